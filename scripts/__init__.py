"""
Deployment Scripts
==================

Entry points for deploying the governance system:
- deploy: GovernanceToken, then MyGovernor bound to the token
"""

__version__ = "1.0.0"
__author__ = "Governance System Team"
