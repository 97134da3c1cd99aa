"""
Governance System Harness
=========================

Deployment and verification tooling for the governance token and the
governor contract:
- config: network profiles loaded from the environment
- artifacts: compiled contract factories
- network: web3 connection and signing identity
- deployer: ordered token -> governor deployment
- gas_reporter / verification: optional reporting and explorer verification
"""

__version__ = "1.0.0"
__author__ = "Governance System Team"
