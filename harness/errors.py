"""Exceptions raised by the deployment harness."""


class HarnessError(Exception):
    """Base class for harness failures"""


class NetworkConfigError(HarnessError):
    """Network profile is unknown, incomplete or does not match the node"""


class ArtifactError(HarnessError):
    """Compiled artifact cannot be used to deploy a contract"""


class ArtifactNotFoundError(ArtifactError):
    """No compiled artifact exists for the requested contract"""


class DeploymentError(HarnessError):
    """Contract creation failed on-chain or was given invalid inputs"""


class VerificationError(HarnessError):
    """Block explorer rejected or could not process a verification request"""
