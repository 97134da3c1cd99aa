"""
Network connection and signing identity
"""

import logging
from dataclasses import dataclass
from typing import Any, Optional

from web3 import EthereumTesterProvider, Web3
from web3.middleware import ExtraDataToPOAMiddleware

from .config import NetworkConfig
from .errors import NetworkConfigError

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Signer:
    """
    Account that pays for and signs deployments

    account is a local eth_account object when a private key is configured;
    None means the node holds the key (unlocked account).
    """
    address: str
    account: Optional[Any] = None

    @property
    def signs_locally(self) -> bool:
        return self.account is not None


def connect(network: NetworkConfig) -> Web3:
    """
    Open a web3 connection for a network profile

    Ephemeral profiles get a fresh in-process chain on every call.
    """
    if network.ephemeral:
        w3 = Web3(EthereumTesterProvider())
        logger.info(f"Started ephemeral in-process chain for network '{network.name}'")
        return w3

    if not network.url:
        raise NetworkConfigError(f"Network '{network.name}' has no RPC URL configured")

    w3 = Web3(Web3.HTTPProvider(network.url))
    if network.poa:
        w3.middleware_onion.inject(ExtraDataToPOAMiddleware, layer=0)

    if not w3.is_connected():
        raise ConnectionError(f"Could not connect to RPC URL: {network.url}")

    if network.chain_id is not None:
        chain_id = w3.eth.chain_id
        if chain_id != network.chain_id:
            raise NetworkConfigError(
                f"Chain ID mismatch on '{network.name}': expected {network.chain_id} got {chain_id}"
            )

    logger.info(f"Connected to blockchain at {network.url}")
    return w3


def resolve_signer(w3: Web3, network: NetworkConfig) -> Signer:
    """Picks the first configured key, else the node's first unlocked account."""
    if network.accounts:
        account = w3.eth.account.from_key(network.accounts[0])
        return Signer(address=account.address, account=account)

    node_accounts = w3.eth.accounts
    if not node_accounts:
        raise NetworkConfigError(
            f"No signer available on '{network.name}': set PRIVATE_KEY or use a node with unlocked accounts"
        )
    return Signer(address=Web3.to_checksum_address(node_accounts[0]))
