"""
Contract deployment
Sends creation transactions and waits for them to be confirmed
"""

import logging
from dataclasses import dataclass
from typing import Any, Dict, Optional, Tuple

from web3 import Web3

from .artifacts import ContractFactory
from .config import AUTO_GAS_PRICE, GasPrice
from .errors import DeploymentError
from .network import Signer

logger = logging.getLogger(__name__)

ZERO_ADDRESS = "0x0000000000000000000000000000000000000000"
DEFAULT_CONFIRMATION_TIMEOUT = 120


@dataclass(frozen=True)
class Deployment:
    """Result of one confirmed contract creation"""
    contract_name: str
    address: str
    transaction_hash: str
    block_number: int
    gas_used: int
    constructor_args: Tuple[Any, ...] = ()

    def to_dict(self) -> Dict[str, Any]:
        return {
            'address': self.address,
            'transactionHash': self.transaction_hash,
            'blockNumber': self.block_number,
            'gasUsed': self.gas_used,
            'constructorArgs': list(self.constructor_args),
        }


@dataclass(frozen=True)
class GovernanceSystem:
    token: Deployment
    governor: Deployment


class Deployer:
    """Deploys contracts from one signer, one transaction at a time"""

    def __init__(self, w3: Web3, signer: Signer, gas_price: GasPrice = AUTO_GAS_PRICE,
                 timeout: float = DEFAULT_CONFIRMATION_TIMEOUT, gas_reporter=None):
        self.w3 = w3
        self.signer = signer
        self.gas_price = gas_price
        self.timeout = timeout
        self.gas_reporter = gas_reporter

    def _transaction_params(self) -> Dict[str, Any]:
        params: Dict[str, Any] = {'from': self.signer.address}
        if self.gas_price != AUTO_GAS_PRICE:
            params['gasPrice'] = self.gas_price
        return params

    def _send(self, constructor) -> Any:
        params = self._transaction_params()
        if not self.signer.signs_locally:
            return constructor.transact(params)

        params['nonce'] = self.w3.eth.get_transaction_count(self.signer.address)
        tx = constructor.build_transaction(params)
        signed_tx = self.signer.account.sign_transaction(tx)
        return self.w3.eth.send_raw_transaction(signed_tx.raw_transaction)

    def deploy(self, factory: ContractFactory, *args: Any) -> Deployment:
        """
        Create a contract and block until the chain confirms it

        Args:
            factory: Compiled contract to instantiate
            *args: Constructor arguments

        Returns:
            Deployment describing the confirmed contract

        Raises:
            DeploymentError: the creation transaction was mined but reverted
        """
        contract = factory.bind(self.w3)
        tx_hash = self._send(contract.constructor(*args))
        tx_hash_hex = Web3.to_hex(tx_hash)
        logger.info(f"{factory.contract_name} deployment sent: {tx_hash_hex}")

        receipt = self.w3.eth.wait_for_transaction_receipt(tx_hash, timeout=self.timeout)
        if receipt['status'] != 1:
            raise DeploymentError(
                f"{factory.contract_name} deployment reverted in block {receipt['blockNumber']} ({tx_hash_hex})"
            )

        deployment = Deployment(
            contract_name=factory.contract_name,
            address=Web3.to_checksum_address(receipt['contractAddress']),
            transaction_hash=tx_hash_hex,
            block_number=receipt['blockNumber'],
            gas_used=receipt['gasUsed'],
            constructor_args=tuple(args),
        )
        logger.info(f"{factory.contract_name} confirmed in block {deployment.block_number}")

        if self.gas_reporter is not None:
            self.gas_reporter.record(deployment)
        return deployment

    def contract_at(self, factory: ContractFactory, deployment: Deployment):
        return self.w3.eth.contract(address=deployment.address, abi=factory.abi)


def deploy_governance_system(deployer: Deployer, token_factory: ContractFactory,
                             governor_factory: ContractFactory) -> GovernanceSystem:
    """Deploy the token, then the governor pointed at the token."""
    token = deployer.deploy(token_factory)
    logger.info(f"Token deployed at: {token.address}")

    governor = deploy_governor(deployer, governor_factory, token.address)
    logger.info(f"Governor deployed at: {governor.address}")
    return GovernanceSystem(token=token, governor=governor)


def deploy_governor(deployer: Deployer, governor_factory: ContractFactory,
                    token_address: Optional[str]) -> Deployment:
    if not token_address or int(token_address, 16) == 0:
        raise DeploymentError("Governor requires a deployed token address")
    return deployer.deploy(governor_factory, Web3.to_checksum_address(token_address))
