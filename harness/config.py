"""
Harness configuration
Network profiles, compiler and reporter settings read from the environment
"""

import os
from dataclasses import dataclass, field
from typing import Dict, Mapping, Optional, Tuple, Union

from dotenv import load_dotenv

from .errors import NetworkConfigError

# Load environment variables from .env file
load_dotenv()

DEFAULT_NETWORK = "hardhat"
AUTO_GAS_PRICE = "auto"

GasPrice = Union[str, int]


@dataclass(frozen=True)
class NetworkConfig:
    """Connection parameters for one named network"""
    name: str
    url: str = ""
    chain_id: Optional[int] = None
    accounts: Tuple[str, ...] = ()
    gas_price: GasPrice = AUTO_GAS_PRICE
    ephemeral: bool = False
    poa: bool = False

    @property
    def has_fixed_gas_price(self) -> bool:
        return self.gas_price != AUTO_GAS_PRICE


@dataclass(frozen=True)
class CompilerSettings:
    version: str = "0.8.24"
    optimizer_enabled: bool = True
    optimizer_runs: int = 200


@dataclass(frozen=True)
class GasReporterConfig:
    enabled: bool = False
    currency: str = "USD"
    gas_price_gwei: int = 21


@dataclass(frozen=True)
class HarnessConfig:
    networks: Dict[str, NetworkConfig]
    default_network: str = DEFAULT_NETWORK
    etherscan_api_key: str = ""
    solidity: CompilerSettings = field(default_factory=CompilerSettings)
    gas_reporter: GasReporterConfig = field(default_factory=GasReporterConfig)
    artifacts_dir: str = "artifacts"
    deployments_dir: str = "deployments"

    def get_network(self, name: Optional[str] = None) -> NetworkConfig:
        """
        Look up a network profile

        Args:
            name: Profile name; falls back to the default network

        Returns:
            The matching NetworkConfig
        """
        selected = name or self.default_network
        try:
            return self.networks[selected]
        except KeyError:
            known = ", ".join(sorted(self.networks))
            raise NetworkConfigError(f"Unknown network '{selected}' (known: {known})") from None


def parse_gas_price(value: Optional[str]) -> GasPrice:
    """Accepts 'auto' or an integer amount of wei"""
    if value is None or value.strip() == "" or value.strip().lower() == AUTO_GAS_PRICE:
        return AUTO_GAS_PRICE
    try:
        price = int(value)
    except ValueError:
        raise NetworkConfigError(f"Invalid gas price '{value}': expected 'auto' or wei") from None
    if price <= 0:
        raise NetworkConfigError(f"Gas price must be positive, got {price}")
    return price


def _is_enabled(value: Optional[str]) -> bool:
    return (value or "").strip().lower() in ("1", "true", "yes", "on")


def load_config(env: Optional[Mapping[str, str]] = None) -> HarnessConfig:
    """
    Build the harness configuration

    Args:
        env: Variables to read from; defaults to the process environment

    Returns:
        Immutable HarnessConfig with the hardhat, localhost and sepolia profiles
    """
    if env is None:
        env = os.environ

    private_key = env.get("PRIVATE_KEY") or ""
    sepolia_accounts = (private_key,) if private_key else ()

    networks = {
        "hardhat": NetworkConfig(name="hardhat", chain_id=31337, ephemeral=True),
        "localhost": NetworkConfig(name="localhost", url="http://127.0.0.1:8545"),
        "sepolia": NetworkConfig(
            name="sepolia",
            url=env.get("SEPOLIA_RPC_URL") or "",
            chain_id=11155111,
            accounts=sepolia_accounts,
            gas_price=parse_gas_price(env.get("SEPOLIA_GAS_PRICE")),
        ),
    }

    gas_reporter = GasReporterConfig(enabled=_is_enabled(env.get("REPORT_GAS")))

    return HarnessConfig(
        networks=networks,
        default_network=env.get("HARDHAT_NETWORK") or DEFAULT_NETWORK,
        etherscan_api_key=env.get("ETHERSCAN_API_KEY") or "",
        gas_reporter=gas_reporter,
        artifacts_dir=env.get("ARTIFACTS_DIR") or "artifacts",
        deployments_dir=env.get("DEPLOYMENTS_DIR") or "deployments",
    )
