"""
Deployment gas report
"""

import logging
from typing import List

from web3 import Web3

from .config import GasReporterConfig

logger = logging.getLogger(__name__)


class GasReporter:
    """Collects gas used by each deployment and prices it at a fixed gas price"""

    def __init__(self, config: GasReporterConfig):
        self.config = config
        self.deployments: List = []

    @property
    def enabled(self) -> bool:
        return self.config.enabled

    def record(self, deployment):
        self.deployments.append(deployment)

    def total_gas(self) -> int:
        return sum(d.gas_used for d in self.deployments)

    def cost_in_eth(self, gas_used: int) -> float:
        wei = gas_used * Web3.to_wei(self.config.gas_price_gwei, 'gwei')
        return float(Web3.from_wei(wei, 'ether'))

    def format_report(self) -> str:
        header = f"{'Contract':<24} {'Gas used':>12} {'Cost (ETH)':>14}"
        lines = [
            f"Deployment gas report @ {self.config.gas_price_gwei} gwei",
            header,
            "-" * len(header),
        ]
        for d in self.deployments:
            lines.append(f"{d.contract_name:<24} {d.gas_used:>12} {self.cost_in_eth(d.gas_used):>14.6f}")
        total = self.total_gas()
        lines.append("-" * len(header))
        lines.append(f"{'Total':<24} {total:>12} {self.cost_in_eth(total):>14.6f}")
        return "\n".join(lines)

    def log_report(self):
        if not self.enabled:
            return
        for line in self.format_report().splitlines():
            logger.info(line)
