#!/usr/bin/env python3
"""
Deploy the governance system
Token first, then the governor wired to the token's address
"""

import argparse
import logging
import sys
from typing import List, Optional

from harness.artifacts import load_governance_factories
from harness.config import load_config
from harness.deployer import Deployer, deploy_governance_system
from harness.gas_reporter import GasReporter
from harness.log import configure_logging
from harness.network import connect, resolve_signer
from harness.records import build_record, save_record
from harness.verification import EtherscanVerifier

logger = logging.getLogger(__name__)


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Deploy GovernanceToken and MyGovernor")
    parser.add_argument("--network", help="network profile (default: HARDHAT_NETWORK or hardhat)")
    parser.add_argument("--verify", action="store_true",
                        help="verify both contracts on the block explorer after deployment")
    return parser.parse_args(argv)


def deploy(network_name: Optional[str] = None, verify: bool = False, config=None):
    config = config or load_config()
    network = config.get_network(network_name)

    w3 = connect(network)
    signer = resolve_signer(w3, network)
    logger.info(f"Deploying with: {signer.address}")

    token_factory, governor_factory = load_governance_factories(config.artifacts_dir)
    gas_reporter = GasReporter(config.gas_reporter)
    deployer = Deployer(w3, signer, gas_price=network.gas_price, gas_reporter=gas_reporter)

    system = deploy_governance_system(deployer, token_factory, governor_factory)
    gas_reporter.log_report()

    if network.ephemeral:
        logger.info(f"Network '{network.name}' is ephemeral; no deployment record written")
    else:
        record = build_record(system, network.name, w3.eth.chain_id, signer.address)
        save_record(record, config.deployments_dir)

    if verify:
        if network.ephemeral:
            logger.warning("Skipping verification on an ephemeral network")
        else:
            verifier = EtherscanVerifier(config.etherscan_api_key, w3.eth.chain_id)
            verifier.verify(token_factory, system.token)
            verifier.verify(governor_factory, system.governor)

    return system


def main(argv: Optional[List[str]] = None) -> int:
    args = parse_args(argv)
    try:
        deploy(args.network, verify=args.verify)
    except Exception as e:
        logger.error(f"Deployment failed: {e}", exc_info=True)
        return 1
    return 0


def run():
    configure_logging()
    sys.exit(main())


if __name__ == "__main__":
    run()
