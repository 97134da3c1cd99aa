"""
Deployment records
Addresses of a deployed system, written as deployments/<network>.json
"""

import json
import logging
import os
from datetime import datetime, timezone
from typing import Any, Dict

from .deployer import GovernanceSystem

logger = logging.getLogger(__name__)


def build_record(system: GovernanceSystem, network: str, chain_id: int, deployer_address: str) -> Dict[str, Any]:
    return {
        'network': network,
        'chainId': chain_id,
        'deployedAt': datetime.now(timezone.utc).isoformat(),
        'contracts': {
            'token': system.token.address,
            'governor': system.governor.address,
        },
        'roles': {
            'deployer': deployer_address,
        },
        'transactions': {
            system.token.contract_name: system.token.to_dict(),
            system.governor.contract_name: system.governor.to_dict(),
        },
    }


def save_record(record: Dict[str, Any], deployments_dir: str) -> str:
    os.makedirs(deployments_dir, exist_ok=True)
    path = os.path.join(deployments_dir, f"{record['network']}.json")
    with open(path, 'w') as f:
        json.dump(record, f, indent=2)
    logger.info(f"Deployment record written to {path}")
    return path


def load_record(network: str, deployments_dir: str) -> Dict[str, Any]:
    path = os.path.join(deployments_dir, f'{network}.json')
    with open(path, 'r') as f:
        return json.load(f)
