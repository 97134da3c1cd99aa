"""
Compiled contract artifacts
Loads Hardhat artifact JSON into deployable contract factories
"""

import glob
import json
import logging
import os
from dataclasses import dataclass
from typing import Any, Dict, List, Optional

from web3 import Web3

from .errors import ArtifactError, ArtifactNotFoundError

logger = logging.getLogger(__name__)

TOKEN_CONTRACT = "GovernanceToken"
GOVERNOR_CONTRACT = "MyGovernor"


@dataclass(frozen=True)
class ContractFactory:
    """Everything needed to create and talk to one contract"""
    contract_name: str
    source_name: str
    abi: List[Dict[str, Any]]
    bytecode: str
    artifact_path: str = ""

    def bind(self, w3: Web3):
        return w3.eth.contract(abi=self.abi, bytecode=self.bytecode)

    def constructor_abi_types(self) -> List[str]:
        for entry in self.abi:
            if entry.get('type') == 'constructor':
                return [item['type'] for item in entry.get('inputs', [])]
        return []

    @property
    def fully_qualified_name(self) -> str:
        return f"{self.source_name}:{self.contract_name}"


def find_artifact(contract_name: str, artifacts_dir: str) -> str:
    """
    Locate the artifact file for a contract

    Hardhat writes artifacts to <artifacts>/<source path>/<Name>.json next to a
    <Name>.dbg.json debug file; the debug files and build-info are skipped.
    """
    pattern = os.path.join(artifacts_dir, '**', f'{contract_name}.json')
    matches = [
        path for path in glob.glob(pattern, recursive=True)
        if 'build-info' not in path.split(os.sep)
    ]
    if not matches:
        raise ArtifactNotFoundError(
            f"No artifact for {contract_name} under {artifacts_dir}. Compile the contracts first."
        )
    if len(matches) > 1:
        raise ArtifactError(
            f"Multiple artifacts named {contract_name}: {', '.join(sorted(matches))}"
        )
    return matches[0]


def load_contract_factory(contract_name: str, artifacts_dir: str) -> ContractFactory:
    """Read one artifact into a ContractFactory."""
    path = find_artifact(contract_name, artifacts_dir)
    with open(path, 'r') as f:
        data = json.load(f)

    try:
        abi = data['abi']
        bytecode = data['bytecode']
    except KeyError as e:
        raise ArtifactError(f"Artifact {path} is missing field {e}") from None

    if not bytecode or bytecode in ('0x', '0x0'):
        raise ArtifactError(f"{contract_name} has no creation bytecode (interface or abstract contract?)")

    logger.debug(f"Loaded artifact for {contract_name} from {path}")
    return ContractFactory(
        contract_name=data.get('contractName', contract_name),
        source_name=data.get('sourceName', ''),
        abi=abi,
        bytecode=bytecode,
        artifact_path=path,
    )


def load_governance_factories(artifacts_dir: str, token_name: Optional[str] = None,
                              governor_name: Optional[str] = None):
    """Returns the (token, governor) factory pair."""
    token = load_contract_factory(token_name or TOKEN_CONTRACT, artifacts_dir)
    governor = load_contract_factory(governor_name or GOVERNOR_CONTRACT, artifacts_dir)
    return token, governor
