"""
Block explorer source verification
Submits Hardhat build-info to an Etherscan-compatible API and polls the result
"""

import json
import logging
import os
import time
from typing import Any, Dict, Optional

import requests
from eth_abi import encode

from .artifacts import ContractFactory
from .errors import VerificationError

logger = logging.getLogger(__name__)

ETHERSCAN_API_URL = "https://api.etherscan.io/v2/api"
ALREADY_VERIFIED = "already verified"


def load_build_info(factory: ContractFactory) -> Dict[str, Any]:
    """
    Find the solc build-info that produced an artifact

    Hardhat stores the pointer in <Name>.dbg.json as a path relative to it.
    """
    if not factory.artifact_path:
        raise VerificationError(f"{factory.contract_name} was not loaded from an artifact file")

    dbg_path = factory.artifact_path[:-len('.json')] + '.dbg.json'
    try:
        with open(dbg_path, 'r') as f:
            build_info_rel = json.load(f)['buildInfo']
        build_info_path = os.path.normpath(os.path.join(os.path.dirname(dbg_path), build_info_rel))
        with open(build_info_path, 'r') as f:
            return json.load(f)
    except (FileNotFoundError, KeyError) as e:
        raise VerificationError(f"No build info for {factory.contract_name}: {e}") from None


def encode_constructor_args(factory: ContractFactory, args) -> str:
    """ABI-encoded constructor arguments as bare hex (no 0x prefix)."""
    types = factory.constructor_abi_types()
    if len(types) != len(args):
        raise VerificationError(
            f"{factory.contract_name} constructor takes {len(types)} arguments, got {len(args)}"
        )
    if not types:
        return ""
    return encode(types, list(args)).hex()


class EtherscanVerifier:
    def __init__(self, api_key: str, chain_id: int, api_url: str = ETHERSCAN_API_URL,
                 session: Optional[requests.Session] = None, poll_interval: float = 5.0,
                 max_polls: int = 24, timeout: float = 30):
        if not api_key:
            raise VerificationError("ETHERSCAN_API_KEY is not configured")
        self.api_key = api_key
        self.chain_id = chain_id
        self.api_url = api_url
        self.session = session or requests.Session()
        self.poll_interval = poll_interval
        self.max_polls = max_polls
        self.timeout = timeout

    def _call(self, method: str, payload: Dict[str, Any]) -> Dict[str, Any]:
        params = {'chainid': self.chain_id}
        payload = dict(payload, apikey=self.api_key, module='contract')
        if method == 'GET':
            response = self.session.get(self.api_url, params={**params, **payload}, timeout=self.timeout)
        else:
            response = self.session.post(self.api_url, params=params, data=payload, timeout=self.timeout)
        response.raise_for_status()
        return response.json()

    def submit(self, factory: ContractFactory, deployment) -> Optional[str]:
        """
        Send the source for one deployment

        Returns:
            The explorer's request GUID, or None if the contract is already verified
        """
        build_info = load_build_info(factory)
        payload = {
            'action': 'verifysourcecode',
            'contractaddress': deployment.address,
            'sourceCode': json.dumps(build_info['input']),
            'codeformat': 'solidity-standard-json-input',
            'contractname': factory.fully_qualified_name,
            'compilerversion': f"v{build_info['solcLongVersion']}",
            # Field name is misspelled in the explorer API
            'constructorArguements': encode_constructor_args(factory, deployment.constructor_args),
        }
        data = self._call('POST', payload)
        result = str(data.get('result', ''))
        if data.get('status') == '1':
            logger.info(f"Submitted {factory.contract_name} for verification (guid {result})")
            return result
        if ALREADY_VERIFIED in result.lower():
            logger.info(f"{factory.contract_name} at {deployment.address} is already verified")
            return None
        raise VerificationError(f"Verification request for {factory.contract_name} rejected: {result}")

    def check_status(self, guid: str) -> str:
        data = self._call('GET', {'action': 'checkverifystatus', 'guid': guid})
        return str(data.get('result', ''))

    def wait_for_result(self, guid: str) -> bool:
        for _ in range(self.max_polls):
            result = self.check_status(guid)
            lowered = result.lower()
            if lowered.startswith('pass') or ALREADY_VERIFIED in lowered:
                return True
            if lowered.startswith('fail'):
                raise VerificationError(f"Verification failed: {result}")
            logger.info(f"Verification pending: {result}")
            time.sleep(self.poll_interval)
        raise VerificationError(f"Verification {guid} still pending after {self.max_polls} checks")

    def verify(self, factory: ContractFactory, deployment) -> bool:
        guid = self.submit(factory, deployment)
        if guid is None:
            return True
        verified = self.wait_for_result(guid)
        logger.info(f"{factory.contract_name} verified at {deployment.address}")
        return verified
