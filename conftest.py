import os

import pytest
from web3 import EthereumTesterProvider, Web3

TESTDATA_ARTIFACTS = os.path.join(os.path.dirname(__file__), 'harness', 'testdata', 'artifacts')


@pytest.fixture
def artifacts_dir():
    """Minimal stand-in Hardhat artifacts for GovernanceToken and MyGovernor"""
    return TESTDATA_ARTIFACTS


@pytest.fixture
def w3():
    """Fresh deterministic in-process chain"""
    return Web3(EthereumTesterProvider())
