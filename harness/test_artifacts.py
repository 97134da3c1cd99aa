#!/usr/bin/env python3
"""
Tests for artifact loading
"""

import json

import pytest

from harness.artifacts import find_artifact, load_contract_factory, load_governance_factories
from harness.errors import ArtifactError, ArtifactNotFoundError


def write_artifact(root, name, bytecode="0x6000", abi=None):
    directory = root / "contracts" / f"{name}.sol"
    directory.mkdir(parents=True, exist_ok=True)
    path = directory / f"{name}.json"
    path.write_text(json.dumps({
        "contractName": name,
        "sourceName": f"contracts/{name}.sol",
        "abi": abi or [],
        "bytecode": bytecode,
    }))
    return path


class TestLoadContractFactory:

    def test_governance_factories(self, artifacts_dir):
        token, governor = load_governance_factories(artifacts_dir)

        assert token.contract_name == "GovernanceToken"
        assert token.source_name == "contracts/GovernanceToken.sol"
        assert token.constructor_abi_types() == []
        assert governor.contract_name == "MyGovernor"
        assert governor.constructor_abi_types() == ["address"]
        assert governor.fully_qualified_name == "contracts/MyGovernor.sol:MyGovernor"
        assert governor.bytecode.startswith("0x")

    def test_debug_files_are_not_artifacts(self, artifacts_dir):
        path = find_artifact("MyGovernor", artifacts_dir)
        assert path.endswith("MyGovernor.json")
        assert not path.endswith(".dbg.json")

    def test_bind_creates_contract_class(self, w3, artifacts_dir):
        governor = load_contract_factory("MyGovernor", artifacts_dir)
        contract = governor.bind(w3)
        assert contract.bytecode is not None

    def test_missing_artifact(self, tmp_path):
        with pytest.raises(ArtifactNotFoundError, match="Compile the contracts first"):
            load_contract_factory("GovernanceToken", str(tmp_path))

    def test_interface_without_bytecode(self, tmp_path):
        write_artifact(tmp_path, "IVotes", bytecode="0x")
        with pytest.raises(ArtifactError, match="no creation bytecode"):
            load_contract_factory("IVotes", str(tmp_path))

    def test_artifact_missing_abi(self, tmp_path):
        path = write_artifact(tmp_path, "Broken")
        data = json.loads(path.read_text())
        del data["abi"]
        path.write_text(json.dumps(data))
        with pytest.raises(ArtifactError, match="missing field"):
            load_contract_factory("Broken", str(tmp_path))

    def test_ambiguous_artifact_name(self, tmp_path):
        write_artifact(tmp_path, "MyGovernor")
        other = tmp_path / "contracts" / "legacy" / "MyGovernor.sol"
        other.mkdir(parents=True)
        (other / "MyGovernor.json").write_text("{}")
        with pytest.raises(ArtifactError, match="Multiple artifacts"):
            load_contract_factory("MyGovernor", str(tmp_path))

    def test_custom_contract_names(self, tmp_path):
        write_artifact(tmp_path, "VoteToken")
        write_artifact(tmp_path, "DaoGovernor")
        token, governor = load_governance_factories(str(tmp_path), "VoteToken", "DaoGovernor")
        assert (token.contract_name, governor.contract_name) == ("VoteToken", "DaoGovernor")
