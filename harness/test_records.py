#!/usr/bin/env python3
"""
Tests for deployment records
"""

from harness.deployer import Deployment, GovernanceSystem
from harness.records import build_record, load_record, save_record

DEPLOYER = "0xf39Fd6e51aad88F6F4ce6aB8827279cffFb92266"


def make_system():
    token = Deployment("GovernanceToken", "0x5FbDB2315678afecb367f032d93F642f64180aa3", "0x0a", 1, 900000)
    governor = Deployment("MyGovernor", "0xe7f1725E7734CE288F8367e1Bb143E90bb3F0512", "0x0b", 2, 2500000,
                          ("0x5FbDB2315678afecb367f032d93F642f64180aa3",))
    return GovernanceSystem(token=token, governor=governor)


class TestRecords:

    def test_build_record(self):
        record = build_record(make_system(), "sepolia", 11155111, DEPLOYER)

        assert record['network'] == "sepolia"
        assert record['chainId'] == 11155111
        assert record['contracts'] == {
            'token': "0x5FbDB2315678afecb367f032d93F642f64180aa3",
            'governor': "0xe7f1725E7734CE288F8367e1Bb143E90bb3F0512",
        }
        assert record['roles']['deployer'] == DEPLOYER
        assert record['transactions']['MyGovernor']['constructorArgs'] == [
            "0x5FbDB2315678afecb367f032d93F642f64180aa3"
        ]

    def test_save_and_load(self, tmp_path):
        record = build_record(make_system(), "localhost", 31337, DEPLOYER)
        deployments_dir = tmp_path / "deployments"

        path = save_record(record, str(deployments_dir))

        assert path.endswith("localhost.json")
        assert load_record("localhost", str(deployments_dir)) == record
