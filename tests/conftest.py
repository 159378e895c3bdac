"""Shared pytest fixtures for flow-project-config tests."""

import json
from pathlib import Path
from typing import Any, Dict, List

import pytest

from flow_project_config import (
    Account,
    AccountKey,
    AccountRegistry,
    Contract,
    ContractCatalog,
    Deployment,
    DeploymentIndex,
    Network,
    NetworkRegistry,
    ProjectConfig,
)
from flow_project_config.constants import EMULATOR_SERVICE_ADDRESS

PRIVATE_KEY = "dd72967fd2bd75234ae9037dd4694c1f00baad63a10c35172bf65fbb8ad74b47"
MARKET_PATH = "./cadence/kittyItemsMarket/contracts/KittyItemsMarket.cdc"


def _key() -> AccountKey:
    return AccountKey(context={"privateKey": PRIVATE_KEY})


@pytest.fixture
def complex_config() -> ProjectConfig:
    """Configuration with one contract on two networks and overlapping deployments."""
    contracts = ContractCatalog(
        [
            Contract("NonFungibleToken", "../hungry-kitties/cadence/contracts/NonFungibleToken.cdc", "emulator"),
            Contract("FungibleToken", "../hungry-kitties/cadence/contracts/FungibleToken.cdc", "emulator"),
            Contract("Kibble", "./cadence/kibble/contracts/Kibble.cdc", "emulator"),
            Contract("KittyItems", "./cadence/kittyItems/contracts/KittyItems.cdc", "emulator"),
            Contract("KittyItemsMarket", MARKET_PATH, "emulator"),
            Contract("KittyItemsMarket", "0x123123123", "testnet"),
        ]
    )
    deployments = DeploymentIndex(
        [
            Deployment("emulator", "emulator-account", ["KittyItems", "KittyItemsMarket"]),
            Deployment(
                "emulator",
                "account-4",
                ["FungibleToken", "NonFungibleToken", "Kibble", "KittyItems", "KittyItemsMarket"],
            ),
            Deployment(
                "testnet",
                "account-2",
                ["FungibleToken", "NonFungibleToken", "Kibble", "KittyItems"],
            ),
        ]
    )
    accounts = AccountRegistry(
        [
            Account("emulator-account", EMULATOR_SERVICE_ADDRESS, "flow-emulator", [_key()]),
            Account("account-2", "2c1162386b0a245f", "flow-emulator", [_key()]),
            Account("account-4", "0xf8d6e0586b0a20c2", "flow-emulator", [_key()]),
        ]
    )
    networks = NetworkRegistry([Network("emulator", "127.0.0.1.3569", "flow-emulator")])
    return ProjectConfig(
        contracts=contracts, accounts=accounts, networks=networks, deployments=deployments
    )


class RecordingReader:
    """read_source stand-in returning fixed bytes and recording requested locations."""

    def __init__(self, sources: Dict[str, bytes]):
        self.sources = sources
        self.calls: List[str] = []

    def __call__(self, location: str) -> bytes:
        self.calls.append(location)
        if location not in self.sources:
            raise FileNotFoundError(location)
        return self.sources[location]


@pytest.fixture
def reader() -> RecordingReader:
    """Reader knowing every emulator source of complex_config."""
    return RecordingReader(
        {
            "../hungry-kitties/cadence/contracts/NonFungibleToken.cdc": b"pub contract NonFungibleToken {}",
            "../hungry-kitties/cadence/contracts/FungibleToken.cdc": b"pub contract FungibleToken {}",
            "./cadence/kibble/contracts/Kibble.cdc": b"pub contract Kibble {}",
            "./cadence/kittyItems/contracts/KittyItems.cdc": b"pub contract KittyItems {}",
            MARKET_PATH: b"pub contract KittyItemsMarket {}",
        }
    )


@pytest.fixture
def sample_document() -> Dict[str, Any]:
    """A configuration document in the persisted layout."""
    return {
        "contracts": {
            "Kibble": "./cadence/Kibble.cdc",
            "KittyItems": "./cadence/KittyItems.cdc",
            "KittyItemsMarket": {
                "source": "./cadence/KittyItemsMarket.cdc",
                "aliases": {"testnet": "0x123123123"},
            },
        },
        "networks": {
            "emulator": "127.0.0.1:3569",
            "testnet": "access.devnet.nodes.onflow.org:9000",
        },
        "accounts": {
            "emulator-account": {"address": EMULATOR_SERVICE_ADDRESS, "key": PRIVATE_KEY},
            "testnet-account": {
                "address": "0x2c1162386b0a245f",
                "chain": "flow-testnet",
                "key": {
                    "type": "hex",
                    "index": 1,
                    "signatureAlgorithm": "ECDSA_secp256k1",
                    "hashAlgorithm": "SHA2_256",
                    "privateKey": PRIVATE_KEY,
                },
            },
        },
        "deployments": {
            "emulator": {"emulator-account": ["Kibble", "KittyItems", "KittyItemsMarket"]},
            "testnet": {"testnet-account": [{"name": "Kibble", "args": []}, "KittyItems"]},
        },
    }


@pytest.fixture
def project_dir(tmp_path: Path, sample_document: Dict[str, Any]) -> Path:
    """Project directory with flow.json and contract sources."""
    cadence = tmp_path / "cadence"
    cadence.mkdir()
    for name in ("Kibble", "KittyItems", "KittyItemsMarket"):
        (cadence / f"{name}.cdc").write_text(f"pub contract {name} {{}}")

    with open(tmp_path / "flow.json", "w") as f:
        json.dump(sample_document, f, indent=2)
    return tmp_path
