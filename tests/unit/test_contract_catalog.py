"""Unit tests for the contract catalog."""

import pytest

from flow_project_config import Contract, ContractCatalog, ContractNotFoundError, ProjectConfig


class TestGetByName:
    """Test the get_by_name method."""

    def test_returns_contract(self, complex_config: ProjectConfig):
        kitty = complex_config.contracts.get_by_name("KittyItems")

        assert kitty.name == "KittyItems"

    def test_returns_first_inserted_entry(self, complex_config: ProjectConfig):
        """Test that the earliest entry wins when a name exists on several networks."""
        market = complex_config.contracts.get_by_name("KittyItemsMarket")

        assert market.source == "./cadence/kittyItemsMarket/contracts/KittyItemsMarket.cdc"
        assert market.network == "emulator"

    def test_raises_for_unknown_name(self, complex_config: ProjectConfig):
        with pytest.raises(ContractNotFoundError) as exc_info:
            complex_config.contracts.get_by_name("Unknown")

        assert "Unknown" in str(exc_info.value)


class TestGetByNameAndNetwork:
    """Test the get_by_name_and_network method."""

    def test_returns_alias_entry(self, complex_config: ProjectConfig):
        market = complex_config.contracts.get_by_name_and_network("KittyItemsMarket", "testnet")

        assert market.source == "0x123123123"
        assert market.is_alias

    def test_returns_path_entry(self, complex_config: ProjectConfig):
        market = complex_config.contracts.get_by_name_and_network("KittyItemsMarket", "emulator")

        assert not market.is_alias

    def test_raises_for_wrong_network(self, complex_config: ProjectConfig):
        with pytest.raises(ContractNotFoundError):
            complex_config.contracts.get_by_name_and_network("Kibble", "testnet")


class TestGetByNetwork:
    """Test the get_by_network method."""

    def test_returns_entries_in_insertion_order(self, complex_config: ProjectConfig):
        contracts = complex_config.contracts.get_by_network("emulator")

        assert [c.name for c in contracts] == [
            "NonFungibleToken",
            "FungibleToken",
            "Kibble",
            "KittyItems",
            "KittyItemsMarket",
        ]

    def test_only_matching_network(self, complex_config: ProjectConfig):
        contracts = complex_config.contracts.get_by_network("testnet")

        assert len(contracts) == 1
        assert contracts[0].source == "0x123123123"

    def test_unknown_network_is_empty(self, complex_config: ProjectConfig):
        assert complex_config.contracts.get_by_network("mainnet") == []


class TestAddOrUpdate:
    """Test the add_or_update method."""

    def test_adds_new_entry(self):
        catalog = ContractCatalog()
        catalog.add_or_update(Contract("Kibble", "./Kibble.cdc", "emulator"))

        assert len(catalog) == 1
        assert catalog.has("Kibble", "emulator")

    def test_same_name_other_network_is_new_entry(self):
        catalog = ContractCatalog()
        catalog.add_or_update(Contract("Kibble", "./Kibble.cdc", "emulator"))
        catalog.add_or_update(Contract("Kibble", "0x01", "testnet"))

        assert len(catalog) == 2
        assert catalog.names() == ["Kibble"]

    def test_duplicate_key_overwrites_in_place(self):
        """Test that replacing an entry keeps its position in insertion order."""
        catalog = ContractCatalog(
            [
                Contract("A", "./A.cdc", "emulator"),
                Contract("B", "./B.cdc", "emulator"),
            ]
        )
        catalog.add_or_update(Contract("A", "./A2.cdc", "emulator"))

        contracts = catalog.get_by_network("emulator")
        assert len(catalog) == 2
        assert [c.name for c in contracts] == ["A", "B"]
        assert catalog.get_by_name_and_network("A", "emulator").source == "./A2.cdc"

    def test_remove(self):
        catalog = ContractCatalog([Contract("A", "./A.cdc", "emulator")])
        catalog.remove("A", "emulator")

        assert len(catalog) == 0
        with pytest.raises(ContractNotFoundError):
            catalog.remove("A", "emulator")
