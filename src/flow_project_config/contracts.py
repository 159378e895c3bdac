"""Contract catalog for flow-project-config library."""

from typing import Dict, Iterable, Iterator, List, Optional, Tuple

from .exceptions import ContractNotFoundError
from .types import Contract


class ContractCatalog:
    """
    Contract definitions keyed by (name, network).

    A contract targeting several networks is stored as several entries
    sharing a name. Exact lookups go through a dict keyed by
    (name, network); insertion order is kept in a separate list for
    network enumeration and first-match-by-name queries.
    """

    def __init__(self, contracts: Optional[Iterable[Contract]] = None):
        self._entries: List[Contract] = []
        self._index: Dict[Tuple[str, str], Contract] = {}
        for contract in contracts or []:
            self.add_or_update(contract)

    def __iter__(self) -> Iterator[Contract]:
        return iter(list(self._entries))

    def __len__(self) -> int:
        return len(self._entries)

    def has(self, name: str, network: str) -> bool:
        return (name, network) in self._index

    def names(self) -> List[str]:
        """Distinct contract names, in order of first appearance."""
        return list(dict.fromkeys(c.name for c in self._entries))

    def get_by_name(self, name: str) -> Contract:
        """
        Get the first contract with the given name, on any network.

        Args:
            name: Contract name

        Returns:
            Earliest inserted matching contract

        Raises:
            ContractNotFoundError: If no entry has that name
        """
        for contract in self._entries:
            if contract.name == name:
                return contract

        raise ContractNotFoundError(f"Contract '{name}' not found")

    def get_by_name_and_network(self, name: str, network: str) -> Contract:
        """
        Get the contract with the given name on the given network.

        Raises:
            ContractNotFoundError: If no entry matches both fields
        """
        try:
            return self._index[(name, network)]
        except KeyError:
            raise ContractNotFoundError(
                f"Contract '{name}' not found for network '{network}'"
            ) from None

    def get_by_network(self, network: str) -> List[Contract]:
        """All contracts on a network, in insertion order."""
        return [c for c in self._entries if c.network == network]

    def add_or_update(self, contract: Contract) -> None:
        """
        Insert a contract, or replace the entry with the same (name, network).

        A replaced entry keeps its position in insertion order.
        """
        key = (contract.name, contract.network)
        existing = self._index.get(key)
        if existing is None:
            self._entries.append(contract)
        else:
            position = next(i for i, c in enumerate(self._entries) if c is existing)
            self._entries[position] = contract
        self._index[key] = contract

    def remove(self, name: str, network: str) -> None:
        """
        Remove the contract with the given name on the given network.

        Raises:
            ContractNotFoundError: If no entry matches
        """
        contract = self.get_by_name_and_network(name, network)
        self._entries = [c for c in self._entries if c is not contract]
        del self._index[(name, network)]
