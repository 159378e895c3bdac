"""Network registry for flow-project-config library."""

from typing import Dict, Iterable, Iterator, List, Optional

from .exceptions import NetworkNotFoundError
from .types import Network


class NetworkRegistry:
    """Named networks."""

    def __init__(self, networks: Optional[Iterable[Network]] = None):
        self._networks: Dict[str, Network] = {}
        for network in networks or []:
            self.add_or_update(network)

    def __iter__(self) -> Iterator[Network]:
        return iter(list(self._networks.values()))

    def __len__(self) -> int:
        return len(self._networks)

    def has(self, name: str) -> bool:
        return name in self._networks

    def names(self) -> List[str]:
        return list(self._networks)

    def get_by_name(self, name: str) -> Network:
        """
        Get a network by name.

        Raises:
            NetworkNotFoundError: If no network has that name
        """
        try:
            return self._networks[name]
        except KeyError:
            raise NetworkNotFoundError(f"Network '{name}' not found") from None

    def add_or_update(self, network: Network) -> None:
        self._networks[network.name] = network
