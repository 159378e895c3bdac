"""Deployment index for flow-project-config library."""

from typing import Dict, Iterable, Iterator, List, Optional, Tuple

from .types import Deployment


class DeploymentIndex:
    """
    Which account deploys which contracts on which network.

    Entries are additive: one account may have several entries for the
    same network, and they are never merged. Entries are kept in an
    insertion-ordered list, with a list-valued dict keyed by
    (network, account) for direct lookups.
    """

    def __init__(self, deployments: Optional[Iterable[Deployment]] = None):
        self._entries: List[Deployment] = []
        self._index: Dict[Tuple[str, str], List[Deployment]] = {}
        for deployment in deployments or []:
            self.append(deployment)

    def __iter__(self) -> Iterator[Deployment]:
        return iter(list(self._entries))

    def __len__(self) -> int:
        return len(self._entries)

    def get_by_account_and_network(self, account: str, network: str) -> List[Deployment]:
        """
        Get all entries of an account on a network.

        Args:
            account: Account name
            network: Network name

        Returns:
            Matching entries in insertion order (empty if none)
        """
        return list(self._index.get((network, account), []))

    def by_network(self, network: str) -> List[Deployment]:
        """All entries on a network, in insertion order."""
        return [d for d in self._entries if d.network == network]

    def append(self, deployment: Deployment) -> None:
        """Add an entry without replacing existing entries for the same key."""
        self._entries.append(deployment)
        self._index.setdefault((deployment.network, deployment.account), []).append(deployment)

    def add_or_update(self, deployment: Deployment) -> Deployment:
        """
        Upsert an entry keyed by (network, account).

        If entries already exist for the key, the contract list of the
        first one is replaced wholesale; any further entries for the key
        are left as they are. Otherwise the entry is appended.

        Returns:
            The entry now stored for the key
        """
        key = (deployment.network, deployment.account)
        existing = self._index.get(key)
        if not existing:
            self.append(deployment)
            return deployment

        replaced = existing[0]
        updated = Deployment(
            network=replaced.network,
            account=replaced.account,
            contracts=list(deployment.contracts),
        )
        position = next(i for i, d in enumerate(self._entries) if d is replaced)
        self._entries[position] = updated
        existing[0] = updated
        return updated
