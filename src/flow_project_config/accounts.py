"""Account registry for flow-project-config library."""

from typing import Dict, Iterable, Iterator, List, Optional

from .addresses import normalize_address
from .exceptions import AccountNotFoundError, DuplicateAddressError
from .types import Account


class AccountRegistry:
    """Named accounts. Names and addresses are both unique."""

    def __init__(self, accounts: Optional[Iterable[Account]] = None):
        self._accounts: Dict[str, Account] = {}
        for account in accounts or []:
            self.add_or_update(account)

    def __iter__(self) -> Iterator[Account]:
        return iter(list(self._accounts.values()))

    def __len__(self) -> int:
        return len(self._accounts)

    def has(self, name: str) -> bool:
        return name in self._accounts

    def names(self) -> List[str]:
        return list(self._accounts)

    def get_by_name(self, name: str) -> Account:
        """
        Get an account by name.

        Raises:
            AccountNotFoundError: If no account has that name
        """
        try:
            return self._accounts[name]
        except KeyError:
            raise AccountNotFoundError(f"Account '{name}' not found") from None

    def get_by_address(self, address: str) -> Account:
        """
        Get an account by address.

        The '0x' prefix is optional and hex digits compare case-insensitively,
        so "0xF8D6E0586B0A20C1" and "f8d6e0586b0a20c1" find the same account.

        Args:
            address: Hex address

        Returns:
            Account with that address

        Raises:
            AccountNotFoundError: If no account has that address
        """
        wanted = normalize_address(address)
        for account in self._accounts.values():
            if normalize_address(account.address) == wanted:
                return account

        raise AccountNotFoundError(f"Account with address '{address}' not found")

    def add_or_update(self, account: Account) -> None:
        """
        Insert an account, or replace the account with the same name.

        Raises:
            DuplicateAddressError: If another account already uses the address
        """
        wanted = normalize_address(account.address)
        for other in self._accounts.values():
            if other.name != account.name and normalize_address(other.address) == wanted:
                raise DuplicateAddressError(
                    f"Address '{account.address}' of account '{account.name}' "
                    f"is already used by account '{other.name}'"
                )

        self._accounts[account.name] = account
