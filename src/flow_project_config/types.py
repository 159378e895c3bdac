"""Data types and dataclasses for flow-project-config library."""

from dataclasses import dataclass, field
from typing import Dict, List, Optional

from .addresses import is_address_literal
from .exceptions import DuplicateContractError


@dataclass
class Contract:
    """A contract definition on one network."""

    name: str  # e.g., "KittyItems"; unique per network only
    source: str  # Source location, or an alias address such as "0x123123123"
    network: str  # e.g., "emulator"
    location: Optional[str] = None  # Source location kept alongside an alias address

    @property
    def is_alias(self) -> bool:
        """True if the contract already exists on-chain at the `source` address."""
        return is_address_literal(self.source)


@dataclass
class AccountKey:
    """Key descriptor of an account. Opaque to resolution."""

    type: str = "hex"
    index: int = 0
    sig_algo: str = "ECDSA_P256"
    hash_algo: str = "SHA3_256"
    context: Dict[str, str] = field(default_factory=dict)  # e.g., {"privateKey": "..."}


@dataclass
class Account:
    """A named account."""

    name: str
    address: str  # Hex address, with or without "0x"
    chain_id: str  # e.g., "flow-emulator"
    keys: List[AccountKey] = field(default_factory=list)


@dataclass
class Network:
    """A named network."""

    name: str
    host: str  # e.g., "127.0.0.1:3569"
    chain_id: str


@dataclass
class Deployment:
    """Contracts deployed by one account on one network."""

    network: str
    account: str
    contracts: List[str] = field(default_factory=list)  # Deployment order

    def __post_init__(self) -> None:
        seen = set()
        for name in self.contracts:
            if name in seen:
                raise DuplicateContractError(
                    f"Contract '{name}' listed more than once in deployment "
                    f"of account '{self.account}' on network '{self.network}'"
                )
            seen.add(name)


@dataclass(frozen=True)
class ContractBinding:
    """Resolved address and code of a contract on a network."""

    name: str
    code: Optional[bytes]  # None for aliased contracts
    address: str  # "0x"-prefixed lower-case hex
