"""Contract migration staging helpers for flow-project-config library."""

import os
from dataclasses import dataclass, field
from typing import Dict, Iterable, List, Mapping, Optional

from .addresses import format_address
from .constants import DEFAULT_STAGING_ADDRESSES, STAGING_ADDRESS_ENV_PREFIX
from .exceptions import ContractNotStageableError, SourceUnreadableError, StagingNotSupportedError
from .resolution import ContractResolver, ReadSource
from .types import ContractBinding


@dataclass
class StagingSettings:
    """Address of the migration staging contract on each network."""

    addresses: Dict[str, str] = field(default_factory=lambda: dict(DEFAULT_STAGING_ADDRESSES))

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "StagingSettings":
        """
        Create settings from the defaults and the environment.

        $FLOW_STAGING_ADDRESS_<NETWORK> sets the staging contract address of
        <network> (lower-cased), e.g. FLOW_STAGING_ADDRESS_PREVIEWNET.
        """
        if environ is None:
            environ = os.environ

        addresses = dict(DEFAULT_STAGING_ADDRESSES)
        for key, value in environ.items():
            if key.startswith(STAGING_ADDRESS_ENV_PREFIX) and value:
                addresses[key[len(STAGING_ADDRESS_ENV_PREFIX):].lower()] = value
        return cls(addresses)

    def check_network(self, network: str) -> None:
        """
        Raises:
            StagingNotSupportedError: If the network has no staging contract
        """
        if network not in self.addresses:
            supported = ", ".join(sorted(self.addresses)) or "none"
            raise StagingNotSupportedError(
                f"Staging is not supported on network '{network}' "
                f"(supported networks: {supported})"
            )

    def address_for(self, network: str) -> str:
        """
        Get the staging contract address of a network.

        Returns:
            "0x"-prefixed address

        Raises:
            StagingNotSupportedError: If the network has no staging contract
        """
        self.check_network(network)
        return format_address(self.addresses[network])


@dataclass(frozen=True)
class StagedContractQuery:
    """Arguments of the script checking whether a contract is staged."""

    staging_address: str
    contract_address: str
    contract_name: str


def is_staged_query(
    resolver: ContractResolver, settings: StagingSettings, name: str, network: str
) -> StagedContractQuery:
    """
    Build the query checking whether a contract is staged on a network.

    Raises:
        StagingNotSupportedError: If the network has no staging contract
        ResolutionError: If the contract address cannot be resolved
    """
    staging_address = settings.address_for(network)
    return StagedContractQuery(
        staging_address=staging_address,
        contract_address=resolver.address_for(name, network),
        contract_name=name,
    )


def resolve_staged_contracts(
    resolver: ContractResolver,
    names: Iterable[str],
    network: str,
    read_source: ReadSource,
) -> List[ContractBinding]:
    """
    Resolve contracts to stage, in the given order.

    Every binding must carry code. An aliased contract keeps its alias
    address and takes its code from the location recorded next to the
    alias.

    Raises:
        ContractNotStageableError: If an aliased contract has no location
        ResolutionError: If a contract cannot be resolved
    """
    bindings = []
    for name in names:
        binding = resolver.resolve_contract(name, network, read_source)
        if binding.code is None:
            location = resolver.definition(name, network).location
            if location is None:
                raise ContractNotStageableError(name, network)
            try:
                code = read_source(location)
            except Exception as e:
                raise SourceUnreadableError(name, network, location, e) from e
            binding = ContractBinding(name=name, code=code, address=binding.address)
        bindings.append(binding)
    return bindings
