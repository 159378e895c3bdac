"""Contract resolution for flow-project-config library."""

from typing import Callable, Iterable, List

from .accounts import AccountRegistry
from .addresses import format_address
from .contracts import ContractCatalog
from .deployments import DeploymentIndex
from .exceptions import (
    AccountNotFoundError,
    ContractNotDefinedError,
    ContractNotDeployedError,
    ContractNotFoundError,
    DeployingAccountNotFoundError,
    SourceUnreadableError,
)
from .types import Contract, ContractBinding

# Reads contract source code from a location (path or URL)
ReadSource = Callable[[str], bytes]


class ContractResolver:
    """
    Resolves contract names to deployable bindings on a network.

    Holds read-only references to the collections of one project
    configuration and never mutates them. Source code is read only
    through the `read_source` callable passed to each call.
    """

    def __init__(
        self,
        contracts: ContractCatalog,
        accounts: AccountRegistry,
        deployments: DeploymentIndex,
    ):
        self._contracts = contracts
        self._accounts = accounts
        self._deployments = deployments

    def definition(self, name: str, network: str) -> Contract:
        """
        Get the contract definition of a name on a network.

        Raises:
            ContractNotDefinedError: If the contract is not defined on the network
        """
        try:
            return self._contracts.get_by_name_and_network(name, network)
        except ContractNotFoundError:
            raise ContractNotDefinedError(name, network) from None

    def _deployer_address(self, name: str, network: str) -> str:
        # First entry wins; later entries for the same contract are ignored
        account_name = None
        for deployment in self._deployments.by_network(network):
            if name in deployment.contracts:
                account_name = deployment.account
                break

        if account_name is None:
            raise ContractNotDeployedError(name, network)

        try:
            account = self._accounts.get_by_name(account_name)
        except AccountNotFoundError:
            raise DeployingAccountNotFoundError(name, network, account_name) from None

        return account.address

    def _address(self, contract: Contract) -> str:
        if contract.is_alias:
            return format_address(contract.source)
        return format_address(self._deployer_address(contract.name, contract.network))

    def address_for(self, name: str, network: str) -> str:
        """
        Resolve only the address of a contract on a network.

        Args:
            name: Contract name
            network: Network name

        Returns:
            "0x"-prefixed address

        Raises:
            ContractNotDefinedError: If the contract is not defined on the network
            ContractNotDeployedError: If no alias and no deployment reference it
            DeployingAccountNotFoundError: If the deploying account is not defined
        """
        return self._address(self.definition(name, network))

    def resolve_contract(self, name: str, network: str, read_source: ReadSource) -> ContractBinding:
        """
        Resolve a contract name to its address and code on a network.

        The address is the alias address when the contract's source is an
        address literal; otherwise it is the address of the account named
        by the first deployment on the network that lists the contract.
        Code is read from the source location, and is None for aliases.

        Args:
            name: Contract name
            network: Network name
            read_source: Callable returning the bytes at a source location

        Returns:
            ContractBinding

        Raises:
            ContractNotDefinedError: If the contract is not defined on the network
            ContractNotDeployedError: If no alias and no deployment reference it
            DeployingAccountNotFoundError: If the deploying account is not defined
            SourceUnreadableError: If read_source fails
        """
        contract = self.definition(name, network)
        address = self._address(contract)

        code = None
        if not contract.is_alias:
            try:
                code = read_source(contract.source)
            except Exception as e:
                raise SourceUnreadableError(name, network, contract.source, e) from e

        return ContractBinding(name=name, code=code, address=address)

    def resolve_many(
        self, names: Iterable[str], network: str, read_source: ReadSource
    ) -> List[ContractBinding]:
        """
        Resolve several contracts, in the given order.

        Stops at the first failure and raises it; names after the failing
        one are not attempted. Repeated names are resolved again each time.

        Returns:
            Bindings in the same order as `names`
        """
        return [self.resolve_contract(name, network, read_source) for name in names]
