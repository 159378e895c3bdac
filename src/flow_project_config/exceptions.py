"""Custom exception classes for flow-project-config library."""

from typing import Optional


class ProjectConfigError(Exception):
    """Base exception for project configuration errors."""

    pass


class ConfigNotFoundError(ProjectConfigError, FileNotFoundError):
    """Raised when the project configuration file is not found."""

    pass


class ConfigExistsError(ProjectConfigError, FileExistsError):
    """Raised when initializing would overwrite an existing configuration file."""

    pass


class ConfigFormatError(ProjectConfigError, ValueError):
    """Raised when a configuration document is malformed."""

    pass


class NotFoundError(ProjectConfigError, LookupError):
    """Raised when a registry lookup has no match."""

    pass


class ContractNotFoundError(NotFoundError):
    """Raised when requested contract is not in the catalog."""

    pass


class AccountNotFoundError(NotFoundError):
    """Raised when requested account is not in the registry."""

    pass


class NetworkNotFoundError(NotFoundError):
    """Raised when requested network is not in the registry."""

    pass


class DuplicateContractError(ProjectConfigError, ValueError):
    """Raised when a deployment lists the same contract more than once."""

    pass


class DuplicateAddressError(ProjectConfigError, ValueError):
    """Raised when two accounts would share one address."""

    pass


class StagingNotSupportedError(ProjectConfigError, ValueError):
    """Raised when a network has no migration staging contract configured."""

    pass


class SourceFetchError(ProjectConfigError, OSError):
    """Raised when contract source cannot be fetched over HTTP."""

    pass


class ResolutionError(ProjectConfigError):
    """
    Base exception for contract resolution failures.

    Attributes:
        contract_name: Contract being resolved
        network: Target network
        stage: Resolution step that failed ("definition", "deployment",
               "account", "source" or "staging")
    """

    stage = "resolution"

    def __init__(self, message: str, contract_name: str, network: str):
        super().__init__(message)
        self.contract_name = contract_name
        self.network = network


class ContractNotDefinedError(ResolutionError):
    """Raised when no contract entry exists for the name on the network."""

    stage = "definition"

    def __init__(self, contract_name: str, network: str):
        super().__init__(
            f"Contract '{contract_name}' is not defined for network '{network}'",
            contract_name,
            network,
        )


class ContractNotDeployedError(ResolutionError):
    """Raised when a contract has no alias and no deployment on the network."""

    stage = "deployment"

    def __init__(self, contract_name: str, network: str):
        super().__init__(
            f"Contract '{contract_name}' has no alias and is not listed in any "
            f"deployment on network '{network}'",
            contract_name,
            network,
        )


class DeployingAccountNotFoundError(ResolutionError):
    """Raised when a deployment names an account missing from the registry."""

    stage = "account"

    def __init__(self, contract_name: str, network: str, account_name: str):
        super().__init__(
            f"Account '{account_name}' deploying contract '{contract_name}' "
            f"on network '{network}' is not defined",
            contract_name,
            network,
        )
        self.account_name = account_name


class SourceUnreadableError(ResolutionError):
    """Raised when the source code of a contract cannot be read."""

    stage = "source"

    def __init__(
        self,
        contract_name: str,
        network: str,
        location: str,
        reason: Optional[BaseException] = None,
    ):
        message = f"Failed to read source '{location}' of contract '{contract_name}'"
        if reason is not None:
            message += f": {reason}"
        super().__init__(message, contract_name, network)
        self.location = location


class ContractNotStageableError(ResolutionError):
    """Raised when an aliased contract has no source location to stage."""

    stage = "staging"

    def __init__(self, contract_name: str, network: str):
        super().__init__(
            f"Contract '{contract_name}' is an alias on network '{network}' "
            "and has no source location to stage",
            contract_name,
            network,
        )
