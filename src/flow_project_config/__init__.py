"""
flow-project-config: Python library for resolving contracts, accounts and deployments of a Flow project
"""

from importlib.metadata import PackageNotFoundError, version

from .accounts import AccountRegistry
from .contracts import ContractCatalog
from .deployments import DeploymentIndex
from .exceptions import (
    AccountNotFoundError,
    ConfigExistsError,
    ConfigFormatError,
    ConfigNotFoundError,
    ContractNotDefinedError,
    ContractNotDeployedError,
    ContractNotFoundError,
    ContractNotStageableError,
    DeployingAccountNotFoundError,
    DuplicateAddressError,
    DuplicateContractError,
    NetworkNotFoundError,
    NotFoundError,
    ProjectConfigError,
    ResolutionError,
    SourceFetchError,
    SourceUnreadableError,
    StagingNotSupportedError,
)
from .networks import NetworkRegistry
from .project import Project, ProjectConfig, add_deployment, init_project, load_project, save_project
from .resolution import ContractResolver
from .staging import StagingSettings, is_staged_query, resolve_staged_contracts
from .types import Account, AccountKey, Contract, ContractBinding, Deployment, Network

try:
    __version__ = version("flow-project-config")
except PackageNotFoundError:
    __version__ = None

__all__ = [
    "Account",
    "AccountKey",
    "Contract",
    "ContractBinding",
    "Deployment",
    "Network",
    "AccountRegistry",
    "ContractCatalog",
    "DeploymentIndex",
    "NetworkRegistry",
    "ContractResolver",
    "Project",
    "ProjectConfig",
    "load_project",
    "save_project",
    "init_project",
    "add_deployment",
    "StagingSettings",
    "is_staged_query",
    "resolve_staged_contracts",
    "ProjectConfigError",
    "ConfigNotFoundError",
    "ConfigExistsError",
    "ConfigFormatError",
    "NotFoundError",
    "ContractNotFoundError",
    "AccountNotFoundError",
    "NetworkNotFoundError",
    "DuplicateContractError",
    "DuplicateAddressError",
    "ResolutionError",
    "ContractNotDefinedError",
    "ContractNotDeployedError",
    "DeployingAccountNotFoundError",
    "SourceUnreadableError",
    "ContractNotStageableError",
    "StagingNotSupportedError",
    "SourceFetchError",
]
