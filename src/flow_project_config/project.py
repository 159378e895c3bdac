"""Main API for flow-project-config library."""

import json
import logging
import secrets
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, List, Optional, Union

from .accounts import AccountRegistry
from .constants import (
    DEFAULT_HASH_ALGO,
    DEFAULT_SIG_ALGO,
    EMULATOR_ACCOUNT_NAME,
    EMULATOR_NETWORK_NAME,
    EMULATOR_SERVICE_ADDRESS,
    HASH_ALGORITHMS,
    KNOWN_NETWORKS,
    SIGNATURE_ALGORITHMS,
)
from .contracts import ContractCatalog
from .deployments import DeploymentIndex
from .exceptions import AccountNotFoundError, ConfigExistsError, ConfigFormatError, ConfigNotFoundError
from .networks import NetworkRegistry
from .parsers import (
    parse_accounts,
    parse_contracts,
    parse_deployments,
    parse_networks,
    referenced_networks,
    serialize_accounts,
    serialize_contracts,
    serialize_deployments,
    serialize_networks,
)
from .paths import get_global_config_path, resolve_config_path
from .resolution import ContractResolver
from .sources import SourceReader, default_source_reader
from .types import Account, AccountKey, Deployment, Network

logger = logging.getLogger(__name__)


@dataclass
class ProjectConfig:
    """Contracts, accounts, networks and deployments of one project."""

    contracts: ContractCatalog = field(default_factory=ContractCatalog)
    accounts: AccountRegistry = field(default_factory=AccountRegistry)
    networks: NetworkRegistry = field(default_factory=NetworkRegistry)
    deployments: DeploymentIndex = field(default_factory=DeploymentIndex)

    def resolver(self) -> ContractResolver:
        """Create a resolver over this configuration."""
        return ContractResolver(self.contracts, self.accounts, self.deployments)

    def emulator_service_account(self) -> Account:
        """
        Get the emulator service account.

        Raises:
            AccountNotFoundError: If no account has the emulator service address
        """
        try:
            return self.accounts.get_by_address(EMULATOR_SERVICE_ADDRESS)
        except AccountNotFoundError:
            raise AccountNotFoundError(
                f"Emulator service account not found (address 0x{EMULATOR_SERVICE_ADDRESS})"
            ) from None


@dataclass
class Project:
    """A configuration loaded from disk, with a reader for its contract sources."""

    config: ProjectConfig
    path: Path
    read_source: SourceReader


def config_from_document(document: Dict[str, Any]) -> ProjectConfig:
    """
    Build a configuration from a parsed configuration document.

    Args:
        document: Object with optional "contracts", "networks", "accounts"
                  and "deployments" sections

    Returns:
        ProjectConfig

    Raises:
        ConfigFormatError: If the document is malformed
    """
    if not isinstance(document, dict):
        raise ConfigFormatError("Configuration document must be an object")

    return ProjectConfig(
        contracts=ContractCatalog(
            parse_contracts(document.get("contracts", {}), referenced_networks(document))
        ),
        accounts=AccountRegistry(parse_accounts(document.get("accounts", {}))),
        networks=NetworkRegistry(parse_networks(document.get("networks", {}))),
        deployments=DeploymentIndex(parse_deployments(document.get("deployments", {}))),
    )


def config_to_document(config: ProjectConfig) -> Dict[str, Any]:
    """
    Inverse of config_from_document.

    Raises:
        ConfigFormatError: If the contracts cannot be written without
                           changing them on the next load
    """
    document: Dict[str, Any] = {
        "networks": serialize_networks(list(config.networks)),
        "accounts": serialize_accounts(list(config.accounts)),
        "deployments": serialize_deployments(list(config.deployments)),
    }
    contracts = serialize_contracts(list(config.contracts), referenced_networks(document))
    return {"contracts": contracts, **document}


def load_project(path: Optional[Union[Path, str]] = None) -> Project:
    """
    Load a project configuration file.

    Args:
        path: Path to the configuration file
              If None, uses $FLOW_CONFIG_PATH or ./flow.json

    Returns:
        Project whose read_source resolves relative locations against
        the configuration file's directory

    Raises:
        ConfigNotFoundError: If the configuration file is not found
        ConfigFormatError: If the file is not a valid configuration
    """
    config_path = resolve_config_path(path)
    if not config_path.exists():
        raise ConfigNotFoundError(
            f"Configuration not found at {config_path}. "
            "Run init_project() to create it."
        )

    try:
        with open(config_path, encoding="utf-8") as f:
            document = json.load(f)
    except json.JSONDecodeError as e:
        raise ConfigFormatError(f"Invalid JSON in {config_path}: {e}") from e
    except UnicodeDecodeError as e:
        raise ConfigFormatError(f"{config_path} is not valid UTF-8: {e}") from e

    config = config_from_document(document)
    logger.debug(
        "Loaded %s: %d contracts, %d accounts, %d networks, %d deployments",
        config_path,
        len(config.contracts),
        len(config.accounts),
        len(config.networks),
        len(config.deployments),
    )

    return Project(
        config=config,
        path=config_path,
        read_source=default_source_reader(config_path.parent),
    )


def save_project(config: ProjectConfig, path: Optional[Union[Path, str]] = None) -> Path:
    """
    Save a project configuration file.

    Creates parent directories if they don't exist.

    Returns:
        Path the configuration was written to

    Raises:
        ConfigFormatError: If the configuration cannot be written without
                           changing it on the next load; the file is left
                           untouched
    """
    config_path = resolve_config_path(path)
    document = config_to_document(config)
    config_path.parent.mkdir(parents=True, exist_ok=True)
    with open(config_path, "w", encoding="utf-8") as f:
        json.dump(document, f, indent=2)

    logger.debug("Saved configuration to %s", config_path)
    return config_path


def default_config(
    private_key: Optional[str] = None,
    sig_algo: str = DEFAULT_SIG_ALGO,
    hash_algo: str = DEFAULT_HASH_ALGO,
) -> ProjectConfig:
    """
    Create the configuration of a new project.

    Contains the well-known networks and the emulator service account.

    Args:
        private_key: Hex private key of the service account
                     (defaults to 32 random bytes)
        sig_algo: Signature algorithm of the service account key
        hash_algo: Hash algorithm of the service account key

    Raises:
        ValueError: If sig_algo or hash_algo is not a known algorithm
    """
    if sig_algo not in SIGNATURE_ALGORITHMS:
        raise ValueError(f"invalid signature algorithm: {sig_algo}")
    if hash_algo not in HASH_ALGORITHMS:
        raise ValueError(f"invalid hash algorithm: {hash_algo}")

    if private_key is None:
        private_key = secrets.token_hex(32)

    networks = NetworkRegistry(
        Network(name=name, host=info["host"], chain_id=info["chain_id"])
        for name, info in KNOWN_NETWORKS.items()
    )
    key = AccountKey(sig_algo=sig_algo, hash_algo=hash_algo, context={"privateKey": private_key})
    accounts = AccountRegistry(
        [
            Account(
                name=EMULATOR_ACCOUNT_NAME,
                address=EMULATOR_SERVICE_ADDRESS,
                chain_id=KNOWN_NETWORKS[EMULATOR_NETWORK_NAME]["chain_id"],
                keys=[key],
            )
        ]
    )
    return ProjectConfig(accounts=accounts, networks=networks)


def init_project(
    path: Optional[Union[Path, str]] = None,
    private_key: Optional[str] = None,
    reset: bool = False,
    global_config: bool = False,
    sig_algo: str = DEFAULT_SIG_ALGO,
    hash_algo: str = DEFAULT_HASH_ALGO,
) -> ProjectConfig:
    """
    Write the configuration of a new project.

    Args:
        path: Where to write the configuration
              (defaults to $FLOW_CONFIG_PATH or ./flow.json)
        private_key: Hex private key of the emulator service account
        reset: Overwrite an existing configuration
        global_config: Write to ~/flow.json instead (ignores `path`)
        sig_algo: Signature algorithm of the service account key
        hash_algo: Hash algorithm of the service account key

    Returns:
        The new configuration

    Raises:
        ValueError: If sig_algo or hash_algo is not a known algorithm
        ConfigExistsError: If a configuration exists and reset is False
    """
    config = default_config(private_key, sig_algo=sig_algo, hash_algo=hash_algo)

    config_path = get_global_config_path() if global_config else resolve_config_path(path)
    if config_path.exists() and not reset:
        raise ConfigExistsError(
            f"Configuration already exists at: {config_path}, "
            "if you want to reset configuration use the reset flag"
        )

    save_project(config, config_path)
    logger.info("Configuration initialized at %s", config_path)
    return config


def add_deployment(config: ProjectConfig, network: str, account: str, contracts: List[str]) -> Deployment:
    """
    Add or replace the deployment of an account on a network.

    Returns:
        The deployment stored in the configuration

    Raises:
        ValueError: If network, account or contracts is empty
        DuplicateContractError: If contracts repeats a name
    """
    if not network:
        raise ValueError("network name must be provided")
    if not account:
        raise ValueError("account name must be provided")
    if not contracts:
        raise ValueError("at least one contract name must be provided")

    return config.deployments.add_or_update(
        Deployment(network=network, account=account, contracts=list(contracts))
    )
