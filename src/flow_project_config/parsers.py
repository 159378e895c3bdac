"""Configuration document parsers for flow-project-config library."""

from typing import Any, Dict, List

from .addresses import format_address, is_address_literal
from .constants import DEFAULT_HASH_ALGO, DEFAULT_SIG_ALGO, KNOWN_NETWORKS
from .exceptions import ConfigFormatError
from .types import Account, AccountKey, Contract, Deployment, Network


def _require_mapping(value: Any, where: str) -> Dict[str, Any]:
    if not isinstance(value, dict):
        raise ConfigFormatError(f"Expected an object for {where}, got {type(value).__name__}")
    return value


def parse_networks(data: Dict[str, Any]) -> List[Network]:
    """
    Parse the "networks" section.

    Each value is a host string, or an object with "host" and optional
    "chain". Missing chain ids are taken from KNOWN_NETWORKS, or left
    empty for custom networks.

    Args:
        data: Mapping of network name to host or network object

    Returns:
        Networks in document order
    """
    result: List[Network] = []
    for name, value in _require_mapping(data, "networks").items():
        default_chain = KNOWN_NETWORKS.get(name, {}).get("chain_id", "")
        if isinstance(value, str):
            result.append(Network(name=name, host=value, chain_id=default_chain))
            continue

        value = _require_mapping(value, f"network '{name}'")
        if "host" not in value:
            raise ConfigFormatError(f"Missing host for network '{name}'")
        result.append(
            Network(name=name, host=value["host"], chain_id=value.get("chain", default_chain))
        )

    return result


def _parse_key(value: Any, account_name: str) -> AccountKey:
    # A bare string is a hex-encoded private key
    if isinstance(value, str):
        return AccountKey(context={"privateKey": value})

    value = _require_mapping(value, f"key of account '{account_name}'")
    context = {
        k: v
        for k, v in value.items()
        if k not in ("type", "index", "signatureAlgorithm", "hashAlgorithm")
    }
    try:
        index = int(value.get("index", 0))
    except (TypeError, ValueError):
        raise ConfigFormatError(
            f"Invalid key index of account '{account_name}': {value.get('index')}"
        ) from None

    return AccountKey(
        type=value.get("type", "hex"),
        index=index,
        sig_algo=value.get("signatureAlgorithm", DEFAULT_SIG_ALGO),
        hash_algo=value.get("hashAlgorithm", DEFAULT_HASH_ALGO),
        context=context,
    )


def parse_accounts(data: Dict[str, Any]) -> List[Account]:
    """
    Parse the "accounts" section.

    Each value is an object with "address", optional "chain" and an
    optional "key", which may be a hex private key, a key object or a
    list of key objects.

    Raises:
        ConfigFormatError: If an account has no address
    """
    result: List[Account] = []
    for name, value in _require_mapping(data, "accounts").items():
        value = _require_mapping(value, f"account '{name}'")
        if not value.get("address"):
            raise ConfigFormatError(f"Missing address for account '{name}'")

        raw_keys = value.get("key", [])
        if not isinstance(raw_keys, list):
            raw_keys = [raw_keys]

        result.append(
            Account(
                name=name,
                address=value["address"],
                chain_id=value.get("chain", ""),
                keys=[_parse_key(k, name) for k in raw_keys],
            )
        )

    return result


def parse_contracts(data: Dict[str, Any], network_names: List[str]) -> List[Contract]:
    """
    Parse the "contracts" section into one entry per network.

    A contract given as a location string is defined on every network in
    `network_names`. A contract object may add "aliases", mapping network
    names to addresses; on those networks the entry's source is the alias
    address and its location is the object's "source". An object with
    aliases but no "source" is defined only on its alias networks.

    Args:
        data: Mapping of contract name to location or contract object
        network_names: Networks that location-only contracts apply to

    Returns:
        Contracts grouped by name, in document order
    """
    result: List[Contract] = []
    for name, value in _require_mapping(data, "contracts").items():
        if isinstance(value, str):
            source, aliases = value, {}
        else:
            value = _require_mapping(value, f"contract '{name}'")
            source = value.get("source")
            aliases = _require_mapping(value.get("aliases", {}), f"aliases of contract '{name}'")
            if source is None and not aliases:
                raise ConfigFormatError(f"Missing source for contract '{name}'")

        if source is not None:
            for network in network_names:
                if network not in aliases:
                    result.append(Contract(name=name, source=source, network=network))

        for network, address in aliases.items():
            if not isinstance(address, str) or not is_address_literal(address):
                raise ConfigFormatError(
                    f"Alias of contract '{name}' on network '{network}' is not an address: {address}"
                )
            result.append(Contract(name=name, source=address, network=network, location=source))

    return result


def parse_deployments(data: Dict[str, Any]) -> List[Deployment]:
    """
    Parse the "deployments" section.

    Structure is network -> account -> list of contracts; each contract
    item is a name or an object with "name" (other fields such as "args"
    belong to the deploy transaction and are not kept).

    Raises:
        ConfigFormatError: If a contract item has no name
        DuplicateContractError: If a list repeats a contract name
    """
    result: List[Deployment] = []
    for network, accounts in _require_mapping(data, "deployments").items():
        for account, items in _require_mapping(accounts, f"deployments on '{network}'").items():
            if not isinstance(items, list):
                raise ConfigFormatError(
                    f"Expected a list of contracts for '{account}' on '{network}'"
                )
            names = []
            for item in items:
                if isinstance(item, dict):
                    if "name" not in item:
                        raise ConfigFormatError(
                            f"Missing contract name in deployment of '{account}' on '{network}'"
                        )
                    item = item["name"]
                names.append(item)
            result.append(Deployment(network=network, account=account, contracts=names))

    return result


def referenced_networks(document: Dict[str, Any]) -> List[str]:
    """
    Networks that location-only contracts are defined on.

    Declared networks if there are any, otherwise networks named in
    deployments.

    Raises:
        ConfigFormatError: If either section is not an object
    """
    networks = list(_require_mapping(document.get("networks", {}), "networks"))
    if networks:
        return networks
    return list(_require_mapping(document.get("deployments", {}), "deployments"))


def serialize_contracts(contracts: List[Contract], network_names: List[str]) -> Dict[str, Any]:
    """
    Inverse of parse_contracts.

    Args:
        contracts: Contracts to write
        network_names: Networks that location-only contracts will be
                       defined on when the document is parsed again

    Raises:
        ConfigFormatError: If a contract cannot be written so that parsing
                           the document gives back the same entries: it
                           has different locations on different networks,
                           or its location-only networks differ from
                           `network_names`
    """
    sources: Dict[str, str] = {}
    located: Dict[str, List[str]] = {}
    aliases: Dict[str, Dict[str, str]] = {}
    for contract in contracts:
        aliases.setdefault(contract.name, {})
        located.setdefault(contract.name, [])
        if contract.is_alias:
            aliases[contract.name][contract.network] = format_address(contract.source)
            source = contract.location
        else:
            located[contract.name].append(contract.network)
            source = contract.source

        if source is None:
            continue
        if sources.get(contract.name, source) != source:
            raise ConfigFormatError(
                f"Contract '{contract.name}' has different sources on different networks"
            )
        sources[contract.name] = source

    for name, networks in located.items():
        if name not in sources:
            continue
        expected = [n for n in network_names if n not in aliases[name]]
        if sorted(networks) != sorted(expected):
            raise ConfigFormatError(
                f"Contract '{name}' is defined on networks {sorted(networks)}, "
                f"but its location would apply to {sorted(expected)} when loaded"
            )

    result: Dict[str, Any] = {}
    for name, contract_aliases in aliases.items():
        if not contract_aliases:
            result[name] = sources[name]
            continue

        entry: Dict[str, Any] = {}
        if name in sources:
            entry["source"] = sources[name]
        entry["aliases"] = contract_aliases
        result[name] = entry

    return result


def serialize_networks(networks: List[Network]) -> Dict[str, Any]:
    result: Dict[str, Any] = {}
    for network in networks:
        if network.chain_id == KNOWN_NETWORKS.get(network.name, {}).get("chain_id", ""):
            result[network.name] = network.host
        else:
            result[network.name] = {"host": network.host, "chain": network.chain_id}
    return result


def _serialize_key(key: AccountKey) -> Any:
    is_default = (
        key.type == "hex"
        and key.index == 0
        and key.sig_algo == DEFAULT_SIG_ALGO
        and key.hash_algo == DEFAULT_HASH_ALGO
        and list(key.context) == ["privateKey"]
    )
    if is_default:
        return key.context["privateKey"]

    return {
        "type": key.type,
        "index": key.index,
        "signatureAlgorithm": key.sig_algo,
        "hashAlgorithm": key.hash_algo,
        **key.context,
    }


def serialize_accounts(accounts: List[Account]) -> Dict[str, Any]:
    result: Dict[str, Any] = {}
    for account in accounts:
        entry: Dict[str, Any] = {"address": account.address}
        if account.chain_id:
            entry["chain"] = account.chain_id
        if len(account.keys) == 1:
            entry["key"] = _serialize_key(account.keys[0])
        elif account.keys:
            entry["key"] = [_serialize_key(k) for k in account.keys]
        result[account.name] = entry
    return result


def serialize_deployments(deployments: List[Deployment]) -> Dict[str, Any]:
    """
    Inverse of parse_deployments.

    Several entries for one (network, account) are written as a single
    list, in entry order, without repeats.
    """
    result: Dict[str, Dict[str, List[str]]] = {}
    for deployment in deployments:
        names = result.setdefault(deployment.network, {}).setdefault(deployment.account, [])
        for name in deployment.contracts:
            if name not in names:
                names.append(name)
    return result
