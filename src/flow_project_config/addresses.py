"""Address normalization utilities for flow-project-config library."""

import re

# Flow addresses are 8 bytes
ADDRESS_HEX_LENGTH = 16

_PREFIXED_HEX = re.compile(r"0[xX][0-9a-fA-F]{1,16}")
_BARE_HEX = re.compile(r"[0-9a-fA-F]{16}")


def normalize_address(address: str) -> str:
    """
    Convert an address to its comparison form.

    Strips surrounding whitespace and an optional leading '0x'/'0X',
    and lower-cases the hex digits.

    Args:
        address: Address string, with or without prefix

    Returns:
        Lower-case hex string without prefix
    """
    address = address.strip()
    if address[:2] in ("0x", "0X"):
        address = address[2:]
    return address.lower()


def format_address(address: str) -> str:
    """
    Convert an address to its display form ('0x' + lower-case hex).

    Args:
        address: Address string, with or without prefix

    Returns:
        Prefixed lower-case hex string
    """
    return "0x" + normalize_address(address)


def is_address_literal(source: str) -> bool:
    """
    Check whether a contract source is an address rather than a location.

    Address literals are either '0x'-prefixed hex of up to 16 digits
    (e.g. "0x123123123"), or exactly 16 bare hex digits.

    Args:
        source: Contract source string

    Returns:
        True if source is an address literal, False for paths and URLs
    """
    source = source.strip()
    return bool(_PREFIXED_HEX.fullmatch(source) or _BARE_HEX.fullmatch(source))
