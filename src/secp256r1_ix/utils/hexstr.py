# src/secp256r1_ix/utils/hexstr.py
"""Hex string helpers with optional ``0x`` prefix handling."""

from __future__ import annotations

import re

PUBKEY_HEX_PATTERN = re.compile(r"(0x)?(02|03)[0-9a-fA-F]{64}")
SIGNATURE_HEX_PATTERN = re.compile(r"(0x)?[0-9a-fA-F]{128}")
MESSAGE_HEX_PATTERN = re.compile(r"0x(?:[0-9a-fA-F]{2})+")
EVEN_HEX_PATTERN = re.compile(r"(0x)?(?:[0-9a-fA-F]{2})*")

HEX_PREFIX = "0x"


def strip_hex_prefix(value: str) -> str:
    """Return ``value`` without a leading ``0x``."""
    if value.startswith(HEX_PREFIX):
        return value[len(HEX_PREFIX):]
    return value


def hex_to_bytes(value: str) -> bytes:
    """Decode a hex string, accepting an optional ``0x`` prefix.

    Args:
        value: Hex digits, upper or lower case, optionally prefixed with ``0x``.

    Returns:
        Decoded bytes

    Raises:
        ValueError: If the digits are not valid even-length hex.
    """
    return bytes.fromhex(strip_hex_prefix(value))


def bytes_to_hex(data: bytes) -> str:
    """Render bytes as lowercase hex with no prefix or separators."""
    return data.hex()


def is_pubkey_hex(value: str) -> bool:
    """Return True if ``value`` is a hex-encoded compressed public key."""
    return PUBKEY_HEX_PATTERN.fullmatch(value) is not None


def is_signature_hex(value: str) -> bool:
    """Return True if ``value`` is a hex-encoded 64-byte signature."""
    return SIGNATURE_HEX_PATTERN.fullmatch(value) is not None


def is_message_hex(value: str) -> bool:
    """Return True if ``value`` is ``0x`` followed by at least one hex byte."""
    return MESSAGE_HEX_PATTERN.fullmatch(value) is not None


def is_even_hex(value: str) -> bool:
    """Return True if ``value`` is even-length hex, optionally ``0x``-prefixed."""
    return EVEN_HEX_PATTERN.fullmatch(value) is not None
