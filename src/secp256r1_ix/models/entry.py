# src/secp256r1_ix/models/entry.py
"""Normalized (message, public key, signature) records.

A :class:`SignatureEntry` is the fixed-shape record the encoder lays out in the
instruction body. Callers usually build one through :func:`normalize`, which
accepts raw bytes or text for each field. Text can be wrapped in :class:`Hex`
or :class:`Utf8` to pin its interpretation; bare ``str`` values are resolved
per field:

- public key and signature text is always hex
- message text is hex when it reads ``0x`` + an even number of hex digits,
  otherwise it is UTF-8 encoded
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Union

from secp256r1_ix.core.constants import (
    COMPRESSED_PUBKEY_PREFIXES,
    COMPRESSED_PUBKEY_SIZE,
    ENTRY_FIXED_SIZE,
    SIGNATURE_SIZE,
)
from secp256r1_ix.core.errors import (
    InvalidMessageFormat,
    InvalidPublicKeyFormat,
    InvalidPublicKeyLength,
    InvalidSignatureFormat,
    InvalidSignatureLength,
)
from secp256r1_ix.utils.hexstr import (
    bytes_to_hex,
    hex_to_bytes,
    is_even_hex,
    is_message_hex,
    is_pubkey_hex,
    is_signature_hex,
)


@dataclass(frozen=True)
class Raw:
    """Bytes used exactly as given."""

    data: bytes


@dataclass(frozen=True)
class Hex:
    """Text holding hex digits, optionally prefixed with ``0x``."""

    text: str


@dataclass(frozen=True)
class Utf8:
    """Text to be encoded as UTF-8."""

    text: str


FieldInput = Union[Raw, Hex, Utf8, bytes, bytearray, memoryview, str]


def _check_pubkey(pubkey: bytes) -> None:
    if len(pubkey) != COMPRESSED_PUBKEY_SIZE:
        raise InvalidPublicKeyLength(
            f"Public key must be {COMPRESSED_PUBKEY_SIZE} bytes, got {len(pubkey)}"
        )
    if pubkey[0] not in COMPRESSED_PUBKEY_PREFIXES:
        raise InvalidPublicKeyFormat(
            f"Public key must start with 0x02 or 0x03, got 0x{pubkey[0]:02x}"
        )


def _check_signature(signature: bytes) -> None:
    if len(signature) != SIGNATURE_SIZE:
        raise InvalidSignatureLength(
            f"Signature must be {SIGNATURE_SIZE} bytes, got {len(signature)}"
        )


@dataclass(frozen=True)
class SignatureEntry:
    """One secp256r1 triple ready to be packed into an instruction.

    Attributes:
        message: Signed message bytes, any length.
        pubkey: 33-byte compressed public key.
        signature: 64-byte raw ``r || s`` signature.
    """

    message: bytes
    pubkey: bytes
    signature: bytes

    def __post_init__(self) -> None:
        for name in ("pubkey", "signature", "message"):
            value = getattr(self, name)
            if isinstance(value, (bytearray, memoryview)):
                object.__setattr__(self, name, bytes(value))
            elif not isinstance(value, bytes):
                raise TypeError(f"{name} must be bytes, got {type(value).__name__}")
        _check_pubkey(self.pubkey)
        _check_signature(self.signature)

    @property
    def length(self) -> int:
        """Number of body bytes this entry occupies."""
        return len(self.message) + ENTRY_FIXED_SIZE

    def to_bytes(self) -> bytes:
        """Return the body bytes ``pubkey || signature || message``."""
        return self.pubkey + self.signature + self.message

    def to_hex(self) -> str:
        """Return the body bytes as lowercase hex."""
        return bytes_to_hex(self.to_bytes())


def _as_variant(value: FieldInput, text_variant: type[Hex] | type[Utf8]) -> Raw | Hex | Utf8:
    if isinstance(value, (Raw, Hex, Utf8)):
        return value
    if isinstance(value, (bytes, bytearray, memoryview)):
        return Raw(bytes(value))
    if isinstance(value, str):
        return text_variant(value)
    raise TypeError(f"Unsupported input type: {type(value).__name__}")


def resolve_pubkey(pubkey: FieldInput) -> bytes:
    """Decode and validate a compressed public key.

    Raises:
        InvalidPublicKeyFormat: Text is not ``(0x)?(02|03)`` + 64 hex digits,
            or the first byte is not a compressed-point prefix.
        InvalidPublicKeyLength: The bytes are not 33 bytes long.
    """
    variant = _as_variant(pubkey, Hex)
    if isinstance(variant, Utf8):
        raise InvalidPublicKeyFormat("Public key cannot be given as UTF-8 text")
    if isinstance(variant, Hex):
        if not is_pubkey_hex(variant.text):
            raise InvalidPublicKeyFormat(f"Invalid public key string: {variant.text!r}")
        data = hex_to_bytes(variant.text)
    else:
        data = bytes(variant.data)
    _check_pubkey(data)
    return data


def resolve_signature(signature: FieldInput) -> bytes:
    """Decode and validate a raw 64-byte signature.

    Raises:
        InvalidSignatureFormat: Text is not ``(0x)?`` + 128 hex digits.
        InvalidSignatureLength: The bytes are not 64 bytes long.
    """
    variant = _as_variant(signature, Hex)
    if isinstance(variant, Utf8):
        raise InvalidSignatureFormat("Signature cannot be given as UTF-8 text")
    if isinstance(variant, Hex):
        if not is_signature_hex(variant.text):
            raise InvalidSignatureFormat(f"Invalid signature string: {variant.text!r}")
        data = hex_to_bytes(variant.text)
    else:
        data = bytes(variant.data)
    _check_signature(data)
    return data


def resolve_message(message: FieldInput) -> bytes:
    """Turn a message input into bytes.

    Bare text is hex-decoded only when it is ``0x`` followed by whole hex
    bytes; anything else is UTF-8 encoded.

    Raises:
        InvalidMessageFormat: An explicit :class:`Hex` value is not even-length hex,
            or the text cannot be UTF-8 encoded (e.g. lone surrogates).
    """
    if isinstance(message, str):
        message = Hex(message) if is_message_hex(message) else Utf8(message)
    variant = _as_variant(message, Utf8)
    if isinstance(variant, Hex):
        if not is_even_hex(variant.text):
            raise InvalidMessageFormat(f"Invalid hex message: {variant.text!r}")
        return hex_to_bytes(variant.text)
    if isinstance(variant, Utf8):
        try:
            return variant.text.encode("utf-8")
        except UnicodeEncodeError as err:
            raise InvalidMessageFormat(f"Message text is not valid UTF-8: {err}") from err
    return bytes(variant.data)


def normalize(message: FieldInput, pubkey: FieldInput, signature: FieldInput) -> SignatureEntry:
    """Validate raw inputs and build a :class:`SignatureEntry`.

    Fields are checked in the order public key, signature, message, so the
    first invalid field in that order determines the error raised.

    Args:
        message: Message bytes, ``0x``-prefixed hex text or plain text.
        pubkey: Compressed public key as bytes or hex text.
        signature: ``r || s`` signature as bytes or hex text.

    Returns:
        The immutable, validated entry
    """
    pubkey_bytes = resolve_pubkey(pubkey)
    signature_bytes = resolve_signature(signature)
    message_bytes = resolve_message(message)
    return SignatureEntry(message=message_bytes, pubkey=pubkey_bytes, signature=signature_bytes)
