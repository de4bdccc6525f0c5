# src/secp256r1_ix/core/errors.py
"""Exceptions raised while normalizing entries or encoding payloads.

Every error is a ``ValueError`` so callers that only care about "bad input"
can catch that, while tests and tooling can match the precise kind.
"""
from __future__ import annotations


class Secp256r1Error(ValueError):
    """Base class for all input rejections raised by this package."""


class InvalidPublicKeyFormat(Secp256r1Error):
    """Public key text is not a hex-encoded compressed point."""


class InvalidPublicKeyLength(Secp256r1Error):
    """Public key bytes are not exactly 33 bytes long."""


class InvalidSignatureFormat(Secp256r1Error):
    """Signature text is not 128 hex digits."""


class InvalidSignatureLength(Secp256r1Error):
    """Signature bytes are not exactly 64 bytes long."""


class InvalidMessageFormat(Secp256r1Error):
    """A message explicitly marked as hex could not be decoded."""


class TooManyEntries(Secp256r1Error):
    """More entries than the single count byte can describe."""


class OffsetOverflow(Secp256r1Error):
    """A computed offset or length does not fit in an unsigned 16-bit field."""


class MalformedPayload(Secp256r1Error):
    """An encoded buffer is too short for the header it declares."""


__all__ = [
    "Secp256r1Error",
    "InvalidPublicKeyFormat",
    "InvalidPublicKeyLength",
    "InvalidSignatureFormat",
    "InvalidSignatureLength",
    "InvalidMessageFormat",
    "TooManyEntries",
    "OffsetOverflow",
    "MalformedPayload",
]
