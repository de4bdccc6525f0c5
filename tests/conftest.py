# tests/conftest.py
from __future__ import annotations

from collections.abc import Callable

import pytest
from cryptography.hazmat.primitives import hashes, serialization
from cryptography.hazmat.primitives.asymmetric import ec
from cryptography.hazmat.primitives.asymmetric.utils import decode_dss_signature

from secp256r1_ix.models.entry import SignatureEntry, normalize
from vectors import GOLDEN_MESSAGE, GOLDEN_PUBKEY, GOLDEN_SIGNATURE

SignFn = Callable[[bytes], tuple[bytes, bytes, bytes]]


def sign_p256(private_key: ec.EllipticCurvePrivateKey, message: bytes) -> tuple[bytes, bytes]:
    """Return (compressed_pubkey, r||s signature) for ``message``."""
    der = private_key.sign(message, ec.ECDSA(hashes.SHA256()))
    r, s = decode_dss_signature(der)
    pubkey = private_key.public_key().public_bytes(
        encoding=serialization.Encoding.X962,
        format=serialization.PublicFormat.CompressedPoint,
    )
    return pubkey, r.to_bytes(32, "big") + s.to_bytes(32, "big")


@pytest.fixture()
def golden_entry() -> SignatureEntry:
    return normalize(GOLDEN_MESSAGE, GOLDEN_PUBKEY, GOLDEN_SIGNATURE)


@pytest.fixture()
def p256_key() -> ec.EllipticCurvePrivateKey:
    return ec.generate_private_key(ec.SECP256R1())


@pytest.fixture()
def make_signed(p256_key: ec.EllipticCurvePrivateKey) -> SignFn:
    """Sign messages with a fresh P-256 key, returning (message, pubkey, signature)."""

    def _make(message: bytes) -> tuple[bytes, bytes, bytes]:
        pubkey, signature = sign_p256(p256_key, message)
        return message, pubkey, signature

    return _make
