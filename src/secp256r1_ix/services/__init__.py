"""Encoding services for secp256r1 verification instructions."""

from .encoder import (
    Secp256r1Instruction,
    SignatureOffsets,
    compute_offsets,
    decode_offsets,
    encode,
    encode_hex,
)

__all__ = [
    "Secp256r1Instruction",
    "SignatureOffsets",
    "compute_offsets",
    "decode_offsets",
    "encode",
    "encode_hex",
]
