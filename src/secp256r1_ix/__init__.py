"""Build instruction data for the secp256r1 signature-verification program."""

from secp256r1_ix.core.constants import SECP256R1_PROGRAM_ID
from secp256r1_ix.core.errors import (
    InvalidMessageFormat,
    InvalidPublicKeyFormat,
    InvalidPublicKeyLength,
    InvalidSignatureFormat,
    InvalidSignatureLength,
    MalformedPayload,
    OffsetOverflow,
    Secp256r1Error,
    TooManyEntries,
)
from secp256r1_ix.models.entry import Hex, Raw, SignatureEntry, Utf8, normalize
from secp256r1_ix.services.encoder import (
    Secp256r1Instruction,
    SignatureOffsets,
    compute_offsets,
    decode_offsets,
    encode,
    encode_hex,
)

__version__ = "0.1.0"

__all__ = [
    "SECP256R1_PROGRAM_ID",
    "Hex",
    "Raw",
    "Utf8",
    "SignatureEntry",
    "normalize",
    "Secp256r1Instruction",
    "SignatureOffsets",
    "compute_offsets",
    "decode_offsets",
    "encode",
    "encode_hex",
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
