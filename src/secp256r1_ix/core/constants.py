# src/secp256r1_ix/core/constants.py
"""Wire-format constants for the secp256r1 signature-verification program."""
from __future__ import annotations

from solders.pubkey import Pubkey

SECP256R1_PROGRAM_ID = Pubkey.from_string("Secp256r1SigVerify1111111111111111111111111")

COMPRESSED_PUBKEY_SIZE = 33
SIGNATURE_SIZE = 64
ENTRY_FIXED_SIZE = COMPRESSED_PUBKEY_SIZE + SIGNATURE_SIZE  # 97

COMPRESSED_PUBKEY_PREFIXES = (0x02, 0x03)

COUNT_SIZE = 1
PADDING_SIZE = 1
SIGNATURE_OFFSETS_SIZE = 14
SIGNATURE_OFFSETS_START = COUNT_SIZE + PADDING_SIZE

# Instruction index meaning "the bytes live in this instruction".
CURRENT_INSTRUCTION_INDEX = 0xFFFF

MAX_ENTRIES = 0xFF
MAX_U16 = 0xFFFF
