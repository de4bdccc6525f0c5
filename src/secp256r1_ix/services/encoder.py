# src/secp256r1_ix/services/encoder.py
"""Instruction data encoder for the secp256r1 signature-verification program.

Layout of the encoded buffer::

    count (u8) | padding (u8) | offsets (14 bytes) * count | body

Each body record is ``pubkey (33) | signature (64) | message``. The offsets
record points at those fields; every instruction-index slot carries
``0xFFFF`` because all data lives in the same instruction. An empty
sequence encodes to the single count byte.
"""
from __future__ import annotations

import logging
import struct
from collections.abc import Iterable, Sequence
from dataclasses import dataclass

from solders.instruction import Instruction
from solders.pubkey import Pubkey

from secp256r1_ix.core.constants import (
    COMPRESSED_PUBKEY_SIZE,
    COUNT_SIZE,
    CURRENT_INSTRUCTION_INDEX,
    ENTRY_FIXED_SIZE,
    MAX_ENTRIES,
    MAX_U16,
    SECP256R1_PROGRAM_ID,
    SIGNATURE_OFFSETS_SIZE,
    SIGNATURE_OFFSETS_START,
)
from secp256r1_ix.core.errors import MalformedPayload, OffsetOverflow, TooManyEntries
from secp256r1_ix.models.entry import FieldInput, SignatureEntry, normalize
from secp256r1_ix.utils.hexstr import bytes_to_hex

logger = logging.getLogger(__name__)

_OFFSETS_STRUCT = struct.Struct("<7H")


@dataclass(frozen=True)
class SignatureOffsets:
    """Offsets for one secp256r1 signature verification record (all u16)."""

    signature_offset: int
    signature_instruction_index: int
    public_key_offset: int
    public_key_instruction_index: int
    message_data_offset: int
    message_data_size: int
    message_instruction_index: int

    def pack(self) -> bytes:
        """Serialize to the 14-byte little-endian record."""
        return _OFFSETS_STRUCT.pack(
            self.signature_offset,
            self.signature_instruction_index,
            self.public_key_offset,
            self.public_key_instruction_index,
            self.message_data_offset,
            self.message_data_size,
            self.message_instruction_index,
        )

    @classmethod
    def unpack(cls, data: bytes) -> SignatureOffsets:
        """Parse a 14-byte little-endian record."""
        return cls(*_OFFSETS_STRUCT.unpack(data))


def header_length(count: int) -> int:
    """Return the header size for ``count`` entries."""
    if count == 0:
        return COUNT_SIZE
    return SIGNATURE_OFFSETS_START + SIGNATURE_OFFSETS_SIZE * count


def _check_u16(name: str, value: int) -> int:
    if value > MAX_U16:
        raise OffsetOverflow(f"{name} {value} does not fit in 16 bits")
    return value


def entry_offsets(entry: SignatureEntry, base: int) -> SignatureOffsets:
    """Compute the offsets record for an entry whose body starts at ``base``.

    Raises:
        OffsetOverflow: If any offset or the message length exceeds 65535.
    """
    pubkey_offset = base
    signature_offset = pubkey_offset + COMPRESSED_PUBKEY_SIZE
    message_offset = base + ENTRY_FIXED_SIZE
    return SignatureOffsets(
        signature_offset=_check_u16("signature_offset", signature_offset),
        signature_instruction_index=CURRENT_INSTRUCTION_INDEX,
        public_key_offset=_check_u16("public_key_offset", pubkey_offset),
        public_key_instruction_index=CURRENT_INSTRUCTION_INDEX,
        message_data_offset=_check_u16("message_data_offset", message_offset),
        message_data_size=_check_u16("message_data_size", len(entry.message)),
        message_instruction_index=CURRENT_INSTRUCTION_INDEX,
    )


def _check_count(count: int) -> None:
    if count > MAX_ENTRIES:
        raise TooManyEntries(f"At most {MAX_ENTRIES} entries fit in one instruction, got {count}")


def compute_offsets(entries: Sequence[SignatureEntry]) -> list[SignatureOffsets]:
    """Compute the offsets table for ``entries`` in order.

    Raises:
        TooManyEntries: If there are more than 255 entries.
        OffsetOverflow: If any offset or length exceeds 65535.
    """
    _check_count(len(entries))
    base = header_length(len(entries))
    table: list[SignatureOffsets] = []
    for entry in entries:
        table.append(entry_offsets(entry, base))
        base += entry.length
    return table


def encode(entries: Sequence[SignatureEntry]) -> bytes:
    """Assemble the instruction data for ``entries``.

    The whole buffer is sized up front and filled through a write cursor.

    Raises:
        TooManyEntries: If there are more than 255 entries.
        OffsetOverflow: If any offset or length exceeds 65535.
    """
    table = compute_offsets(entries)
    count = len(entries)
    head = header_length(count)
    total = head + sum(entry.length for entry in entries)

    buffer = bytearray(total)
    buffer[0] = count
    cursor = SIGNATURE_OFFSETS_START
    for offsets in table:
        buffer[cursor:cursor + SIGNATURE_OFFSETS_SIZE] = offsets.pack()
        cursor += SIGNATURE_OFFSETS_SIZE

    cursor = head
    for entry in entries:
        for chunk in (entry.pubkey, entry.signature, entry.message):
            buffer[cursor:cursor + len(chunk)] = chunk
            cursor += len(chunk)

    logger.debug("Encoded %d secp256r1 entries into %d bytes", count, total)
    return bytes(buffer)


def encode_hex(entries: Sequence[SignatureEntry]) -> str:
    """Return :func:`encode` output as lowercase hex."""
    return bytes_to_hex(encode(entries))


def decode_offsets(data: bytes) -> list[SignatureOffsets]:
    """Read the offsets table back out of encoded instruction data.

    Raises:
        MalformedPayload: If ``data`` is empty or shorter than its declared header.
    """
    if not data:
        raise MalformedPayload("Instruction data is empty")
    count = data[0]
    needed = header_length(count)
    if len(data) < needed:
        raise MalformedPayload(
            f"Header for {count} entries needs {needed} bytes, got {len(data)}"
        )
    return [
        SignatureOffsets.unpack(data[start:start + SIGNATURE_OFFSETS_SIZE])
        for start in range(
            SIGNATURE_OFFSETS_START,
            SIGNATURE_OFFSETS_START + SIGNATURE_OFFSETS_SIZE * count,
            SIGNATURE_OFFSETS_SIZE,
        )
    ]


class Secp256r1Instruction:
    """An ordered batch of entries verified by a single instruction."""

    def __init__(self, entries: Iterable[SignatureEntry]) -> None:
        self.entries: tuple[SignatureEntry, ...] = tuple(entries)
        _check_count(len(self.entries))

    @classmethod
    def from_triples(
        cls, triples: Iterable[tuple[FieldInput, FieldInput, FieldInput]]
    ) -> Secp256r1Instruction:
        """Normalize ``(message, pubkey, signature)`` triples into an instruction."""
        return cls(normalize(message, pubkey, signature) for message, pubkey, signature in triples)

    def __len__(self) -> int:
        return len(self.entries)

    def offsets(self) -> list[SignatureOffsets]:
        return compute_offsets(self.entries)

    def to_bytes(self) -> bytes:
        return encode(self.entries)

    def to_hex(self) -> str:
        return encode_hex(self.entries)

    def to_instruction(self, program_id: Pubkey | None = None) -> Instruction:
        """Wrap the encoded data in an instruction for the verifier program.

        Args:
            program_id: Target program; defaults to the native secp256r1 program.

        Returns:
            Instruction with no accounts, ready to add to a transaction
        """
        return Instruction(
            program_id=program_id if program_id is not None else SECP256R1_PROGRAM_ID,
            data=self.to_bytes(),
            accounts=[],
        )
