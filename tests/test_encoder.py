# mypy: ignore-errors
"""Tests for the offsets table and buffer assembly."""

from __future__ import annotations

import struct

import pytest

from secp256r1_ix.core.errors import MalformedPayload, OffsetOverflow, TooManyEntries
from secp256r1_ix.models.entry import SignatureEntry, normalize
from secp256r1_ix.services.encoder import (
    Secp256r1Instruction,
    SignatureOffsets,
    compute_offsets,
    decode_offsets,
    encode,
    encode_hex,
    header_length,
)
from vectors import GOLDEN_HEX, GOLDEN_PUBKEY, GOLDEN_SIGNATURE


def _entry(message: bytes) -> SignatureEntry:
    return normalize(message, GOLDEN_PUBKEY, GOLDEN_SIGNATURE)


class TestGoldenVector:
    """Byte-exact compatibility with a known-good payload."""

    def test_single_entry_hex(self, golden_entry: SignatureEntry) -> None:
        """Ensure a single golden entry encodes to the known hex."""
        assert encode_hex([golden_entry]) == GOLDEN_HEX

    def test_instruction_hex(self, golden_entry: SignatureEntry) -> None:
        """Ensure the instruction wrapper renders the same hex."""
        assert Secp256r1Instruction([golden_entry]).to_hex() == GOLDEN_HEX

    def test_bytes_match_hex(self, golden_entry: SignatureEntry) -> None:
        """Ensure the byte buffer matches the hex view."""
        assert encode([golden_entry]) == bytes.fromhex(GOLDEN_HEX)


class TestHeader:
    """Count byte and offsets records."""

    def test_empty_sequence_is_single_zero_byte(self) -> None:
        """Ensure no entries encode to a lone zero count byte."""
        assert encode([]) == b"\x00"
        assert encode_hex([]) == "00"

    def test_header_length(self) -> None:
        """Ensure header sizes include the padding byte only when entries exist."""
        assert header_length(0) == 1
        assert header_length(1) == 16
        assert header_length(3) == 44

    def test_first_entry_offsets(self) -> None:
        """Ensure the first entry starts right after the header."""
        entries = [_entry(b"abc"), _entry(b"defgh")]
        head = header_length(len(entries))
        first = compute_offsets(entries)[0]
        assert first.public_key_offset == head
        assert first.signature_offset == head + 33
        assert first.message_data_offset == head + 97
        assert first.message_data_size == 3

    def test_offsets_accumulate_entry_lengths(self) -> None:
        """Ensure each entry starts where the previous one ends."""
        entries = [_entry(b"abc"), _entry(b""), _entry(b"xyz12")]
        table = compute_offsets(entries)
        head = header_length(3)
        assert [o.public_key_offset for o in table] == [head, head + 100, head + 197]
        assert [o.message_data_size for o in table] == [3, 0, 5]

    def test_instruction_index_sentinels(self, golden_entry: SignatureEntry) -> None:
        """Ensure every instruction index is the current-instruction sentinel."""
        offsets = compute_offsets([golden_entry])[0]
        assert offsets.signature_instruction_index == 0xFFFF
        assert offsets.public_key_instruction_index == 0xFFFF
        assert offsets.message_instruction_index == 0xFFFF

    def test_offsets_record_is_little_endian(self) -> None:
        """Ensure offsets records pack as little-endian u16 fields."""
        record = SignatureOffsets(0x0102, 0xFFFF, 0x0304, 0xFFFF, 0x0506, 0x0007, 0xFFFF)
        packed = record.pack()
        assert len(packed) == 14
        assert packed == bytes.fromhex("0201ffff0403ffff06050700ffff")
        assert SignatureOffsets.unpack(packed) == record

    def test_count_and_padding_bytes(self, golden_entry: SignatureEntry) -> None:
        """Ensure the count byte is followed by a zero padding byte."""
        data = encode([golden_entry] * 3)
        assert data[0] == 3
        assert data[1] == 0


class TestBody:
    """Body layout and sizing."""

    def test_buffer_length(self) -> None:
        """Ensure the buffer size is header plus the sum of entry lengths."""
        entries = [_entry(b"a" * n) for n in (0, 1, 50, 7)]
        expected = 2 + 14 * len(entries) + sum(entry.length for entry in entries)
        assert len(encode(entries)) == expected

    def test_fields_found_at_their_offsets(self) -> None:
        """Ensure each field sits at the offset its record points to."""
        entries = [_entry(b"first"), _entry(b"second message")]
        data = encode(entries)
        for entry, offsets in zip(entries, compute_offsets(entries)):
            pk = offsets.public_key_offset
            sig = offsets.signature_offset
            msg = offsets.message_data_offset
            assert data[pk:pk + 33] == entry.pubkey
            assert data[sig:sig + 64] == entry.signature
            assert data[msg:msg + offsets.message_data_size] == entry.message

    def test_encoding_is_deterministic(self) -> None:
        """Ensure encoding the same entries twice gives the same bytes."""
        entries = [_entry(b"one"), _entry(b"two")]
        assert encode(entries) == encode(list(entries))

    def test_entry_order_changes_layout(self) -> None:
        """Ensure entry order is reflected in the layout."""
        a, b = _entry(b"a"), _entry(b"bb")
        assert encode([a, b]) != encode([b, a])


class TestLimits:
    """Capacity limits of the wire format."""

    def test_255_entries_allowed(self) -> None:
        """Ensure the maximum of 255 entries encodes."""
        entries = [_entry(b"")] * 255
        data = encode(entries)
        assert data[0] == 255
        assert len(data) == 2 + 14 * 255 + 97 * 255

    def test_256_entries_rejected(self) -> None:
        """Ensure 256 entries are rejected instead of wrapping the count."""
        with pytest.raises(TooManyEntries):
            encode([_entry(b"")] * 256)

    def test_instruction_rejects_256_entries(self) -> None:
        """Ensure the instruction wrapper rejects 256 entries up front."""
        with pytest.raises(TooManyEntries):
            Secp256r1Instruction([_entry(b"")] * 256)

    def test_large_message_length_rejected(self) -> None:
        """Ensure a message longer than 65535 bytes is rejected."""
        with pytest.raises(OffsetOverflow):
            encode([_entry(b"\x00" * 65536)])

    def test_offset_past_u16_rejected(self) -> None:
        """Ensure offsets past 65535 are rejected instead of wrapping."""
        # The second entry's signature offset lands past 65535.
        entries = [_entry(b"\x00" * 65400), _entry(b"x")]
        with pytest.raises(OffsetOverflow):
            encode(entries)

    def test_offsets_just_within_range(self) -> None:
        """Ensure offsets right at the u16 limit are accepted."""
        # message_data_offset == 16 + 97 and size == 65535 - 113 fits.
        entry = _entry(b"\x00" * (65535 - 113))
        offsets = compute_offsets([entry])[0]
        assert offsets.message_data_offset == 113
        assert offsets.message_data_size == 65422


class TestDecodeOffsets:
    """Reading the offsets table back."""

    def test_decode_matches_compute(self) -> None:
        """Ensure decoded offsets match the computed table."""
        entries = [_entry(b"abc"), _entry(b"0123456789")]
        assert decode_offsets(encode(entries)) == compute_offsets(entries)

    def test_decode_golden(self) -> None:
        """Ensure the golden payload decodes to the expected offsets."""
        (offsets,) = decode_offsets(bytes.fromhex(GOLDEN_HEX))
        assert offsets.public_key_offset == 0x10
        assert offsets.signature_offset == 0x31
        assert offsets.message_data_offset == 0x71
        assert offsets.message_data_size == 5

    def test_decode_empty_sequence(self) -> None:
        """Ensure a lone zero count byte decodes to no records."""
        assert decode_offsets(b"\x00") == []

    def test_decode_empty_input_rejected(self) -> None:
        """Ensure empty data is rejected."""
        with pytest.raises(MalformedPayload):
            decode_offsets(b"")

    def test_decode_truncated_header_rejected(self) -> None:
        """Ensure data shorter than its declared header is rejected."""
        data = struct.pack("<BB", 2, 0) + b"\x00" * 14
        with pytest.raises(MalformedPayload):
            decode_offsets(data)
