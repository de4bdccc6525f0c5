"""Schemas describing signature entries supplied as text (e.g. JSON files)."""
from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field, TypeAdapter

from secp256r1_ix.models.entry import SignatureEntry, normalize


class SignatureEntryIn(BaseModel):
    """A single (message, pubkey, signature) triple in textual form."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    message: str = Field(..., description="Plain text, or 0x-prefixed hex bytes.")
    pubkey: str = Field(..., description="Hex-encoded 33-byte compressed public key.")
    signature: str = Field(..., description="Hex-encoded 64-byte r||s signature.")

    def to_entry(self) -> SignatureEntry:
        """Normalize into a validated :class:`SignatureEntry`."""
        return normalize(self.message, self.pubkey, self.signature)


_ENTRY_LIST = TypeAdapter(list[SignatureEntryIn])


def load_entries_json(raw: str | bytes) -> list[SignatureEntry]:
    """Parse a JSON array of entry objects and normalize each one.

    Raises:
        pydantic.ValidationError: If the JSON does not have the expected shape.
        Secp256r1Error: If any entry fails normalization.
    """
    return [item.to_entry() for item in _ENTRY_LIST.validate_json(raw)]
