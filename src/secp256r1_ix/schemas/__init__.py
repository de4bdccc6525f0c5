"""
Pydantic schemas for textual entry input.

These schemas validate the JSON shape of entries before normalization.
"""

from .entry import SignatureEntryIn, load_entries_json

__all__ = ["SignatureEntryIn", "load_entries_json"]
