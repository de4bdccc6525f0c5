"""Value objects for normalized signature entries."""

from .entry import FieldInput, Hex, Raw, SignatureEntry, Utf8, normalize

__all__ = ["FieldInput", "Hex", "Raw", "SignatureEntry", "Utf8", "normalize"]
