"""Byte container types with hex conversion."""

from hexwire.models.hex_types import HexArray, HexBytes

__all__ = [
    "HexArray",
    "HexBytes",
]
