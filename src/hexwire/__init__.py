"""Main package initialization."""

__version__ = "0.1.0"
__author__ = "hexwire Contributors"
__description__ = "Hex encoding and decoding of byte sequences, with pydantic integration"

from .core.codec import (
    decode,
    decode_exact,
    decode_to_slice,
    encode,
    encode_to_slice,
    encode_upper,
)
from .core.traits import FromHex, ToHex
from .exceptions import (
    BufferSizeError,
    ByteLengthError,
    DeserializationError,
    FromHexError,
    HexwireException,
    InvalidHexCharacter,
    InvalidStringLength,
    OddLength,
)
from .models.hex_types import HexArray, HexBytes

__all__ = [
    "decode",
    "decode_exact",
    "decode_to_slice",
    "encode",
    "encode_to_slice",
    "encode_upper",
    "FromHex",
    "ToHex",
    "BufferSizeError",
    "ByteLengthError",
    "DeserializationError",
    "FromHexError",
    "HexwireException",
    "InvalidHexCharacter",
    "InvalidStringLength",
    "OddLength",
    "HexArray",
    "HexBytes",
]
