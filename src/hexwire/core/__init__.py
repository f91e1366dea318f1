"""Hex codec core: encode/decode functions and capability interfaces."""

from hexwire.core.codec import (
    decode,
    decode_exact,
    decode_to_slice,
    encode,
    encode_to_slice,
    encode_upper,
)
from hexwire.core.traits import FromHex, ToHex

__all__ = [
    'decode',
    'decode_exact',
    'decode_to_slice',
    'encode',
    'encode_to_slice',
    'encode_upper',
    'FromHex',
    'ToHex',
]
