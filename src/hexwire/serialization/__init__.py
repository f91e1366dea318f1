"""Serialization hooks choosing between encoded text and raw bytes."""

from hexwire.serialization.context import (
    BINARY,
    TEXT,
    FormatContext,
    is_human_readable,
)
from hexwire.serialization.hex import (
    HexEncodedBytes,
    UpperHexEncodedBytes,
    deserialize,
    deserialize_array,
    fixed_hex_bytes,
    hex_json_schema,
    serialize,
    serialize_upper,
)
from hexwire.serialization.base64_bytes import Base64EncodedBytes

__all__ = [
    'BINARY',
    'TEXT',
    'FormatContext',
    'is_human_readable',
    'HexEncodedBytes',
    'UpperHexEncodedBytes',
    'deserialize',
    'deserialize_array',
    'fixed_hex_bytes',
    'hex_json_schema',
    'serialize',
    'serialize_upper',
    'Base64EncodedBytes',
]
