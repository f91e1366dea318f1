"""
Serialize bytes as hex in human-readable formats and as raw bytes otherwise.

Usable directly as pydantic hooks::

    class Key(BaseModel):
        data: HexEncodedBytes
        digest: fixed_hex_bytes(32)

``Key(...).model_dump_json()`` writes hex strings, ``model_dump()`` keeps
raw bytes.
"""

import logging
from typing import Annotated, Any

from pydantic import PlainSerializer, PlainValidator, WithJsonSchema

from hexwire.config import get_settings
from hexwire.core.codec import decode, decode_exact, encode, encode_upper
from hexwire.exceptions import ByteLengthError, DeserializationError, FromHexError
from hexwire.serialization.context import is_human_readable
from hexwire.utils.encoding import ensure_bytes

logger = logging.getLogger(__name__)

HEX_PATTERN = "^(?:[0-9a-fA-F]{2})*$"


def hex_json_schema(size: int = None) -> dict:
    """JSON schema of a hex string, optionally of exactly ``size`` bytes."""
    if size is None:
        return {"type": "string", "pattern": HEX_PATTERN}
    hex_len = 2 * size
    return {
        "type": "string",
        "minLength": hex_len,
        "maxLength": hex_len,
        "pattern": f"^[0-9a-fA-F]{{{hex_len}}}$",
    }


def serialize(data, info):
    """Lowercase hex string if the format is human readable, raw bytes otherwise."""
    if is_human_readable(info):
        return encode(data)
    return bytes(ensure_bytes(data))


def serialize_upper(data, info):
    """Same as :func:`serialize` with uppercase digits."""
    if is_human_readable(info):
        return encode_upper(data)
    return bytes(ensure_bytes(data))


def _decode_text(value: str, decoder):
    try:
        return decoder(value)
    except FromHexError as e:
        logger.debug(f"Rejected hex input: {e}")
        raise DeserializationError(f"Invalid hex string: {e}", error=e) from e


def _expect_text(value) -> str:
    if not isinstance(value, str):
        logger.debug(f"Expected hex string, got {type(value).__name__}")
        raise DeserializationError(
            f"Expected a hex-encoded string, got {type(value).__name__}"
        )
    return value


def _expect_bytes(value) -> bytes:
    if not isinstance(value, (bytes, bytearray, memoryview)):
        logger.debug(f"Expected raw bytes, got {type(value).__name__}")
        raise DeserializationError(f"Expected bytes, got {type(value).__name__}")
    return bytes(value)


def deserialize(value, info) -> bytes:
    """
    Read bytes written by :func:`serialize`.

    Args:
        value: Hex string (human-readable formats) or bytes (binary formats)
        info: Format context or pydantic ``ValidationInfo``

    Raises:
        DeserializationError: If the value has the wrong kind for the format
            or is not valid hex; ``.error`` holds the FromHexError
    """
    if is_human_readable(info):
        return _decode_text(_expect_text(value), decode)
    if isinstance(value, str) and get_settings().accept_text_in_binary_mode:
        return _decode_text(value, decode)
    return _expect_bytes(value)


def deserialize_array(value, info, size: int) -> bytes:
    """
    Read exactly ``size`` bytes written by :func:`serialize`.

    Raises:
        DeserializationError: As :func:`deserialize`, and when the value does
            not hold exactly ``size`` bytes
    """
    if is_human_readable(info):
        return _decode_text(_expect_text(value), lambda text: decode_exact(text, size))
    if isinstance(value, str) and get_settings().accept_text_in_binary_mode:
        return _decode_text(value, lambda text: decode_exact(text, size))

    raw = _expect_bytes(value)
    if len(raw) != size:
        error = ByteLengthError(size, len(raw))
        logger.debug(f"Rejected byte array: {error}")
        raise DeserializationError(
            f"Expected a byte array of length {size}, got {len(raw)}", error=error
        ) from error
    return raw


HexEncodedBytes = Annotated[
    bytes,
    PlainValidator(deserialize),
    PlainSerializer(serialize, return_type=Any),
    WithJsonSchema(hex_json_schema()),
]

UpperHexEncodedBytes = Annotated[
    bytes,
    PlainValidator(deserialize),
    PlainSerializer(serialize_upper, return_type=Any),
    WithJsonSchema(hex_json_schema()),
]


def fixed_hex_bytes(size: int, upper: bool = False):
    """Annotated ``bytes`` type holding exactly ``size`` bytes, hex-encoded in text formats."""

    def validate(value, info):
        return deserialize_array(value, info, size)

    return Annotated[
        bytes,
        PlainValidator(validate),
        PlainSerializer(serialize_upper if upper else serialize, return_type=Any),
        WithJsonSchema(hex_json_schema(size)),
    ]
