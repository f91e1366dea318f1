"""Serialize bytes as base64 in human-readable formats and as raw bytes otherwise."""

import base64
import binascii
import logging
from typing import Annotated, Any

from pydantic import PlainSerializer, PlainValidator, WithJsonSchema

from hexwire.config import get_settings
from hexwire.exceptions import DeserializationError
from hexwire.serialization.context import is_human_readable
from hexwire.utils.encoding import ensure_bytes

logger = logging.getLogger(__name__)

BASE64_JSON_SCHEMA = {"type": "string", "format": "byte", "contentEncoding": "base64"}


def serialize(data, info):
    """Standard padded base64 if the format is human readable, raw bytes otherwise."""
    raw = ensure_bytes(data)
    if is_human_readable(info):
        return base64.b64encode(raw).decode("ascii")
    return bytes(raw)


def _decode_text(value: str) -> bytes:
    try:
        return base64.b64decode(value, validate=True)
    except (binascii.Error, ValueError) as e:
        logger.debug(f"Rejected base64 input: {e}")
        raise DeserializationError(f"Invalid base64 string: {e}", error=e) from e


def deserialize(value, info) -> bytes:
    """
    Read bytes written by :func:`serialize`.

    Raises:
        DeserializationError: If the value has the wrong kind for the format
            or is not valid base64
    """
    if is_human_readable(info):
        if not isinstance(value, str):
            raise DeserializationError(
                f"Expected a base64-encoded string, got {type(value).__name__}"
            )
        return _decode_text(value)
    if isinstance(value, str) and get_settings().accept_text_in_binary_mode:
        return _decode_text(value)
    if not isinstance(value, (bytes, bytearray, memoryview)):
        raise DeserializationError(f"Expected bytes, got {type(value).__name__}")
    return bytes(value)


Base64EncodedBytes = Annotated[
    bytes,
    PlainValidator(deserialize),
    PlainSerializer(serialize, return_type=Any),
    WithJsonSchema(BASE64_JSON_SCHEMA),
]
