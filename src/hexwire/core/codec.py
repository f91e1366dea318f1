"""Hexadecimal encoding and decoding of byte sequences."""

from hexwire.exceptions import (
    BufferSizeError,
    InvalidHexCharacter,
    InvalidStringLength,
    OddLength,
)
from hexwire.utils.encoding import ensure_bytes, ensure_hex_text, writable_view

HEX_CHARS_LOWER = b"0123456789abcdef"
HEX_CHARS_UPPER = b"0123456789ABCDEF"

_INVALID = 0xFF


def _build_decode_table() -> bytes:
    """Map every 8-bit code point to its nibble value, or ``_INVALID``."""
    table = bytearray([_INVALID]) * 256
    for value, char in enumerate(HEX_CHARS_LOWER):
        table[char] = value
    for value, char in enumerate(HEX_CHARS_UPPER):
        table[char] = value
    return bytes(table)


_DECODE_TABLE = _build_decode_table()


def _nibble(char: str) -> int:
    code = ord(char)
    return _DECODE_TABLE[code] if code < 256 else _INVALID


def _encode_into(data, out, table: bytes) -> None:
    for i, byte in enumerate(data):
        out[2 * i] = table[byte >> 4]
        out[2 * i + 1] = table[byte & 0x0F]


def _validate(text: str) -> None:
    for index, char in enumerate(text):
        if _nibble(char) == _INVALID:
            raise InvalidHexCharacter(char, index)


def _decode_into(text: str, out) -> None:
    for i in range(0, len(text), 2):
        out[i // 2] = (_nibble(text[i]) << 4) | _nibble(text[i + 1])


def encode(data) -> str:
    """
    Encode bytes as a lowercase hex string.

    Args:
        data: Bytes-like object (a str is encoded as UTF-8 first)

    Returns:
        str: Hex digits, two per input byte, no prefix

    Example:
        >>> encode(b"\\xde\\xad\\xbe\\xef")
        'deadbeef'
    """
    return bytes(ensure_bytes(data)).hex()


def encode_upper(data) -> str:
    """
    Encode bytes as an uppercase hex string.

    Example:
        >>> encode_upper(b"\\xde\\xad\\xbe\\xef")
        'DEADBEEF'
    """
    return bytes(ensure_bytes(data)).hex().upper()


def encode_to_slice(data, out, upper: bool = False) -> None:
    """
    Encode bytes as ASCII hex digits into a caller-supplied buffer.

    Args:
        data: Bytes-like object of length N
        out: Writable buffer of exactly 2N bytes
        upper: Emit uppercase digits instead of lowercase

    Raises:
        BufferSizeError: If ``len(out) != 2 * len(data)``. Nothing is written.
        TypeError: If ``out`` is not a writable buffer
    """
    raw = ensure_bytes(data)
    view = writable_view(out)
    if len(view) != 2 * len(raw):
        raise BufferSizeError(2 * len(raw), len(view))
    _encode_into(raw, view, HEX_CHARS_UPPER if upper else HEX_CHARS_LOWER)


def decode(text) -> bytes:
    """
    Decode a hex string into bytes.

    Both uppercase and lowercase digits are accepted.

    Args:
        text: Hex string, or ASCII bytes-like object holding one

    Returns:
        bytes: Decoded data, half the length of ``text``

    Raises:
        OddLength: If ``text`` has an odd number of characters
        InvalidHexCharacter: For the first character outside 0-9a-fA-F
    """
    text = ensure_hex_text(text)
    if len(text) % 2 != 0:
        raise OddLength()
    _validate(text)

    out = bytearray(len(text) // 2)
    _decode_into(text, out)
    return bytes(out)


def decode_to_slice(text, out) -> None:
    """
    Decode a hex string into a caller-supplied buffer.

    The whole input is validated before the first write, so ``out`` is left
    untouched when an error is raised.

    Raises:
        OddLength: If ``text`` has an odd number of characters
        BufferSizeError: If ``len(out) != len(text) // 2``
        InvalidHexCharacter: For the first character outside 0-9a-fA-F
    """
    text = ensure_hex_text(text)
    if len(text) % 2 != 0:
        raise OddLength()
    view = writable_view(out)
    if len(view) != len(text) // 2:
        raise BufferSizeError(len(text) // 2, len(view))
    _validate(text)
    _decode_into(text, view)


def decode_exact(text, size: int) -> bytes:
    """
    Decode a hex string that must represent exactly ``size`` bytes.

    Raises:
        OddLength: If ``text`` has an odd number of characters
        InvalidStringLength: If ``text`` does not hold ``size`` bytes
        InvalidHexCharacter: For the first character outside 0-9a-fA-F
    """
    text = ensure_hex_text(text)
    if len(text) % 2 != 0:
        raise OddLength()
    if len(text) // 2 != size:
        raise InvalidStringLength(size, len(text) // 2)
    _validate(text)

    out = bytearray(size)
    _decode_into(text, out)
    return bytes(out)
