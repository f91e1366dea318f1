"""Byte container types implementing ToHex and FromHex, with pydantic support."""

from typing import Dict

from pydantic_core import core_schema

from hexwire.core.codec import decode, decode_exact
from hexwire.core.traits import FromHex, ToHex
from hexwire.exceptions import ByteLengthError
from hexwire.serialization.hex import (
    deserialize,
    deserialize_array,
    hex_json_schema,
    serialize,
)
from hexwire.utils.encoding import ensure_bytes


class HexBytes(bytearray, ToHex, FromHex):
    """
    Growable byte buffer that converts to and from hex.

    In pydantic models it validates and serializes through
    :mod:`hexwire.serialization.hex`: hex text in JSON, raw bytes in Python mode.
    """

    @classmethod
    def from_hex(cls, text) -> "HexBytes":
        """
        Decode a hex string of any even length.

        Raises:
            OddLength, InvalidHexCharacter: If ``text`` is not valid hex
        """
        return cls(decode(text))

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.encode_hex()!r})"

    @classmethod
    def __get_pydantic_core_schema__(cls, source, handler):
        def validate(value, info):
            if isinstance(value, cls):
                return cls(value)
            return cls(deserialize(value, info))

        return core_schema.with_info_plain_validator_function(
            validate,
            serialization=core_schema.plain_serializer_function_ser_schema(
                serialize, info_arg=True
            ),
        )

    @classmethod
    def __get_pydantic_json_schema__(cls, schema, handler):
        return hex_json_schema()


_SIZED_ARRAYS: Dict[int, type] = {}


def _restore_hex_array(size: int, data: bytes) -> "HexArray":
    return HexArray[size](data)


class HexArray(bytes, ToHex, FromHex):
    """
    Immutable byte array of a fixed length.

    ``HexArray[N]`` is the array type of length N; the same class object is
    returned for every subscription with N. The bare ``HexArray`` cannot be
    instantiated.

    Example:
        >>> Digest = HexArray[4]
        >>> Digest.from_hex("deadbeef")
        HexArray_4('deadbeef')
        >>> Digest()
        HexArray_4('00000000')
    """

    SIZE = None

    def __class_getitem__(cls, size: int) -> type:
        if cls.SIZE is not None:
            raise TypeError(f"{cls.__name__} already has a fixed size")
        if not isinstance(size, int) or isinstance(size, bool) or size < 0:
            raise TypeError(f"HexArray size must be a non-negative int, got {size!r}")

        sized = _SIZED_ARRAYS.get(size)
        if sized is None:
            sized = _SIZED_ARRAYS.setdefault(
                size,
                type(cls)(f"HexArray_{size}", (cls,), {"SIZE": size, "__module__": __name__}),
            )
        return sized

    def __new__(cls, data=None):
        if cls.SIZE is None:
            raise TypeError("HexArray needs a size, e.g. HexArray[32]")
        if data is None:
            return super().__new__(cls, cls.SIZE)
        if isinstance(data, str):
            raise TypeError(f"Use {cls.__name__}.from_hex() to build from a hex string")

        raw = ensure_bytes(data)
        if len(raw) != cls.SIZE:
            raise ByteLengthError(cls.SIZE, len(raw))
        return super().__new__(cls, raw)

    @classmethod
    def from_hex(cls, text) -> "HexArray":
        """
        Decode a hex string holding exactly ``SIZE`` bytes.

        Raises:
            OddLength: If ``text`` has an odd number of characters
            InvalidStringLength: If ``text`` decodes to a different length
            InvalidHexCharacter: For the first invalid character
        """
        if cls.SIZE is None:
            raise TypeError("HexArray needs a size, e.g. HexArray[32]")
        return cls(decode_exact(text, cls.SIZE))

    def into_inner(self) -> bytes:
        """Return the contents as plain bytes."""
        return bytes(self)

    def __str__(self) -> str:
        return self.encode_hex()

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.encode_hex()!r})"

    def __reduce__(self):
        return (_restore_hex_array, (self.SIZE, bytes(self)))

    @classmethod
    def __get_pydantic_core_schema__(cls, source, handler):
        if cls.SIZE is None:
            raise TypeError("HexArray needs a size, e.g. HexArray[32]")
        size = cls.SIZE

        def validate(value, info):
            if isinstance(value, cls):
                return value
            return cls(deserialize_array(value, info, size))

        return core_schema.with_info_plain_validator_function(
            validate,
            serialization=core_schema.plain_serializer_function_ser_schema(
                serialize, info_arg=True
            ),
        )

    @classmethod
    def __get_pydantic_json_schema__(cls, schema, handler):
        return hex_json_schema(cls.SIZE)
