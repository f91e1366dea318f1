"""Capability interfaces for types convertible to and from hex."""

from abc import ABC, abstractmethod

from hexwire.core.codec import encode, encode_upper


class ToHex(ABC):
    """
    Mixin for types that expose themselves as a byte sequence.

    The byte view is whatever the buffer protocol or ``__bytes__`` yields.
    """

    def encode_hex(self) -> str:
        """Encode this value as a lowercase hex string."""
        return encode(self)

    def encode_hex_upper(self) -> str:
        """Encode this value as an uppercase hex string."""
        return encode_upper(self)


class FromHex(ABC):
    """Interface for types that can be built from a hex string."""

    @classmethod
    @abstractmethod
    def from_hex(cls, text):
        """
        Build an instance from a hex string.

        Raises:
            FromHexError: If ``text`` is not valid hex for this type
        """
        raise NotImplementedError
