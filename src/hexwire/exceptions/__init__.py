"""Custom exceptions for the hexwire codec."""


class HexwireException(Exception):
    """Base exception for all hexwire errors."""
    pass


# Malformed input
class FromHexError(HexwireException, ValueError):
    """Base exception for hex strings that cannot be decoded."""
    pass


class InvalidHexCharacter(FromHexError):
    """Raised when a character is not one of 0-9, a-f or A-F."""

    def __init__(self, char: str, index: int):
        self.char = char
        self.index = index
        super().__init__(f"Invalid character {char!r} at position {index}")


class OddLength(FromHexError):
    """Raised when a hex string has an odd number of digits."""

    def __init__(self):
        super().__init__("Odd number of digits")


class InvalidStringLength(FromHexError):
    """Raised when a hex string decodes to the wrong number of bytes for a fixed-size target."""

    def __init__(self, expected: int, actual: int):
        self.expected = expected
        self.actual = actual
        super().__init__(
            f"Invalid string length: expected {expected} bytes, got {actual}"
        )


# Size contracts
class ByteLengthError(HexwireException, ValueError):
    """Raised when a byte sequence does not have the required length."""

    def __init__(self, expected: int, actual: int, message: str = None):
        self.expected = expected
        self.actual = actual
        super().__init__(message or f"Expected {expected} bytes, got {actual}")


class BufferSizeError(ByteLengthError):
    """Raised when a destination buffer does not match the required size."""

    def __init__(self, expected: int, actual: int):
        super().__init__(
            expected,
            actual,
            f"Destination buffer must be {expected} bytes long, got {actual}",
        )


# Serialization
class DeserializationError(HexwireException, ValueError):
    """Raised when a serialized value cannot be turned back into bytes."""

    def __init__(self, message: str, error: Exception = None):
        self.error = error
        super().__init__(message)
