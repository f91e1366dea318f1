"""Coercion helpers for byte and text inputs."""

from typing import Union

BytesLike = Union[bytes, bytearray, memoryview]


def _flat_bytes(view: memoryview) -> memoryview:
    """Flatten to one byte per item; non-contiguous views are copied."""
    if view.ndim == 1 and view.format == "B":
        return view
    if view.c_contiguous:
        return view.cast("B")
    return memoryview(view.tobytes())


def ensure_bytes(data) -> BytesLike:
    """
    Ensure data can be iterated as a sequence of byte values.

    Args:
        data: Bytes-like object, object implementing ``__bytes__``, or string

    Returns:
        bytes, bytearray or a flat one-byte-per-item memoryview over ``data``.
        Multi-dimensional buffers are flattened in C order.
        Strings are returned as their UTF-8 encoding.

    Raises:
        TypeError: If data has no byte representation
    """
    if isinstance(data, (bytes, bytearray)):
        return data
    elif isinstance(data, str):
        return data.encode('utf-8')
    elif isinstance(data, memoryview):
        return _flat_bytes(data)
    elif hasattr(data, "__bytes__"):
        return bytes(data)

    try:
        view = memoryview(data)
    except TypeError:
        raise TypeError(f"Expected bytes-like object or str, got {type(data)}") from None
    return _flat_bytes(view)


def ensure_hex_text(data) -> str:
    """
    Ensure hex input is a string, one character per input unit.

    Bytes-like input is mapped byte-for-character (latin-1) so positions in
    error reports match byte offsets and any non-ASCII byte stays invalid.

    Raises:
        TypeError: If data is neither str nor bytes-like
    """
    if isinstance(data, str):
        return data
    elif isinstance(data, (bytes, bytearray, memoryview)):
        return bytes(data).decode('latin-1')
    else:
        raise TypeError(f"Expected str or bytes-like object, got {type(data)}")


def writable_view(buffer) -> memoryview:
    """
    Return a writable flat one-byte-per-item view over a caller-supplied buffer.

    Multi-dimensional buffers are addressed in C order.

    Raises:
        TypeError: If buffer does not support the buffer protocol, is read-only
            or is not contiguous
    """
    try:
        view = memoryview(buffer)
    except TypeError:
        raise TypeError(f"Expected a writable buffer, got {type(buffer)}") from None
    if view.readonly:
        raise TypeError(f"Destination buffer is read-only: {type(buffer)}")
    if view.ndim == 1 and view.format == "B":
        return view
    if not view.c_contiguous:
        raise TypeError(f"Destination buffer is not contiguous: {type(buffer)}")
    return view.cast("B")
