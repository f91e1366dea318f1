"""Property-based tests using Hypothesis for codec invariants."""

import pytest
from hypothesis import given, strategies as st, settings, HealthCheck

from hexwire.core.codec import (
    decode,
    decode_exact,
    decode_to_slice,
    encode,
    encode_to_slice,
    encode_upper,
)
from hexwire.exceptions import InvalidHexCharacter, OddLength
from hexwire.models.hex_types import HexArray, HexBytes
from hexwire.serialization.context import BINARY, TEXT
from hexwire.serialization.hex import deserialize, serialize

HEX_DIGITS = "0123456789abcdefABCDEF"


class TestCodecProperties:
    """Property-based tests for encode/decode invariants."""

    @given(st.binary(max_size=512))
    @settings(max_examples=200, suppress_health_check=[HealthCheck.too_slow])
    def test_roundtrip_lower(self, data: bytes):
        """Property: decode(encode(b)) == b."""
        assert decode(encode(data)) == data

    @given(st.binary(max_size=512))
    @settings(max_examples=200)
    def test_roundtrip_upper(self, data: bytes):
        """Property: decode is case-insensitive, so uppercase round-trips too."""
        assert decode(encode_upper(data)) == data

    @given(st.binary(max_size=512))
    def test_length_law(self, data: bytes):
        """Property: output is exactly twice as long as input."""
        assert len(encode(data)) == 2 * len(data)

    @given(st.binary(max_size=256))
    def test_matches_builtin_hex(self, data: bytes):
        """Property: agrees with bytes.hex() for both cases."""
        assert encode(data) == data.hex()
        assert encode_upper(data) == data.hex().upper()

    @given(st.binary(max_size=256))
    def test_slice_variants_agree(self, data: bytes):
        """Property: slice variants produce the same results as allocating ones."""
        text = bytearray(2 * len(data))
        encode_to_slice(data, text)
        assert text.decode("ascii") == encode(data)

        out = bytearray(len(data))
        decode_to_slice(text, out)
        assert out == data

    @given(st.text(alphabet=HEX_DIGITS, max_size=200).filter(lambda s: len(s) % 2 == 0))
    def test_canonical_reencode(self, text: str):
        """Property: encode(decode(h)) is h in lowercase."""
        assert encode(decode(text)) == text.lower()

    @given(st.text(alphabet=HEX_DIGITS, min_size=1, max_size=201).filter(lambda s: len(s) % 2 == 1))
    def test_odd_length_always_rejected(self, text: str):
        """Property: any odd-length input fails with OddLength."""
        with pytest.raises(OddLength):
            decode(text)

    @given(
        st.text(alphabet=HEX_DIGITS, max_size=50),
        st.characters().filter(lambda c: c not in HEX_DIGITS),
        st.text(alphabet=HEX_DIGITS, max_size=50),
    )
    def test_invalid_character_position(self, head: str, bad: str, tail: str):
        """Property: the first invalid character is reported at its index."""
        text = head + bad + tail
        if len(text) % 2:
            text += "0"

        with pytest.raises(InvalidHexCharacter) as exc_info:
            decode(text)
        assert exc_info.value.char == bad
        assert exc_info.value.index == len(head)


class TestTypeProperties:
    """Property-based tests for the hex types and serialization hooks."""

    @given(st.binary(min_size=8, max_size=8))
    def test_hex_array_roundtrip(self, data: bytes):
        """Property: HexArray survives hex conversion."""
        value = HexArray[8](data)
        assert HexArray[8].from_hex(value.encode_hex_upper()) == value
        assert decode_exact(str(value), 8) == data

    @given(st.binary(max_size=128))
    def test_hex_bytes_roundtrip(self, data: bytes):
        """Property: HexBytes survives hex conversion."""
        assert HexBytes.from_hex(HexBytes(data).encode_hex()) == data

    @given(st.binary(max_size=128))
    def test_serialize_roundtrip_both_modes(self, data: bytes):
        """Property: each format mode reads back what it wrote."""
        assert deserialize(serialize(data, TEXT), TEXT) == data
        assert deserialize(serialize(data, BINARY), BINARY) == data
