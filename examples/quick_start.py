#!/usr/bin/env python3
"""
Quick start guide for hexwire.

Run this to see encoding, decoding and the pydantic integration.
"""

import sys
from pathlib import Path

# Add src to path
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from pydantic import BaseModel

from hexwire import FromHexError, HexArray, decode, encode, encode_to_slice, encode_upper
from hexwire.serialization import HexEncodedBytes


class SignedBlob(BaseModel):
    """Example record with a variable payload and a fixed-size digest."""
    payload: HexEncodedBytes
    digest: HexArray[4]


def main():
    """Run a short tour of the codec."""

    print("=" * 70)
    print("HEXWIRE QUICK START EXAMPLE")
    print("=" * 70)
    print()

    # Step 1: Encode
    print("Step 1: Encode bytes")
    print("-" * 70)
    data = bytes([0xDE, 0xAD, 0xBE, 0xEF])
    print(f"  encode:       {encode(data)}")
    print(f"  encode_upper: {encode_upper(data)}")
    scratch = bytearray(8)
    encode_to_slice(data, scratch)
    print(f"  into buffer:  {scratch.decode('ascii')}")
    print()

    # Step 2: Decode
    print("Step 2: Decode hex")
    print("-" * 70)
    print(f"  decode('DeadBeef') -> {decode('DeadBeef')!r}")
    for bad in ("abc", "a1g2"):
        try:
            decode(bad)
        except FromHexError as e:
            print(f"  decode({bad!r}) -> {type(e).__name__}: {e}")
    print()

    # Step 3: pydantic models
    print("Step 3: Serialize a model")
    print("-" * 70)
    blob = SignedBlob(payload=b"hello", digest=HexArray[4].from_hex("01020304"))
    as_json = blob.model_dump_json()
    print(f"  JSON (human readable): {as_json}")
    print(f"  Python (binary):       {blob.model_dump()}")
    restored = SignedBlob.model_validate_json(as_json)
    print(f"✓ Round trip equal: {restored == blob}")
    print()


if __name__ == "__main__":
    main()
