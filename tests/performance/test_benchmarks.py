"""Performance benchmarking suite for the hex codec."""

import pytest
import time
import os
from statistics import mean

from hexwire.core.codec import decode, decode_to_slice, encode, encode_to_slice
from hexwire.models.hex_types import HexArray


class PerformanceBenchmark:
    """Times repeated runs of one codec operation."""

    def __init__(self, name: str, iterations: int = 10):
        self.name = name
        self.iterations = iterations
        self.times = []

    def __enter__(self):
        self.start = time.perf_counter()
        return self

    def __exit__(self, *args):
        self.times.append(time.perf_counter() - self.start)

    def report(self):
        """Print the mean run time and return it in milliseconds."""
        avg_ms = mean(self.times) * 1000
        print(f"\n{self.name}: {avg_ms:.3f} ms over {len(self.times)} runs")
        return {"name": self.name, "avg_ms": avg_ms}


@pytest.mark.benchmark
class TestPerformanceBenchmarks:
    """Performance benchmarks for the codec hot paths."""

    PAYLOAD = os.urandom(4096)

    def test_encode(self):
        """Benchmark allocating encode of 4 KiB."""
        benchmark = PerformanceBenchmark("Encode 4 KiB", iterations=50)

        for _ in range(benchmark.iterations):
            with benchmark:
                encode(self.PAYLOAD)

        stats = benchmark.report()
        assert stats["avg_ms"] < 200

    def test_encode_to_slice_reused_buffer(self):
        """Benchmark slice encode into one scratch buffer."""
        benchmark = PerformanceBenchmark("Encode 4 KiB into scratch buffer", iterations=50)
        scratch = bytearray(2 * len(self.PAYLOAD))

        for _ in range(benchmark.iterations):
            with benchmark:
                encode_to_slice(self.PAYLOAD, scratch)

        stats = benchmark.report()
        assert scratch.decode("ascii") == self.PAYLOAD.hex()
        assert stats["avg_ms"] < 200

    def test_decode(self):
        """Benchmark allocating decode of 4 KiB."""
        text = self.PAYLOAD.hex()
        benchmark = PerformanceBenchmark("Decode 4 KiB", iterations=50)

        for _ in range(benchmark.iterations):
            with benchmark:
                decode(text)

        stats = benchmark.report()
        assert stats["avg_ms"] < 300

    def test_decode_to_slice(self):
        """Benchmark slice decode of 4 KiB."""
        text = self.PAYLOAD.hex()
        out = bytearray(len(self.PAYLOAD))
        benchmark = PerformanceBenchmark("Decode 4 KiB into buffer", iterations=50)

        for _ in range(benchmark.iterations):
            with benchmark:
                decode_to_slice(text, out)

        stats = benchmark.report()
        assert out == self.PAYLOAD
        assert stats["avg_ms"] < 300

    def test_hex_array_from_hex(self):
        """Benchmark decoding 32-byte digests."""
        digest_type = HexArray[32]
        text = os.urandom(32).hex()
        benchmark = PerformanceBenchmark("HexArray[32].from_hex", iterations=1000)

        for _ in range(benchmark.iterations):
            with benchmark:
                digest_type.from_hex(text)

        stats = benchmark.report()
        assert stats["avg_ms"] < 5
