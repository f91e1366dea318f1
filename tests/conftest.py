"""Pytest configuration and fixtures."""

import pytest
import sys
from pathlib import Path

# Add src to path for imports
src_path = Path(__file__).parent.parent / "src"
sys.path.insert(0, str(src_path))

from hexwire.config import get_settings


@pytest.fixture(autouse=True)
def fresh_settings():
    """Fixture clearing the cached settings around each test."""
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture(scope="session")
def test_data():
    """Fixture providing test data."""
    return {
        "deadbeef": bytes([0xDE, 0xAD, 0xBE, 0xEF]),
        "sample_16": bytes.fromhex("0123456789abcdef0123456789abcdef"),
        "sample_16_hex": "0123456789abcdef0123456789abcdef",
    }


def pytest_configure(config):
    config.addinivalue_line("markers", "benchmark: performance benchmarks")
