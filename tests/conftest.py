import pytest

from hmackit.engine import HmacEngine
from hmackit.hasher.base import MockHashAlgorithm
from hmackit.hasher.hashlib import HashlibHashAlgorithm


@pytest.fixture(scope="function")
def sha1() -> HashlibHashAlgorithm:
    """SHA-1 adapter (64-byte block, 20-byte digest)."""
    return HashlibHashAlgorithm("sha1")


@pytest.fixture(scope="function")
def sha256() -> HashlibHashAlgorithm:
    """SHA-256 adapter (64-byte block, 32-byte digest)."""
    return HashlibHashAlgorithm("sha256")


@pytest.fixture(scope="function")
def mock_hash() -> MockHashAlgorithm:
    """Recording hash algorithm, fresh for each test."""
    return MockHashAlgorithm()


@pytest.fixture(scope="function")
def engine(sha256: HashlibHashAlgorithm) -> HmacEngine:
    """HMAC-SHA256 engine with a fixed test key."""
    return HmacEngine(b"unit-test-key", sha256)
