import hashlib
from typing import List, Optional

from hmackit.domain.hasher import BaseHashAlgorithm, HashAlgorithm


class MockHashAlgorithm(BaseHashAlgorithm):
    """Recording hash algorithm for tests.

    Digests are SHA-256 of the input, so results are real and stable, but
    every input is also appended to ``calls`` to let tests inspect exactly
    what the HMAC engine hashed.
    """

    calls: List[bytes]

    def __init__(self, block_size: Optional[int] = 64) -> None:
        super().__init__(name="mock", block_size=block_size, digest_size=32)
        self.calls = []

    def compute_hash(self, data: bytes) -> bytes:
        self.calls.append(bytes(data))
        return hashlib.sha256(data).digest()


__all__ = ["HashAlgorithm", "BaseHashAlgorithm", "MockHashAlgorithm"]
