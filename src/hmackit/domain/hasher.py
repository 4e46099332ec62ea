from abc import ABC, abstractmethod
from typing import Optional, Protocol


class HashAlgorithm(Protocol):
    """Protocol for the hash primitive an HMAC engine is built on.

    Implementations must compute each digest with fresh hashing state so
    that a single instance can be shared across threads.
    """

    name: str
    block_size: Optional[int]
    digest_size: int

    def compute_hash(self, data: bytes) -> bytes:
        """Return the digest of the whole ``data`` buffer."""
        ...


class BaseHashAlgorithm(HashAlgorithm, ABC):
    """Base class for hash algorithm adapters.

    Attributes:
        name (str): Canonical, lowercase name of the algorithm.
        block_size (int | None): Internal block size in bytes, ``None`` when
            the underlying library does not expose it.
        digest_size (int): Size of the produced digest in bytes.
    """

    name: str
    block_size: Optional[int]
    digest_size: int

    def __init__(self, name: str, block_size: Optional[int], digest_size: int) -> None:
        self.name = name
        self.block_size = block_size
        self.digest_size = digest_size

    def __repr__(self) -> str:
        return f"{type(self).__name__}(name={self.name!r})"

    @abstractmethod
    def compute_hash(self, data: bytes) -> bytes:
        """Return the digest of the whole ``data`` buffer."""
        ...
