import hashlib
from typing import List

from hmackit.domain.errors import InvalidArgumentError
from hmackit.domain.hasher import BaseHashAlgorithm

DEFAULT_ALGORITHM = "sha256"
"""Algorithm used by the CLI when none is given."""


def normalize_name(name: str) -> str:
    """Map user-facing spellings such as ``SHA-256`` to hashlib names."""
    return name.strip().lower().replace("-", "").replace("_", "") if name else ""


class HashlibHashAlgorithm(BaseHashAlgorithm):
    """Hash algorithm backed by :mod:`hashlib`.

    A fresh hashlib object is created for every digest, so one instance can
    be shared freely between threads and HMAC engines.

    Example::

        sha1 = HashlibHashAlgorithm("sha1")
        assert sha1.block_size == 64 and sha1.digest_size == 20
    """

    def __init__(self, name: str) -> None:
        hashlib_name = _resolve(name)
        try:
            probe = hashlib.new(hashlib_name)
        except ValueError as exc:
            raise InvalidArgumentError(f"Unsupported hash algorithm: {name!r}") from exc

        # shake_* report digest_size 0, their output length is caller-chosen
        if probe.digest_size == 0:
            raise InvalidArgumentError(f"Variable-length hash {name!r} cannot be used for HMAC.")

        super().__init__(name=hashlib_name, block_size=probe.block_size, digest_size=probe.digest_size)

    def compute_hash(self, data: bytes) -> bytes:
        return hashlib.new(self.name, data).digest()


def _resolve(name: str) -> str:
    wanted = normalize_name(name)
    for candidate in hashlib.algorithms_available:
        if normalize_name(candidate) == wanted:
            return candidate.lower()
    raise InvalidArgumentError(f"Unsupported hash algorithm: {name!r}")


def available_algorithms() -> List[str]:
    """Names of the fixed-length hashlib algorithms usable for HMAC."""
    names = set()
    for name in hashlib.algorithms_available:
        try:
            HashlibHashAlgorithm(name)
        except InvalidArgumentError:
            continue
        names.add(name.lower())
    return sorted(names)


def get_hash_algorithm(name: str = DEFAULT_ALGORITHM) -> HashlibHashAlgorithm:
    """Resolve an algorithm name (``sha1``, ``SHA-256``, ...) to an adapter.

    Raises:
        InvalidArgumentError: If the name is unknown to hashlib.
    """
    return HashlibHashAlgorithm(name)
