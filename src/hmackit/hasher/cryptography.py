from typing import Optional

try:
    import cryptography  # noqa: F401
except ModuleNotFoundError as e:
    raise ImportError("Cryptography backend requires 'cryptography'. Install it with: uv add hmackit[cryptography]") from e
from cryptography.hazmat.primitives import hashes

from hmackit.domain.errors import InvalidArgumentError
from hmackit.domain.hasher import BaseHashAlgorithm


class CryptographyHashAlgorithm(BaseHashAlgorithm):
    """Hash algorithm backed by the ``cryptography`` package.

    Accepts any fixed-length ``hashes.HashAlgorithm`` instance. SHA-3
    algorithms do not expose a block size there, so one must be passed
    explicitly (136 bytes for SHA3-256, for example).
    """

    _algorithm: hashes.HashAlgorithm

    def __init__(self, algorithm: hashes.HashAlgorithm, block_size: Optional[int] = None) -> None:
        if isinstance(algorithm, hashes.ExtendableOutputFunction):
            raise InvalidArgumentError(f"Extendable-output hash {algorithm.name!r} cannot be used for HMAC.")

        block_size = block_size or getattr(algorithm, "block_size", None)
        if block_size is None:
            raise InvalidArgumentError(f"Hash {algorithm.name!r} does not declare a block size, pass one explicitly.")

        super().__init__(name=algorithm.name, block_size=block_size, digest_size=algorithm.digest_size)
        self._algorithm = algorithm

    def compute_hash(self, data: bytes) -> bytes:
        digest = hashes.Hash(self._algorithm)
        digest.update(data)
        return digest.finalize()
