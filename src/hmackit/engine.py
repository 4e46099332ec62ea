"""HMAC construction (RFC 2104) over a pluggable hash algorithm.

The engine normalizes the key once, derives the inner and outer pads once,
and then computes ``H(outer_pad + H(inner_pad + message))`` for each call.
All of its state is immutable after construction.
"""

import warnings
from typing import Optional, Union

from hmackit.domain.errors import HashComputationFailedError, InvalidArgumentError
from hmackit.domain.hasher import HashAlgorithm
from hmackit.utils import DEFAULT_ENCODING, BytesLike, to_base64, to_bytes, to_hex

DEFAULT_BLOCK_SIZE = 64
"""Block size used when the hash algorithm does not declare one."""

INNER_PAD_BYTE = 0x36
OUTER_PAD_BYTE = 0x5C

_TRANS_INNER = bytes(x ^ INNER_PAD_BYTE for x in range(256))
_TRANS_OUTER = bytes(x ^ OUTER_PAD_BYTE for x in range(256))


class HmacEngine:
    """Computes keyed message authentication codes.

    Args:
        key: Secret key, raw bytes or text encoded with ``encoding``.
        hash_algorithm: Hash primitive used for key shrinking and both
            hashing passes.
        encoding: Default text encoding for ``str`` keys and messages.
        block_size: Pad length in bytes. Defaults to the algorithm's own
            block size, or 64 when the algorithm does not declare one.

    Raises:
        InvalidArgumentError: If the key or the hash algorithm is missing,
            or the block size is not a positive integer.

    Warns:
        UserWarning: If the key is empty. Empty keys are still accepted,
            but a run with ``-W error`` turns this into an exception.

    Example::

        engine = HmacEngine(b"secret", get_hash_algorithm("sha256"))
        tag = engine.compute_mac(b"payload")
    """

    __slots__ = ("_hash_algorithm", "_encoding", "_block_size", "_key", "_inner", "_outer")

    def __init__(
        self,
        key: Union[str, BytesLike],
        hash_algorithm: HashAlgorithm,
        encoding: str = DEFAULT_ENCODING,
        block_size: Optional[int] = None,
    ) -> None:
        if hash_algorithm is None:
            raise InvalidArgumentError("The hash algorithm cannot be None.")

        if block_size is None:
            block_size = getattr(hash_algorithm, "block_size", None) or DEFAULT_BLOCK_SIZE
        if not isinstance(block_size, int) or isinstance(block_size, bool) or block_size <= 0:
            raise InvalidArgumentError(f"Block size must be a positive integer, got {block_size!r}.")

        raw_key = to_bytes(key, encoding, name="key")
        if not raw_key:
            warnings.warn(
                "Using an empty HMAC key is insecure. Please provide a secret key.",
                UserWarning,
                stacklevel=2,
            )

        self._hash_algorithm = hash_algorithm
        self._encoding = encoding
        self._block_size = block_size

        if len(raw_key) > block_size:
            raw_key = self._hash(raw_key)
            if len(raw_key) > block_size:
                raise InvalidArgumentError(
                    f"Block size {block_size} is smaller than the {len(raw_key)}-byte digest of the key."
                )
        self._key = raw_key

        padded_key = raw_key.ljust(block_size, b"\x00")
        self._inner = padded_key.translate(_TRANS_INNER)
        self._outer = padded_key.translate(_TRANS_OUTER)

    def __repr__(self) -> str:
        return f"HmacEngine(hash_algorithm={self._hash_algorithm!r}, block_size={self._block_size})"

    @property
    def hash_algorithm(self) -> HashAlgorithm:
        return self._hash_algorithm

    @property
    def block_size(self) -> int:
        return self._block_size

    @property
    def digest_size(self) -> Optional[int]:
        return getattr(self._hash_algorithm, "digest_size", None)

    @property
    def key(self) -> bytes:
        """Effective key, already shrunk when it exceeded the block size."""
        return self._key

    @property
    def inner_pad(self) -> bytes:
        return self._inner

    @property
    def outer_pad(self) -> bytes:
        return self._outer

    def _hash(self, data: bytes) -> bytes:
        try:
            return bytes(self._hash_algorithm.compute_hash(data))
        except Exception as exc:
            raise HashComputationFailedError(f"Hash algorithm {self._hash_algorithm!r} failed: {exc}") from exc

    def compute_mac(self, message: Union[str, BytesLike], encoding: Optional[str] = None) -> bytes:
        """Compute the HMAC of ``message``.

        Args:
            message: Payload to authenticate; text is encoded with
                ``encoding`` or the engine's default encoding.
            encoding: Optional override of the text encoding.

        Returns:
            The raw digest bytes.

        Raises:
            InvalidArgumentError: If ``message`` is ``None`` or not text/bytes.
            HashComputationFailedError: If the hash algorithm raises.
        """
        data = to_bytes(message, encoding or self._encoding, name="message")
        inner_digest = self._hash(self._inner + data)
        return self._hash(self._outer + inner_digest)

    def compute_mac_to_base64(self, message: Union[str, BytesLike], encoding: Optional[str] = None) -> str:
        """Compute the HMAC of ``message`` rendered as base64 text."""
        return to_base64(self.compute_mac(message, encoding))

    def compute_mac_to_hex(self, message: Union[str, BytesLike], encoding: Optional[str] = None) -> str:
        """Compute the HMAC of ``message`` rendered as lowercase hex."""
        return to_hex(self.compute_mac(message, encoding))
