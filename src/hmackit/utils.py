import base64
from typing import Union

from hmackit.domain.errors import InvalidArgumentError

BytesLike = Union[bytes, bytearray, memoryview]
"""Binary inputs accepted wherever raw bytes are expected."""

DEFAULT_ENCODING = "utf-8"
"""Text encoding applied to ``str`` keys and messages unless told otherwise."""


def to_bytes(value: Union[str, BytesLike], encoding: str = DEFAULT_ENCODING, *, name: str = "value") -> bytes:
    """Coerce text or a bytes-like object into an immutable ``bytes``.

    Raises:
        InvalidArgumentError: If ``value`` is ``None``, of an unsupported
            type, or cannot be encoded with ``encoding``.
    """
    if value is None:
        raise InvalidArgumentError(f"The {name} cannot be None.")

    if isinstance(value, str):
        try:
            return value.encode(encoding)
        except LookupError as exc:
            raise InvalidArgumentError(f"Unknown text encoding: {encoding!r}") from exc
        except UnicodeEncodeError as exc:
            raise InvalidArgumentError(f"The {name} cannot be encoded with {encoding!r}.") from exc

    if isinstance(value, (bytes, bytearray, memoryview)):
        return bytes(value)

    raise InvalidArgumentError(f"The {name} must be str or bytes, not {type(value).__name__}.")


def to_base64(digest: bytes) -> str:
    """Render a digest as standard (padded) base64 text."""
    return base64.b64encode(digest).decode("ascii")


def to_hex(digest: bytes) -> str:
    """Render a digest as lowercase hexadecimal text."""
    return digest.hex()
