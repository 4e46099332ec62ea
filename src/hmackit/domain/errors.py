class HmacError(Exception):
    """Base exception for HMAC domain errors."""


class InvalidArgumentError(HmacError, ValueError):
    """Raised when a key, message or option is absent or malformed."""


class HashComputationFailedError(HmacError):
    """Raised when the underlying hash algorithm fails.

    The original exception is kept as ``__cause__``.
    """
