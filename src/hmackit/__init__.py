import importlib.metadata

from hmackit.domain.errors import HashComputationFailedError, HmacError, InvalidArgumentError
from hmackit.domain.hasher import BaseHashAlgorithm, HashAlgorithm
from hmackit.engine import HmacEngine
from hmackit.hasher.hashlib import HashlibHashAlgorithm, get_hash_algorithm

__all__ = [
    "HmacEngine",
    "HashAlgorithm",
    "BaseHashAlgorithm",
    "HashlibHashAlgorithm",
    "get_hash_algorithm",
    "HmacError",
    "InvalidArgumentError",
    "HashComputationFailedError",
]

__version__ = importlib.metadata.version("hmackit")
