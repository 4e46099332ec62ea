from .base import MockHashAlgorithm
from .hashlib import HashlibHashAlgorithm, available_algorithms, get_hash_algorithm

__all__ = ["MockHashAlgorithm", "HashlibHashAlgorithm", "available_algorithms", "get_hash_algorithm"]
