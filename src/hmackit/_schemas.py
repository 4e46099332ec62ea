"""Pydantic schemas for serialized HMAC results."""

try:
    from pydantic import BaseModel, Field
except ModuleNotFoundError as e:  # pragma: no cover
    raise ImportError("Pydantic is required for JSON output. Install it with: uv add hmackit[cli]") from e

from hmackit.engine import HmacEngine
from hmackit.utils import to_base64, to_hex


class MacResult(BaseModel):
    """Public representation of a computed MAC.

    Attributes:
        algorithm: Name of the underlying hash algorithm.
        block_size: Pad length used by the engine, in bytes.
        digest_size: Length of the MAC, in bytes.
        hex: MAC as lowercase hexadecimal.
        base64: MAC as standard base64.
    """

    algorithm: str
    block_size: int = Field(..., gt=0)
    digest_size: int = Field(..., ge=0)
    hex: str
    base64: str

    @classmethod
    def from_digest(cls, engine: HmacEngine, digest: bytes) -> "MacResult":
        return cls(
            algorithm=engine.hash_algorithm.name,
            block_size=engine.block_size,
            digest_size=len(digest),
            hex=to_hex(digest),
            base64=to_base64(digest),
        )
