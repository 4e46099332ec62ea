import hashlib

from hmackit import BaseHashAlgorithm, HmacEngine


class Blake2sHashAlgorithm(BaseHashAlgorithm):
    """Any digest works as long as it exposes compute_hash()."""

    def __init__(self) -> None:
        super().__init__(name="blake2s", block_size=64, digest_size=32)

    def compute_hash(self, data: bytes) -> bytes:
        return hashlib.blake2s(data).digest()


def main():
    engine = HmacEngine(b"demo-secret", Blake2sHashAlgorithm())
    print(engine)
    print(engine.compute_mac_to_hex(b"payload"))


if __name__ == "__main__":
    main()
