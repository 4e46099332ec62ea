from cryptography.hazmat.primitives import hashes

from hmackit import HmacEngine
from hmackit.hasher.cryptography import CryptographyHashAlgorithm


def main():
    sha3 = CryptographyHashAlgorithm(hashes.SHA3_256(), block_size=136)
    engine = HmacEngine(b"demo-secret", sha3)
    print(engine.compute_mac_to_base64(b"payload"))


if __name__ == "__main__":
    main()
