import os

from hmackit import HmacEngine, get_hash_algorithm

# Set env var to override the demo key
# Never hard-code real secrets in source code
key = os.environ.get("HMACKIT_KEY", "demo-secret")


def main():
    engine = HmacEngine(key, get_hash_algorithm("sha256"))

    body = b'{"event": "order.created", "id": 42}'
    print(f"hex:    {engine.compute_mac_to_hex(body)}")
    print(f"base64: {engine.compute_mac_to_base64(body)}")

    # Text is UTF-8 encoded unless told otherwise
    print(f"text:   {engine.compute_mac_to_hex('héllo', encoding='latin-1')}")


if __name__ == "__main__":
    main()
