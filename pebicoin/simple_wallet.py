"""A minimal key pair and hex address generator."""

from __future__ import annotations

from cryptography.hazmat.primitives import serialization
from cryptography.hazmat.primitives.asymmetric import ec

from .hashing import bytes_to_hex, double_sha256, hash160

_VERSION = b"\x00"


def generate_key_pair() -> tuple[str, str]:
    """Return a new secp256k1 private key and compressed public key as upper-case hex."""
    key = ec.generate_private_key(ec.SECP256K1())
    secret = key.private_numbers().private_value
    private_hex = secret.to_bytes((secret.bit_length() + 7) // 8, "big").hex().upper()
    public_bytes = key.public_key().public_bytes(
        serialization.Encoding.X962, serialization.PublicFormat.CompressedPoint
    )
    return private_hex, public_bytes.hex().upper()


def create_address(public_key_hex: str) -> str:
    """Return the hex of version byte, HASH160 and checksum for a public key."""
    length = len(public_key_hex) // 2
    public_key = bytes.fromhex(public_key_hex[: 2 * length])
    versioned = _VERSION + hash160(public_key)
    checksum = double_sha256(versioned)[:4]
    return bytes_to_hex(versioned + checksum)


def main(argv: list[str] | None = None) -> int:
    """Print a freshly generated key pair and its address."""
    private_hex, public_hex = generate_key_pair()
    address = create_address(public_hex)
    print("Pebicoin Wallet - Address Generator")
    print("======================================")
    print(f"Private Key: {private_hex}")
    print(f"Public Key: {public_hex}")
    print(f"Address: {address}")
    print("\nWARNING: Keep your private key secure!")
    print("Never share your private key with anyone!")
    return 0