"""Pebicoin address creation, decoding and validation."""

from __future__ import annotations

from .base58 import Base58Error, base58_decode, base58_encode
from .hashing import double_sha256, hash160, hex_to_bytes

PEBICOIN_ADDRESS_VERSION = 0x37
PEBICOIN_ADDRESS_PREFIX = "Pbc"


class AddressError(ValueError):
    """Raised when an address cannot be decoded or fails its checksum."""


def generate_address_from_hash(pub_key_hash: bytes) -> str:
    """Build an address from a public key hash."""
    versioned = bytes([PEBICOIN_ADDRESS_VERSION]) + bytes(pub_key_hash)
    checksum = double_sha256(versioned)[:4]
    return PEBICOIN_ADDRESS_PREFIX + base58_encode(versioned + checksum)


def generate_address_from_public_key(public_key: bytes) -> str:
    """Build an address from raw public key bytes."""
    return generate_address_from_hash(hash160(bytes(public_key)))


def generate_address(public_key: str | bytes) -> str:
    """Build an address from a public key given as hex text or bytes."""
    if isinstance(public_key, str):
        public_key = hex_to_bytes(public_key)
    return generate_address_from_public_key(public_key)


def decode_address(address: str) -> tuple[int, bytes]:
    """Return the version byte and hash held in an address."""
    if not address.startswith(PEBICOIN_ADDRESS_PREFIX):
        raise AddressError(f"address must start with {PEBICOIN_ADDRESS_PREFIX!r}")
    try:
        decoded = base58_decode(address[len(PEBICOIN_ADDRESS_PREFIX):])
    except Base58Error as exc:
        raise AddressError(str(exc)) from exc
    if len(decoded) < 5:
        raise AddressError("address is too short")
    body, checksum = decoded[:-4], decoded[-4:]
    if double_sha256(body)[:4] != checksum:
        raise AddressError("address checksum mismatch")
    return body[0], body[1:]


def validate_address(address: str) -> bool:
    """Return whether an address has the right prefix and checksum."""
    try:
        decode_address(address)
    except AddressError:
        return False
    return True


def get_address_prefix() -> str:
    """Return the prefix every Pebicoin address starts with."""
    return PEBICOIN_ADDRESS_PREFIX