"""ECDSA signing and verification of messages on the secp256k1 curve."""

from __future__ import annotations

from cryptography.exceptions import InvalidSignature
from cryptography.hazmat.primitives import hashes
from cryptography.hazmat.primitives.asymmetric import ec

from .hashing import bytes_to_hex, hex_to_bytes, sha256


class SignerError(ValueError):
    """Raised when a key cannot be built from the given hex text."""


def _message_digest(message: str) -> bytes:
    return sha256(message.encode("utf-8"))


def _private_key(private_key_hex: str) -> ec.EllipticCurvePrivateKey:
    try:
        raw = hex_to_bytes(private_key_hex)
        return ec.derive_private_key(int.from_bytes(raw, "big"), ec.SECP256K1())
    except (ValueError, TypeError) as exc:
        raise SignerError("Failed to create private key from data") from exc


def _public_key(public_key_hex: str) -> ec.EllipticCurvePublicKey:
    try:
        raw = hex_to_bytes(public_key_hex)
        return ec.EllipticCurvePublicKey.from_encoded_point(ec.SECP256K1(), raw)
    except (ValueError, TypeError) as exc:
        raise SignerError("Failed to create public key") from exc


def sign_message(private_key_hex: str, message: str) -> str:
    """Sign the SHA-256 digest of ``message``; return the DER signature as hex."""
    key = _private_key(private_key_hex)
    signature = key.sign(_message_digest(message), ec.ECDSA(hashes.SHA256()))
    return bytes_to_hex(signature)


def verify_signature(public_key_hex: str, message: str, signature_hex: str) -> bool:
    """Return whether ``signature_hex`` signs ``message`` under the public key."""
    key = _public_key(public_key_hex)
    try:
        signature = hex_to_bytes(signature_hex)
    except ValueError:
        return False
    try:
        key.verify(signature, _message_digest(message), ec.ECDSA(hashes.SHA256()))
    except (InvalidSignature, ValueError):
        return False
    return True