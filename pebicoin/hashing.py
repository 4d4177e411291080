"""Hash primitives and hex helpers used by blocks, addresses and keys."""

from __future__ import annotations

import hashlib
import re

from Crypto.Hash import RIPEMD160

_HEX_RE = re.compile(r"[0-9a-fA-F]*")


def bytes_to_hex(data: bytes) -> str:
    """Return the lower-case hex form of ``data``."""
    return bytes(data).hex()


def hex_to_bytes(hex_string: str) -> bytes:
    """Decode a hex string.

    A string of odd length yields empty bytes; non-hex characters raise
    ``ValueError``.
    """
    if len(hex_string) % 2 != 0:
        return b""
    if not _HEX_RE.fullmatch(hex_string):
        raise ValueError(f"invalid hex string: {hex_string!r}")
    return bytes.fromhex(hex_string)


def sha256(data: bytes) -> bytes:
    """Return the SHA-256 digest of ``data``."""
    return hashlib.sha256(data).digest()


def ripemd160(data: bytes) -> bytes:
    """Return the RIPEMD-160 digest of ``data``."""
    return RIPEMD160.new(bytes(data)).digest()


def double_sha256(data: bytes) -> bytes:
    """Return SHA-256 applied twice to ``data``."""
    return sha256(sha256(data))


def hash160(data: bytes) -> bytes:
    """Return RIPEMD-160 of the SHA-256 of ``data``."""
    return ripemd160(sha256(data))


def double_sha256_hex(text: str) -> str:
    """Return the hex double SHA-256 of the UTF-8 encoding of ``text``."""
    return bytes_to_hex(double_sha256(text.encode("utf-8")))