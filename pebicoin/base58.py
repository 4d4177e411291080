"""Base58 and Base58Check encoding."""

from __future__ import annotations

from .hashing import double_sha256

BASE58_CHARS = "123456789ABCDEFGHJKLMNPQRSTUVWXYZabcdefghijkmnopqrstuvwxyz"
_INDEX = {char: value for value, char in enumerate(BASE58_CHARS)}


class Base58Error(ValueError):
    """Raised when a Base58 string cannot be decoded."""


def _count_leading(sequence, item) -> int:
    count = 0
    for element in sequence:
        if element != item:
            break
        count += 1
    return count


def base58_encode(data: bytes) -> str:
    """Encode bytes as Base58; each leading zero byte becomes a '1'."""
    data = bytes(data)
    zeros = _count_leading(data, 0)
    number = int.from_bytes(data[zeros:], "big")
    digits = []
    while number:
        number, remainder = divmod(number, 58)
        digits.append(BASE58_CHARS[remainder])
    return "1" * zeros + "".join(reversed(digits))


def base58_decode(encoded: str) -> bytes:
    """Decode a Base58 string; each leading '1' becomes a zero byte."""
    number = 0
    for char in encoded:
        try:
            number = number * 58 + _INDEX[char]
        except KeyError:
            raise Base58Error(f"invalid Base58 character: {char!r}") from None
    body = number.to_bytes((number.bit_length() + 7) // 8, "big")
    return b"\x00" * _count_leading(encoded, "1") + body


def base58check_encode(data: bytes) -> str:
    """Encode bytes with a four-byte double SHA-256 checksum appended."""
    data = bytes(data)
    return base58_encode(data + double_sha256(data)[:4])


def base58check_decode(encoded: str) -> bytes:
    """Decode a Base58Check string and verify its checksum."""
    decoded = base58_decode(encoded)
    if len(decoded) < 4:
        raise Base58Error("Base58Check data is too short")
    data, checksum = decoded[:-4], decoded[-4:]
    if double_sha256(data)[:4] != checksum:
        raise Base58Error("Base58Check checksum mismatch")
    return data