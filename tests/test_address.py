import pytest

from pebicoin.address import (
    PEBICOIN_ADDRESS_VERSION,
    AddressError,
    decode_address,
    generate_address,
    generate_address_from_hash,
    generate_address_from_public_key,
    get_address_prefix,
    validate_address,
)
from pebicoin.base58 import base58_encode
from pebicoin.hashing import hash160

PUBLIC_KEY = b"\x02" + bytes(range(32))


def test_prefix():
    assert get_address_prefix() == "Pbc"


def test_generated_address_starts_with_prefix():
    assert generate_address_from_hash(b"\x01" * 20).startswith("Pbc")


def test_decode_round_trip():
    pub_hash = bytes(range(20))
    version, decoded_hash = decode_address(generate_address_from_hash(pub_hash))
    assert version == PEBICOIN_ADDRESS_VERSION == 0x37
    assert decoded_hash == pub_hash


def test_public_key_address_uses_hash160():
    assert generate_address_from_public_key(PUBLIC_KEY) == generate_address_from_hash(
        hash160(PUBLIC_KEY)
    )


def test_generate_address_hex_and_bytes_agree():
    assert generate_address(PUBLIC_KEY.hex()) == generate_address(PUBLIC_KEY)


def test_decoded_hash_is_hash160_of_key():
    _, decoded_hash = decode_address(generate_address(PUBLIC_KEY))
    assert decoded_hash == hash160(PUBLIC_KEY)


def test_validate_accepts_generated_address():
    assert validate_address(generate_address(PUBLIC_KEY)) is True


def test_validate_rejects_wrong_prefix():
    address = generate_address(PUBLIC_KEY)
    assert validate_address("Xyz" + address[3:]) is False


def test_validate_rejects_tampered_address():
    address = generate_address(PUBLIC_KEY)
    replacement = "2" if address[-1] != "2" else "3"
    assert validate_address(address[:-1] + replacement) is False


def test_decode_rejects_invalid_characters():
    with pytest.raises(AddressError):
        decode_address("Pbc0OIl")


def test_decode_rejects_short_payload():
    with pytest.raises(AddressError):
        decode_address("Pbc" + base58_encode(b"\x37\x01\x02"))


def test_decode_rejects_missing_prefix():
    with pytest.raises(AddressError):
        decode_address(generate_address(PUBLIC_KEY)[3:])