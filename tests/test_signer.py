import pytest

from pebicoin.signer import SignerError, sign_message, verify_signature

PRIVATE_ONE = "00" * 31 + "01"
G_COMPRESSED = "0279BE667EF9DCBBAC55A06295CE870B07029BFCDB2DCE28D959F2815B16F81798"
G_UNCOMPRESSED = (
    "0479BE667EF9DCBBAC55A06295CE870B07029BFCDB2DCE28D959F2815B16F81798"
    "483ADA7726A3C4655DA4FBFC0E1108A8FD17B448A68554199C47D08FFB10D4B8"
)
OTHER_PRIVATE = "00" * 31 + "02"


def test_sign_then_verify_round_trip():
    signature = sign_message(PRIVATE_ONE, "hello pebicoin")
    assert verify_signature(G_COMPRESSED, "hello pebicoin", signature) is True


def test_signature_is_der_hex():
    signature = sign_message(PRIVATE_ONE, "message")
    assert signature.startswith("30")
    assert signature == signature.lower()
    assert len(signature) % 2 == 0


def test_verify_accepts_uncompressed_public_key():
    signature = sign_message(PRIVATE_ONE, "abc")
    assert verify_signature(G_UNCOMPRESSED, "abc", signature) is True


def test_verify_rejects_other_message():
    signature = sign_message(PRIVATE_ONE, "abc")
    assert verify_signature(G_COMPRESSED, "abd", signature) is False


def test_verify_rejects_signature_from_other_key():
    signature = sign_message(OTHER_PRIVATE, "abc")
    assert verify_signature(G_COMPRESSED, "abc", signature) is False


def test_verify_rejects_tampered_signature():
    signature = sign_message(PRIVATE_ONE, "abc")
    last = signature[-1]
    tampered = signature[:-1] + ("0" if last != "0" else "1")
    assert verify_signature(G_COMPRESSED, "abc", tampered) is False


def test_verify_rejects_garbage_signature():
    assert verify_signature(G_COMPRESSED, "abc", "deadbeef") is False


def test_verify_rejects_non_hex_signature():
    assert verify_signature(G_COMPRESSED, "abc", "zz") is False


def test_zero_private_key_raises():
    with pytest.raises(SignerError):
        sign_message("00" * 32, "abc")


def test_empty_private_key_raises():
    with pytest.raises(SignerError):
        sign_message("", "abc")


def test_non_hex_private_key_raises():
    with pytest.raises(SignerError):
        sign_message("zz" * 32, "abc")


def test_invalid_public_key_raises():
    signature = sign_message(PRIVATE_ONE, "abc")
    with pytest.raises(SignerError):
        verify_signature("02" + "00" * 32, "abc", signature)