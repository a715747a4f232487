"""Base58 identities: pubkeys, keypairs and their text forms."""

from __future__ import annotations

import pytest

from ixforge import (InvalidPubkey, InvalidSecretKey, Keypair, Pubkey,
                     decode_pubkey, decode_secret, encode_pubkey,
                     encode_secret)
from ixforge.serde import b58_encode

SYSTEM_PROGRAM = "11111111111111111111111111111111"
TOKEN_PROGRAM = "TokenkegQfeZyiNwAJbNbGKPFXCWuBvf9Ss623VQ5DA"
SEED = bytes(31) + bytes([1])


def test_decode_all_zero_key() -> None:
    key = decode_pubkey(SYSTEM_PROGRAM)
    assert bytes(key) == bytes(32)
    assert encode_pubkey(key) == SYSTEM_PROGRAM


def test_pubkey_round_trip() -> None:
    for raw in (bytes(32), bytes(range(32)), b"\xff" * 32, bytes(31) + b"\x01"):
        key = Pubkey(raw)
        assert decode_pubkey(encode_pubkey(key)) == key
    assert encode_pubkey(decode_pubkey(TOKEN_PROGRAM)) == TOKEN_PROGRAM


@pytest.mark.parametrize(
    "text",
    [
        "not-base58!!",
        "",
        "0OIl",
        "1111111111111111111111111111111",
        b58_encode(bytes(33)),
        "TokenkegéQfeZyiNwAJbNbGKPFXCWuBvf9Ss623VQ5DA",
    ],
)
def test_decode_pubkey_rejects(text: str) -> None:
    with pytest.raises(InvalidPubkey) as excinfo:
        decode_pubkey(text)
    assert excinfo.value.text == text
    assert str(excinfo.value) == f"Invalid public key: {text}"


def test_pubkey_equality_and_hash() -> None:
    a = Pubkey(bytes(range(32)))
    b = Pubkey.from_bytes(bytes(range(32)))
    assert a == b
    assert hash(a) == hash(b)
    assert a != Pubkey(bytes(32))
    assert len({a, b}) == 1


def test_pubkey_is_immutable() -> None:
    key = Pubkey(bytes(32))
    with pytest.raises(AttributeError):
        key._raw = b"\x01" * 32


def test_pubkey_constructor_checks_length() -> None:
    with pytest.raises(ValueError):
        Pubkey(bytes(31))


def test_secret_round_trip() -> None:
    keypair = Keypair.from_seed(SEED)
    text = encode_secret(keypair)
    restored = decode_secret(text)
    assert restored == keypair
    assert restored.pubkey() == keypair.pubkey()
    assert restored.to_bytes() == SEED + bytes(keypair.pubkey())


def test_keypair_bytes_layout() -> None:
    keypair = Keypair.generate()
    raw = keypair.to_bytes()
    assert len(raw) == 64
    assert raw[:32] == keypair.secret()
    assert raw[32:] == bytes(keypair.pubkey())


def test_decode_secret_rejects_bad_base58() -> None:
    with pytest.raises(InvalidSecretKey) as excinfo:
        decode_secret("not-base58!!")
    assert excinfo.value.reason == "Invalid base58 encoding"


def test_decode_secret_rejects_wrong_length() -> None:
    seed_only = b58_encode(SEED)
    with pytest.raises(InvalidSecretKey) as excinfo:
        decode_secret(seed_only)
    assert excinfo.value.reason == "Invalid keypair bytes"


def test_decode_secret_rejects_mismatched_public_half() -> None:
    raw = Keypair.from_seed(SEED).to_bytes()
    forged = raw[:32] + bytes(Keypair.generate().pubkey())
    with pytest.raises(InvalidSecretKey) as excinfo:
        decode_secret(b58_encode(forged))
    assert str(excinfo.value) == "Invalid secret key: Invalid keypair bytes"


@pytest.mark.parametrize("suffix", [" ", "\n", "\t", "\r\n"])
def test_decode_pubkey_rejects_trailing_whitespace(suffix: str) -> None:
    text = SYSTEM_PROGRAM + suffix
    with pytest.raises(InvalidPubkey) as excinfo:
        decode_pubkey(text)
    assert excinfo.value.text == text


@pytest.mark.parametrize("text", [" " + SYSTEM_PROGRAM, SYSTEM_PROGRAM[:16] + " " + SYSTEM_PROGRAM[16:]])
def test_decode_pubkey_rejects_inner_and_leading_whitespace(text: str) -> None:
    with pytest.raises(InvalidPubkey):
        decode_pubkey(text)


@pytest.mark.parametrize("suffix", [" ", "\n", "\t"])
def test_decode_secret_rejects_whitespace(suffix: str) -> None:
    text = Keypair.from_seed(SEED).to_base58_string() + suffix
    with pytest.raises(InvalidSecretKey) as excinfo:
        decode_secret(text)
    assert excinfo.value.reason == "Invalid base58 encoding"


def test_keypair_and_signature_are_immutable() -> None:
    keypair = Keypair.from_seed(SEED)
    signature = keypair.sign_message(b"hello")
    with pytest.raises(AttributeError):
        signature._raw = bytes(64)
    with pytest.raises(AttributeError):
        keypair._seed = bytes(32)
    with pytest.raises(AttributeError):
        keypair._pubkey = Pubkey(bytes(32))
    assert keypair == Keypair.from_seed(SEED)
    assert keypair.sign_message(b"hello") == signature
