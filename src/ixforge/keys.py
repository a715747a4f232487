"""
Account identities: public keys, Ed25519 keypairs and detached signatures.

Public keys and secrets use base58 text; a keypair's canonical binary form is
the 64-byte ``seed || pubkey`` layout Solana wallets use.
"""

from __future__ import annotations

from .curves import (PUBLIC_KEY_SIZE, SEED_SIZE, SIGNATURE_SIZE,
                     ed25519_generate_seed, ed25519_public_key, ed25519_sign,
                     ed25519_verify)
from .errors import InvalidPubkey, InvalidSecretKey, InvalidSignature
from .serde import b58_decode, b58_encode, b64_decode, b64_encode

KEYPAIR_SIZE = SEED_SIZE + PUBLIC_KEY_SIZE


class Pubkey:
    """Immutable 32-byte account address."""

    __slots__ = ("_raw",)

    LENGTH = PUBLIC_KEY_SIZE

    def __init__(self, raw: bytes) -> None:
        raw = bytes(raw)
        if len(raw) != self.LENGTH:
            raise ValueError(f"Pubkey must be {self.LENGTH} bytes, got {len(raw)}")
        object.__setattr__(self, "_raw", raw)

    def __setattr__(self, name, value):
        raise AttributeError("Pubkey is immutable")

    @classmethod
    def from_bytes(cls, raw: bytes) -> Pubkey:
        return cls(raw)

    @classmethod
    def from_string(cls, text: str) -> Pubkey:
        """Parse a base58 address. Raises ``InvalidPubkey`` carrying the original text."""
        try:
            raw = b58_decode(text)
        except ValueError:
            raise InvalidPubkey(text) from None
        if len(raw) != cls.LENGTH:
            raise InvalidPubkey(text)
        return cls(raw)

    def __bytes__(self) -> bytes:
        return self._raw

    def __str__(self) -> str:
        return b58_encode(self._raw)

    def __repr__(self) -> str:
        return f"Pubkey({self})"

    def __eq__(self, other) -> bool:
        if not isinstance(other, Pubkey):
            return NotImplemented
        return self._raw == other._raw

    def __hash__(self) -> int:
        return hash(self._raw)


class Signature:
    """64-byte detached Ed25519 signature (R || S)."""

    __slots__ = ("_raw",)

    LENGTH = SIGNATURE_SIZE

    def __init__(self, raw: bytes) -> None:
        raw = bytes(raw)
        if len(raw) != self.LENGTH:
            raise ValueError(f"Signature must be {self.LENGTH} bytes, got {len(raw)}")
        object.__setattr__(self, "_raw", raw)

    def __setattr__(self, name, value):
        raise AttributeError("Signature is immutable")

    @classmethod
    def from_base64(cls, text: str) -> Signature:
        try:
            raw = b64_decode(text)
        except ValueError:
            raise InvalidSignature("Invalid base64 encoding") from None
        if len(raw) != cls.LENGTH:
            raise InvalidSignature("Invalid signature bytes")
        return cls(raw)

    def to_base64(self) -> str:
        return b64_encode(self._raw)

    def verify(self, pubkey: Pubkey, message: bytes) -> bool:
        return ed25519_verify(message, self._raw, bytes(pubkey))

    def __bytes__(self) -> bytes:
        return self._raw

    def __eq__(self, other) -> bool:
        if not isinstance(other, Signature):
            return NotImplemented
        return self._raw == other._raw

    def __hash__(self) -> int:
        return hash(self._raw)

    def __repr__(self) -> str:
        return f"Signature({self.to_base64()})"


class Keypair:
    """Ed25519 secret seed together with its derived public key."""

    __slots__ = ("_seed", "_pubkey")

    def __init__(self, seed: bytes, pubkey: Pubkey) -> None:
        object.__setattr__(self, "_seed", seed)
        object.__setattr__(self, "_pubkey", pubkey)

    def __setattr__(self, name, value):
        raise AttributeError("Keypair is immutable")

    @classmethod
    def generate(cls) -> Keypair:
        return cls.from_seed(ed25519_generate_seed())

    @classmethod
    def from_seed(cls, seed: bytes) -> Keypair:
        seed = bytes(seed)
        return cls(seed, Pubkey(ed25519_public_key(seed)))

    @classmethod
    def from_bytes(cls, raw: bytes) -> Keypair:
        """
        Load the 64-byte ``seed || pubkey`` form.

        Raises:
            ValueError: wrong length, or the embedded public key does not belong
                to the seed.
        """
        raw = bytes(raw)
        if len(raw) != KEYPAIR_SIZE:
            raise ValueError(f"keypair must be {KEYPAIR_SIZE} bytes, got {len(raw)}")
        keypair = cls.from_seed(raw[:SEED_SIZE])
        if bytes(keypair.pubkey()) != raw[SEED_SIZE:]:
            raise ValueError("public key does not match secret seed")
        return keypair

    @classmethod
    def from_base58_string(cls, text: str) -> Keypair:
        try:
            raw = b58_decode(text)
        except ValueError:
            raise InvalidSecretKey("Invalid base58 encoding") from None
        try:
            return cls.from_bytes(raw)
        except ValueError:
            raise InvalidSecretKey("Invalid keypair bytes") from None

    def pubkey(self) -> Pubkey:
        return self._pubkey

    def secret(self) -> bytes:
        return self._seed

    def to_bytes(self) -> bytes:
        return self._seed + bytes(self._pubkey)

    def to_base58_string(self) -> str:
        return b58_encode(self.to_bytes())

    def sign_message(self, message: bytes) -> Signature:
        return Signature(ed25519_sign(message, self._seed, bytes(self._pubkey)))

    def __eq__(self, other) -> bool:
        if not isinstance(other, Keypair):
            return NotImplemented
        return self._seed == other._seed

    def __hash__(self) -> int:
        return hash(self._seed)

    def __repr__(self) -> str:
        return f"Keypair(pubkey={self._pubkey})"


def decode_pubkey(text: str) -> Pubkey:
    return Pubkey.from_string(text)


def encode_pubkey(pubkey: Pubkey) -> str:
    return str(pubkey)


def decode_secret(text: str) -> Keypair:
    """base58 ``seed || pubkey`` (64 bytes) to a Keypair; ``InvalidSecretKey`` otherwise."""
    return Keypair.from_base58_string(text)


def encode_secret(keypair: Keypair) -> str:
    return keypair.to_base58_string()


__all__: tuple[str, ...] = (
    "KEYPAIR_SIZE",
    "Keypair",
    "Pubkey",
    "Signature",
    "decode_pubkey",
    "decode_secret",
    "encode_pubkey",
    "encode_secret",
)
