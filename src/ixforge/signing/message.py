"""
Detached message signatures with Ed25519 keypairs.

Messages are raw bytes; the text helpers sign and verify the UTF-8 encoding of a
string. Signatures travel as standard base64.
"""

from __future__ import annotations

from ..errors import MissingField
from ..keys import Keypair, Pubkey, Signature, decode_pubkey, decode_secret


def generate_keypair() -> Keypair:
    """New keypair from a fresh CSPRNG seed. Uniqueness is probabilistic, not checked."""
    return Keypair.generate()


def sign(keypair: Keypair, message: bytes) -> Signature:
    """
    Sign message with keypair (deterministic Ed25519).

    Raises:
        MissingField: message is empty.
    """
    if not message:
        raise MissingField("message")
    return keypair.sign_message(message)


def verify(pubkey: Pubkey, message: bytes, signature: Signature) -> bool:
    """True iff signature is valid for message under pubkey; a mismatch is just False."""
    return signature.verify(pubkey, message)


def encode_signature(signature: Signature) -> str:
    return signature.to_base64()


def decode_signature(text: str) -> Signature:
    return Signature.from_base64(text)


def sign_with_secret(secret: str, message: str) -> tuple[Keypair, Signature]:
    """
    Decode a base58 secret and sign the UTF-8 bytes of message.

    Empty fields are reported before any decoding, message first.
    """
    if not message:
        raise MissingField("message")
    if not secret:
        raise MissingField("secret")
    keypair = decode_secret(secret)
    return keypair, sign(keypair, message.encode("utf-8"))


def verify_with_text(pubkey: str, message: str, signature: str) -> bool:
    """Verify a base64 signature over the UTF-8 bytes of message under a base58 pubkey."""
    for name, value in (("message", message), ("signature", signature), ("pubkey", pubkey)):
        if not value:
            raise MissingField(name)
    key = decode_pubkey(pubkey)
    sig = decode_signature(signature)
    return verify(key, message.encode("utf-8"), sig)
