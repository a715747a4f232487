"""Keypair generation and detached message signatures."""

from .message import (decode_signature, encode_signature, generate_keypair,
                      sign, sign_with_secret, verify, verify_with_text)

__all__: tuple[str, ...] = (
    "decode_signature",
    "encode_signature",
    "generate_keypair",
    "sign",
    "sign_with_secret",
    "verify",
    "verify_with_text",
)
