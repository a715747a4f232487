"""Elliptic-curve primitives: Ed25519 (Solana account keys and signatures)."""

from .ed25519 import (PUBLIC_KEY_SIZE, SEED_SIZE, SIGNATURE_SIZE,
                      ed25519_generate_seed, ed25519_public_key, ed25519_sign,
                      ed25519_verify)

__all__: tuple[str, ...] = (
    "PUBLIC_KEY_SIZE",
    "SEED_SIZE",
    "SIGNATURE_SIZE",
    "ed25519_generate_seed",
    "ed25519_public_key",
    "ed25519_sign",
    "ed25519_verify",
)
