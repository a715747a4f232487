#!/usr/bin/env python3
"""Example: keypair, detached signature and verification."""

from ixforge import Keypair, generate_keypair, sign, verify
from ixforge.signing import encode_signature

keypair = generate_keypair()
secret = keypair.to_base58_string()
message = b"Hello, Solana"
signature = sign(Keypair.from_base58_string(secret), message)
print("Public key:", keypair.pubkey())
print("Signature:", encode_signature(signature))
print("Verify:", verify(keypair.pubkey(), message, signature))
