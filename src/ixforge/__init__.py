"""
Solana-style instruction payloads and Ed25519 message signatures.
Builds unsigned system/token program instructions, keypairs and detached
signatures; never talks to a ledger.
"""

from .__about__ import __version__
from .curves import ed25519_public_key, ed25519_sign, ed25519_verify
from .errors import (InvalidAmount, InvalidPubkey, InvalidSecretKey,
                     InvalidSignature, IxforgeError, MissingField,
                     ProgramError)
from .instructions import (SYSTEM_PROGRAM_ID, SYSVAR_RENT_ID,
                           TOKEN_PROGRAM_ID, AccountMeta, Instruction,
                           initialize_mint, mint_to, transfer_native,
                           transfer_token)
from .keys import (Keypair, Pubkey, Signature, decode_pubkey, decode_secret,
                   encode_pubkey, encode_secret)
from .projector import (project_instruction, project_keypair,
                        project_signed_message, project_verification)
from .signing import generate_keypair, sign, verify

__all__: tuple[str, ...] = (
    # About
    "__version__",
    # Curves: Ed25519
    "ed25519_public_key",
    "ed25519_sign",
    "ed25519_verify",
    # Errors
    "IxforgeError",
    "InvalidAmount",
    "InvalidPubkey",
    "InvalidSecretKey",
    "InvalidSignature",
    "MissingField",
    "ProgramError",
    # Identities
    "Keypair",
    "Pubkey",
    "Signature",
    "decode_pubkey",
    "decode_secret",
    "encode_pubkey",
    "encode_secret",
    # Signing
    "generate_keypair",
    "sign",
    "verify",
    # Instructions
    "AccountMeta",
    "Instruction",
    "SYSTEM_PROGRAM_ID",
    "SYSVAR_RENT_ID",
    "TOKEN_PROGRAM_ID",
    "initialize_mint",
    "mint_to",
    "transfer_native",
    "transfer_token",
    # Response projection
    "project_instruction",
    "project_keypair",
    "project_signed_message",
    "project_verification",
)
