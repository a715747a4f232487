"""
JSON-shaped views of instructions, keypairs and signatures.

The field names and encodings here are the public response contract: keys in
base58, signatures and instruction data in standard base64.
"""

from __future__ import annotations

from typing import Any

from .instructions import Instruction
from .keys import Keypair, Signature
from .serde import b64_encode


def project_instruction(instruction: Instruction) -> dict[str, Any]:
    return {
        "program_id": str(instruction.program_id),
        "accounts": [
            {
                "pubkey": str(meta.pubkey),
                "is_signer": meta.is_signer,
                "is_writable": meta.is_writable,
            }
            for meta in instruction.accounts
        ],
        "instruction_data": b64_encode(instruction.data),
    }


def project_keypair(keypair: Keypair) -> dict[str, str]:
    return {"pubkey": str(keypair.pubkey()), "secret": keypair.to_base58_string()}


def project_signed_message(signature: Signature, keypair: Keypair, message: str) -> dict[str, str]:
    return {
        "signature": signature.to_base64(),
        "public_key": str(keypair.pubkey()),
        "message": message,
    }


def project_verification(valid: bool, message: str, pubkey: str) -> dict[str, Any]:
    """``pubkey`` is echoed exactly as the caller sent it."""
    return {"valid": valid, "message": message, "pubkey": pubkey}
