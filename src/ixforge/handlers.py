"""
Request-level operations behind each HTTP route.

Each handler takes the already-parsed request fields, validates and decodes them
in request order (so the first bad field is the one reported), calls the
matching builder or signer and returns the projected response payload. Nothing
is encoded until every identifier has been decoded.
"""

from __future__ import annotations

from typing import Any

from . import instructions, signing
from .errors import InvalidAmount
from .keys import decode_pubkey
from .projector import (project_instruction, project_keypair,
                        project_signed_message, project_verification)


def generate_keypair() -> dict[str, str]:
    return project_keypair(signing.generate_keypair())


def create_token(mint_authority: str, mint: str, decimals: int) -> dict[str, Any]:
    authority_key = decode_pubkey(mint_authority)
    mint_key = decode_pubkey(mint)
    ix = instructions.initialize_mint(authority_key, mint_key, decimals)
    return project_instruction(ix)


def mint_token(mint: str, destination: str, authority: str, amount: int) -> dict[str, Any]:
    mint_key = decode_pubkey(mint)
    destination_key = decode_pubkey(destination)
    authority_key = decode_pubkey(authority)
    ix = instructions.mint_to(mint_key, destination_key, authority_key, amount)
    return project_instruction(ix)


def sign_message(message: str, secret: str) -> dict[str, str]:
    keypair, signature = signing.sign_with_secret(secret, message)
    return project_signed_message(signature, keypair, message)


def verify_message(message: str, signature: str, pubkey: str) -> dict[str, Any]:
    valid = signing.verify_with_text(pubkey, message, signature)
    return project_verification(valid, message, pubkey)


def send_sol(from_: str, to: str, lamports: int) -> dict[str, Any]:
    if lamports == 0:
        raise InvalidAmount()
    from_key = decode_pubkey(from_)
    to_key = decode_pubkey(to)
    ix = instructions.transfer_native(from_key, to_key, lamports)
    return project_instruction(ix)


def send_token(destination: str, mint: str, owner: str, amount: int) -> dict[str, Any]:
    if amount == 0:
        raise InvalidAmount()
    mint_key = decode_pubkey(mint)
    destination_key = decode_pubkey(destination)
    owner_key = decode_pubkey(owner)
    ix = instructions.transfer_token(destination_key, mint_key, owner_key, amount)
    return project_instruction(ix)
