"""Builders for system and token program instructions."""

from .programs import SYSTEM_PROGRAM_ID, SYSVAR_RENT_ID, TOKEN_PROGRAM_ID
from .system import transfer_native
from .token import initialize_mint, mint_to, transfer, transfer_token
from .types import AccountMeta, Instruction

__all__: tuple[str, ...] = (
    "AccountMeta",
    "Instruction",
    "SYSTEM_PROGRAM_ID",
    "SYSVAR_RENT_ID",
    "TOKEN_PROGRAM_ID",
    "initialize_mint",
    "mint_to",
    "transfer",
    "transfer_native",
    "transfer_token",
)
