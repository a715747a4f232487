"""
Token program instruction layouts.

Data starts with a one-byte instruction tag. Amounts are little-endian u64,
addresses are raw 32-byte keys and optional addresses are a ``0``/``1`` tag byte
followed by the key when present. Authorities sign directly unless multisig
signer keys are given, in which case the authority is a readonly non-signer and
each multisig key is appended as a readonly signer.
"""

from __future__ import annotations

import struct
from collections.abc import Sequence

from ..errors import InvalidAmount, ProgramError
from ..keys import Pubkey
from .programs import SYSVAR_RENT_ID, TOKEN_PROGRAM_ID
from .types import AccountMeta, Instruction

INITIALIZE_MINT = 0
TRANSFER = 3
MINT_TO = 7

_U64_MAX = 2**64 - 1


def _check_program_account(program_id: Pubkey) -> None:
    if program_id != TOKEN_PROGRAM_ID:
        raise ProgramError("Incorrect program id for instruction")


def _check_u64(amount: int) -> None:
    if not 0 <= amount <= _U64_MAX:
        raise InvalidAmount()


def _authority_metas(authority: Pubkey, signers: Sequence[Pubkey]) -> list[AccountMeta]:
    metas = [AccountMeta(authority, is_signer=not signers, is_writable=False)]
    metas.extend(AccountMeta(signer, is_signer=True, is_writable=False) for signer in signers)
    return metas


def _pack_optional_key(key: Pubkey | None) -> bytes:
    if key is None:
        return b"\x00"
    return b"\x01" + bytes(key)


def initialize_mint(
    mint_authority: Pubkey,
    mint: Pubkey,
    decimals: int,
    freeze_authority: Pubkey | None = None,
    program_id: Pubkey = TOKEN_PROGRAM_ID,
) -> Instruction:
    """
    Initialize ``mint`` with ``decimals`` and ``mint_authority``.

    Accounts: mint (writable), rent sysvar.

    Raises:
        ProgramError: wrong program id, or decimals outside the u8 range.
    """
    _check_program_account(program_id)
    if not 0 <= decimals <= 0xFF:
        raise ProgramError(f"decimals must fit in a u8, got {decimals}")
    data = (
        struct.pack("<BB", INITIALIZE_MINT, decimals)
        + bytes(mint_authority)
        + _pack_optional_key(freeze_authority)
    )
    return Instruction(
        program_id=program_id,
        accounts=(
            AccountMeta(mint, is_signer=False, is_writable=True),
            AccountMeta(SYSVAR_RENT_ID, is_signer=False, is_writable=False),
        ),
        data=data,
    )


def mint_to(
    mint: Pubkey,
    destination: Pubkey,
    authority: Pubkey,
    amount: int,
    signers: Sequence[Pubkey] = (),
    program_id: Pubkey = TOKEN_PROGRAM_ID,
) -> Instruction:
    """
    Issue ``amount`` new units of ``mint`` into ``destination``. A zero amount is
    a valid instruction.

    Accounts: mint (writable), destination (writable), authority.
    """
    _check_program_account(program_id)
    _check_u64(amount)
    accounts = [
        AccountMeta(mint, is_signer=False, is_writable=True),
        AccountMeta(destination, is_signer=False, is_writable=True),
    ]
    accounts.extend(_authority_metas(authority, signers))
    return Instruction(
        program_id=program_id,
        accounts=tuple(accounts),
        data=struct.pack("<BQ", MINT_TO, amount),
    )


def transfer(
    source: Pubkey,
    destination: Pubkey,
    authority: Pubkey,
    amount: int,
    signers: Sequence[Pubkey] = (),
    program_id: Pubkey = TOKEN_PROGRAM_ID,
) -> Instruction:
    """Raw token-program Transfer. Accounts: source (w), destination (w), authority."""
    _check_program_account(program_id)
    _check_u64(amount)
    accounts = [
        AccountMeta(source, is_signer=False, is_writable=True),
        AccountMeta(destination, is_signer=False, is_writable=True),
    ]
    accounts.extend(_authority_metas(authority, signers))
    return Instruction(
        program_id=program_id,
        accounts=tuple(accounts),
        data=struct.pack("<BQ", TRANSFER, amount),
    )


def transfer_token(
    destination: Pubkey,
    mint: Pubkey,
    owner: Pubkey,
    amount: int,
    signers: Sequence[Pubkey] = (),
    program_id: Pubkey = TOKEN_PROGRAM_ID,
) -> Instruction:
    """
    Move ``amount`` tokens owned by ``owner`` to ``destination``.

    The owner's address is used as the source token account; no associated
    token account is derived. ``mint`` is accepted for validation only and does
    not appear in the instruction.

    Raises:
        InvalidAmount: amount is zero or does not fit in a u64.
    """
    if amount == 0:
        raise InvalidAmount()
    return transfer(owner, destination, owner, amount, signers=signers, program_id=program_id)
