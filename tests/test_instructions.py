"""System and token program instruction builders."""

from __future__ import annotations

import dataclasses

import pytest

from ixforge import (SYSTEM_PROGRAM_ID, SYSVAR_RENT_ID, TOKEN_PROGRAM_ID,
                     AccountMeta, InvalidAmount, ProgramError, Pubkey,
                     initialize_mint, mint_to, transfer_native,
                     transfer_token)
from ixforge.instructions import transfer

A = Pubkey(bytes(range(32)))
B = Pubkey(bytes(range(32, 64)))
C = Pubkey(bytes(range(64, 96)))
D = Pubkey(bytes(range(96, 128)))


def _flags(ix) -> list[tuple[Pubkey, bool, bool]]:
    return [(m.pubkey, m.is_signer, m.is_writable) for m in ix.accounts]


def test_transfer_native_accounts() -> None:
    ix = transfer_native(A, B, 1)
    assert ix.program_id == SYSTEM_PROGRAM_ID
    assert _flags(ix) == [(A, True, True), (B, False, True)]


def test_transfer_native_rejects_zero_and_overflow() -> None:
    with pytest.raises(InvalidAmount):
        transfer_native(A, B, 0)
    with pytest.raises(InvalidAmount):
        transfer_native(A, B, 2**64)
    with pytest.raises(InvalidAmount):
        transfer_native(A, B, -1)


def test_transfer_native_same_account_kept_twice() -> None:
    ix = transfer_native(A, A, 5)
    assert _flags(ix) == [(A, True, True), (A, False, True)]


def test_initialize_mint_accounts() -> None:
    ix = initialize_mint(A, B, 9)
    assert ix.program_id == TOKEN_PROGRAM_ID
    assert _flags(ix) == [(B, False, True), (SYSVAR_RENT_ID, False, False)]


def test_initialize_mint_decimals_range() -> None:
    initialize_mint(A, B, 0)
    initialize_mint(A, B, 255)
    with pytest.raises(ProgramError):
        initialize_mint(A, B, 256)


def test_token_builders_check_program_id() -> None:
    with pytest.raises(ProgramError) as excinfo:
        initialize_mint(A, B, 6, program_id=SYSTEM_PROGRAM_ID)
    assert str(excinfo.value) == "Program error: Incorrect program id for instruction"
    with pytest.raises(ProgramError):
        mint_to(A, B, C, 1, program_id=D)
    with pytest.raises(ProgramError):
        transfer_token(A, B, C, 1, program_id=D)


def test_mint_to_accounts() -> None:
    ix = mint_to(A, B, C, 100)
    assert ix.program_id == TOKEN_PROGRAM_ID
    assert _flags(ix) == [(A, False, True), (B, False, True), (C, True, False)]


def test_mint_to_accepts_zero() -> None:
    ix = mint_to(A, B, C, 0)
    assert ix.data == b"\x07" + bytes(8)


def test_mint_to_multisig() -> None:
    ix = mint_to(A, B, C, 1, signers=[D, A])
    assert _flags(ix) == [
        (A, False, True),
        (B, False, True),
        (C, False, False),
        (D, True, False),
        (A, True, False),
    ]


def test_transfer_token_source_is_owner() -> None:
    ix = transfer_token(destination=B, mint=C, owner=A, amount=10)
    assert ix.program_id == TOKEN_PROGRAM_ID
    assert _flags(ix) == [(A, False, True), (B, False, True), (A, True, False)]
    assert all(meta.pubkey != C for meta in ix.accounts)


def test_transfer_token_rejects_zero() -> None:
    with pytest.raises(InvalidAmount):
        transfer_token(A, B, C, 0)


def test_raw_transfer_allows_zero() -> None:
    ix = transfer(A, B, C, 0)
    assert _flags(ix) == [(A, False, True), (B, False, True), (C, True, False)]


def test_instruction_is_immutable() -> None:
    ix = transfer_native(A, B, 1)
    with pytest.raises(dataclasses.FrozenInstanceError):
        ix.data = b""
    with pytest.raises(dataclasses.FrozenInstanceError):
        ix.accounts[0].is_signer = False
    assert isinstance(ix.accounts, tuple)
    assert ix.accounts[0] == AccountMeta(A, True, True)
