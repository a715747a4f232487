"""Program-addressed instruction values."""

from __future__ import annotations

from dataclasses import dataclass

from ..keys import Pubkey


@dataclass(frozen=True)
class AccountMeta:
    pubkey: Pubkey
    is_signer: bool
    is_writable: bool


@dataclass(frozen=True)
class Instruction:
    """
    One instruction for a ledger program: the program it addresses, the ordered
    accounts it touches and its opaque data. Account order is positional and is
    defined by the instruction layout.
    """

    program_id: Pubkey
    accounts: tuple[AccountMeta, ...]
    data: bytes
