"""
System program instruction layouts.

Data is a little-endian u32 variant index followed by the variant's fields.
"""

from __future__ import annotations

import struct

from ..errors import InvalidAmount
from ..keys import Pubkey
from .programs import SYSTEM_PROGRAM_ID
from .types import AccountMeta, Instruction

TRANSFER = 2

_U64_MAX = 2**64 - 1


def transfer_native(from_pubkey: Pubkey, to_pubkey: Pubkey, lamports: int) -> Instruction:
    """
    Move ``lamports`` from ``from_pubkey`` (signer, writable) to ``to_pubkey``
    (writable) through the system program.

    Raises:
        InvalidAmount: lamports is zero or does not fit in a u64.
    """
    if not 0 < lamports <= _U64_MAX:
        raise InvalidAmount()
    return Instruction(
        program_id=SYSTEM_PROGRAM_ID,
        accounts=(
            AccountMeta(from_pubkey, is_signer=True, is_writable=True),
            AccountMeta(to_pubkey, is_signer=False, is_writable=True),
        ),
        data=struct.pack("<IQ", TRANSFER, lamports),
    )
