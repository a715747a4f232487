"""
Text transports for binary values.

Account keys and secrets travel as base58 (Bitcoin alphabet); signatures and
instruction payloads travel as standard padded base64. Decoders raise
``ValueError`` on malformed input and leave length checks to the caller.
"""

from __future__ import annotations

import base64

import base58

_B58_ALPHABET = frozenset(base58.BITCOIN_ALPHABET.decode("ascii"))


def b58_encode(data: bytes) -> str:
    return base58.b58encode(data).decode("ascii")


def b58_decode(text: str) -> bytes:
    """
    Decode base58 text. Any character outside the alphabet, whitespace included,
    raises ``ValueError``.
    """
    bad = set(text) - _B58_ALPHABET
    if bad:
        raise ValueError(f"invalid base58 character(s): {sorted(bad)!r}")
    return base58.b58decode(text)


def b64_encode(data: bytes) -> str:
    return base64.b64encode(data).decode("ascii")


def b64_decode(text: str) -> bytes:
    """
    Strict standard base64: padding required, nothing outside the alphabet.
    ``binascii.Error`` (a ``ValueError``) on malformed text.
    """
    return base64.b64decode(text, validate=True)
