"""
Error taxonomy shared by the codecs, signing and instruction builders.

Every error is terminal for the request that raised it. ``str(err)`` is the
human-readable message the HTTP layer returns to the caller.
"""

from __future__ import annotations


class IxforgeError(Exception):
    """Base class for every error raised by ixforge."""

    message = "ixforge error"

    def __str__(self) -> str:
        return self.message


class InvalidPubkey(IxforgeError):
    """Malformed or wrong-length base58 account identifier."""

    def __init__(self, text: str) -> None:
        super().__init__(text)
        self.text = text
        self.message = f"Invalid public key: {text}"


class InvalidSecretKey(IxforgeError):
    def __init__(self, reason: str) -> None:
        super().__init__(reason)
        self.reason = reason
        self.message = f"Invalid secret key: {reason}"


class InvalidSignature(IxforgeError):
    def __init__(self, reason: str) -> None:
        super().__init__(reason)
        self.reason = reason
        self.message = f"Invalid signature: {reason}"


class MissingField(IxforgeError):
    """A required text field was empty."""

    def __init__(self, name: str) -> None:
        super().__init__(name)
        self.name = name
        self.message = f"Missing required field: {name}"


class InvalidAmount(IxforgeError):
    """Amount is zero where a positive one is required, or does not fit in a u64."""

    message = "Invalid amount"


class ProgramError(IxforgeError):
    """The instruction layout rejected its parameters."""

    def __init__(self, details: str) -> None:
        super().__init__(details)
        self.details = details
        self.message = f"Program error: {details}"


__all__: tuple[str, ...] = (
    "IxforgeError",
    "InvalidAmount",
    "InvalidPubkey",
    "InvalidSecretKey",
    "InvalidSignature",
    "MissingField",
    "ProgramError",
)
