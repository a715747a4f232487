"""Serialization of keys, signatures and payloads to their text transports."""

from .text import b58_decode, b58_encode, b64_decode, b64_encode

__all__: tuple[str, ...] = ("b58_decode", "b58_encode", "b64_decode", "b64_encode")
