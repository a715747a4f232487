"""
Request bodies for the HTTP routes.

Models are strict: numbers must arrive as JSON integers, never as strings,
floats or booleans.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field, field_validator

U64_MAX = 2**64 - 1


def _utf8_text(value: str) -> str:
    try:
        value.encode("utf-8")
    except UnicodeEncodeError:
        raise ValueError("must be valid UTF-8 text") from None
    return value


class _StrictRequest(BaseModel):
    model_config = ConfigDict(strict=True)


class CreateTokenRequest(_StrictRequest):
    mint_authority: str
    mint: str
    decimals: int = Field(ge=0, le=255)


class MintTokenRequest(_StrictRequest):
    mint: str
    destination: str
    authority: str
    amount: int = Field(ge=0, le=U64_MAX)


class SignMessageRequest(_StrictRequest):
    message: str
    secret: str

    @field_validator("message")
    @classmethod
    def check_message(cls, value: str) -> str:
        return _utf8_text(value)


class VerifyMessageRequest(_StrictRequest):
    message: str
    signature: str
    pubkey: str

    @field_validator("message")
    @classmethod
    def check_message(cls, value: str) -> str:
        return _utf8_text(value)


class SendSolRequest(_StrictRequest):
    model_config = ConfigDict(strict=True, populate_by_name=True)

    from_: str = Field(alias="from")
    to: str
    lamports: int = Field(ge=0, le=U64_MAX)


class SendTokenRequest(_StrictRequest):
    destination: str
    mint: str
    owner: str
    amount: int = Field(ge=0, le=U64_MAX)
