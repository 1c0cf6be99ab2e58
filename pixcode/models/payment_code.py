from __future__ import annotations

from decimal import Decimal

from pydantic import BaseModel, ConfigDict, field_validator


class PaymentCodeRequest(BaseModel):
    """Input of a single "generate payment code" action."""

    model_config = ConfigDict(frozen=True)

    key: str
    payee_name: str
    payee_city: str
    amount: Decimal | None = None
    note: str | None = None
    reference: str | None = None

    @field_validator("key", mode="after")
    @classmethod
    def _trim_key(cls, value: str) -> str:
        return value.strip()

    @field_validator("note", "reference", mode="before")
    @classmethod
    def _blank_to_none(cls, value: object) -> object:
        # Form inputs send "" for untouched optional fields.
        if isinstance(value, str) and not value.strip():
            return None
        return value


class PaymentCode(BaseModel):
    model_config = ConfigDict(frozen=True)

    request: PaymentCodeRequest
    payload: str
    image_uri: str
    content_type: str
