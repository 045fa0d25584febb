"""Recipient Schemas — request validation and cached-recipient responses.

Invariants:
    - RecipientCreate strips required text fields; blank values reach the service
      as "" so check_required_fields reports them in a fixed order
    - Empty currency means "use the home currency" (resolved by the service)
    - Responses render NULL bank_name/description as "" (clients never see null text)

Design Decisions:
    - Required fields default to "" instead of being pydantic-required: a missing key
      and an empty value produce the same "<field> is required" error
    - metadata is exposed under its API name; the ORM attribute is recipient_metadata
"""

from datetime import datetime
from typing import Any

from pydantic import (
    AliasChoices, BaseModel, ConfigDict, Field, field_validator,
)


class RecipientCreate(BaseModel):
    """Recipient creation body — forwarded to Paystack, then cached."""
    type: str = Field("", max_length=32)
    name: str = Field("", max_length=255)
    account_number: str = Field("", max_length=32)
    bank_code: str = Field("", max_length=16)
    currency: str | None = Field(None, max_length=3)
    description: str | None = Field(None, max_length=2000)
    metadata: dict[str, Any] | None = None

    @field_validator("type", "name", "account_number", "bank_code", mode="before")
    @classmethod
    def strip_required(cls, v):
        if v is None:
            return ""
        return v.strip() if isinstance(v, str) else v

    @field_validator("currency", mode="before")
    @classmethod
    def normalize_currency(cls, v):
        if not isinstance(v, str):
            return v
        return v.strip().upper() or None


class RecipientResponse(BaseModel):
    """Cached recipient as returned by list/get."""
    model_config = ConfigDict(from_attributes=True)

    id: int
    recipient_code: str
    type: str
    name: str
    account_number: str
    bank_code: str
    bank_name: str = ""
    currency: str
    description: str = ""
    metadata: dict[str, Any] | None = Field(
        None, validation_alias=AliasChoices("recipient_metadata", "metadata"),
    )
    created_at: datetime
    updated_at: datetime

    @field_validator("bank_name", "description", mode="before")
    @classmethod
    def null_to_empty(cls, v):
        return "" if v is None else v


class RecipientSearchResult(RecipientResponse):
    match_score: float


class RecipientSearchPage(BaseModel):
    """One page of ranked results; total counts this page, not all matches."""
    results: list[RecipientSearchResult]
    total: int
    query: str
    limit: int
    offset: int
