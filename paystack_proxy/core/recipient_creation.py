"""Recipient Creation Rules — request validation, cache-record derivation, outcome type.

Invariants:
    - Required fields checked in fixed order: type, name, account_number, bank_code
    - Validation runs before any Paystack call (pure, raises FieldValidationError)
    - Cache record fields come from the request, except recipient_code and bank_name
      which come from Paystack's response
    - RecipientCreation.remote is always Paystack's object, whatever happened to the cache

Design Decisions:
    - Outcome as a dataclass with cache_error over raise-and-swallow: callers see
      "remote succeeded, cache failed" as data (ADR: availability over consistency)
    - bank_name read defensively from details: Paystack omits it for some rails
"""

from dataclasses import dataclass
from typing import Any

from paystack_proxy.core.domain_types import RecipientCode
from paystack_proxy.core.errors import FieldValidationError

REQUIRED_FIELDS = ("type", "name", "account_number", "bank_code")


@dataclass(frozen=True)
class RecipientCreation:
    """Result of a create: Paystack's recipient plus the cache write outcome."""
    remote: dict[str, Any]
    cache_error: str | None = None

    @property
    def cached(self) -> bool:
        return self.cache_error is None

    @property
    def recipient_code(self) -> RecipientCode:
        return RecipientCode(self.remote.get("recipient_code", ""))


def check_required_fields(fields: dict[str, Any]) -> None:
    """Raise FieldValidationError for the first missing or blank required field."""
    for name in REQUIRED_FIELDS:
        value = fields.get(name)
        if not isinstance(value, str) or not value.strip():
            raise FieldValidationError(name)


def extract_bank_name(remote: dict[str, Any]) -> str:
    details = remote.get("details")
    if not isinstance(details, dict):
        return ""
    bank_name = details.get("bank_name")
    return bank_name if isinstance(bank_name, str) else ""


def build_cache_record(
    fields: dict[str, Any], remote: dict[str, Any],
) -> dict[str, Any]:
    """Derive the row to cache from the validated request and Paystack's reply."""
    return {
        "recipient_code": remote["recipient_code"],
        "type": fields["type"],
        "name": fields["name"],
        "account_number": fields["account_number"],
        "bank_code": fields["bank_code"],
        "bank_name": extract_bank_name(remote),
        "currency": fields["currency"],
        "description": fields.get("description") or None,
        "recipient_metadata": fields.get("metadata"),
    }
