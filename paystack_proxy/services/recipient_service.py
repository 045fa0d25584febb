"""Recipient Service — write-through creation and cache-only reads.

Invariants:
    - Validation happens before Paystack is called; Paystack before the cache
    - A PaystackAPIError propagates untouched and nothing is cached
    - A DatabaseError from the cache write (constraint violation or unreachable
      server) is logged at WARNING and returned as RecipientCreation.cache_error;
      the create still succeeds
    - list/get/search never call Paystack

Design Decisions:
    - Collaborators injected through the constructor (gateway, store, logger):
      routes build a service per request, tests pass fakes
    - Only DatabaseError is downgraded to a warning: anything else is a bug and
      reaches the global handler
"""

import logging
from typing import Any

from paystack_proxy.core.domain_types import RecipientCode
from paystack_proxy.core.errors import DatabaseError
from paystack_proxy.core.recipient_creation import (
    RecipientCreation, build_cache_record, check_required_fields,
)
from paystack_proxy.core.repository_protocols import (
    RecipientGateway, RecipientRepository,
)
from paystack_proxy.core.search_recipients import (
    normalize_pagination, normalize_search_query,
)
from paystack_proxy.schemas.recipient import (
    RecipientResponse, RecipientSearchPage, RecipientSearchResult,
)

logger = logging.getLogger(__name__)


class RecipientService:
    """Coordinates Paystack (system of record) and the local recipient cache."""

    def __init__(
        self,
        gateway: RecipientGateway,
        store: RecipientRepository,
        home_currency: str = "NGN",
        log: logging.Logger | None = None,
    ):
        self.gateway = gateway
        self.store = store
        self.home_currency = home_currency
        self.log = log or logger

    async def create(self, fields: dict[str, Any]) -> RecipientCreation:
        """Create in Paystack, then cache. Cache failure does not fail the call."""
        check_required_fields(fields)
        fields = {**fields, "currency": fields.get("currency") or self.home_currency}

        remote = await self.gateway.create_recipient(
            type=fields["type"],
            name=fields["name"],
            account_number=fields["account_number"],
            bank_code=fields["bank_code"],
            currency=fields["currency"],
            description=fields.get("description"),
            metadata=fields.get("metadata"),
        )

        record = build_cache_record(fields, remote)
        try:
            await self.store.create(record)
        except DatabaseError as e:
            self.log.warning(
                f"Failed to cache recipient: {e.message}",
                extra={
                    "recipient_code": record["recipient_code"],
                    "error_code": e.code,
                    "cached": False,
                },
            )
            return RecipientCreation(remote=remote, cache_error=e.message)

        self.log.info(
            "Recipient created and cached",
            extra={"recipient_code": record["recipient_code"], "cached": True},
        )
        return RecipientCreation(remote=remote)

    async def list_all(self) -> list[RecipientResponse]:
        recipients = await self.store.list_all()
        return [RecipientResponse.model_validate(r) for r in recipients]

    async def get(self, recipient_code: str) -> RecipientResponse:
        recipient = await self.store.get(RecipientCode(recipient_code))
        return RecipientResponse.model_validate(recipient)

    async def search(
        self, query: str | None, limit: int | None, offset: int | None,
    ) -> RecipientSearchPage:
        query = normalize_search_query(query)
        limit, offset = normalize_pagination(limit, offset)
        rows = await self.store.search(query, limit, offset)
        results = [
            RecipientSearchResult(
                **RecipientResponse.model_validate(recipient).model_dump(),
                match_score=score,
            )
            for recipient, score in rows
        ]
        return RecipientSearchPage(
            results=results, total=len(results),
            query=query, limit=limit, offset=offset,
        )
