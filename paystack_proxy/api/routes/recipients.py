"""Recipient Routes — create (Paystack + cache), list, search and get (cache only).

Invariants:
    - Request bodies validated by Pydantic, required fields by the service
    - /search registered before /{recipient_code} so it is not captured as a code
    - Create returns Paystack's recipient object even when caching failed

Design Decisions:
    - Service built per request from injected collaborators (db session, Paystack client)
    - Bad limit/offset types and values above MAX_LIMIT/MAX_OFFSET are rejected by
      FastAPI (400); non-positive values fall back to defaults
"""

from typing import Any

from fastapi import APIRouter, Depends, Query, status
from sqlalchemy.ext.asyncio import AsyncSession

from paystack_proxy.config import get_settings
from paystack_proxy.core.search_recipients import (
    MAX_LIMIT, MAX_OFFSET, format_search_message,
)
from paystack_proxy.infrastructure.database import get_db
from paystack_proxy.infrastructure.paystack_client import (
    PaystackClient, get_paystack,
)
from paystack_proxy.schemas.envelope import Envelope
from paystack_proxy.schemas.recipient import (
    RecipientCreate, RecipientResponse, RecipientSearchPage,
)
from paystack_proxy.services.recipient_service import RecipientService
from paystack_proxy.services.recipient_store import RecipientStore

router = APIRouter(prefix="/api/v1/recipients", tags=["recipients"])


def get_recipient_service(
    db: AsyncSession = Depends(get_db),
    paystack: PaystackClient = Depends(get_paystack),
) -> RecipientService:
    return RecipientService(
        paystack, RecipientStore(db),
        home_currency=get_settings().home_currency,
    )


@router.post(
    "", response_model=Envelope[dict[str, Any]],
    status_code=status.HTTP_201_CREATED,
)
async def create_recipient(
    body: RecipientCreate,
    service: RecipientService = Depends(get_recipient_service),
):
    """Create a transfer recipient in Paystack and cache it locally."""
    outcome = await service.create(body.model_dump())
    return Envelope(message="Recipient created", data=outcome.remote)


@router.get("", response_model=Envelope[list[RecipientResponse]])
async def list_recipients(
    service: RecipientService = Depends(get_recipient_service),
):
    """List cached recipients, newest first."""
    recipients = await service.list_all()
    return Envelope(message="Recipients retrieved", data=recipients)


@router.get("/search", response_model=Envelope[RecipientSearchPage])
async def search_recipients(
    q: str | None = Query(None),
    limit: int | None = Query(None, le=MAX_LIMIT),
    offset: int | None = Query(None, le=MAX_OFFSET),
    service: RecipientService = Depends(get_recipient_service),
):
    """Ranked fuzzy search over cached name, account number and bank name."""
    page = await service.search(q, limit, offset)
    return Envelope(
        message=format_search_message(page.total, page.query),
        data=page,
    )


@router.get("/{recipient_code}", response_model=Envelope[RecipientResponse])
async def get_recipient(
    recipient_code: str,
    service: RecipientService = Depends(get_recipient_service),
):
    """Get one cached recipient by Paystack recipient code."""
    recipient = await service.get(recipient_code)
    return Envelope(message="Recipient retrieved", data=recipient)
