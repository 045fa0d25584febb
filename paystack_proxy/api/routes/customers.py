"""Customer Routes — direct passthrough to Paystack, no local state.

Invariants:
    - Every call goes to Paystack; nothing is cached
    - Paging params forwarded only when count > 0 (Paystack defaults otherwise)
"""

from typing import Any

from fastapi import APIRouter, Depends, Query, status

from paystack_proxy.infrastructure.paystack_client import (
    PaystackClient, get_paystack,
)
from paystack_proxy.schemas.customer import CustomerCreate
from paystack_proxy.schemas.envelope import Envelope

router = APIRouter(prefix="/api/v1/customers", tags=["customers"])


@router.post(
    "", response_model=Envelope[dict[str, Any]],
    status_code=status.HTTP_201_CREATED,
)
async def create_customer(
    body: CustomerCreate,
    paystack: PaystackClient = Depends(get_paystack),
):
    customer = await paystack.create_customer(**body.model_dump())
    return Envelope(message="Customer created", data=customer)


@router.get("", response_model=Envelope[dict[str, Any]])
async def list_customers(
    count: int = Query(0, ge=0, le=100),
    page: int = Query(0, ge=0),
    paystack: PaystackClient = Depends(get_paystack),
):
    customers = await paystack.list_customers(count=count, page=page)
    return Envelope(message="Customers retrieved", data=customers)
