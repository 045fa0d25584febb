"""Boundary Protocols — contracts between the recipient service and its IO collaborators.

Invariants:
    - Service code depends on these Protocols, never on httpx or SQLAlchemy directly
    - Implementations provided by shell via dependency injection
    - Gateway methods raise PaystackAPIError; repository methods raise DatabaseError

Design Decisions:
    - Protocol over ABC: structural subtyping, test fakes need no inheritance
    - Async in Protocol: every implementation does IO
"""

from typing import Any, Protocol

from paystack_proxy.core.domain_types import RecipientCode


class RecipientGateway(Protocol):
    """Contract for the remote system of record (Paystack)."""
    async def create_recipient(
        self,
        *,
        type: str,
        name: str,
        account_number: str,
        bank_code: str,
        currency: str,
        description: str | None = None,
        metadata: dict[str, Any] | None = None,
    ) -> dict[str, Any]: ...


class RecipientRepository(Protocol):
    """Contract for the local recipient cache — implemented by shell."""
    async def create(self, record: dict[str, Any]) -> Any: ...
    async def list_all(self) -> list[Any]: ...
    async def get(self, recipient_code: RecipientCode) -> Any: ...
    async def search(
        self, query: str, limit: int, offset: int,
    ) -> list[tuple[Any, float]]: ...
