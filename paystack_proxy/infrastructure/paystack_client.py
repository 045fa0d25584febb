"""Paystack Client — wraps httpx.AsyncClient with auth, timeouts, and error mapping.

Invariants:
    - Every call is attempted exactly once (no retry: Paystack creates are not idempotent here)
    - Timeouts, connection failures, non-2xx replies, `status: false` bodies and
      unparseable bodies all map to PaystackAPIError (core/errors.py)
    - Returned objects are Paystack's `data` payloads, untouched

Design Decisions:
    - Wrapper over raw httpx: isolates wire format from the recipient service (ADR: single responsibility)
    - Singleton opened in lifespan, closed at shutdown: one connection pool per process
    - transport parameter exists for httpx.MockTransport in tests
"""

import logging
import time
from typing import Any, AsyncGenerator

import httpx

from paystack_proxy.core.errors import PaystackAPIError, ErrorContext

logger = logging.getLogger(__name__)


class PaystackClient:
    """Thin async client for the Paystack endpoints this proxy exposes."""

    def __init__(
        self,
        secret_key: str,
        base_url: str = "https://api.paystack.co",
        timeout_seconds: float = 30.0,
        transport: httpx.AsyncBaseTransport | None = None,
    ):
        self.client = httpx.AsyncClient(
            base_url=base_url,
            headers={
                "Authorization": f"Bearer {secret_key}",
                "Content-Type": "application/json",
            },
            timeout=timeout_seconds,
            transport=transport,
        )

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
    ) -> dict[str, Any]:
        """Create a transfer recipient. Returns Paystack's recipient object."""
        payload: dict[str, Any] = {
            "type": type,
            "name": name,
            "account_number": account_number,
            "bank_code": bank_code,
            "currency": currency,
        }
        if description:
            payload["description"] = description
        if metadata:
            payload["metadata"] = metadata
        body = await self._request(
            "POST", "/transferrecipient", "create_recipient", json=payload,
        )
        data = body.get("data")
        if not isinstance(data, dict) or not data.get("recipient_code"):
            raise PaystackAPIError(
                "response missing recipient_code", "malformed_response",
                context=ErrorContext(operation="create_recipient"),
            )
        return data

    async def create_customer(
        self,
        *,
        email: str,
        first_name: str | None = None,
        last_name: str | None = None,
        phone: str | None = None,
    ) -> dict[str, Any]:
        payload = {"email": email}
        for key, value in (
            ("first_name", first_name), ("last_name", last_name), ("phone", phone),
        ):
            if value:
                payload[key] = value
        body = await self._request(
            "POST", "/customer", "create_customer", json=payload,
        )
        return body.get("data") or {}

    async def list_customers(
        self, count: int = 0, page: int = 0,
    ) -> dict[str, Any]:
        """List customers; paging params only sent when count > 0."""
        params = {}
        if count > 0:
            params = {"perPage": count, "page": page}
        body = await self._request(
            "GET", "/customer", "list_customers", params=params,
        )
        return {"customers": body.get("data") or [], "meta": body.get("meta")}

    async def aclose(self) -> None:
        await self.client.aclose()

    async def _request(
        self, method: str, path: str, operation: str, **kwargs,
    ) -> dict[str, Any]:
        """Send one request and map every failure mode to PaystackAPIError."""
        context = ErrorContext(operation=operation)
        started = time.monotonic()
        try:
            response = await self.client.request(method, path, **kwargs)
        except httpx.TimeoutException:
            raise PaystackAPIError("request timed out", "timeout", context=context)
        except httpx.TransportError as e:
            raise PaystackAPIError(
                f"connection failed: {e}", "connection_error", context=context,
            )

        try:
            body = response.json()
        except ValueError:
            raise PaystackAPIError(
                f"unparseable response (HTTP {response.status_code})",
                "malformed_response",
                upstream_status=response.status_code,
                context=context,
            )
        if not isinstance(body, dict):
            raise PaystackAPIError(
                "unexpected response shape", "malformed_response",
                upstream_status=response.status_code, context=context,
            )

        if response.is_error or not body.get("status"):
            error_type = (
                "server_error" if response.status_code >= 500 else "client_error"
            )
            raise PaystackAPIError(
                body.get("message") or f"HTTP {response.status_code}",
                error_type,
                upstream_status=response.status_code,
                context=context,
            )

        logger.info(
            "Paystack API success",
            extra={
                "operation": operation,
                "upstream_status": response.status_code,
                "duration_ms": int((time.monotonic() - started) * 1000),
            },
        )
        return body


# Singleton (initialized on startup)
paystack_client: PaystackClient | None = None


def init_paystack(secret_key: str, **kwargs) -> None:
    global paystack_client
    paystack_client = PaystackClient(secret_key, **kwargs)


async def close_paystack() -> None:
    global paystack_client
    if paystack_client:
        await paystack_client.aclose()
        paystack_client = None


async def get_paystack() -> AsyncGenerator[PaystackClient, None]:
    """FastAPI dependency for the shared Paystack client."""
    if not paystack_client:
        raise RuntimeError("Paystack client not initialized")
    yield paystack_client
