"""Recipient Service — write-through creation with fake gateway and store.

Tests cover:
    - Success path caches the derived record and reports cached=True
    - DatabaseError from the store becomes cache_error + WARNING on the injected logger
    - An unreachable database during the cache write still returns the remote recipient
    - PaystackAPIError propagates and the store is never touched
    - Validation runs before the gateway is called
    - Search normalizes query and pagination before reaching the store
"""

import logging

import pytest

from paystack_proxy.core.errors import (
    DatabaseError, FieldValidationError, PaystackAPIError,
)
from paystack_proxy.services.recipient_service import RecipientService
from paystack_proxy.services.recipient_store import RecipientStore

from tests.services.fake_paystack import FakePaystack


class _FakeStore:
    def __init__(self, error: Exception | None = None):
        self.error = error
        self.created: list[dict] = []
        self.searches: list[tuple] = []

    async def create(self, record):
        if self.error:
            raise self.error
        self.created.append(record)
        return record

    async def list_all(self):
        return []

    async def get(self, recipient_code):
        raise AssertionError("not used")

    async def search(self, query, limit, offset):
        self.searches.append((query, limit, offset))
        return []


class _UnreachableSession:
    def add(self, instance):
        pass

    async def commit(self):
        raise ConnectionRefusedError(111, "Connect call failed ('127.0.0.1', 5432)")

    async def rollback(self):
        raise ConnectionRefusedError(111, "Connect call failed ('127.0.0.1', 5432)")


def _fields(**overrides) -> dict:
    fields = {
        "type": "nuban",
        "name": "John Contractor",
        "account_number": "0123456789",
        "bank_code": "058",
        "currency": None,
        "description": None,
        "metadata": None,
    }
    fields.update(overrides)
    return fields


async def test_create_caches_record_derived_from_paystack():
    store = _FakeStore()
    service = RecipientService(FakePaystack(), store)

    outcome = await service.create(_fields())

    assert outcome.cached
    assert outcome.recipient_code == "RCP_test000001"
    assert store.created[0]["recipient_code"] == "RCP_test000001"
    assert store.created[0]["bank_name"] == "Guaranty Trust Bank"
    assert store.created[0]["currency"] == "NGN"


async def test_create_uses_configured_home_currency():
    gateway = FakePaystack()
    service = RecipientService(gateway, _FakeStore(), home_currency="GHS")

    await service.create(_fields())

    assert gateway.calls[0][1]["currency"] == "GHS"


async def test_cache_failure_returns_remote_and_logs_warning(caplog):
    log = logging.getLogger("tests.recipient_cache")
    store = _FakeStore(error=DatabaseError("IntegrityError", "insert"))
    service = RecipientService(FakePaystack(), store, log=log)

    with caplog.at_level(logging.WARNING, logger="tests.recipient_cache"):
        outcome = await service.create(_fields())

    assert not outcome.cached
    assert outcome.remote["recipient_code"] == "RCP_test000001"
    assert "IntegrityError" in outcome.cache_error
    record = next(r for r in caplog.records if r.name == "tests.recipient_cache")
    assert record.levelno == logging.WARNING
    assert record.recipient_code == "RCP_test000001"
    assert record.error_code == "DATABASE_ERROR"


async def test_upstream_failure_propagates_without_cache_write():
    gateway = FakePaystack()
    gateway.error = PaystackAPIError("Invalid key", "client_error", upstream_status=401)
    store = _FakeStore()
    service = RecipientService(gateway, store)

    with pytest.raises(PaystackAPIError):
        await service.create(_fields())

    assert store.created == []


async def test_validation_runs_before_gateway():
    gateway = FakePaystack()
    service = RecipientService(gateway, _FakeStore())

    with pytest.raises(FieldValidationError) as exc:
        await service.create(_fields(bank_code=""))

    assert exc.value.field == "bank_code"
    assert gateway.calls == []


async def test_unreachable_database_still_returns_remote_recipient():
    session = _UnreachableSession()
    service = RecipientService(FakePaystack(), RecipientStore(session))

    outcome = await service.create(_fields())

    assert not outcome.cached
    assert outcome.recipient_code == "RCP_test000001"
    assert "ConnectionRefusedError" in outcome.cache_error


async def test_store_programming_error_is_not_swallowed():
    store = _FakeStore(error=RuntimeError("bug"))
    service = RecipientService(FakePaystack(), store)

    with pytest.raises(RuntimeError):
        await service.create(_fields())


async def test_search_normalizes_before_querying_store():
    store = _FakeStore()
    service = RecipientService(FakePaystack(), store)

    page = await service.search("  john  ", None, -1)

    assert store.searches == [("john", 10, 0)]
    assert page.query == "john"
    assert page.total == 0
    assert page.results == []
