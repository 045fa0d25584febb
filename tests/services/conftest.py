"""Service test fixtures — async DB, fake Paystack, FastAPI test client.

Invariants:
    - Every test gets a fresh in-memory SQLite database
    - get_db dependency overridden to use test DB sessions
    - get_paystack dependency overridden with FakePaystack (no network)
    - db_manager patched so the readiness probe sees the test engine

Design Decisions:
    - SQLite in-memory: fast, no external dependency; ranking SQL uses only
      LOWER/LIKE/CASE which behave the same on PostgreSQL
    - SQLite LOWER folds ASCII only, so the test engine registers a Unicode
      lower() matching PostgreSQL under a UTF-8 locale
    - make_recipient seeds rows with explicit created_at so recency ordering is deterministic
"""

from datetime import datetime, timedelta, timezone
from uuid import uuid4

import pytest
from sqlalchemy import event
from sqlalchemy.ext.asyncio import (
    AsyncSession, create_async_engine, async_sessionmaker,
)
from httpx import ASGITransport, AsyncClient

from paystack_proxy.db.base import Base
from paystack_proxy.infrastructure.database import get_db, DatabaseSessionManager
from paystack_proxy.infrastructure.paystack_client import get_paystack
from paystack_proxy.models.recipient import Recipient
import paystack_proxy.infrastructure.database as db_module
from paystack_proxy.main import app

from tests.services.fake_paystack import FakePaystack

BASE_TIME = datetime(2026, 1, 1, 12, 0, tzinfo=timezone.utc)


def _unicode_lower(value):
    return value.lower() if isinstance(value, str) else value


def _register_unicode_lower(dbapi_connection, _record):
    dbapi_connection.create_function("lower", 1, _unicode_lower)


@pytest.fixture
async def test_engine():
    engine = create_async_engine(
        "sqlite+aiosqlite:///:memory:", echo=False,
    )
    event.listen(engine.sync_engine, "connect", _register_unicode_lower)
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield engine
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)
    await engine.dispose()


@pytest.fixture
async def test_session_factory(test_engine):
    return async_sessionmaker(
        test_engine, class_=AsyncSession, expire_on_commit=False,
    )


@pytest.fixture
async def test_db(test_session_factory):
    async with test_session_factory() as session:
        yield session


@pytest.fixture
def fake_paystack():
    return FakePaystack()


@pytest.fixture
async def client(test_engine, test_session_factory, fake_paystack):
    """FastAPI test client with DB and Paystack dependencies overridden."""
    async def override_get_db():
        async with test_session_factory() as session:
            yield session

    app.dependency_overrides[get_db] = override_get_db
    app.dependency_overrides[get_paystack] = lambda: fake_paystack

    original_manager = db_module.db_manager
    fake_manager = DatabaseSessionManager.__new__(DatabaseSessionManager)
    fake_manager.engine = test_engine
    fake_manager._session_factory = test_session_factory
    db_module.db_manager = fake_manager

    async with AsyncClient(
        transport=ASGITransport(app=app), base_url="http://test",
    ) as c:
        yield c

    app.dependency_overrides.clear()
    db_module.db_manager = original_manager


@pytest.fixture
def make_recipient(test_db):
    """Seed a cached recipient; minutes_ago controls created_at ordering."""
    async def _make(
        name: str = "John Contractor",
        account_number: str = "0123456789",
        bank_name: str | None = "Access Bank",
        minutes_ago: int = 0,
        **overrides,
    ) -> Recipient:
        created_at = BASE_TIME - timedelta(minutes=minutes_ago)
        fields = {
            "recipient_code": f"RCP_{uuid4().hex[:12]}",
            "type": "nuban",
            "name": name,
            "account_number": account_number,
            "bank_code": "044",
            "bank_name": bank_name,
            "currency": "NGN",
            "description": None,
            "created_at": created_at,
            "updated_at": created_at,
        }
        fields.update(overrides)
        recipient = Recipient(**fields)
        test_db.add(recipient)
        await test_db.commit()
        await test_db.refresh(recipient)
        return recipient

    return _make
