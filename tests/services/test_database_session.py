"""Database Session Manager — error mapping inside managed sessions.

Tests cover:
    - IntegrityError becomes a 503 DatabaseError tagged with the failing step
    - Driver connection failures (OSError) become DatabaseError instead of a raw 500
    - Non-database exceptions pass through untouched
"""

import pytest
from sqlalchemy.exc import IntegrityError

from paystack_proxy.core.errors import DatabaseError
from paystack_proxy.infrastructure.database import DatabaseSessionManager


@pytest.fixture
def manager(test_engine, test_session_factory):
    manager = DatabaseSessionManager.__new__(DatabaseSessionManager)
    manager.engine = test_engine
    manager._session_factory = test_session_factory
    return manager


async def test_integrity_error_carries_commit_context(manager):
    cause = IntegrityError("INSERT INTO recipients", {}, Exception("duplicate"))

    with pytest.raises(DatabaseError) as exc:
        async with manager.session():
            raise cause

    assert exc.value.http_status == 503
    assert exc.value.operation == "commit"
    assert exc.value.context.operation == "recipient_cache_commit"
    assert exc.value.__cause__ is cause


async def test_connection_refused_maps_to_database_error(manager):
    with pytest.raises(DatabaseError) as exc:
        async with manager.session():
            raise ConnectionRefusedError(111, "Connect call failed")

    assert exc.value.context.operation == "recipient_cache_connect"
    assert exc.value.message == "Database connect failed: Database unreachable"


async def test_non_database_error_passes_through(manager):
    with pytest.raises(ValueError):
        async with manager.session():
            raise ValueError("not a database problem")
