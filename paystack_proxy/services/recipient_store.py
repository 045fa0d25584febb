"""Recipient Store — SQLAlchemy implementation of the recipient cache.

Invariants:
    - Reads never call Paystack; the cache answers list/get/search alone
    - create() sets created_at and updated_at from a single clock reading
    - list() and search() tie-break on created_at DESC then id DESC (stable pages)
    - SQLAlchemy and driver connection failures (OSError, TimeoutError) surface as
      DatabaseError; the caller decides whether they are fatal
    - Search matches the query literally: LIKE wildcards in user input are escaped
    - Query and columns are case-folded by the same SQL LOWER

Design Decisions:
    - Ranking in SQL (CASE expression) over Python post-filtering: limit/offset apply
      after ranking without loading the whole table
    - CASE branches built from core MATCH_SCORES so scores have one definition
"""

import logging
from datetime import datetime, timezone
from typing import Any

from sqlalchemy import String, case, func, literal, or_, select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from paystack_proxy.core.domain_types import MatchRule, RecipientCode
from paystack_proxy.core.errors import (
    DatabaseError, ErrorContext, ResourceNotFoundError,
)
from paystack_proxy.core.search_recipients import MATCH_SCORES
from paystack_proxy.models.recipient import Recipient

logger = logging.getLogger(__name__)

LIKE_ESCAPE = "/"


def _contains_pattern(query: str) -> str:
    escaped = (
        query.replace(LIKE_ESCAPE, LIKE_ESCAPE * 2)
        .replace("%", LIKE_ESCAPE + "%")
        .replace("_", LIKE_ESCAPE + "_")
    )
    return f"%{escaped}%"


class RecipientStore:
    """Recipient cache backed by the `recipients` table."""

    def __init__(self, db: AsyncSession):
        self.db = db

    async def create(self, record: dict[str, Any]) -> Recipient:
        """Insert one cached recipient and commit."""
        now = datetime.now(timezone.utc)
        recipient = Recipient(**record, created_at=now, updated_at=now)
        self.db.add(recipient)
        try:
            await self.db.commit()
        except (SQLAlchemyError, OSError, TimeoutError) as e:
            await self._rollback_quietly()
            raise DatabaseError(
                type(e).__name__, "insert",
                context=ErrorContext(
                    recipient_code=record.get("recipient_code"),
                    operation="cache_recipient",
                ),
            ) from e
        return recipient

    async def _rollback_quietly(self) -> None:
        # An unreachable server fails the rollback too; the original error wins.
        try:
            await self.db.rollback()
        except (SQLAlchemyError, OSError, TimeoutError) as e:
            logger.warning(f"Rollback after failed cache write also failed: {e}")

    async def list_all(self) -> list[Recipient]:
        result = await self.db.execute(
            select(Recipient).order_by(
                Recipient.created_at.desc(), Recipient.id.desc(),
            ),
        )
        return list(result.scalars().all())

    async def get(self, recipient_code: RecipientCode) -> Recipient:
        result = await self.db.execute(
            select(Recipient).where(
                Recipient.recipient_code == recipient_code,
            ),
        )
        recipient = result.scalar_one_or_none()
        if not recipient:
            raise ResourceNotFoundError(
                "Recipient", recipient_code,
                context=ErrorContext(recipient_code=recipient_code),
            )
        return recipient

    async def search(
        self, query: str, limit: int, offset: int,
    ) -> list[tuple[Recipient, float]]:
        """Ranked fuzzy search over name, account number and bank name."""
        lowered = func.lower(literal(query, String), type_=String)
        pattern = func.lower(literal(_contains_pattern(query), String), type_=String)
        name = func.lower(Recipient.name, type_=String)
        bank_name = func.lower(Recipient.bank_name, type_=String)

        name_contains = name.like(pattern, escape=LIKE_ESCAPE)
        account_matches = Recipient.account_number == query
        bank_contains = bank_name.like(pattern, escape=LIKE_ESCAPE)

        match_score = case(
            (name == lowered, MATCH_SCORES[MatchRule.EXACT_NAME]),
            (name_contains, MATCH_SCORES[MatchRule.PARTIAL_NAME]),
            (account_matches, MATCH_SCORES[MatchRule.EXACT_ACCOUNT_NUMBER]),
            (bank_contains, MATCH_SCORES[MatchRule.PARTIAL_BANK_NAME]),
            else_=MATCH_SCORES[MatchRule.FALLBACK],
        ).label("match_score")

        stmt = (
            select(Recipient, match_score)
            .where(or_(name_contains, account_matches, bank_contains))
            .order_by(
                match_score.desc(),
                Recipient.created_at.desc(),
                Recipient.id.desc(),
            )
            .limit(limit)
            .offset(offset)
        )
        rows = (await self.db.execute(stmt)).all()
        return [(recipient, float(score)) for recipient, score in rows]
