"""Recipient ORM — local cache of Paystack transfer recipients.

Invariants:
    - id is a local sequential integer; recipient_code is Paystack's unique identifier
    - Rows are written once (after Paystack confirms) and never updated or deleted
    - created_at == updated_at at insert

Design Decisions:
    - recipient_metadata attribute maps to the "metadata" column: `metadata` is reserved
      on DeclarativeBase subclasses
    - Index on created_at: list and search both order by recency
"""

from datetime import datetime, timezone

from sqlalchemy import Integer, String, Text, DateTime, JSON, Index, UniqueConstraint
from sqlalchemy.orm import Mapped, mapped_column

from paystack_proxy.db.base import Base


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class Recipient(Base):
    """Cached transfer recipient."""
    __tablename__ = "recipients"
    __table_args__ = (
        UniqueConstraint("recipient_code", name="uq_recipients_recipient_code"),
        Index("ix_recipients_created_at", "created_at"),
    )

    id: Mapped[int] = mapped_column(
        Integer, primary_key=True, autoincrement=True,
    )
    recipient_code: Mapped[str] = mapped_column(
        String(64), nullable=False,
    )
    type: Mapped[str] = mapped_column(String(32), nullable=False)
    name: Mapped[str] = mapped_column(String(255), nullable=False)
    account_number: Mapped[str] = mapped_column(String(32), nullable=False)
    bank_code: Mapped[str] = mapped_column(String(16), nullable=False)
    bank_name: Mapped[str | None] = mapped_column(String(255), nullable=True)
    currency: Mapped[str] = mapped_column(
        String(3), nullable=False, default="NGN",
    )
    description: Mapped[str | None] = mapped_column(Text, nullable=True)
    recipient_metadata: Mapped[dict | None] = mapped_column(
        "metadata", JSON, nullable=True,
    )
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), nullable=False, default=_utcnow,
    )
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), nullable=False, default=_utcnow,
    )
