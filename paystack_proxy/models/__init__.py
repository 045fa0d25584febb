"""ORM Models — SQLAlchemy declarative models for cached entities.

Invariants:
    - All models inherit from Base (db/base.py)
    - Only recipients are cached; customers live solely in Paystack

Design Decisions:
    - All models imported here so Base.metadata is complete before create_all/autogenerate
"""

from paystack_proxy.models.recipient import Recipient  # noqa: F401
