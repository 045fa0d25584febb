"""Recipient Search Rules — scoring table and pagination for ranked cache search.

Invariants:
    - Pure module: no IO, no async, no DB
    - Rules evaluated top-down, first match wins (MATCH_SCORES preserves order)
    - Inclusion filter and scoring rules cover the same rows: every included row
      hits PARTIAL_NAME, EXACT_ACCOUNT_NUMBER or PARTIAL_BANK_NAME, so FALLBACK
      only scores rows a wider filter would let through
    - Non-positive or missing limit/offset fall back to defaults (10 / 0)

Design Decisions:
    - Scores kept as data, not inlined into SQL: the store builds its CASE
      expression from this table, tests assert against the same constants
    - No upper bound on limit: recipient caches are personal/small-business sized
"""

from paystack_proxy.core.domain_types import MatchRule, MatchScore
from paystack_proxy.core.errors import FieldValidationError

DEFAULT_LIMIT = 10
DEFAULT_OFFSET = 0
MAX_LIMIT = 100
MAX_OFFSET = 100_000

MATCH_SCORES: dict[MatchRule, MatchScore] = {
    MatchRule.EXACT_NAME: MatchScore(1.0),
    MatchRule.PARTIAL_NAME: MatchScore(0.9),
    MatchRule.EXACT_ACCOUNT_NUMBER: MatchScore(0.85),
    MatchRule.PARTIAL_BANK_NAME: MatchScore(0.7),
    MatchRule.FALLBACK: MatchScore(0.5),
}


def normalize_search_query(query: str | None) -> str:
    """Strip the query; reject missing or whitespace-only input."""
    query = (query or "").strip()
    if not query:
        raise FieldValidationError("q")
    return query


def normalize_pagination(
    limit: int | None, offset: int | None,
) -> tuple[int, int]:
    """Apply defaults to unspecified or non-positive limit/offset."""
    if limit is None or limit <= 0:
        limit = DEFAULT_LIMIT
    if offset is None or offset <= 0:
        offset = DEFAULT_OFFSET
    return limit, offset


def format_search_message(returned: int, query: str) -> str:
    return f"Found {returned} recipients matching '{query}'"
