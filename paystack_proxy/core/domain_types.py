"""Domain Types — rich types that replace bare primitives across the codebase.

Invariants:
    - RecipientCode wraps the Paystack-assigned identifier (RCP_...), never a local id
    - MatchScore is bounded 0.0–1.0
    - Ranking rules encoded as an Enum, in evaluation order

Design Decisions:
    - NewType over dataclass wrappers: zero runtime cost, full type-checker support
    - Recipient `type` stays a plain string: the cache stores whatever rail Paystack
      accepted, so new rails need no code change
"""

from enum import Enum
from typing import NewType


# ─── Identity Types ──────────────────────────────────────────────

RecipientCode = NewType("RecipientCode", str)


# ─── Value Types ─────────────────────────────────────────────────

MatchScore = NewType("MatchScore", float)   # 0.0–1.0


# ─── Enums ───────────────────────────────────────────────────────

class MatchRule(str, Enum):
    """Search ranking rules, in evaluation order (first match wins)."""
    EXACT_NAME = "exact_name"
    PARTIAL_NAME = "partial_name"
    EXACT_ACCOUNT_NUMBER = "exact_account_number"
    PARTIAL_BANK_NAME = "partial_bank_name"
    FALLBACK = "fallback"
