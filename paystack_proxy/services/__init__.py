"""Services Layer — imperative shell around core rules.

Invariants:
    - Services own IO orchestration (Paystack, cache); rules come from core/
"""
