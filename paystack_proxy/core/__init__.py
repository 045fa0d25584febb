"""Core Layer — pure domain logic, no IO, no async, no DB.

Invariants:
    - No module in core/ imports from services/, api/, infrastructure/, or models/
    - All functions are pure and deterministic

Design Decisions:
    - Functional core separated from imperative shell: validation, scoring table and
      cache-record derivation are testable without a database or Paystack
"""
