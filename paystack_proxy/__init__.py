"""Paystack Proxy — customer and transfer-recipient API with a local recipient cache.

Invariants:
    - Package root contains no executable code (import side-effects prohibited)
"""
