"""Infrastructure Layer — external service clients and cross-cutting concerns.

Invariants:
    - Infrastructure never imports from services/ or api/
    - All external calls wrapped with timeout/error mapping

Design Decisions:
    - Process-wide clients (DB engine, Paystack HTTP pool) opened in lifespan, injected via Depends
"""
