"""Database Layer — SQLAlchemy declarative Base shared by models and migrations.

Design Decisions:
    - asyncpg driver for PostgreSQL in production, aiosqlite in tests
"""
