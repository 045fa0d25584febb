"""Root conftest — shared test configuration."""

import os

# Ensure tests don't accidentally hit Paystack with a real key
os.environ.setdefault("PAYSTACK_SECRET_KEY", "sk_test_fake_key")
os.environ.setdefault(
    "DATABASE_URL",
    "sqlite+aiosqlite:///test.db",
)
