"""Paystack Proxy API — FastAPI application entry point.

Invariants:
    - Routes registered explicitly (no auto-discovery)
    - Global error handlers map ProxyError → structured JSON responses
    - CORS configured from settings (not hardcoded)
    - Database and Paystack client opened on startup, closed on shutdown (lifespan)

Design Decisions:
    - Lifespan over @app.on_event: FastAPI recommended pattern, cleaner cleanup
    - Error handlers live in api/error_handlers.py to keep this module wiring-only
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from paystack_proxy.api.error_handlers import register_error_handlers
from paystack_proxy.api.routes import customers, health, recipients
from paystack_proxy.config import get_settings
from paystack_proxy.infrastructure.database import close_db, init_db
from paystack_proxy.infrastructure.observability import setup_logging
from paystack_proxy.infrastructure.paystack_client import (
    close_paystack, init_paystack,
)

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Startup/shutdown lifecycle."""
    settings = get_settings()
    setup_logging(settings.log_level, settings.log_format)
    init_db(
        settings.database_url,
        pool_size=settings.database_pool_size,
        max_overflow=settings.database_max_overflow,
    )
    init_paystack(
        settings.paystack_secret_key,
        base_url=settings.paystack_base_url,
        timeout_seconds=settings.paystack_timeout_seconds,
    )
    logger.info("Paystack proxy started")
    yield
    logger.info("Paystack proxy shutting down")
    await close_paystack()
    await close_db()


app = FastAPI(
    title="Paystack Proxy API", version="1.0.0", lifespan=lifespan,
)

settings = get_settings()
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(health.router)
app.include_router(recipients.router)
app.include_router(customers.router)

register_error_handlers(app)
