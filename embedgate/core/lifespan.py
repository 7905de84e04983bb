"""Application lifespan: startup and shutdown.

Wiring only: logging, the shared oEmbed HTTP client, and the configured
entry meta store backend (Redis connection or SQL tables).
"""

import logging
from contextlib import asynccontextmanager
from typing import AsyncIterator

import httpx
from fastapi import FastAPI

from embedgate.core.config import get_settings
from embedgate.shared.telemetry import setup_logging

logger = logging.getLogger(__name__)


@asynccontextmanager
async def create_lifespan(app: FastAPI) -> AsyncIterator[None]:
    """Run startup then yield; on exit run shutdown.

    Startup: logging, shared HTTP client, meta store (redis connect or sql
    create_all). Shutdown in reverse order.
    """
    settings = get_settings()
    setup_logging()

    # ---- Startup ----
    # Shared HTTP client for oEmbed lookups (connection reuse).
    app.state.oembed_http_client = httpx.AsyncClient(timeout=settings.oembed_timeout_seconds)

    if settings.meta_store_backend == "redis":
        from embedgate.infrastructure.cache.redis_meta_store import RedisEntryMetaStore

        store = RedisEntryMetaStore()
        await store.connect()
        app.state.meta_store = store
    else:
        from embedgate.infrastructure.persistence.database import init_models

        await init_models()
        app.state.meta_store = None

    yield

    # ---- Shutdown ----
    if getattr(app.state, "oembed_http_client", None) is not None:
        await app.state.oembed_http_client.aclose()
        app.state.oembed_http_client = None
        logger.info("oEmbed HTTP client closed")

    if getattr(app.state, "meta_store", None) is not None:
        await app.state.meta_store.disconnect()
        app.state.meta_store = None

    if settings.meta_store_backend == "sql":
        from embedgate.infrastructure.persistence.database import dispose_engine

        await dispose_engine()
