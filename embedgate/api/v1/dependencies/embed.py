"""Embed gate dependencies (composition root).

Builds the entry meta store for the configured backend, the oEmbed
resolver on the shared HTTP client, and the EmbedCacheGate over both.
Routes depend only on these, never on infrastructure directly.
"""

from __future__ import annotations

from typing import Annotated

from fastapi import Depends, Request

from embedgate.application.interfaces.services import IContentResolver, IEntryMetaStore
from embedgate.application.services.embed_cache_gate import EmbedCacheGate
from embedgate.application.services.url_validator import TweetUrlValidator
from embedgate.core.config import get_settings
from embedgate.domain.exceptions import MetaStoreUnavailableException
from embedgate.infrastructure.cache.keys import embed_cache_key
from embedgate.infrastructure.external.oembed import OEmbedClient


def get_meta_store(request: Request) -> IEntryMetaStore:
    """Entry meta store: app-wide Redis store, or SQL with one transaction per call."""
    settings = get_settings()
    if settings.meta_store_backend == "sql":
        from embedgate.infrastructure.persistence.database import transactional_session
        from embedgate.infrastructure.persistence.repositories import SessionScopedEntryMetaStore

        return SessionScopedEntryMetaStore(transactional_session)

    store = getattr(request.app.state, "meta_store", None)
    if store is None:
        raise MetaStoreUnavailableException(settings.meta_store_backend)
    return store


def get_content_resolver(request: Request) -> IContentResolver:
    """oEmbed resolver on the shared HTTP client (composition root)."""
    settings = get_settings()
    return OEmbedClient(
        settings.oembed_endpoint,
        timeout=settings.oembed_timeout_seconds,
        max_width=settings.oembed_max_width,
        omit_script=settings.oembed_omit_script,
        http_client=getattr(request.app.state, "oembed_http_client", None),
    )


def get_embed_cache_gate(
    store: Annotated[IEntryMetaStore, Depends(get_meta_store)],
    resolver: Annotated[IContentResolver, Depends(get_content_resolver)],
) -> EmbedCacheGate:
    """Embed cache gate over the configured store and resolver."""
    return EmbedCacheGate(store=store, resolver=resolver, key_builder=embed_cache_key)


def get_url_validator() -> TweetUrlValidator:
    """Fresh tweet URL validator per request (it carries failed-state)."""
    return TweetUrlValidator(field="url")
