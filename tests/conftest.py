"""Pytest configuration and fixtures for the embed cache gate.

Unit tests use in-memory fakes for the entry meta store and the content
resolver. HTTP tests run the FastAPI app over ASGI with those fakes
injected through dependency_overrides, so no Redis or network is needed.
"""

from collections.abc import AsyncIterator, Iterator

import pytest
from httpx import ASGITransport, AsyncClient

from embedgate.api.v1.dependencies import get_content_resolver, get_meta_store
from embedgate.application.services.embed_cache_gate import EmbedCacheGate
from embedgate.core.config import get_settings
from embedgate.infrastructure.cache.keys import embed_cache_key

EMBED_HTML = '<blockquote class="twitter-tweet"><a href="https://twitter.com/jack/status/20"></a></blockquote>'


class FakeMetaStore:
    """Dict-backed entry meta store: {entry_id: {key: (value, form_id)}}."""

    def __init__(self) -> None:
        self.data: dict[int, dict[str, tuple[str, int]]] = {}
        self.calls: list[tuple[str, int, str]] = []
        self.fail_deletes = False

    async def get(self, entry_id: int, key: str) -> str | None:
        self.calls.append(("get", entry_id, key))
        stored = self.data.get(entry_id, {}).get(key)
        return stored[0] if stored else None

    async def set(self, entry_id: int, key: str, value: str, form_id: int) -> bool:
        self.calls.append(("set", entry_id, key))
        self.data.setdefault(entry_id, {})[key] = (value, form_id)
        return True

    async def delete(self, entry_id: int, key: str) -> bool:
        self.calls.append(("delete", entry_id, key))
        if self.fail_deletes:
            return False
        self.data.get(entry_id, {}).pop(key, None)
        return True

    def seed(self, entry_id: int, key: str, value: str, form_id: int = 1) -> None:
        self.data.setdefault(entry_id, {})[key] = (value, form_id)

    def value(self, entry_id: int, key: str) -> str | None:
        stored = self.data.get(entry_id, {}).get(key)
        return stored[0] if stored else None


class FakeResolver:
    """Resolver returning a fixed result and recording every URL it was asked for."""

    def __init__(self, result: str | None = EMBED_HTML) -> None:
        self.result = result
        self.urls: list[str] = []

    async def fetch_embed(self, url: str) -> str | None:
        self.urls.append(url)
        return self.result


@pytest.fixture(autouse=True)
def _fresh_settings() -> Iterator[None]:
    """Drop cached settings around each test so monkeypatched env applies."""
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def meta_store() -> FakeMetaStore:
    return FakeMetaStore()


@pytest.fixture
def resolver() -> FakeResolver:
    return FakeResolver()


@pytest.fixture
def gate(meta_store: FakeMetaStore, resolver: FakeResolver) -> EmbedCacheGate:
    """EmbedCacheGate over the fake store and resolver."""
    return EmbedCacheGate(store=meta_store, resolver=resolver, key_builder=embed_cache_key)


@pytest.fixture
async def client(
    meta_store: FakeMetaStore, resolver: FakeResolver
) -> AsyncIterator[AsyncClient]:
    """Async HTTP client against a fresh FastAPI app with fake store and resolver."""
    from embedgate.main import create_app

    app = create_app()
    app.dependency_overrides[get_meta_store] = lambda: meta_store
    app.dependency_overrides[get_content_resolver] = lambda: resolver
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac
