"""Tests for EntryMetaRepository on an in-memory SQLite database (aiosqlite)."""

from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

import pytest
from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.pool import StaticPool

from embedgate.application.services.embed_cache_gate import EmbedCacheGate
from embedgate.domain.entities.form import FormEntity, FormField
from embedgate.domain.enums import ResolutionOutcome
from embedgate.domain.value_objects import EntryIdentity
from embedgate.infrastructure.cache.keys import embed_cache_key
from embedgate.infrastructure.persistence.database import Base
from embedgate.infrastructure.persistence.models import EntryMeta
from embedgate.infrastructure.persistence.repositories import (
    EntryMetaRepository,
    SessionScopedEntryMetaStore,
)


@pytest.fixture
async def db_session() -> AsyncIterator[AsyncSession]:
    """Session on a fresh in-memory database with the entry_meta table."""
    engine = create_async_engine("sqlite+aiosqlite:///:memory:")
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    session_factory = async_sessionmaker(engine, expire_on_commit=False)
    async with session_factory() as session:
        yield session
    await engine.dispose()


@pytest.fixture
def repo(db_session: AsyncSession) -> EntryMetaRepository:
    return EntryMetaRepository(db_session)


async def test_get_missing_returns_none(repo: EntryMetaRepository) -> None:
    assert await repo.get(100, "tweet_output_1:2") is None


async def test_set_then_get(repo: EntryMetaRepository) -> None:
    await repo.set(100, "tweet_output_1:2", "<embed/>", form_id=1)
    assert await repo.get(100, "tweet_output_1:2") == "<embed/>"


async def test_set_twice_upserts_single_row(
    repo: EntryMetaRepository, db_session: AsyncSession
) -> None:
    await repo.set(100, "tweet_output_1:2", "<old/>", form_id=1)
    await repo.set(100, "tweet_output_1:2", "<new/>", form_id=1)
    count = await db_session.scalar(select(func.count()).select_from(EntryMeta))
    assert count == 1
    assert await repo.get(100, "tweet_output_1:2") == "<new/>"


async def test_rows_record_form_id(repo: EntryMetaRepository, db_session: AsyncSession) -> None:
    await repo.set(100, "tweet_output_3:2", "<embed/>", form_id=3)
    row = await db_session.scalar(select(EntryMeta).where(EntryMeta.entry_id == 100))
    assert row is not None
    assert row.form_id == 3


async def test_delete_is_scoped_and_idempotent(repo: EntryMetaRepository) -> None:
    await repo.set(100, "tweet_output_1:2", "<a/>", form_id=1)
    await repo.set(101, "tweet_output_1:2", "<b/>", form_id=1)
    await repo.delete(100, "tweet_output_1:2")
    await repo.delete(100, "tweet_output_1:2")
    assert await repo.get(100, "tweet_output_1:2") is None
    assert await repo.get(101, "tweet_output_1:2") == "<b/>"


async def test_gate_over_sql_store(repo: EntryMetaRepository) -> None:
    """Resolve, hit, and invalidate end to end on the SQL backend."""

    class _Resolver:
        calls = 0

        async def fetch_embed(self, url: str) -> str | None:
            _Resolver.calls += 1
            return "<blockquote/>"

    gate = EmbedCacheGate(store=repo, resolver=_Resolver(), key_builder=embed_cache_key)
    identity = EntryIdentity(form_id=1, field_id=2, entry_id=100)
    url = "https://twitter.com/jack/status/20"

    assert (await gate.resolve(url, identity)).outcome == ResolutionOutcome.RESOLVED
    assert (await gate.resolve(url, identity)).outcome == ResolutionOutcome.CACHE_HIT
    assert _Resolver.calls == 1

    await gate.invalidate(FormEntity(id=1, fields=[FormField(2, "tweet")]), 100)
    assert await repo.get(100, embed_cache_key(1, 2)) is None


async def test_session_scoped_store_holds_no_session_during_resolve() -> None:
    """Each store call runs in its own transaction; none is open while resolving."""
    engine = create_async_engine("sqlite+aiosqlite:///:memory:", poolclass=StaticPool)
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    session_factory = async_sessionmaker(engine, expire_on_commit=False)
    open_sessions = 0

    @asynccontextmanager
    async def counted_session() -> AsyncIterator[AsyncSession]:
        nonlocal open_sessions
        async with session_factory() as session:
            async with session.begin():
                open_sessions += 1
                try:
                    yield session
                finally:
                    open_sessions -= 1

    class _Resolver:
        seen_open: list[int] = []

        async def fetch_embed(self, url: str) -> str | None:
            _Resolver.seen_open.append(open_sessions)
            return "<blockquote/>"

    store = SessionScopedEntryMetaStore(counted_session)
    gate = EmbedCacheGate(store=store, resolver=_Resolver(), key_builder=embed_cache_key)
    identity = EntryIdentity(form_id=1, field_id=2, entry_id=100)

    result = await gate.resolve("https://twitter.com/jack/status/20", identity)

    assert result.outcome == ResolutionOutcome.RESOLVED
    assert _Resolver.seen_open == [0]
    assert await store.get(100, embed_cache_key(1, 2)) == "<blockquote/>"
    assert await store.delete(100, embed_cache_key(1, 2)) is True
    assert await store.get(100, embed_cache_key(1, 2)) is None
    await engine.dispose()
