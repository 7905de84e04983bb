"""Entry meta repository: SQL implementation of the entry meta store."""

from __future__ import annotations

from collections.abc import Callable
from contextlib import AbstractAsyncContextManager
from typing import Any

from sqlalchemy import delete, select
from sqlalchemy.dialects import postgresql, sqlite
from sqlalchemy.ext.asyncio import AsyncSession

from embedgate.infrastructure.persistence.models.entry_meta import EntryMeta


class EntryMetaRepository:
    """Entry meta store backed by the entry_meta table.

    Writes upsert on (entry_id, meta_key) so re-storing the same embed is
    harmless. Runs inside the caller's session; the transaction boundary
    belongs to transactional_session().
    """

    def __init__(self, db: AsyncSession) -> None:
        self.db = db

    async def get(self, entry_id: int, key: str) -> str | None:
        """Return meta_value for (entry_id, key), or None."""
        result = await self.db.execute(
            select(EntryMeta.meta_value).where(
                EntryMeta.entry_id == entry_id,
                EntryMeta.meta_key == key,
            )
        )
        return result.scalar_one_or_none()

    async def set(self, entry_id: int, key: str, value: str, form_id: int) -> bool:
        """Insert or overwrite (entry_id, key) with value. Database errors propagate."""
        values: dict[str, Any] = {
            "entry_id": entry_id,
            "form_id": form_id,
            "meta_key": key,
            "meta_value": value,
        }
        dialect = self.db.get_bind().dialect.name
        if dialect == "postgresql":
            stmt = postgresql.insert(EntryMeta).values(**values)
        elif dialect == "sqlite":
            stmt = sqlite.insert(EntryMeta).values(**values)
        else:
            await self._set_portable(entry_id, key, value, form_id)
            return True
        stmt = stmt.on_conflict_do_update(
            index_elements=[EntryMeta.entry_id, EntryMeta.meta_key],
            set_={"meta_value": value, "form_id": form_id},
        )
        await self.db.execute(stmt)
        return True

    async def _set_portable(self, entry_id: int, key: str, value: str, form_id: int) -> None:
        """Select-then-write fallback for dialects without ON CONFLICT."""
        result = await self.db.execute(
            select(EntryMeta).where(
                EntryMeta.entry_id == entry_id,
                EntryMeta.meta_key == key,
            )
        )
        row = result.scalar_one_or_none()
        if row is None:
            self.db.add(
                EntryMeta(entry_id=entry_id, form_id=form_id, meta_key=key, meta_value=value)
            )
        else:
            row.meta_value = value
            row.form_id = form_id
        await self.db.flush()

    async def delete(self, entry_id: int, key: str) -> bool:
        """Delete (entry_id, key). No-op when absent. Database errors propagate."""
        await self.db.execute(
            delete(EntryMeta).where(
                EntryMeta.entry_id == entry_id,
                EntryMeta.meta_key == key,
            )
        )
        return True


SessionFactory = Callable[[], AbstractAsyncContextManager[AsyncSession]]


class SessionScopedEntryMetaStore:
    """Entry meta store that opens one short transaction per call.

    No connection stays checked out between store calls, so none is held
    while the gate waits on the resolver.
    """

    def __init__(self, session_factory: SessionFactory) -> None:
        self._session_factory = session_factory

    async def get(self, entry_id: int, key: str) -> str | None:
        async with self._session_factory() as session:
            return await EntryMetaRepository(session).get(entry_id, key)

    async def set(self, entry_id: int, key: str, value: str, form_id: int) -> bool:
        async with self._session_factory() as session:
            return await EntryMetaRepository(session).set(entry_id, key, value, form_id)

    async def delete(self, entry_id: int, key: str) -> bool:
        async with self._session_factory() as session:
            return await EntryMetaRepository(session).delete(entry_id, key)
