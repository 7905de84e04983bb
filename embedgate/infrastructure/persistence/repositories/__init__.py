"""SQL repositories implementing application ports."""

from embedgate.infrastructure.persistence.repositories.entry_meta_repo import (
    EntryMetaRepository,
    SessionScopedEntryMetaStore,
)

__all__ = ["EntryMetaRepository", "SessionScopedEntryMetaStore"]
