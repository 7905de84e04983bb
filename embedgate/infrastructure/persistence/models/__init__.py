"""ORM models. Importing this package registers all tables on Base.metadata."""

from embedgate.infrastructure.persistence.models.entry_meta import EntryMeta

__all__ = ["EntryMeta"]
