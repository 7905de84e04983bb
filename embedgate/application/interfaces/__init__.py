"""Application ports (Protocols)."""

from embedgate.application.interfaces.services import IContentResolver, IEntryMetaStore

__all__ = ["IContentResolver", "IEntryMetaStore"]
