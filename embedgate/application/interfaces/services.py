"""Service interfaces (ports) for the application layer.

Protocols define the collaborators the embed cache gate consumes (DIP).
Implementations live in embedgate.infrastructure.
"""

from __future__ import annotations

from typing import Protocol


# Content resolver interface
class IContentResolver(Protocol):
    """Protocol for the external URL-to-embed lookup (e.g. oEmbed)."""

    async def fetch_embed(self, url: str) -> str | None:
        """Return rendered embed markup, or None when the lookup failed.

        Called at most once per resolve request; implementations own their
        own timeout behaviour and must not raise for provider failures.
        """


# Entry meta store interface
class IEntryMetaStore(Protocol):
    """Protocol for per-entry key/value metadata storage (the embed cache)."""

    async def get(self, entry_id: int, key: str) -> str | None:
        """Return stored value for (entry_id, key), or None when absent."""

    async def set(self, entry_id: int, key: str, value: str, form_id: int) -> bool:
        """Store value under (entry_id, key), recording form_id as its scope.

        Returns False when the store could not write; the caller carries on
        uncached.
        """

    async def delete(self, entry_id: int, key: str) -> bool:
        """Remove (entry_id, key). Absent keys count as removed.

        Returns False when the store could not run the delete, so the value
        may still be served.
        """
