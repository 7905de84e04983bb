"""Embed cache gate: fetch-or-populate-or-serve for embed field values.

Sits in front of the external content resolver. Cached markup is stored in
the per-entry meta store under a key derived from (form_id, field_id), so
full addressing is entry_id -> cache key -> content. A failed lookup is
never cached; every later request retries the resolver.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from typing import TYPE_CHECKING

from embedgate.application.dtos.embed import CachePolicy, EmbedResult
from embedgate.domain.entities.form import EmbedFieldType, FormEntity
from embedgate.domain.enums import ResolutionOutcome
from embedgate.domain.exceptions import CacheInvalidationException

if TYPE_CHECKING:
    from embedgate.application.interfaces.services import (
        IContentResolver,
        IEntryMetaStore,
    )
    from embedgate.domain.value_objects.core import EntryIdentity

logger = logging.getLogger(__name__)

CacheKeyBuilder = Callable[[int, int], str]


class EmbedCacheGate:
    """Resolves embed markup for one field value, caching it per entry.

    Each resolve ends in exactly one outcome: CACHE_HIT, RESOLVED (stored
    when the policy allows) or NOT_RESOLVABLE. invalidate() sweeps every
    embed-type field of a form for one entry.
    """

    def __init__(
        self,
        store: IEntryMetaStore,
        resolver: IContentResolver,
        key_builder: CacheKeyBuilder,
        field_type: EmbedFieldType | None = None,
    ) -> None:
        self._store = store
        self._resolver = resolver
        self._key_builder = key_builder
        self.field_type = field_type or EmbedFieldType()

    def cache_key(self, form_id: int, field_id: int) -> str:
        """Return the meta key the embed for (form_id, field_id) is stored under."""
        return self._key_builder(form_id, field_id)

    async def resolve(
        self,
        raw_value: str,
        identity: EntryIdentity,
        use_cache: bool = True,
        set_cache: bool = True,
    ) -> EmbedResult:
        """Return cached embed markup, or resolve, store and return it.

        Args:
            raw_value: URL to resolve (already validated by the caller).
            identity: (form_id, field_id, entry_id) scoping the cache entry.
            use_cache: Read the stored value first; a non-empty hit is returned
                without calling the resolver.
            set_cache: Store freshly resolved markup before returning it.

        Returns:
            EmbedResult; content is None when the resolver failed.
        """
        meta_key = self.cache_key(identity.form_id, identity.field_id)

        if use_cache:
            cached_output = await self._store.get(identity.entry_id, meta_key)
            if cached_output:
                logger.debug("Embed cache HIT: entry=%s key=%s", identity.entry_id, meta_key)
                return EmbedResult(outcome=ResolutionOutcome.CACHE_HIT, content=cached_output)
            logger.debug("Embed cache MISS: entry=%s key=%s", identity.entry_id, meta_key)

        content = await self._resolver.fetch_embed(raw_value)

        if not content:
            logger.info(
                "Embed not resolvable: entry=%s key=%s url=%s",
                identity.entry_id,
                meta_key,
                raw_value,
            )
            return EmbedResult.not_resolvable()

        if set_cache:
            if await self._store.set(identity.entry_id, meta_key, content, identity.form_id):
                logger.debug("Embed cache SET: entry=%s key=%s", identity.entry_id, meta_key)
            else:
                logger.warning("Embed cache SET failed: entry=%s key=%s", identity.entry_id, meta_key)

        return EmbedResult(outcome=ResolutionOutcome.RESOLVED, content=content)

    async def display(
        self,
        raw_value: str | None,
        identity: EntryIdentity,
        policy: CachePolicy | None = None,
    ) -> str | None:
        """Return embed markup when resolvable, otherwise raw_value unchanged.

        Empty values are returned as-is without touching store or resolver.
        """
        if not raw_value:
            return raw_value
        policy = policy or CachePolicy()
        result = await self.resolve(
            raw_value,
            identity,
            use_cache=policy.use_cache,
            set_cache=policy.set_cache,
        )
        return result.rendered(raw_value)

    async def invalidate(self, form: FormEntity, entry_id: int) -> int:
        """Delete cached embeds for every embed-type field of form on entry_id.

        Runs after an entry update regardless of which values changed.
        Deleting an absent key is a no-op. Every key is attempted even when
        an earlier delete fails.

        Returns:
            Number of cache keys swept.

        Raises:
            CacheInvalidationException: If the store could not delete one or
                more keys; the update event should be retried.
        """
        fields = form.fields_of_type(self.field_type.type)
        failed: list[str] = []
        for gf_field in fields:
            meta_key = self.cache_key(form.id, gf_field.id)
            if not await self._store.delete(entry_id, meta_key):
                failed.append(meta_key)
        if failed:
            logger.error(
                "Embed cache INVALIDATE failed: form=%s entry=%s keys=%s",
                form.id,
                entry_id,
                failed,
            )
            raise CacheInvalidationException(entry_id, failed)
        if fields:
            logger.info(
                "Embed cache INVALIDATE: form=%s entry=%s (%s keys)",
                form.id,
                entry_id,
                len(fields),
            )
        return len(fields)
