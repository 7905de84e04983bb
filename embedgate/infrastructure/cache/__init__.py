"""Cache: embed cache key builders and the Redis entry meta store.

Key format lives in keys.py; RedisEntryMetaStore uses embedgate.core.config.
"""

from embedgate.infrastructure.cache.keys import embed_cache_key, entry_meta_hash_key
from embedgate.infrastructure.cache.redis_meta_store import RedisEntryMetaStore

__all__ = [
    "RedisEntryMetaStore",
    "embed_cache_key",
    "entry_meta_hash_key",
]
