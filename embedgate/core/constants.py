"""Core constants: embed cache key structure and shared literal values.

Single source of truth for cache key structure. Used by
infrastructure cache key builders and the entry meta stores.
"""

# Embed cache key: tweet_output_<form_id>:<field_id>
EMBED_CACHE_PREFIX = "tweet_output_"

# Delimiter between form_id and field_id
CACHE_KEY_SEP = ":"

# Redis hash holding all meta for one entry: entry_meta:<entry_id>
ENTRY_META_HASH_PREFIX = "entry_meta"

# Field type whose values are rendered as embeds
EMBED_FIELD_TYPE = "tweet"

META_STORE_BACKENDS = frozenset({"redis", "sql"})
