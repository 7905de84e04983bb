"""Cache key builders. Single place for key format.

Key components are positive integers, so the separator can never appear
inside one and distinct (form_id, field_id) pairs never collide.
"""

from embedgate.core.constants import (
    CACHE_KEY_SEP,
    EMBED_CACHE_PREFIX,
    ENTRY_META_HASH_PREFIX,
)


def _validate_key_component(value: int, name: str) -> None:
    """Raise ValueError unless value is a positive int.

    Args:
        value: Integer component used in a cache key.
        name: Name of the component (for error message).

    Raises:
        ValueError: If value is not a positive integer.
    """
    if isinstance(value, bool) or not isinstance(value, int) or value <= 0:
        raise ValueError(f"Cache key component {name!r} must be a positive integer, got {value!r}")


def embed_cache_key(form_id: int, field_id: int) -> str:
    """Meta key for the cached embed of one field (form + field, not entry)."""
    _validate_key_component(form_id, "form_id")
    _validate_key_component(field_id, "field_id")
    return f"{EMBED_CACHE_PREFIX}{form_id}{CACHE_KEY_SEP}{field_id}"


def entry_meta_hash_key(entry_id: int) -> str:
    """Redis hash holding every meta key of one entry."""
    _validate_key_component(entry_id, "entry_id")
    return f"{ENTRY_META_HASH_PREFIX}{CACHE_KEY_SEP}{entry_id}"
