"""Presentation-layer dependency injection (composition root)."""

from embedgate.api.v1.dependencies.auth import get_cache_policy, is_privileged
from embedgate.api.v1.dependencies.embed import (
    get_content_resolver,
    get_embed_cache_gate,
    get_meta_store,
    get_url_validator,
)

__all__ = [
    "get_cache_policy",
    "get_content_resolver",
    "get_embed_cache_gate",
    "get_meta_store",
    "get_url_validator",
    "is_privileged",
]
