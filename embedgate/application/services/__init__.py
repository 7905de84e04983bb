"""Application services: embed cache gate, cache policy, field validators."""

from embedgate.application.services.cache_policy import resolve_cache_policy
from embedgate.application.services.embed_cache_gate import EmbedCacheGate
from embedgate.application.services.url_validator import (
    TweetUrlValidator,
    WebsiteUrlValidator,
    extract_status_id,
)

__all__ = [
    "EmbedCacheGate",
    "TweetUrlValidator",
    "WebsiteUrlValidator",
    "extract_status_id",
    "resolve_cache_policy",
]
