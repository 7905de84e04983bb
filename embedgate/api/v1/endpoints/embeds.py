"""Embed API: validate a tweet URL, then resolve or display it through the embed cache gate."""

from typing import Annotated

from fastapi import APIRouter, Depends

from embedgate.api.v1.dependencies import (
    get_cache_policy,
    get_embed_cache_gate,
    get_url_validator,
)
from embedgate.application.dtos.embed import CachePolicy
from embedgate.application.services.embed_cache_gate import EmbedCacheGate
from embedgate.application.services.url_validator import TweetUrlValidator
from embedgate.domain.value_objects import EntryIdentity
from embedgate.schemas.embed import (
    DisplayEmbedResponse,
    ResolveEmbedRequest,
    ResolveEmbedResponse,
)

router = APIRouter()


@router.post("/resolve", response_model=ResolveEmbedResponse)
async def resolve_embed(
    body: ResolveEmbedRequest,
    validator: Annotated[TweetUrlValidator, Depends(get_url_validator)],
    policy: Annotated[CachePolicy, Depends(get_cache_policy)],
    gate: Annotated[EmbedCacheGate, Depends(get_embed_cache_gate)],
) -> ResolveEmbedResponse:
    """Return the embed for a field value, falling back to the raw URL.

    Invalid URLs are rejected with 400 before the cache or resolver is
    touched. Admin callers may pass ?cache or ?nocache to bypass the cache.
    """
    validator.ensure_valid(body.url)
    identity = EntryIdentity(
        form_id=body.form_id,
        field_id=body.field_id,
        entry_id=body.entry_id,
    )
    result = await gate.resolve(
        body.url,
        identity,
        use_cache=policy.use_cache,
        set_cache=policy.set_cache,
    )
    return ResolveEmbedResponse(
        outcome=result.outcome,
        content=result.content,
        html=result.rendered(body.url),
    )


@router.post("/display", response_model=DisplayEmbedResponse)
async def display_embed(
    body: ResolveEmbedRequest,
    validator: Annotated[TweetUrlValidator, Depends(get_url_validator)],
    policy: Annotated[CachePolicy, Depends(get_cache_policy)],
    gate: Annotated[EmbedCacheGate, Depends(get_embed_cache_gate)],
) -> DisplayEmbedResponse:
    """Return what to render for a stored field value.

    Values that are not tweet URLs are shown unchanged and never reach the
    cache or resolver.
    """
    if not validator.check(body.url).valid:
        return DisplayEmbedResponse(html=body.url)
    identity = EntryIdentity(
        form_id=body.form_id,
        field_id=body.field_id,
        entry_id=body.entry_id,
    )
    html = await gate.display(body.url, identity, policy)
    return DisplayEmbedResponse(html=html or body.url)
