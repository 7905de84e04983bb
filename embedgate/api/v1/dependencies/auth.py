"""Privilege and cache-bypass dependencies (composition root)."""

from __future__ import annotations

import hmac
from typing import Annotated

from fastapi import Depends, Query, Request

from embedgate.application.dtos.embed import CachePolicy
from embedgate.application.services.cache_policy import resolve_cache_policy
from embedgate.core.config import get_settings
from embedgate.domain.exceptions import AuthorizationException


def is_privileged(request: Request) -> bool:
    """Return True when the request carries the configured admin key.

    No header means an ordinary caller. A header that does not match (or
    any header while no admin key is configured) is rejected with 403.
    """
    settings = get_settings()
    presented = request.headers.get(settings.admin_key_header)
    if presented is None:
        return False
    expected = settings.admin_api_key.get_secret_value() if settings.admin_api_key else ""
    if not expected or not hmac.compare_digest(presented.encode(), expected.encode()):
        raise AuthorizationException()
    return True


def get_cache_policy(
    privileged: Annotated[bool, Depends(is_privileged)],
    cache: Annotated[
        str | None, Query(description="Admin only: resolve fresh and refresh the cache")
    ] = None,
    nocache: Annotated[
        str | None, Query(description="Admin only: resolve fresh without caching")
    ] = None,
) -> CachePolicy:
    """Cache policy from privilege and the presence of ?cache / ?nocache."""
    return resolve_cache_policy(
        privileged,
        force_cache=cache is not None,
        no_cache=nocache is not None,
    )
