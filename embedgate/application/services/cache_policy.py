"""Privilege-gated cache bypass policy for embed resolution."""

from embedgate.application.dtos.embed import CachePolicy


def resolve_cache_policy(
    privileged: bool,
    *,
    force_cache: bool = False,
    no_cache: bool = False,
) -> CachePolicy:
    """Return the cache policy for one request.

    Non-privileged callers always read and write the cache; the bypass flags
    are ignored for them. For privileged callers:

    - no_cache: resolve fresh and leave the stored value untouched.
    - force_cache: resolve fresh and overwrite the stored value.
    - neither: normal cached behaviour.

    no_cache wins when both flags are sent.
    """
    if not privileged:
        return CachePolicy()
    if no_cache:
        return CachePolicy(use_cache=False, set_cache=False)
    if force_cache:
        return CachePolicy(use_cache=False, set_cache=True)
    return CachePolicy()
