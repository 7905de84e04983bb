"""Tests for resolve_cache_policy (privilege-gated cache bypass)."""

import pytest

from embedgate.application.dtos.embed import CachePolicy
from embedgate.application.services.cache_policy import resolve_cache_policy


@pytest.mark.parametrize(
    "force_cache, no_cache",
    [(False, False), (True, False), (False, True), (True, True)],
)
def test_unprivileged_callers_always_use_cache(force_cache: bool, no_cache: bool) -> None:
    policy = resolve_cache_policy(False, force_cache=force_cache, no_cache=no_cache)
    assert policy == CachePolicy(use_cache=True, set_cache=True)


def test_privileged_without_flags_uses_cache() -> None:
    assert resolve_cache_policy(True) == CachePolicy(use_cache=True, set_cache=True)


def test_privileged_force_cache_refreshes() -> None:
    policy = resolve_cache_policy(True, force_cache=True)
    assert policy == CachePolicy(use_cache=False, set_cache=True)


def test_privileged_no_cache_bypasses_entirely() -> None:
    policy = resolve_cache_policy(True, no_cache=True)
    assert policy == CachePolicy(use_cache=False, set_cache=False)


def test_no_cache_wins_over_force_cache() -> None:
    policy = resolve_cache_policy(True, force_cache=True, no_cache=True)
    assert policy == CachePolicy(use_cache=False, set_cache=False)
