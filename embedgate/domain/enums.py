"""Domain enumerations for the embed cache gate."""

from enum import Enum


class ResolutionOutcome(str, Enum):
    """Terminal state of one resolve request.

    Every request ends in exactly one of these; there are no retry or
    intermediate states.
    """

    CACHE_HIT = "cache_hit"
    RESOLVED = "resolved"
    NOT_RESOLVABLE = "not_resolvable"

    @property
    def has_content(self) -> bool:
        """Return True when the outcome carries embed markup."""
        return self is not ResolutionOutcome.NOT_RESOLVABLE
