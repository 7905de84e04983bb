"""DTOs for embed resolution and field validation (no dependency on ORM or HTTP)."""

from dataclasses import dataclass

from embedgate.domain.enums import ResolutionOutcome


@dataclass(frozen=True)
class EmbedResult:
    """Result of one resolve request.

    content is None only when outcome is NOT_RESOLVABLE.
    """

    outcome: ResolutionOutcome
    content: str | None = None

    @classmethod
    def not_resolvable(cls) -> "EmbedResult":
        return cls(outcome=ResolutionOutcome.NOT_RESOLVABLE)

    def rendered(self, raw_value: str) -> str:
        """Return the embed markup, or raw_value when nothing was resolved."""
        if self.outcome.has_content and self.content:
            return self.content
        return raw_value


@dataclass(frozen=True)
class CachePolicy:
    """Whether a resolve request may read from and write to the embed cache."""

    use_cache: bool = True
    set_cache: bool = True


@dataclass(frozen=True)
class ValidationResult:
    """Accept/reject decision for a field value. message is empty when valid."""

    valid: bool
    message: str = ""
