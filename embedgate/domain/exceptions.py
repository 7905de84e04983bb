"""Domain exceptions for the embed cache gate.

Only genuinely exceptional conditions live here. A failed oEmbed lookup
and a cache miss are normal outcomes (see ResolutionOutcome) and are never
raised. Presentation layer maps these exceptions to HTTP responses in
exception handlers.
"""

from typing import Any


class EmbedGateException(Exception):
    """Base exception for all embed gate errors.

    Attributes:
        message: Human-readable error description.
        error_code: Machine-readable error code.
        details: Additional error context (e.g. field, entry_id).
    """

    def __init__(
        self,
        message: str,
        error_code: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        """Initialize the exception.

        Args:
            message: Human-readable error description.
            error_code: Optional machine-readable code; defaults to class name.
            details: Optional dict of extra context.
        """
        self.message = message
        self.error_code = error_code or self.__class__.__name__
        self.details = details or {}
        super().__init__(self.message)

    def to_dict(self) -> dict[str, Any]:
        """Serialize for JSON error responses."""
        return {
            "error": self.error_code,
            "message": self.message,
            "details": self.details,
        }


class ValidationException(EmbedGateException):
    """Raised when a submitted field value is rejected by its validator."""

    def __init__(self, message: str, field: str | None = None) -> None:
        """Initialize with message and optional field name.

        Args:
            message: User-facing rejection message.
            field: Optional field identifier that failed validation.
        """
        details = {"field": field} if field else {}
        super().__init__(message, "VALIDATION_ERROR", details)


class AuthorizationException(EmbedGateException):
    """Raised when a caller presents an admin key that does not match."""

    def __init__(self, message: str = "Invalid admin key") -> None:
        super().__init__(message, "PERMISSION_DENIED")


class MetaStoreUnavailableException(EmbedGateException):
    """Raised when the configured entry meta store cannot be reached at wiring time."""

    def __init__(self, backend: str) -> None:
        super().__init__(
            message=f"Entry meta store backend {backend!r} is not available.",
            error_code="SERVICE_UNAVAILABLE",
            details={"backend": backend},
        )


class SqlNotConfiguredException(EmbedGateException):
    """Raised when the sql backend is selected but no engine could be created."""

    def __init__(self) -> None:
        super().__init__(
            message="This operation requires a SQL database that is not configured.",
            error_code="SERVICE_UNAVAILABLE",
        )


class CacheInvalidationException(EmbedGateException):
    """Raised when cached embeds for an updated entry could not all be deleted.

    The caller should retry the update event; until then the listed keys may
    still serve stale markup.
    """

    def __init__(self, entry_id: int, keys: list[str]) -> None:
        super().__init__(
            message=f"Could not clear {len(keys)} cached embed(s) for entry {entry_id}.",
            error_code="SERVICE_UNAVAILABLE",
            details={"entry_id": entry_id, "keys": keys},
        )
