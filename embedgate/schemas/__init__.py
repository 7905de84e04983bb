"""API request/response schemas (pydantic)."""

from embedgate.schemas.embed import (
    DisplayEmbedResponse,
    ResolveEmbedRequest,
    ResolveEmbedResponse,
)
from embedgate.schemas.entry import (
    EntryUpdatedRequest,
    EntryUpdatedResponse,
    FormFieldSchema,
    FormSchema,
)
from embedgate.schemas.field import ValidateFieldRequest, ValidateFieldResponse
from embedgate.schemas.health import HealthResponse

__all__ = [
    "DisplayEmbedResponse",
    "EntryUpdatedRequest",
    "EntryUpdatedResponse",
    "FormFieldSchema",
    "FormSchema",
    "HealthResponse",
    "ResolveEmbedRequest",
    "ResolveEmbedResponse",
    "ValidateFieldRequest",
    "ValidateFieldResponse",
]
