"""Embed resolution API schemas."""

from pydantic import BaseModel, Field

from embedgate.domain.enums import ResolutionOutcome


class ResolveEmbedRequest(BaseModel):
    """Request body for POST /embeds/resolve and /embeds/display."""

    url: str = Field(..., description="Tweet URL stored in the field")
    form_id: int = Field(..., gt=0)
    field_id: int = Field(..., gt=0)
    entry_id: int = Field(..., gt=0)


class ResolveEmbedResponse(BaseModel):
    """Embed resolution result.

    html is the embed when one is available, otherwise the raw URL.
    """

    outcome: ResolutionOutcome
    content: str | None = Field(default=None, description="Embed markup, null when not resolvable")
    html: str = Field(..., description="What to display: embed markup, or the submitted URL")


class DisplayEmbedResponse(BaseModel):
    """What to show for a field value: embed markup, or the value unchanged."""

    html: str
