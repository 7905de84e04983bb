"""Field validation API schemas."""

from pydantic import BaseModel, Field


class ValidateFieldRequest(BaseModel):
    """Request body for POST /fields/validate."""

    value: str | None = Field(default=None, description="Submitted field value")


class ValidateFieldResponse(BaseModel):
    """Accept/reject decision with the user-facing message on reject."""

    valid: bool
    message: str = ""
