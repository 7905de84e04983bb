"""Entry update (cache invalidation) API schemas."""

from pydantic import BaseModel, Field


class FormFieldSchema(BaseModel):
    """Field definition on the form that owns the updated entry."""

    id: int = Field(..., gt=0)
    type: str = ""


class FormSchema(BaseModel):
    """Form definition as sent by the forms framework."""

    id: int = Field(..., gt=0)
    fields: list[FormFieldSchema] = Field(default_factory=list)


class EntryUpdatedRequest(BaseModel):
    """Request body for POST /entries/{entry_id}/updated."""

    form: FormSchema


class EntryUpdatedResponse(BaseModel):
    """Result of the invalidation sweep."""

    entry_id: int
    form_id: int
    keys_cleared: int
