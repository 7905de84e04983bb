"""Field validation API: run the tweet field check on a submitted value."""

from typing import Annotated

from fastapi import APIRouter, Depends

from embedgate.api.v1.dependencies import get_url_validator
from embedgate.application.services.url_validator import TweetUrlValidator
from embedgate.schemas.field import ValidateFieldRequest, ValidateFieldResponse

router = APIRouter()


@router.post("/validate", response_model=ValidateFieldResponse)
def validate_field(
    body: ValidateFieldRequest,
    validator: Annotated[TweetUrlValidator, Depends(get_url_validator)],
) -> ValidateFieldResponse:
    """Return valid/message for the value; rejection is a 200 with valid=false."""
    result = validator.check(body.value)
    return ValidateFieldResponse(valid=result.valid, message=result.message)
