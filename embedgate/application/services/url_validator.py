"""Field value validators for the embed field (website URL, then tweet URL shape).

Validators keep the forms-framework contract: validate() sets
failed_validation and validation_message instead of raising, so the caller
can surface the message as a form error. check() and ensure_valid() wrap
that for callers that want a result object or an exception.
"""

from __future__ import annotations

import re
from urllib.parse import urlparse

from embedgate.application.dtos.embed import ValidationResult
from embedgate.domain.exceptions import ValidationException

WEBSITE_URL_MESSAGE = "Please enter a valid Website URL (e.g. https://example.com)."
TWEET_URL_MESSAGE = "Not a valid Tweet URL."

# Matched against the whole value: the host is fixed, and a tweet URL
# embedded in some other URL's path or query is not a tweet URL.
_TWEET_URL_RE = re.compile(
    r"https?://(?:www\.)?twitter\.com/[^\s?#]*?/status/(\d+)/?",
    re.IGNORECASE,
)


def extract_status_id(value: str | None) -> str | None:
    """Return the status identifier captured from a tweet URL, or None."""
    if not value:
        return None
    match = _TWEET_URL_RE.fullmatch(value.strip())
    return match.group(1) if match else None


class WebsiteUrlValidator:
    """Website field check: a non-empty value must be an absolute http(s) URL.

    Empty values pass; whether the field is required is enforced elsewhere.
    """

    def __init__(self, field: str | None = None) -> None:
        self.field = field
        self.failed_validation = False
        self.validation_message = ""

    def _fail(self, message: str) -> None:
        self.failed_validation = True
        self.validation_message = message

    def validate(self, value: str | None) -> None:
        """Reset state, then flag value if it is not a usable website URL."""
        self.failed_validation = False
        self.validation_message = ""
        if not value:
            return
        parsed = urlparse(value.strip())
        if parsed.scheme.lower() not in {"http", "https"} or not parsed.netloc:
            self._fail(WEBSITE_URL_MESSAGE)

    def check(self, value: str | None) -> ValidationResult:
        """Run validate() and return the decision as a ValidationResult."""
        self.validate(value)
        if self.failed_validation:
            return ValidationResult(valid=False, message=self.validation_message)
        return ValidationResult(valid=True)

    def ensure_valid(self, value: str | None) -> None:
        """Raise ValidationException with the rejection message when value fails."""
        result = self.check(value)
        if not result.valid:
            raise ValidationException(result.message, field=self.field)


class TweetUrlValidator(WebsiteUrlValidator):
    """Tweet field check: website URL rules first, then the status URL shape.

    Accepts http(s)://[www.]twitter.com/<anything>/status/<digits>[/],
    case-insensitive. Empty input fails here even though the website stage
    lets it through, because no status id can be captured.
    """

    def validate(self, value: str | None) -> None:
        super().validate(value)

        if self.failed_validation:
            return

        if extract_status_id(value) is None:
            self._fail(TWEET_URL_MESSAGE)
