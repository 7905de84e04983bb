"""Tests for WebsiteUrlValidator and TweetUrlValidator."""

import pytest

from embedgate.application.services.url_validator import (
    TWEET_URL_MESSAGE,
    WEBSITE_URL_MESSAGE,
    TweetUrlValidator,
    WebsiteUrlValidator,
    extract_status_id,
)
from embedgate.domain.exceptions import ValidationException


class TestTweetUrlValidator:
    """Tweet URL shape: http(s)://[www.]twitter.com/.../status/<digits>[/]."""

    @pytest.mark.parametrize(
        "url",
        [
            "https://twitter.com/user/status/123456",
            "http://twitter.com/user/status/1",
            "https://www.twitter.com/user/status/123456/",
            "HTTPS://TWITTER.COM/User/Status/987",
            "https://twitter.com/i/web/status/1445078208190291973",
        ],
    )
    def test_accepts_tweet_urls(self, url: str) -> None:
        v = TweetUrlValidator()
        v.validate(url)
        assert v.failed_validation is False
        assert v.validation_message == ""

    @pytest.mark.parametrize(
        "url",
        [
            "https://example.com/status/abc",
            "https://twitter.com/user/status/abc",
            "https://twitter.com/user",
            "https://example.com/user/status/123",
            "https://evil.example/https://twitter.com/u/status/1",
            "https://evil.example/?next=https://twitter.com/u/status/1",
            "https://twitter.com.evil.example/u/status/1",
            "https://twitter.com@evil.example/u/status/1",
            "https://twitter.com/u/status/1/extra",
            "https://twitter.com/u/status/1?s=20",
        ],
    )
    def test_rejects_non_tweet_urls(self, url: str) -> None:
        v = TweetUrlValidator()
        v.validate(url)
        assert v.failed_validation is True
        assert v.validation_message == TWEET_URL_MESSAGE

    def test_rejects_empty_string(self) -> None:
        """Empty passes the website stage but no status id can be captured."""
        result = TweetUrlValidator().check("")
        assert result.valid is False
        assert result.message

    def test_rejects_none(self) -> None:
        assert TweetUrlValidator().check(None).valid is False

    def test_parent_failure_is_not_overridden(self) -> None:
        """A value failing the website check keeps the website message."""
        v = TweetUrlValidator()
        v.validate("not a url")
        assert v.failed_validation is True
        assert v.validation_message == WEBSITE_URL_MESSAGE

    def test_state_resets_between_calls(self) -> None:
        v = TweetUrlValidator()
        v.validate("https://example.com/status/abc")
        assert v.failed_validation is True
        v.validate("https://twitter.com/user/status/5")
        assert v.failed_validation is False
        assert v.validation_message == ""

    def test_ensure_valid_raises_validation_exception(self) -> None:
        with pytest.raises(ValidationException) as exc_info:
            TweetUrlValidator(field="url").ensure_valid("https://example.com/status/abc")
        assert exc_info.value.error_code == "VALIDATION_ERROR"
        assert exc_info.value.message == TWEET_URL_MESSAGE
        assert exc_info.value.details == {"field": "url"}

    def test_ensure_valid_passes_for_tweet(self) -> None:
        TweetUrlValidator().ensure_valid("https://twitter.com/user/status/123456")


class TestWebsiteUrlValidator:
    """Website URL check: empty allowed, otherwise absolute http(s) URL."""

    def test_empty_passes(self) -> None:
        assert WebsiteUrlValidator().check("").valid is True

    def test_any_http_url_passes(self) -> None:
        assert WebsiteUrlValidator().check("https://example.com/status/abc").valid is True

    @pytest.mark.parametrize("value", ["example.com", "ftp://example.com/x", "https://"])
    def test_rejects_non_website_values(self, value: str) -> None:
        result = WebsiteUrlValidator().check(value)
        assert result.valid is False
        assert result.message == WEBSITE_URL_MESSAGE


def test_extract_status_id() -> None:
    assert extract_status_id("https://twitter.com/user/status/123456/") == "123456"
    assert extract_status_id("https://example.com/status/abc") is None
    assert extract_status_id("") is None


def test_extract_status_id_ignores_embedded_tweet_urls() -> None:
    assert extract_status_id("https://evil.example/?next=https://twitter.com/u/status/1") is None
    assert extract_status_id("  https://twitter.com/u/status/7  ") == "7"
