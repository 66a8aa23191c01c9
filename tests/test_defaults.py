# This project was developed with assistance from AI tools.
"""Tests for the status-code defaults table and media type helpers."""

import pytest
from pydantic import ValidationError

from problem_details.core.constants import PROBLEM_MEDIA_TYPE, is_problem_media_type
from problem_details.core.defaults import defaults_for


@pytest.mark.parametrize(
    ("status_code", "title", "link"),
    [
        (400, "Bad Request", "https://tools.ietf.org/html/rfc7231#section-6.5.1"),
        (401, "Unauthorized", "https://tools.ietf.org/html/rfc7235#section-3.1"),
        (403, "Forbidden", "https://tools.ietf.org/html/rfc7231#section-6.5.3"),
        (404, "Not Found", "https://tools.ietf.org/html/rfc7231#section-6.5.4"),
        (406, "Not Acceptable", "https://tools.ietf.org/html/rfc7231#section-6.5.6"),
        (409, "Conflict", "https://tools.ietf.org/html/rfc7231#section-6.5.8"),
        (415, "Unsupported Media Type", "https://tools.ietf.org/html/rfc7231#section-6.5.13"),
        (422, "Unprocessable Entity", "https://tools.ietf.org/html/rfc4918#section-11.2"),
        (
            500,
            "An error occurred while processing your request.",
            "https://tools.ietf.org/html/rfc7231#section-6.6.1",
        ),
    ],
)
def test_known_status_codes(status_code, title, link):
    """Every tabled status code has its title and RFC link."""
    data = defaults_for(status_code)
    assert data is not None
    assert data.title == title
    assert data.link == link


@pytest.mark.parametrize("status_code", [200, 302, 418, 429, 502, 503])
def test_unknown_status_codes_have_no_defaults(status_code):
    """Codes outside the table return None."""
    assert defaults_for(status_code) is None


def test_defaults_are_immutable():
    """Entries are frozen so a caller can't alter the shared table."""
    data = defaults_for(404)
    with pytest.raises(ValidationError):
        data.title = "Changed"
    assert defaults_for(404).title == "Not Found"


@pytest.mark.parametrize(
    "content_type",
    [
        PROBLEM_MEDIA_TYPE,
        "Application/Problem+JSON",
        "application/problem+json; charset=utf-8",
    ],
)
def test_is_problem_media_type_matches(content_type):
    """The problem media type matches regardless of case and parameters."""
    assert is_problem_media_type(content_type) is True


@pytest.mark.parametrize(
    "content_type",
    [None, "", "application/json", "text/plain", "application/problem+xml"],
)
def test_is_problem_media_type_rejects(content_type):
    """Other or missing content types do not match."""
    assert is_problem_media_type(content_type) is False
