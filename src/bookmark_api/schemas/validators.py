"""
Validation functions for bookmark input.

These are pure functions over the raw request mapping. They are shared by the
create path (all fields supplied) and the partial-update path (only the
changed fields supplied): any field absent from the mapping is treated as
"not being changed" and skipped.
"""
import re
from collections.abc import Mapping
from typing import Any

from pydantic import AnyUrl, TypeAdapter, ValidationError

from bookmark_api.services.exceptions import (
    BookmarkValidationError,
    InvalidRatingError,
    InvalidTextFieldError,
    InvalidUrlError,
)

# Declaration order; also the order in which missing fields are reported.
BOOKMARK_FIELDS: tuple[str, ...] = ("title", "url", "description", "rating")

MIN_RATING = 1
MAX_RATING = 5

# Decimal integer as sent in a form-ish JSON string, e.g. "4" or " 4 "
INTEGER_PATTERN = re.compile(r"[+-]?\d+", re.ASCII)

# "scheme://" at the very start of the raw string
URL_PREFIX_PATTERN = re.compile(r"[A-Za-z][A-Za-z0-9+.-]*://", re.ASCII)

_url_adapter = TypeAdapter(AnyUrl)


def is_present(fields: Mapping[str, Any], key: str) -> bool:
    """A field is present when its key is supplied with a non-null value (0 counts)."""
    return fields.get(key) is not None


def find_missing_field(fields: Mapping[str, Any]) -> str | None:
    """Return the first required field (in declaration order) that is not present."""
    for key in BOOKMARK_FIELDS:
        if not is_present(fields, key):
            return key
    return None


def is_valid_url(value: Any) -> bool:
    """
    Check that value is an absolute URL with at least a scheme and a host.

    The raw string is checked as well as the parsed URL, because the raw string
    is what gets stored: it must start with `scheme://` and hold no whitespace.
    """
    if not isinstance(value, str) or not URL_PREFIX_PATTERN.match(value):
        return False
    if any(char.isspace() for char in value):
        return False
    try:
        url = _url_adapter.validate_python(value)
    except ValidationError:
        return False
    return bool(url.scheme and url.host)


def parse_rating(value: Any) -> int | None:
    """
    Parse a rating to an int, or return None if it is not an integer.

    Accepts ints, integral floats (4.0) and decimal-integer strings ("4").
    Booleans are rejected even though they are ints in Python.
    """
    if isinstance(value, bool):
        return None
    if isinstance(value, int):
        return value
    if isinstance(value, float):
        return int(value) if value.is_integer() else None
    if isinstance(value, str):
        text = value.strip()
        if INTEGER_PATTERN.fullmatch(text):
            return int(text)
    return None


def is_valid_rating(value: Any) -> bool:
    """Check that value parses as an integer between MIN_RATING and MAX_RATING."""
    rating = parse_rating(value)
    return rating is not None and MIN_RATING <= rating <= MAX_RATING


def coerce_rating(value: Any) -> int:
    """
    Convert a rating to the int that gets stored.

    Raises:
        InvalidRatingError: If the value is not a valid rating.
    """
    if not is_valid_rating(value):
        raise InvalidRatingError()
    return parse_rating(value)


def validate_bookmark_fields(fields: Mapping[str, Any]) -> BookmarkValidationError | None:
    """
    Validate whichever bookmark fields are present.

    Checks run in order url, rating, title, description and the first failure
    is returned. Absent fields are skipped, which makes this usable for both
    full creates and partial updates.

    Returns:
        The first validation error found, or None if all present fields are valid.
    """
    if is_present(fields, "url") and not is_valid_url(fields["url"]):
        return InvalidUrlError()

    if is_present(fields, "rating") and not is_valid_rating(fields["rating"]):
        return InvalidRatingError()

    if is_present(fields, "title"):
        title = fields["title"]
        if not isinstance(title, str) or not title.strip():
            return InvalidTextFieldError("title", "must be a non-empty string")

    if is_present(fields, "description") and not isinstance(fields["description"], str):
        return InvalidTextFieldError("description", "must be a string")

    return None
