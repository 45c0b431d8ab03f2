"""
Output sanitization for bookmark text fields.

Titles and descriptions are stored exactly as clients sent them. Before a
record leaves the API, markup in those two fields is neutralized:
disallowed tags (e.g. <script>) become escaped text, non-allowlisted
attributes (e.g. onerror) are dropped, and benign markup such as
<img src="..."> survives. Entities already escaped are left alone, so
sanitizing twice gives the same result as sanitizing once.
"""
from bleach.sanitizer import Cleaner

from bookmark_api.schemas.bookmark import BookmarkResponse

ALLOWED_TAGS = frozenset({
    "a",
    "abbr",
    "b",
    "blockquote",
    "br",
    "code",
    "del",
    "div",
    "em",
    "h1",
    "h2",
    "h3",
    "h4",
    "h5",
    "h6",
    "hr",
    "i",
    "img",
    "ins",
    "li",
    "ol",
    "p",
    "pre",
    "s",
    "small",
    "span",
    "strong",
    "sub",
    "sup",
    "u",
    "ul",
})

ALLOWED_ATTRIBUTES = {
    "a": ["href", "title", "target"],
    "abbr": ["title"],
    "img": ["src", "alt", "title", "width", "height"],
}

ALLOWED_PROTOCOLS = frozenset({"http", "https", "mailto", "tel"})

_cleaner = Cleaner(
    tags=ALLOWED_TAGS,
    attributes=ALLOWED_ATTRIBUTES,
    protocols=ALLOWED_PROTOCOLS,
    strip=False,
    strip_comments=True,
)


def sanitize_text(value: str) -> str:
    """Neutralize markup in a single text value."""
    if not value:
        return value
    return _cleaner.clean(value)


def sanitize_bookmark(bookmark: BookmarkResponse) -> BookmarkResponse:
    """Return a copy of the bookmark with `title` and `description` sanitized."""
    return bookmark.model_copy(
        update={
            "title": sanitize_text(bookmark.title),
            "description": sanitize_text(bookmark.description),
        },
    )
