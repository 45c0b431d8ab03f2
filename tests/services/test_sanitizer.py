"""Tests for output sanitization of bookmark text fields."""
import pytest
from bookmark_fixtures import make_malicious_bookmark, make_sanitized_bookmark

from bookmark_api.schemas.bookmark import BookmarkResponse
from bookmark_api.services.sanitizer import sanitize_bookmark, sanitize_text


def test_sanitize_text_escapes_script_tags() -> None:
    """Disallowed tags are escaped, not executed and not silently dropped."""
    assert sanitize_text("<script>alert(1)</script>") == "&lt;script&gt;alert(1)&lt;/script&gt;"


def test_sanitize_text_drops_event_handler_attributes() -> None:
    """Allowed tags keep allowlisted attributes only."""
    cleaned = sanitize_text('<img src="https://example.com/a.png" onerror="alert(1)">')
    assert "onerror" not in cleaned
    assert 'src="https://example.com/a.png"' in cleaned


def test_sanitize_text_drops_javascript_links() -> None:
    """Links with non-allowlisted protocols lose their href."""
    cleaned = sanitize_text('<a href="javascript:alert(1)">click</a>')
    assert "javascript:" not in cleaned
    assert "click" in cleaned


def test_sanitize_text_keeps_plain_text_and_benign_markup() -> None:
    assert sanitize_text("Just words") == "Just words"
    assert sanitize_text("<b>bold</b> and <em>em</em>") == "<b>bold</b> and <em>em</em>"


def test_sanitize_text_strips_comments() -> None:
    assert sanitize_text("a<!-- hidden -->b") == "ab"


def test_sanitize_text_empty_string() -> None:
    assert sanitize_text("") == ""


@pytest.mark.parametrize(
    "raw",
    [
        'Malicious<script>dfasd</script> <img src="x.png" onerror="alert(1)">',
        "<scr<script>ipt>alert(1)</scr</script>ipt>",
        "<script>unclosed",
        "<b>unclosed bold",
        "<p><em>misnested</p></em>",
        "&lt;script&gt; already escaped &amp; done",
        "Tom & Jerry < Spike > cat",
        "&#60;script&#62;",
        "<svg onload=alert(1)>",
        "<iframe src='javascript:alert(1)'></iframe>",
        '<a href="javascript:alert(1)">x</a>',
        '<a href="https://example.com" onclick="evil()">ok</a>',
        "stray <!-- comment start",
        "a<!-- hidden -->b",
        "<img src=x onerror=alert(1)//",
        "<STYLE>body{}</STYLE>",
        '"><script>alert(1)</script>',
        "<div><span>nested <i>tags</i></span></div>",
        "line one<br>line two<br/>",
        "",
    ],
)
def test_sanitize_text_is_idempotent(raw: str) -> None:
    """Sanitizing sanitized text changes nothing."""
    once = sanitize_text(raw)
    assert sanitize_text(once) == once


def test_sanitize_bookmark_matches_expected_output() -> None:
    """The malicious fixture sanitizes to its known-safe counterpart."""
    bookmark = BookmarkResponse(**make_malicious_bookmark())
    assert sanitize_bookmark(bookmark).model_dump() == make_sanitized_bookmark()


def test_sanitize_bookmark_leaves_other_fields_and_input_alone() -> None:
    """Only title and description change; the input object is not mutated."""
    malicious = make_malicious_bookmark()
    bookmark = BookmarkResponse(**malicious)

    sanitized = sanitize_bookmark(bookmark)

    assert sanitized.id == bookmark.id
    assert sanitized.url == bookmark.url
    assert sanitized.rating == bookmark.rating
    assert bookmark.title == malicious["title"]
    assert bookmark.description == malicious["description"]
