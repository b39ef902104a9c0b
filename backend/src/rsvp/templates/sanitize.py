"""HTML sanitising helpers for user-supplied template fragments.

SECURITY: Every string that originates from an admin-edited template or a
guest's RSVP passes through one of these helpers before it is placed in an
email body. Text goes through nh3 (ammonia), which keeps harmless inline
markup and drops scripts, event handlers and unknown tags.
"""

from __future__ import annotations

import html
import re
from typing import Any
from urllib.parse import urlsplit

import nh3

ALLOWED_URL_SCHEMES = frozenset({"http", "https", "mailto"})

# Characters browsers drop from a URL before reading its scheme.
_URL_IGNORED_CHARS = re.compile(r"[\x00-\x20\x7f]+")

# Characters that could break out of a CSS value inside a style attribute.
UNSAFE_CSS_PATTERN = re.compile(r"[<>\"';{}\\]")


def sanitize_html(value: Any) -> str:
    """Return ``value`` as a string that is safe to insert as HTML content."""
    if value is None:
        return ""
    return nh3.clean(str(value))


def escape_attribute(value: str) -> str:
    """Escape quotes in already sanitised text for use inside an attribute."""
    return value.replace('"', "&quot;").replace("'", "&#x27;")


def sanitize_url(value: Any) -> str:
    """Return a URL that is safe to put in an ``href`` attribute.

    Relative references and http, https and mailto URLs are kept. Any other
    scheme (``javascript:``, ``data:`` ...) yields an empty string. The
    scheme is checked on the value a browser would see: entities decoded,
    control characters and whitespace removed.
    """
    if value is None:
        return ""
    cleaned = sanitize_html(str(value).strip())
    if not cleaned:
        return ""
    decoded = _URL_IGNORED_CHARS.sub("", html.unescape(cleaned))
    try:
        scheme = urlsplit(decoded).scheme.lower()
    except ValueError:
        return ""
    if scheme and scheme not in ALLOWED_URL_SCHEMES:
        return ""
    return escape_attribute(cleaned)


def sanitize_css_value(value: Any) -> str:
    """Return a theme value for a ``style`` attribute, or '' if it is unsafe."""
    if value is None:
        return ""
    text = str(value).strip()
    if UNSAFE_CSS_PATTERN.search(text):
        return ""
    return html.escape(text, quote=True)
