"""Tests for template fragment sanitising."""

from __future__ import annotations

import sys
from pathlib import Path

import pytest

sys.path.append(str(Path(__file__).resolve().parents[1] / "backend" / "src"))

from rsvp.templates.sanitize import (  # noqa: E402
    escape_attribute,
    sanitize_css_value,
    sanitize_html,
    sanitize_url,
)


class TestSanitizeHtml:
    """Tests for sanitize_html."""

    def test_plain_text_unchanged(self) -> None:
        assert sanitize_html("Hello Ada") == "Hello Ada"

    def test_none_becomes_empty(self) -> None:
        assert sanitize_html(None) == ""

    def test_numbers_are_stringified(self) -> None:
        assert sanitize_html(3) == "3"

    def test_script_removed_with_content(self) -> None:
        result = sanitize_html("<script>alert(1)</script>hi")
        assert "<script" not in result
        assert "alert" not in result
        assert "hi" in result

    def test_inline_markup_kept(self) -> None:
        assert sanitize_html("<strong>bold</strong>") == "<strong>bold</strong>"

    def test_event_handlers_removed(self) -> None:
        result = sanitize_html('<b onclick="steal()">x</b>')
        assert "onclick" not in result
        assert "x" in result

    def test_placeholders_untouched(self) -> None:
        assert sanitize_html("{missing}") == "{missing}"


class TestSanitizeUrl:
    """Tests for sanitize_url."""

    @pytest.mark.parametrize(
        "url",
        [
            "https://example.com/x",
            "http://localhost:3000/manage-rsvp/sample-token",
            "mailto:host@example.com",
            "/manage-rsvp/abc",
        ],
    )
    def test_allowed_urls_pass_through(self, url: str) -> None:
        assert sanitize_url(url) == url

    @pytest.mark.parametrize(
        "url",
        [
            "javascript:alert(1)",
            "JavaScript:alert(1)",
            "  javascript:alert(1)",
            "data:text/html;base64,PHNjcmlwdD4=",
            "vbscript:msgbox",
        ],
    )
    def test_dangerous_schemes_are_emptied(self, url: str) -> None:
        assert sanitize_url(url) == ""

    @pytest.mark.parametrize(
        "url",
        [
            "javascript&colon;alert(1)",
            "javascript&#58;alert(1)",
            "javascript&#x3a;alert(1)",
            "&#106;avascript:alert(1)",
            "java\nscript:alert(1)",
            "java\tscript:alert(1)",
            "\x01javascript:alert(1)",
        ],
    )
    def test_encoded_and_obfuscated_schemes_are_emptied(self, url: str) -> None:
        assert sanitize_url(url) == ""

    def test_double_encoded_colon_stays_inert(self) -> None:
        result = sanitize_url("javascript&amp;colon;alert(1)")
        assert "javascript:" not in result

    def test_empty_and_none(self) -> None:
        assert sanitize_url("") == ""
        assert sanitize_url(None) == ""

    def test_query_ampersand_is_entity_encoded(self) -> None:
        assert sanitize_url("https://x.test/a?b=1&c=2") == "https://x.test/a?b=1&amp;c=2"

    def test_quotes_cannot_break_attribute(self) -> None:
        result = sanitize_url('https://x.test/"onmouseover="alert(1)')
        assert '"' not in result


class TestAttributeHelpers:
    """Tests for attribute escaping helpers."""

    def test_escape_attribute_quotes(self) -> None:
        assert escape_attribute("a\"b'c") == "a&quot;b&#x27;c"

    def test_css_value_plain_color(self) -> None:
        assert sanitize_css_value("#B45309") == "#B45309"

    def test_css_value_escapes_quotes(self) -> None:
        assert '"' not in sanitize_css_value('red" onload="x')

    @pytest.mark.parametrize(
        "value",
        [
            "red;background:url(https://tracker.test/p.gif)",
            "red} body {color: blue",
            "red\\3b background: red",
            "<b>",
        ],
    )
    def test_css_value_rejects_breakout_characters(self, value: str) -> None:
        assert sanitize_css_value(value) == ""

    def test_css_value_none(self) -> None:
        assert sanitize_css_value(None) == ""
