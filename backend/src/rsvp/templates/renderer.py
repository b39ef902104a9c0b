"""Block-based email template rendering.

An email template is an ordered list of content blocks (header, text,
event details, button, divider) plus a colour theme and a layout skin.
Rendering interpolates ``{variable}`` placeholders from a substitution
record, sanitises every user-supplied fragment, renders each block in
order and wraps the result in the layout's HTML chrome.

Rendering is a pure function of its inputs: the same components, layout,
theme and data always produce byte-identical output.
"""

from __future__ import annotations

import re
from typing import Any
from typing import Callable
from typing import Iterable
from typing import Mapping
from typing import Union

from rsvp.exceptions import TemplateConfigurationError
from rsvp.templates.sanitize import sanitize_css_value
from rsvp.templates.sanitize import sanitize_html
from rsvp.templates.sanitize import sanitize_url
from rsvp.templates.types import BlockStyle
from rsvp.templates.types import BlockType
from rsvp.templates.types import ContentBlock
from rsvp.templates.types import EmailContent
from rsvp.templates.types import EmailTemplate
from rsvp.templates.types import Layout
from rsvp.templates.types import TemplateData
from rsvp.templates.types import Theme
from rsvp.utils.logging import get_logger

logger = get_logger(__name__)

BlockInput = Union[ContentBlock, Mapping[str, Any]]
ThemeInput = Union[Theme, Mapping[str, Any], None]

_PLACEHOLDER_PATTERN = re.compile(r"\{([^}]+)\}")

# =============================================================================
# BLOCK MARKUP
# =============================================================================

HEADER_HTML = (
    '<h1 style="color: {color}; font-size: 24px; font-weight: bold; '
    'margin: 20px 0; text-align: center;">{content}</h1>'
)

TEXT_HTML = (
    '<p style="color: {color}; font-size: 16px; line-height: 1.5; '
    'margin: 16px 0;">{content}</p>'
)

EVENT_DETAILS_HTML = (
    '<div style="background-color: #f3f4f6; border-radius: 8px; '
    'padding: 20px; margin: 20px 0;">{rows}</div>'
)

EVENT_DETAIL_ROW_HTML = (
    '<p style="color: {color}; font-size: 16px; margin: 8px 0;">'
    "<strong>{label}:</strong> {value}</p>"
)

BUTTON_HTML = (
    '<div style="text-align: center; margin: 20px 0;">'
    '<a href="{href}" style="background-color: {color}; color: white; '
    "padding: 12px 24px; text-decoration: none; border-radius: 4px; "
    'display: inline-block;">{label}</a></div>'
)

DIVIDER_HTML = '<hr style="border: none; border-top: 1px solid #e5e7eb; margin: 20px 0;">'

# =============================================================================
# LAYOUT SKINS
# =============================================================================

DEFAULT_LAYOUT_HTML = """<!DOCTYPE html>
<html>
<head>
    <meta charset="utf-8">
    <meta name="viewport" content="width=device-width, initial-scale=1.0">
</head>
<body style="font-family: system-ui, -apple-system, sans-serif; line-height: 1.5; margin: 0; padding: 0; background-color: #ffffff;">
    <div style="max-width: 600px; margin: 0 auto; padding: 20px;">
        {content}
    </div>
</body>
</html>
"""

ELEGANT_LAYOUT_HTML = """<!DOCTYPE html>
<html>
<head>
    <meta charset="utf-8">
    <meta name="viewport" content="width=device-width, initial-scale=1.0">
</head>
<body style="font-family: Georgia, serif; line-height: 1.6; margin: 0; padding: 0; background-color: #fafafa;">
    <div style="max-width: 600px; margin: 40px auto; padding: 40px; background-color: white; border-radius: 8px; box-shadow: 0 2px 4px rgba(0, 0, 0, 0.1);">
        {content}
    </div>
</body>
</html>
"""

# Every Layout member must appear here. "minimal" shares the elegant skin.
LAYOUT_SKINS: dict[str, str] = {
    Layout.DEFAULT.value: DEFAULT_LAYOUT_HTML,
    Layout.ELEGANT.value: ELEGANT_LAYOUT_HTML,
    Layout.MINIMAL.value: ELEGANT_LAYOUT_HTML,
}

# Labels and substitution keys shown by an eventDetails block, in order.
EVENT_DETAIL_FIELDS: tuple[tuple[str, str], ...] = (
    ("Date", "eventDate"),
    ("Time", "eventTime"),
    ("Venue", "venueName"),
    ("Address", "venueAddress"),
)

GUEST_COUNT_LABEL = "Guest Count"
TEXT_DIVIDER = "-" * 40


def interpolate_variables(content: str, data: TemplateData) -> str:
    """Replace ``{key}`` tokens with values from ``data``.

    Tokens whose key is missing (or maps to None) are left untouched so
    that the email author can spot them.
    """

    def _replace(match: re.Match[str]) -> str:
        value = data.get(match.group(1))
        if value is None:
            return match.group(0)
        return str(value)

    return _PLACEHOLDER_PATTERN.sub(_replace, content or "")


def resolve_style_color(style: str, theme: Theme) -> str:
    """Map a block style onto the theme palette (unknown styles use accent)."""
    if style == BlockStyle.PRIMARY.value:
        return theme.primary_color
    if style == BlockStyle.SECONDARY.value:
        return theme.secondary_color
    return theme.accent_color


def split_button_content(content: str) -> tuple[str, str]:
    """Split ``"label|url"`` on the first pipe. Without a pipe the URL is empty."""
    label, _, url = content.partition("|")
    return label, url


def _render_header(content: str, color: str, data: TemplateData) -> str:
    return HEADER_HTML.format(color=color, content=sanitize_html(content))


def _render_text(content: str, color: str, data: TemplateData) -> str:
    return TEXT_HTML.format(color=color, content=sanitize_html(content))


def _render_event_details(content: str, color: str, data: TemplateData) -> str:
    rows = [
        EVENT_DETAIL_ROW_HTML.format(
            color=color,
            label=label,
            value=sanitize_html(data.get(key)),
        )
        for label, key in EVENT_DETAIL_FIELDS
    ]
    guest_count = data.get("guestCount")
    if guest_count:
        rows.append(
            EVENT_DETAIL_ROW_HTML.format(
                color=color,
                label=GUEST_COUNT_LABEL,
                value=sanitize_html(guest_count),
            )
        )
    return EVENT_DETAILS_HTML.format(rows="".join(rows))


def _render_button(content: str, color: str, data: TemplateData) -> str:
    label, url = split_button_content(content)
    return BUTTON_HTML.format(
        href=sanitize_url(url),
        color=color,
        label=sanitize_html(label),
    )


def _render_divider(content: str, color: str, data: TemplateData) -> str:
    return DIVIDER_HTML


_BLOCK_RENDERERS: dict[str, Callable[[str, str, TemplateData], str]] = {
    BlockType.HEADER.value: _render_header,
    BlockType.TEXT.value: _render_text,
    BlockType.EVENT_DETAILS.value: _render_event_details,
    BlockType.BUTTON.value: _render_button,
    BlockType.DIVIDER.value: _render_divider,
}


def _coerce_block(component: BlockInput) -> ContentBlock:
    if isinstance(component, ContentBlock):
        return component
    return ContentBlock.from_dict(component)


def _coerce_theme(theme: ThemeInput) -> Theme:
    if isinstance(theme, Theme):
        return theme
    return Theme.from_dict(theme)


def _layout_skin(layout: Union[Layout, str]) -> str:
    key = getattr(layout, "value", layout)
    skin = LAYOUT_SKINS.get(key)
    if skin is None:
        raise TemplateConfigurationError(str(key))
    return skin


def render_block(block: ContentBlock, theme: Theme, data: TemplateData) -> str:
    """Render one block to HTML. Unknown block types render as ''."""
    renderer = _BLOCK_RENDERERS.get(block.type)
    if renderer is None:
        logger.debug(f"Skipping unknown block type: {block.type!r}")
        return ""
    color = sanitize_css_value(resolve_style_color(block.style, theme))
    content = interpolate_variables(block.content, data)
    return renderer(content, color, data)


def render_email_template(
    components: Iterable[BlockInput],
    layout: Union[Layout, str],
    theme: ThemeInput,
    data: TemplateData,
) -> str:
    """Render content blocks into a complete HTML email document.

    Args:
        components: Ordered content blocks (dataclasses or JSON mappings).
        layout: Layout skin name.
        theme: Colour palette (dataclass or camelCase mapping).
        data: Substitution record for ``{placeholder}`` tokens.

    Returns:
        The HTML document.

    Raises:
        TemplateConfigurationError: If ``layout`` has no skin.
    """
    skin = _layout_skin(layout)
    resolved_theme = _coerce_theme(theme)
    rendered = "".join(
        render_block(_coerce_block(component), resolved_theme, data)
        for component in components
    )
    return skin.format(content=rendered)


def _text_value(value: Any) -> str:
    return "" if value is None else str(value)


def _text_for_block(block: ContentBlock, data: TemplateData) -> str:
    if block.type in (BlockType.HEADER.value, BlockType.TEXT.value):
        return interpolate_variables(block.content, data)
    if block.type == BlockType.EVENT_DETAILS.value:
        lines = [
            f"{label}: {_text_value(data.get(key))}" for label, key in EVENT_DETAIL_FIELDS
        ]
        if data.get("guestCount"):
            lines.append(f"{GUEST_COUNT_LABEL}: {data['guestCount']}")
        return "\n".join(lines)
    if block.type == BlockType.BUTTON.value:
        label, url = split_button_content(interpolate_variables(block.content, data))
        return f"{label}: {url}" if url else label
    if block.type == BlockType.DIVIDER.value:
        return TEXT_DIVIDER
    return ""


def render_email_text(
    components: Iterable[BlockInput],
    data: TemplateData,
) -> str:
    """Render content blocks into the plain-text alternative body."""
    parts = [_text_for_block(_coerce_block(component), data) for component in components]
    return "\n\n".join(part for part in parts if part) + "\n"


def render_template_email(
    template: EmailTemplate,
    data: TemplateData,
) -> EmailContent:
    """Render a whole template into subject, text body and HTML body."""
    return EmailContent(
        subject=interpolate_variables(template.subject, data),
        body_text=render_email_text(template.components, data),
        body_html=render_email_template(
            template.components,
            template.layout,
            template.theme,
            data,
        ),
    )
