"""Template types for email rendering."""

from __future__ import annotations

import enum
from dataclasses import dataclass
from dataclasses import field
from typing import Any
from typing import Mapping

DEFAULT_PRIMARY_COLOR = "#B45309"
DEFAULT_SECONDARY_COLOR = "#1F2937"
DEFAULT_ACCENT_COLOR = "#D97706"

TemplateData = Mapping[str, Any]


class BlockType(str, enum.Enum):
    """Kinds of content block an email template can contain."""

    HEADER = "header"
    TEXT = "text"
    EVENT_DETAILS = "eventDetails"
    BUTTON = "button"
    DIVIDER = "divider"


class BlockStyle(str, enum.Enum):
    """Theme colour a block is drawn with."""

    PRIMARY = "primary"
    SECONDARY = "secondary"
    ACCENT = "accent"


class Layout(str, enum.Enum):
    """Outer HTML skins for a rendered email."""

    DEFAULT = "default"
    ELEGANT = "elegant"
    MINIMAL = "minimal"


@dataclass(frozen=True)
class EmailContent:
    """Container for email content."""

    subject: str
    body_text: str
    body_html: str


@dataclass(frozen=True)
class Theme:
    """Three-colour palette applied to a template's blocks."""

    primary_color: str = DEFAULT_PRIMARY_COLOR
    secondary_color: str = DEFAULT_SECONDARY_COLOR
    accent_color: str = DEFAULT_ACCENT_COLOR

    @classmethod
    def from_dict(cls, data: Mapping[str, Any] | None) -> Theme:
        """Build a theme from its stored camelCase form."""
        data = data or {}
        return cls(
            primary_color=data.get("primaryColor") or DEFAULT_PRIMARY_COLOR,
            secondary_color=data.get("secondaryColor") or DEFAULT_SECONDARY_COLOR,
            accent_color=data.get("accentColor") or DEFAULT_ACCENT_COLOR,
        )

    def to_dict(self) -> dict[str, str]:
        return {
            "primaryColor": self.primary_color,
            "secondaryColor": self.secondary_color,
            "accentColor": self.accent_color,
        }


@dataclass(frozen=True)
class ContentBlock:
    """One typed, styled unit of an email.

    ``type`` and ``style`` are kept as plain strings so that blocks stored
    with a type this version does not know still reach the renderer, which
    drops them instead of failing the whole email.
    """

    type: str
    content: str = ""
    style: str = BlockStyle.PRIMARY.value

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> ContentBlock:
        return cls(
            type=str(data.get("type") or ""),
            content=str(data.get("content") or ""),
            style=str(data.get("style") or BlockStyle.PRIMARY.value),
        )

    def to_dict(self) -> dict[str, str]:
        return {"type": self.type, "content": self.content, "style": self.style}


@dataclass(frozen=True)
class EmailTemplate:
    """A complete, editable email template."""

    subject: str
    layout: str = Layout.DEFAULT.value
    components: tuple[ContentBlock, ...] = field(default_factory=tuple)
    theme: Theme = field(default_factory=Theme)

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> EmailTemplate:
        """Build a template from a JSON document."""
        return cls(
            subject=str(data.get("subject") or ""),
            layout=str(data.get("layout") or Layout.DEFAULT.value),
            components=tuple(
                ContentBlock.from_dict(component)
                for component in data.get("components") or []
            ),
            theme=Theme.from_dict(data.get("theme")),
        )

    def to_dict(self) -> dict[str, Any]:
        return {
            "subject": self.subject,
            "layout": self.layout,
            "components": [component.to_dict() for component in self.components],
            "theme": self.theme.to_dict(),
        }
