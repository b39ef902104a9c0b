"""Pydantic schemas for email template payloads."""

from __future__ import annotations

from typing import List
from typing import Literal

from pydantic import BaseModel
from pydantic import ConfigDict
from pydantic import Field
from pydantic import field_validator
from pydantic import model_validator

from rsvp.templates.sanitize import UNSAFE_CSS_PATTERN
from rsvp.templates.types import DEFAULT_ACCENT_COLOR
from rsvp.templates.types import DEFAULT_PRIMARY_COLOR
from rsvp.templates.types import DEFAULT_SECONDARY_COLOR
from rsvp.templates.types import BlockStyle
from rsvp.templates.types import BlockType
from rsvp.templates.types import EmailTemplate
from rsvp.templates.types import Layout

MAX_SUBJECT_LENGTH = 200
MAX_CONTENT_LENGTH = 5000
MAX_COMPONENTS = 50

# Block types whose content is ignored by the renderer.
_CONTENTLESS_TYPES = frozenset({BlockType.EVENT_DETAILS, BlockType.DIVIDER})


class ComponentSchema(BaseModel):
    """Content block schema."""

    type: BlockType
    content: str = Field(default="", max_length=MAX_CONTENT_LENGTH)
    style: BlockStyle

    @model_validator(mode="after")
    def require_content(self) -> ComponentSchema:
        if self.type not in _CONTENTLESS_TYPES and not self.content.strip():
            raise ValueError(f"content is required for {self.type.value} blocks")
        return self


class ThemeSchema(BaseModel):
    """Theme colour schema."""

    model_config = ConfigDict(populate_by_name=True)

    primary_color: str = Field(default=DEFAULT_PRIMARY_COLOR, alias="primaryColor")
    secondary_color: str = Field(
        default=DEFAULT_SECONDARY_COLOR, alias="secondaryColor"
    )
    accent_color: str = Field(default=DEFAULT_ACCENT_COLOR, alias="accentColor")

    @field_validator("primary_color", "secondary_color", "accent_color")
    @classmethod
    def validate_color(cls, value: str) -> str:
        value = value.strip()
        if not value:
            raise ValueError("color must not be empty")
        if UNSAFE_CSS_PATTERN.search(value):
            raise ValueError("color contains invalid characters")
        return value


class EmailTemplateSchema(BaseModel):
    """Email template schema."""

    subject: str = Field(min_length=1, max_length=MAX_SUBJECT_LENGTH)
    layout: Layout = Layout.DEFAULT
    components: List[ComponentSchema] = Field(max_length=MAX_COMPONENTS)
    theme: ThemeSchema = Field(default_factory=ThemeSchema)

    def to_template(self) -> EmailTemplate:
        """Convert to the renderer's template type."""
        return EmailTemplate.from_dict(self.model_dump(mode="json", by_alias=True))


class PreviewRequestSchema(BaseModel):
    """Body of a template preview request."""

    template: EmailTemplateSchema
    type: Literal["confirmation", "reminder"] = "confirmation"
