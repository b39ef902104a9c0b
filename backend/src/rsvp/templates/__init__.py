"""Email templates for the application."""

from rsvp.templates.data import (
    EventDetails,
    GuestRsvp,
    build_management_link,
    build_template_data,
    get_sample_data,
)
from rsvp.templates.defaults import (
    CONFIRMATION_TEMPLATE,
    DEFAULT_TEMPLATES,
    REMINDER_TEMPLATE,
    get_default_template,
)
from rsvp.templates.renderer import (
    interpolate_variables,
    render_email_template,
    render_email_text,
    render_template_email,
    resolve_style_color,
)
from rsvp.templates.types import (
    BlockStyle,
    BlockType,
    ContentBlock,
    EmailContent,
    EmailTemplate,
    Layout,
    Theme,
)

__all__ = [
    "BlockStyle",
    "BlockType",
    "CONFIRMATION_TEMPLATE",
    "ContentBlock",
    "DEFAULT_TEMPLATES",
    "EmailContent",
    "EmailTemplate",
    "EventDetails",
    "GuestRsvp",
    "Layout",
    "REMINDER_TEMPLATE",
    "Theme",
    "build_management_link",
    "build_template_data",
    "get_default_template",
    "get_sample_data",
    "interpolate_variables",
    "render_email_template",
    "render_email_text",
    "render_template_email",
    "resolve_style_color",
]
