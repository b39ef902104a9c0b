"""Built-in confirmation and reminder templates.

These are used until an admin saves their own versions, and as the
reset target in the template editor.
"""

from __future__ import annotations

from typing import Any

from rsvp.exceptions import NotFoundError
from rsvp.templates.types import DEFAULT_ACCENT_COLOR
from rsvp.templates.types import DEFAULT_PRIMARY_COLOR
from rsvp.templates.types import DEFAULT_SECONDARY_COLOR
from rsvp.templates.types import EmailTemplate

CONFIRMATION_TEMPLATE = "confirmation"
REMINDER_TEMPLATE = "reminder"

_DEFAULT_THEME = {
    "primaryColor": DEFAULT_PRIMARY_COLOR,
    "secondaryColor": DEFAULT_SECONDARY_COLOR,
    "accentColor": DEFAULT_ACCENT_COLOR,
}

DEFAULT_TEMPLATES: dict[str, dict[str, Any]] = {
    CONFIRMATION_TEMPLATE: {
        "subject": "RSVP Confirmation - Event Invitation",
        "layout": "default",
        "components": [
            {
                "type": "header",
                "content": "Thank You for Your RSVP!",
                "style": "primary",
            },
            {
                "type": "text",
                "content": "Hello {fullName}, thank you for confirming your attendance!",
                "style": "primary",
            },
            {"type": "eventDetails", "content": "", "style": "secondary"},
            {
                "type": "text",
                "content": "We look forward to celebrating with you!",
                "style": "primary",
            },
            {
                "type": "button",
                "content": "Manage Your RSVP|{managementLink}",
                "style": "accent",
            },
        ],
        "theme": _DEFAULT_THEME,
    },
    REMINDER_TEMPLATE: {
        "subject": "Event Reminder",
        "layout": "elegant",
        "components": [
            {
                "type": "header",
                "content": "Your Event is Tomorrow!",
                "style": "primary",
            },
            {
                "type": "text",
                "content": "Hello {fullName}, this is a friendly reminder about tomorrow's event.",
                "style": "primary",
            },
            {"type": "eventDetails", "content": "", "style": "secondary"},
            {
                "type": "text",
                "content": "We look forward to seeing you tomorrow!",
                "style": "primary",
            },
        ],
        "theme": _DEFAULT_THEME,
    },
}


def get_default_template(name: str) -> EmailTemplate:
    """Return a fresh copy of a built-in template by name."""
    document = DEFAULT_TEMPLATES.get(name)
    if document is None:
        raise NotFoundError("Template", name)
    return EmailTemplate.from_dict(document)
