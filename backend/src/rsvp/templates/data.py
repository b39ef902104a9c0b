"""Substitution records for template rendering.

A substitution record maps placeholder names (``fullName``, ``eventDate``
...) onto the values for one recipient. These helpers build it from a
guest's RSVP and the event details.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Any
from typing import Optional

from rsvp.exceptions import ValidationError
from rsvp.utils.formatting import DATE_FORMATS
from rsvp.utils.formatting import TIME_FORMATS
from rsvp.utils.formatting import format_date
from rsvp.utils.formatting import format_time


@dataclass(frozen=True)
class EventDetails:
    """Date, time and venue of the event."""

    title: str
    date: str
    time: str
    venue_name: str
    venue_address: str

    @classmethod
    def from_env(cls) -> EventDetails:
        """Load event details from environment variables.

        Unset values fall back to bracketed placeholders so that a missing
        setting is visible in the rendered email.
        """
        return cls(
            title=os.getenv("EVENT_TITLE", "Event"),
            date=os.getenv("EVENT_DATE", "[Event Date]"),
            time=os.getenv("EVENT_TIME", "[Event Time]"),
            venue_name=os.getenv("VENUE_NAME", "[Venue Name]"),
            venue_address=os.getenv("VENUE_ADDRESS", "[Venue Address]"),
        )


@dataclass(frozen=True)
class GuestRsvp:
    """A guest's attendance response."""

    full_name: str
    email: str
    will_attend: bool
    guest_count: int = 1
    management_token: Optional[str] = None


def build_management_link(base_url: str, token: str) -> str:
    """Build the link a guest follows to change their RSVP."""
    return f"{base_url.rstrip('/')}/manage-rsvp/{token}"


def build_template_data(
    guest: GuestRsvp,
    event: EventDetails,
    management_link: Optional[str] = None,
    date_format: str = "US",
    time_format: str = "24h",
) -> dict[str, Any]:
    """Build the substitution record for one guest.

    Raises:
        ValidationError: If ``date_format`` or ``time_format`` is not supported.
    """
    if date_format not in DATE_FORMATS:
        raise ValidationError(
            f"Unsupported date format: {date_format}", field="date_format"
        )
    if time_format not in TIME_FORMATS:
        raise ValidationError(
            f"Unsupported time format: {time_format}", field="time_format"
        )
    data: dict[str, Any] = {
        "fullName": guest.full_name,
        "email": guest.email,
        "eventTitle": event.title,
        "eventDate": format_date(event.date, date_format),
        "eventTime": format_time(event.time, time_format),
        "venueName": event.venue_name,
        "venueAddress": event.venue_address,
        "guestCount": guest.guest_count if guest.will_attend else 0,
    }
    if management_link:
        data["managementLink"] = management_link
    return data


def get_sample_data() -> dict[str, Any]:
    """Sample substitution record used for admin previews."""
    return {
        "fullName": "John Doe",
        "email": "john@example.com",
        "eventDate": os.getenv("EVENT_DATE", "2024-12-31"),
        "eventTime": os.getenv("EVENT_TIME", "18:00"),
        "venueName": os.getenv("VENUE_NAME", "Sample Venue"),
        "venueAddress": os.getenv("VENUE_ADDRESS", "123 Event Street"),
        "guestCount": 2,
        "managementLink": build_management_link(
            os.getenv("APP_BASE_URL", "http://localhost:3000"),
            "sample-token",
        ),
    }
