"""Date and time display formatting for guest-facing emails."""

from __future__ import annotations

from datetime import datetime

DATE_FORMATS = ("US", "IL", "ISO")
TIME_FORMATS = ("12h", "24h")


def format_date(value: str, fmt: str = "US") -> str:
    """Format an ISO date (or date-time) string for display.

    Args:
        value: The date, e.g. "2025-06-01".
        fmt: "US" (June 1, 2025), "IL" (1.6.2025) or "ISO" (2025-06-01).

    Returns:
        The formatted date, or ``value`` unchanged if it cannot be parsed.
    """
    if not value:
        return value
    try:
        parsed = datetime.fromisoformat(value.strip())
    except ValueError:
        return value

    if fmt == "US":
        return f"{parsed:%B} {parsed.day}, {parsed.year}"
    if fmt == "IL":
        return f"{parsed.day}.{parsed.month}.{parsed.year}"
    if fmt == "ISO":
        return parsed.date().isoformat()
    return value


def format_time(value: str, fmt: str = "24h") -> str:
    """Format an "HH:MM" (or ISO date-time) string for display.

    Args:
        value: The time, e.g. "18:00".
        fmt: "24h" (18:00) or "12h" (6:00 PM).

    Returns:
        The formatted time, or ``value`` unchanged if it cannot be parsed.
    """
    if not value:
        return value
    try:
        if "T" in value:
            parsed = datetime.fromisoformat(value.strip())
            hours, minutes = parsed.hour, parsed.minute
        else:
            hours_part, minutes_part = value.strip().split(":")[:2]
            hours, minutes = int(hours_part), int(minutes_part)
    except ValueError:
        return value
    if not (0 <= hours <= 23 and 0 <= minutes <= 59):
        return value

    if fmt == "12h":
        period = "PM" if hours >= 12 else "AM"
        hour12 = hours % 12 or 12
        return f"{hour12}:{minutes:02d} {period}"
    return f"{hours:02d}:{minutes:02d}"
