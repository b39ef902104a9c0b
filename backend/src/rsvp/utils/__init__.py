"""Utility modules for the backend application."""

from rsvp.utils.formatting import format_date, format_time
from rsvp.utils.logging import (
    clear_request_context,
    configure_logging,
    get_logger,
    mask_email,
    set_request_context,
)
from rsvp.utils.responses import error_response, html_response, json_response

__all__ = [
    "clear_request_context",
    "configure_logging",
    "error_response",
    "format_date",
    "format_time",
    "get_logger",
    "html_response",
    "json_response",
    "mask_email",
    "set_request_context",
]
