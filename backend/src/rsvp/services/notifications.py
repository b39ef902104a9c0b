"""Guest notification emails (RSVP confirmation and event reminder)."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any
from typing import Iterable
from typing import Optional

from rsvp.exceptions import AppError
from rsvp.services.email import EmailSender
from rsvp.templates.data import EventDetails
from rsvp.templates.data import GuestRsvp
from rsvp.templates.data import build_management_link
from rsvp.templates.data import build_template_data
from rsvp.templates.renderer import render_template_email
from rsvp.templates.types import EmailTemplate
from rsvp.utils.logging import get_logger
from rsvp.utils.logging import mask_email

logger = get_logger(__name__)


@dataclass
class ReminderStats:
    """Outcome of a reminder run."""

    total: int = 0
    succeeded: int = 0
    failed: int = 0

    def to_dict(self) -> dict[str, Any]:
        return {
            "total": self.total,
            "succeeded": self.succeeded,
            "failed": self.failed,
        }


def _management_link(guest: GuestRsvp, base_url: Optional[str]) -> Optional[str]:
    if not base_url or not guest.management_token:
        return None
    return build_management_link(base_url, guest.management_token)


def send_confirmation_email(
    sender: EmailSender,
    template: EmailTemplate,
    guest: GuestRsvp,
    event: EventDetails,
    base_url: Optional[str] = None,
) -> bool:
    """Render and send the confirmation email for one RSVP.

    Returns:
        True if an email was sent, False if the guest is not attending.

    Raises:
        EmailDeliveryError: If sending fails.
    """
    if not guest.will_attend:
        logger.info(
            f"Confirmation skipped for {mask_email(guest.email)}: not attending"
        )
        return False

    data = build_template_data(
        guest,
        event,
        management_link=_management_link(guest, base_url),
    )
    content = render_template_email(template, data)
    sender.send([guest.email], content)
    logger.info(f"Confirmation email sent to {mask_email(guest.email)}")
    return True


def send_reminder_emails(
    sender: EmailSender,
    template: EmailTemplate,
    guests: Iterable[GuestRsvp],
    event: EventDetails,
    base_url: Optional[str] = None,
) -> ReminderStats:
    """Send the reminder email to every attending guest.

    A failure for one guest is logged and counted; the remaining guests
    still receive their reminder.
    """
    stats = ReminderStats()
    for guest in guests:
        if not guest.will_attend:
            continue
        stats.total += 1
        data = build_template_data(
            guest,
            event,
            management_link=_management_link(guest, base_url),
        )
        try:
            sender.send([guest.email], render_template_email(template, data))
        except AppError as exc:
            stats.failed += 1
            logger.warning(
                f"Reminder failed for {mask_email(guest.email)}: {exc.message}"
            )
            continue
        stats.succeeded += 1

    logger.info(
        f"Reminder emails sent: {stats.succeeded}/{stats.total} succeeded"
    )
    return stats
