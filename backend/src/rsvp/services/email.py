"""SES email sending."""

from __future__ import annotations

from typing import Any
from typing import Iterable
from typing import Optional

from botocore.exceptions import ClientError

from rsvp.config import EmailSettings
from rsvp.exceptions import EmailDeliveryError
from rsvp.services.aws_clients import create_ses_client
from rsvp.templates.types import EmailContent
from rsvp.utils.logging import get_logger
from rsvp.utils.logging import mask_email

logger = get_logger(__name__)


class EmailSender:
    """Sends rendered emails through an SES client.

    The client is passed in rather than created here, so tests and
    callers decide which client (and region) is used.
    """

    def __init__(self, client: Any, source: str):
        self._client = client
        self.source = source

    @classmethod
    def from_settings(
        cls,
        settings: EmailSettings,
        client: Optional[Any] = None,
    ) -> EmailSender:
        """Build a sender from settings, creating an SES client if none is given."""
        if client is None:
            client = create_ses_client(settings.region)
        return cls(client, settings.sender_email)

    def send(self, to_addresses: Iterable[str], content: EmailContent) -> None:
        """Send a plain-text + HTML email.

        Raises:
            EmailDeliveryError: If SES rejects the message.
        """
        recipients = list(to_addresses)
        message: dict[str, Any] = {
            "Subject": {"Data": content.subject, "Charset": "UTF-8"},
            "Body": {"Text": {"Data": content.body_text, "Charset": "UTF-8"}},
        }
        if content.body_html:
            message["Body"]["Html"] = {"Data": content.body_html, "Charset": "UTF-8"}

        try:
            self._client.send_email(
                Source=self.source,
                Destination={"ToAddresses": recipients},
                Message=message,
            )
        except ClientError as exc:
            masked = ", ".join(mask_email(address) for address in recipients)
            logger.error(f"SES send_email failed for {masked}: {exc}")
            raise EmailDeliveryError(
                "Failed to send email",
                detail=exc.response.get("Error", {}).get("Code"),
            ) from exc

        logger.info(f"Email sent to {len(recipients)} recipient(s)")
