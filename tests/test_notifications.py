"""Tests for SES email sending and guest notifications."""

from __future__ import annotations

import sys
from pathlib import Path

import pytest
from botocore.exceptions import ClientError

sys.path.append(str(Path(__file__).resolve().parents[1] / "backend" / "src"))

from rsvp.config import EmailSettings  # noqa: E402
from rsvp.exceptions import ConfigurationError, EmailDeliveryError  # noqa: E402
from rsvp.services.email import EmailSender  # noqa: E402
from rsvp.services.notifications import (  # noqa: E402
    ReminderStats,
    send_confirmation_email,
    send_reminder_emails,
)
from rsvp.templates import (  # noqa: E402
    CONFIRMATION_TEMPLATE,
    REMINDER_TEMPLATE,
    get_default_template,
)
from rsvp.templates.data import GuestRsvp  # noqa: E402
from rsvp.templates.types import EmailContent  # noqa: E402


def _client_error(code: str = "MessageRejected") -> ClientError:
    return ClientError(
        {"Error": {"Code": code, "Message": "Email address is not verified."}},
        "SendEmail",
    )


class TestEmailSettings:
    """Tests for EmailSettings.from_env."""

    def test_requires_sender(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.delenv("SES_SENDER_EMAIL", raising=False)
        with pytest.raises(ConfigurationError) as exc_info:
            EmailSettings.from_env()
        assert exc_info.value.config_name == "SES_SENDER_EMAIL"

    def test_reads_environment(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("SES_SENDER_EMAIL", "events@example.com")
        monkeypatch.setenv("AWS_REGION", "eu-west-1")
        monkeypatch.setenv("APP_BASE_URL", "https://rsvp.test")
        settings = EmailSettings.from_env()
        assert settings == EmailSettings(
            sender_email="events@example.com",
            region="eu-west-1",
            app_base_url="https://rsvp.test",
        )


class TestEmailSender:
    """Tests for EmailSender."""

    def test_sends_text_and_html(self, email_sender, ses_client) -> None:
        email_sender.send(
            ["ada@example.com"],
            EmailContent(subject="Hi", body_text="text", body_html="<p>html</p>"),
        )
        ses_client.send_email.assert_called_once()
        kwargs = ses_client.send_email.call_args.kwargs
        assert kwargs["Source"] == "events@example.com"
        assert kwargs["Destination"] == {"ToAddresses": ["ada@example.com"]}
        assert kwargs["Message"]["Subject"]["Data"] == "Hi"
        assert kwargs["Message"]["Body"]["Text"]["Data"] == "text"
        assert kwargs["Message"]["Body"]["Html"]["Data"] == "<p>html</p>"

    def test_omits_empty_html(self, email_sender, ses_client) -> None:
        email_sender.send(["ada@example.com"], EmailContent("Hi", "text", ""))
        message = ses_client.send_email.call_args.kwargs["Message"]
        assert "Html" not in message["Body"]

    def test_wraps_client_error(self, email_sender, ses_client) -> None:
        ses_client.send_email.side_effect = _client_error()
        with pytest.raises(EmailDeliveryError) as exc_info:
            email_sender.send(["ada@example.com"], EmailContent("Hi", "t", "h"))
        assert exc_info.value.status_code == 502
        assert exc_info.value.detail == "MessageRejected"

    def test_from_settings_uses_given_client(self, ses_client) -> None:
        sender = EmailSender.from_settings(
            EmailSettings(sender_email="events@example.com"), client=ses_client
        )
        assert sender.source == "events@example.com"

    def test_from_settings_creates_client(self, mocker) -> None:
        create = mocker.patch("rsvp.services.email.create_ses_client")
        EmailSender.from_settings(
            EmailSettings(sender_email="events@example.com", region="us-east-1")
        )
        create.assert_called_once_with("us-east-1")

    def test_create_ses_client_uses_boto3(self, mock_boto3_client) -> None:
        from rsvp.services.aws_clients import create_ses_client

        create_ses_client("us-east-1")
        mock_boto3_client.assert_called_once_with("ses", region_name="us-east-1")


class TestSendConfirmationEmail:
    """Tests for send_confirmation_email."""

    def test_sends_rendered_confirmation(
        self, email_sender, ses_client, attending_guest, event_details
    ) -> None:
        sent = send_confirmation_email(
            email_sender,
            get_default_template(CONFIRMATION_TEMPLATE),
            attending_guest,
            event_details,
            base_url="https://rsvp.test",
        )
        assert sent is True
        message = ses_client.send_email.call_args.kwargs["Message"]
        html = message["Body"]["Html"]["Data"]
        assert message["Subject"]["Data"] == "RSVP Confirmation - Event Invitation"
        assert "Hello Ada Lovelace" in html
        assert "June 1, 2025" in html
        assert 'href="https://rsvp.test/manage-rsvp/tok123"' in html
        assert "Manage Your RSVP: https://rsvp.test/manage-rsvp/tok123" in message["Body"]["Text"]["Data"]

    def test_skips_guest_not_attending(self, email_sender, ses_client, event_details) -> None:
        guest = GuestRsvp(full_name="Bo", email="bo@example.com", will_attend=False)
        sent = send_confirmation_email(
            email_sender, get_default_template(CONFIRMATION_TEMPLATE), guest, event_details
        )
        assert sent is False
        ses_client.send_email.assert_not_called()

    def test_without_base_url_leaves_placeholder(
        self, email_sender, ses_client, attending_guest, event_details
    ) -> None:
        send_confirmation_email(
            email_sender,
            get_default_template(CONFIRMATION_TEMPLATE),
            attending_guest,
            event_details,
        )
        text = ses_client.send_email.call_args.kwargs["Message"]["Body"]["Text"]["Data"]
        assert "{managementLink}" in text

    def test_propagates_delivery_error(
        self, email_sender, ses_client, attending_guest, event_details
    ) -> None:
        ses_client.send_email.side_effect = _client_error()
        with pytest.raises(EmailDeliveryError):
            send_confirmation_email(
                email_sender,
                get_default_template(CONFIRMATION_TEMPLATE),
                attending_guest,
                event_details,
            )


class TestSendReminderEmails:
    """Tests for send_reminder_emails."""

    def test_counts_successes_and_failures(self, email_sender, ses_client, event_details) -> None:
        guests = [
            GuestRsvp("Ada", "ada@example.com", True, 2),
            GuestRsvp("Bo", "bo@example.com", False, 0),
            GuestRsvp("Cy", "cy@example.com", True, 1),
        ]
        ses_client.send_email.side_effect = [{"MessageId": "1"}, _client_error()]

        stats = send_reminder_emails(
            email_sender,
            get_default_template(REMINDER_TEMPLATE),
            guests,
            event_details,
        )

        assert stats == ReminderStats(total=2, succeeded=1, failed=1)
        assert stats.to_dict() == {"total": 2, "succeeded": 1, "failed": 1}
        recipients = [
            call.kwargs["Destination"]["ToAddresses"][0]
            for call in ses_client.send_email.call_args_list
        ]
        assert recipients == ["ada@example.com", "cy@example.com"]

    def test_reminder_uses_elegant_layout(self, email_sender, ses_client, event_details) -> None:
        send_reminder_emails(
            email_sender,
            get_default_template(REMINDER_TEMPLATE),
            [GuestRsvp("Ada", "ada@example.com", True, 2)],
            event_details,
        )
        html = ses_client.send_email.call_args.kwargs["Message"]["Body"]["Html"]["Data"]
        assert "Your Event is Tomorrow!" in html
        assert "Georgia, serif" in html

    def test_no_guests(self, email_sender, ses_client, event_details) -> None:
        stats = send_reminder_emails(
            email_sender, get_default_template(REMINDER_TEMPLATE), [], event_details
        )
        assert stats == ReminderStats()
        ses_client.send_email.assert_not_called()
