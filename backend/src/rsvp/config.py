"""Environment-driven settings for outgoing email."""

from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Optional

from rsvp.exceptions import ConfigurationError


@dataclass(frozen=True)
class EmailSettings:
    """Settings needed to send RSVP emails through SES."""

    sender_email: str
    region: Optional[str] = None
    app_base_url: str = "http://localhost:3000"

    @classmethod
    def from_env(cls) -> EmailSettings:
        """Load settings from environment variables.

        Raises:
            ConfigurationError: If SES_SENDER_EMAIL is not set.
        """
        sender_email = os.getenv("SES_SENDER_EMAIL")
        if not sender_email:
            raise ConfigurationError("SES_SENDER_EMAIL")
        return cls(
            sender_email=sender_email,
            region=os.getenv("AWS_REGION") or None,
            app_base_url=os.getenv("APP_BASE_URL", "http://localhost:3000"),
        )
