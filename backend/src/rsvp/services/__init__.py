"""Service integrations (SES email, guest notifications)."""
