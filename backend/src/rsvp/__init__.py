"""Backend for the event RSVP application."""
