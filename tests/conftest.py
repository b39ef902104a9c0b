"""Pytest configuration and fixtures for backend tests.

This module provides shared fixtures for testing the email template
pipeline, including sample themes, substitution records, API Gateway
events and a stub SES client.
"""

from __future__ import annotations

import sys
from pathlib import Path
from unittest.mock import MagicMock
from uuid import uuid4

import pytest

# Add backend source to path for imports
sys.path.insert(0, str(Path(__file__).resolve().parents[1] / 'backend' / 'src'))


# --- Template Fixtures ---


@pytest.fixture
def sample_theme():
    """A theme with easily recognisable colours."""
    from rsvp.templates.types import Theme

    return Theme(
        primary_color='#111111',
        secondary_color='#222222',
        accent_color='#333333',
    )


@pytest.fixture
def sample_event_data() -> dict:
    """Substitution record with event details and no guest count."""
    return {
        'fullName': 'Ada',
        'eventDate': '2025-06-01',
        'eventTime': '18:00',
        'venueName': 'Hall',
        'venueAddress': '1 Main St',
    }


@pytest.fixture
def event_details():
    """Event details for notification tests."""
    from rsvp.templates.data import EventDetails

    return EventDetails(
        title='Summer Party',
        date='2025-06-01',
        time='18:00',
        venue_name='Hall',
        venue_address='1 Main St',
    )


@pytest.fixture
def attending_guest():
    """An attending guest with a management token."""
    from rsvp.templates.data import GuestRsvp

    return GuestRsvp(
        full_name='Ada Lovelace',
        email='ada@example.com',
        will_attend=True,
        guest_count=2,
        management_token='tok123',
    )


# --- AWS Fixtures ---


@pytest.fixture
def ses_client() -> MagicMock:
    """Stub SES client recording send_email calls."""
    client = MagicMock()
    client.send_email.return_value = {'MessageId': 'message-1'}
    return client


@pytest.fixture
def email_sender(ses_client):
    """EmailSender wired to the stub SES client."""
    from rsvp.services.email import EmailSender

    return EmailSender(ses_client, 'events@example.com')


@pytest.fixture
def mock_boto3_client(mocker):
    """Mock boto3 client for AWS service calls."""
    mock = mocker.patch('boto3.client')
    return mock


# --- API Event Fixtures ---


@pytest.fixture
def api_gateway_event() -> dict:
    """Base API Gateway event structure."""
    return {
        'httpMethod': 'POST',
        'path': '/v1/admin/preview-template',
        'queryStringParameters': {},
        'headers': {'Content-Type': 'application/json'},
        'requestContext': {
            'requestId': str(uuid4()),
            'authorizer': {},
        },
        'body': None,
        'isBase64Encoded': False,
    }

