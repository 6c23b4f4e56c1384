"""Test fixtures for notification infrastructure tests."""

import pytest
from unittest.mock import MagicMock

from infrastructure.notifications.context import PushContext
from tests.factories import (
    RecordingTransport,
    make_default_user,
    make_notification,
    make_user_store,
)


@pytest.fixture
def default_user():
    """User wanting com.example.one on email and slack, com.example.two on email."""
    return make_default_user()


@pytest.fixture
def user_store(default_user):
    return make_user_store(default_user)


@pytest.fixture
def email_transport():
    return RecordingTransport("email")


@pytest.fixture
def slack_transport():
    return RecordingTransport("slack")


@pytest.fixture
def notification_factory():
    """Factory for creating notifications.

    Example:
        notification = notification_factory(event_type="com.example.two")
    """
    return make_notification


@pytest.fixture
def background_context():
    return PushContext.background()


@pytest.fixture
def cancelled_context():
    context = PushContext.background()
    context.cancel()
    return context


@pytest.fixture
def mock_slack_client():
    """Mock slack_sdk WebClient with successful responses."""
    client = MagicMock()
    client.chat_postMessage.return_value = {"ok": True, "ts": "1700000000.000100"}
    client.auth_test.return_value = {"ok": True, "team": "Example", "user": "mailroom"}
    return client


@pytest.fixture
def mock_slack_client_manager(mock_slack_client):
    """Mock SlackClientManager returning mock_slack_client."""
    manager = MagicMock()
    manager.get_client.return_value = mock_slack_client
    return manager


@pytest.fixture
def mock_settings():
    """Mock Settings instance for the notification service.

    Returns:
        Mock settings with notifier and slack configurations
    """
    mock = MagicMock()
    mock.notifier.max_workers = 1
    mock.notifier.writer_enabled = False
    mock.notifier.writer_transport_key = "writer"
    mock.notifier.validate_on_startup = True
    mock.slack.enabled = False
    mock.slack.SLACK_TOKEN = ""
    mock.slack.SLACK_TRANSPORT_KEY = "slack"
    return mock
