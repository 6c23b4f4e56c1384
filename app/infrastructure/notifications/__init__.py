"""Preference-gated notification dispatch.

Resolves a notification's recipient, pushes it through every transport the
recipient opted into, and reports failures without letting one transport
block another.

Notifications are created with ``NotificationBuilder``; ``Message`` is the
immutable value it builds and is subclassed, not constructed, by features.

Usage:
    from infrastructure.identifiers import Identity
    from infrastructure.notifications import (
        NotificationBuilder,
        NotificationDispatcher,
        WriterTransport,
    )

    notification = (
        NotificationBuilder("com.example.build.failed")
        .with_recipient(Identity.of("email", "rufus@example.com"))
        .with_default_message("Build #42 failed")
        .build()
    )

    dispatcher = NotificationDispatcher(store, [WriterTransport("writer")])
    dispatcher.push(notification)
"""

# Models
from infrastructure.notifications.models import (
    NotificationBuilder,
    Notification,
    Message,
    EventType,
    TransportKey,
)

# Context
from infrastructure.notifications.context import PushContext

# Dispatcher
from infrastructure.notifications.dispatcher import NotificationDispatcher

# Service
from infrastructure.notifications.service import (
    NotificationService,
    build_default_transports,
)

# Transport interface
from infrastructure.notifications.transports.base import Transport, Validator

# Transport implementations
from infrastructure.notifications.transports.slack import (
    SLACK_ID,
    SlackRichNotification,
    SlackTransport,
)
from infrastructure.notifications.transports.writer import WriterTransport

__all__ = [
    # Models
    "NotificationBuilder",
    "Notification",
    "Message",
    "EventType",
    "TransportKey",
    # Context
    "PushContext",
    # Dispatcher
    "NotificationDispatcher",
    # Service
    "NotificationService",
    "build_default_transports",
    # Transport interface
    "Transport",
    "Validator",
    # Transport implementations
    "SlackTransport",
    "SlackRichNotification",
    "SLACK_ID",
    "WriterTransport",
]
