"""Delivery transport implementations."""

from infrastructure.notifications.transports.base import Transport, Validator
from infrastructure.notifications.transports.slack import (
    SLACK_ID,
    SlackRichNotification,
    SlackTransport,
)
from infrastructure.notifications.transports.writer import WriterTransport

__all__ = [
    "Transport",
    "Validator",
    "SlackTransport",
    "SlackRichNotification",
    "SLACK_ID",
    "WriterTransport",
]
