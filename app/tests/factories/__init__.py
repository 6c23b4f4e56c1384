"""Test data factories for deterministic test data generation."""

from tests.factories.notifications import (
    EVENT_ONE,
    EVENT_THREE,
    EVENT_TWO,
    RecordingTransport,
    ValidatingTransport,
    make_default_user,
    make_notification,
    make_user,
    make_user_store,
)

__all__ = [
    "EVENT_ONE",
    "EVENT_TWO",
    "EVENT_THREE",
    "RecordingTransport",
    "ValidatingTransport",
    "make_default_user",
    "make_notification",
    "make_user",
    "make_user_store",
]
