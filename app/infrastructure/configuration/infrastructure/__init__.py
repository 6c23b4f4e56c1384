"""Infrastructure settings __init__ - exports all infrastructure settings."""

from infrastructure.configuration.infrastructure.notifier import NotifierSettings

__all__ = [
    "NotifierSettings",
]
