"""Notifier dispatch settings."""

from pydantic import Field

from infrastructure.configuration.base import InfrastructureSettings


class NotifierSettings(InfrastructureSettings):
    """Notification dispatch configuration.

    Environment Variables:
        NOTIFIER_MAX_WORKERS: Transports pushed concurrently per notification.
            1 (default) pushes sequentially in registration order.
        NOTIFIER_WRITER_ENABLED: Register the writer transport, which prints
            every notification to stdout (default: False)
        NOTIFIER_WRITER_TRANSPORT_KEY: Transport key of the writer transport
            (default: "writer")
        NOTIFIER_VALIDATE_ON_STARTUP: Validate transports when the
            notification service starts (default: True)

    Example:
        ```python
        from infrastructure.services import get_settings

        settings = get_settings()

        if settings.notifier.max_workers > 1:
            # Fan out concurrently...
        ```
    """

    max_workers: int = Field(
        default=1,
        ge=1,
        alias="NOTIFIER_MAX_WORKERS",
        description="Transports pushed concurrently per notification",
    )
    writer_enabled: bool = Field(
        default=False,
        alias="NOTIFIER_WRITER_ENABLED",
        description="Register the stdout writer transport",
    )
    writer_transport_key: str = Field(
        default="writer",
        min_length=1,
        alias="NOTIFIER_WRITER_TRANSPORT_KEY",
        description="Transport key of the writer transport",
    )
    validate_on_startup: bool = Field(
        default=True,
        alias="NOTIFIER_VALIDATE_ON_STARTUP",
        description="Validate transports when the notification service starts",
    )
