"""Slack integration settings."""

from pydantic import Field

from infrastructure.configuration.base import IntegrationSettings


class SlackSettings(IntegrationSettings):
    """Slack API configuration for the Slack transport.

    Environment Variables:
        SLACK_TOKEN: Slack bot token (xoxb-*). The Slack transport is only
            registered when this is set.
        SLACK_TRANSPORT_KEY: Transport key used for preference lookups and
            per-transport messages (default: "slack")

    Example:
        ```python
        from infrastructure.services import get_settings

        settings = get_settings()

        if settings.slack.enabled:
            token = settings.slack.SLACK_TOKEN
        ```
    """

    SLACK_TOKEN: str = ""
    SLACK_TRANSPORT_KEY: str = Field(default="slack", min_length=1)

    @property
    def enabled(self) -> bool:
        return bool(self.SLACK_TOKEN)
