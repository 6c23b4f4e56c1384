"""
Factory functions for dependency injection.

Provides application-scoped singleton providers for core infrastructure services.
"""

from functools import lru_cache

from infrastructure.configuration import Settings
from integrations.slack.client import SlackClientManager


@lru_cache
def get_settings() -> Settings:
    """
    Get application-scoped settings singleton.

    The @lru_cache decorator ensures only ONE instance is created per process.

        from infrastructure.services.providers import get_settings
        settings = get_settings()

    Returns:
        Settings: Cached settings instance loaded from environment.
    """
    return Settings()


@lru_cache
def get_slack_client_manager() -> SlackClientManager:
    """
    Get application-scoped Slack client manager singleton.

    Returns:
        SlackClientManager: Cached manager using settings.slack.SLACK_TOKEN.
    """
    return SlackClientManager(token=get_settings().slack.SLACK_TOKEN)
