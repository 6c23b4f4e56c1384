"""Infrastructure configuration module - public API.

Centralized configuration management for mailroom using Pydantic
BaseSettings with domain-based organization.

Exports:
    Settings: Main settings class
    SlackSettings: Slack integration settings
    NotifierSettings: Notification dispatch settings

Example:
    ```python
    from infrastructure.services import get_settings

    settings = get_settings()

    slack_token = settings.slack.SLACK_TOKEN
    max_workers = settings.notifier.max_workers
    ```
"""

from infrastructure.configuration.settings import Settings
from infrastructure.configuration.integrations.slack import SlackSettings
from infrastructure.configuration.infrastructure.notifier import NotifierSettings

__all__ = ["Settings", "SlackSettings", "NotifierSettings"]
