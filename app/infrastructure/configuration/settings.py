"""Mailroom configuration settings - main aggregator."""

from pydantic_settings import BaseSettings, SettingsConfigDict

# Integration settings
from infrastructure.configuration.integrations import SlackSettings

# Infrastructure settings
from infrastructure.configuration.infrastructure import NotifierSettings


class Settings(BaseSettings):
    """Mailroom configuration settings - main aggregator.

    Aggregates all domain-specific settings into a single configuration object:

    - **Integrations**: External service configurations (Slack)
    - **Infrastructure**: Core notifier configuration (fan-out, transports)

    Environment Variables:
        LOG_LEVEL: Logging level (DEBUG, INFO, WARNING, ERROR)
        ENVIRONMENT: Deployment environment name (default: development)

    Example:
        ```python
        from infrastructure.services import get_settings

        settings = get_settings()

        slack_token = settings.slack.SLACK_TOKEN
        max_workers = settings.notifier.max_workers

        if settings.is_production:
            # Production-specific logic...
        ```
    """

    # Application-level settings
    LOG_LEVEL: str = "INFO"
    ENVIRONMENT: str = "development"

    # Integration settings
    slack: SlackSettings

    # Infrastructure settings
    notifier: NotifierSettings

    @property
    def is_production(self) -> bool:
        """Check if the application is running in production.

        Returns:
            True if ENVIRONMENT is "production", False otherwise.
        """
        return self.ENVIRONMENT.lower() == "production"

    def __init__(self, **kwargs):
        """Initialize Settings with automatic subsettings instantiation.

        Args:
            **kwargs: Optional overrides for specific settings sections.
        """
        settings_map = {
            # Integrations
            "slack": SlackSettings,
            # Infrastructure
            "notifier": NotifierSettings,
        }

        for setting_name, setting_class in settings_map.items():
            if setting_name not in kwargs:
                kwargs[setting_name] = setting_class()

        super().__init__(**kwargs)

    model_config = SettingsConfigDict(
        env_file=".env",
        case_sensitive=True,
        extra="ignore",
    )
