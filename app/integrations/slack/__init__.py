"""Slack Integration Package.

- client: SlackClientManager, a lazily-created shared slack_sdk WebClient.
"""

from integrations.slack.client import SlackClientManager

__all__ = ["SlackClientManager"]
