from threading import Lock
from typing import Any, Optional

from slack_sdk import WebClient


class SlackClientManager:
    """Manages the Slack API client. Ensures a single WebClient is shared per manager."""

    def __init__(self, token: Optional[str] = None, **client_options: Any):
        """
        Args:
            token: Slack bot token. Read from settings.slack.SLACK_TOKEN when omitted.
            **client_options: Extra keyword arguments for slack_sdk.WebClient
                (base_url, timeout, ...).
        """
        self._token = token
        self._client_options = client_options
        self._client: Optional[WebClient] = None
        self._lock = Lock()

    def get_client(self, timeout: Optional[int] = None) -> WebClient:
        """Returns the shared Slack WebClient, creating it on first use.

        Args:
            timeout: Request timeout in seconds. When given, a dedicated client
                with that timeout is returned instead of the shared one, so
                concurrent callers keep their own deadlines.
        """
        if timeout is not None:
            options = {**self._client_options, "timeout": timeout}
            return WebClient(token=self._resolve_token(), **options)

        with self._lock:
            if self._client is None:
                self._client = WebClient(
                    token=self._resolve_token(), **self._client_options
                )
            return self._client

    def _resolve_token(self) -> Optional[str]:
        if self._token is not None:
            return self._token

        from infrastructure.services.providers import get_settings

        return get_settings().slack.SLACK_TOKEN
