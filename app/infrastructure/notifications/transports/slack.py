"""Slack transport: direct messages through the Slack Web API."""

import math
from typing import Any, Dict, Optional, Protocol, runtime_checkable

from slack_sdk import WebClient
from slack_sdk.errors import SlackApiError

from infrastructure.identifiers import KIND_ID, NamespacedKey
from infrastructure.logging import get_module_logger
from infrastructure.notifications.context import PushContext
from infrastructure.notifications.models import Notification, TransportKey
from infrastructure.notifications.transports.base import Transport
from infrastructure.operations.classifiers import classify_slack_error, slack_error_code
from infrastructure.operations.errors import PermanentError, PushCancelledError
from infrastructure.operations.status import OperationStatus
from integrations.slack.client import SlackClientManager

logger = get_module_logger()

SLACK_ID = NamespacedKey.of("slack.com", KIND_ID)


@runtime_checkable
class SlackRichNotification(Protocol):
    """Optional capability of notifications supporting Slack formatting.

    ``get_slack_options`` returns extra ``chat.postMessage`` arguments such as
    ``blocks``, ``attachments`` or ``unfurl_links``.

    Example:
        class BuildFailed(Message):
            blocks: list = []

            def get_slack_options(self) -> dict:
                return {"blocks": self.blocks}
    """

    def get_slack_options(self) -> Dict[str, Any]: ...  # pragma: no cover


class SlackTransport(Transport):
    """Sends notifications as Slack messages to the recipient's Slack user ID.

    The recipient must carry a ``slack.com/id`` identity. Plain notifications
    are sent as text; notifications implementing ``SlackRichNotification``
    also contribute their Slack options.
    """

    def __init__(
        self,
        key: TransportKey,
        token: Optional[str] = None,
        client_manager: Optional[SlackClientManager] = None,
        **client_options: Any,
    ):
        """
        Args:
            key: Transport key
            token: Slack bot token (ignored when client_manager is given)
            client_manager: Shared SlackClientManager; created from token and
                client_options when omitted
            **client_options: Extra slack_sdk.WebClient options
        """
        self._key = key
        self._client_manager = client_manager or SlackClientManager(
            token=token, **client_options
        )

    @property
    def key(self) -> TransportKey:
        return self._key

    def push(self, notification: Notification, context: PushContext) -> None:
        """Post the rendered message to the recipient's Slack user ID.

        The request timeout is bounded by the time left on the context, so an
        in-flight call gives up at the caller's deadline.

        Raises:
            PermanentError: No Slack ID, or Slack rejected the message for good
            PushCancelledError: The context was cancelled or its deadline
                passed, before or during the request
            SlackApiError: Transient Slack failures (rate limits, ...)
        """
        user_id = notification.recipient.get(SLACK_ID)
        if user_id is None:
            raise PermanentError("recipient does not have a Slack ID")

        context.check()

        options = self._message_options(notification)
        client = self._client_for(context)

        try:
            response = client.chat_postMessage(channel=user_id, **options)
        except SlackApiError as e:
            code = slack_error_code(e)
            logger.warning(
                "slack_post_message_failed",
                transport=self._key,
                slack_user_id=user_id,
                error=code or str(e),
            )
            if classify_slack_error(e) is OperationStatus.PERMANENT_ERROR:
                raise PermanentError(f"Slack rejected message: {code}") from e
            self._raise_if_cancelled(context, e)
            raise
        except Exception as e:
            self._raise_if_cancelled(context, e)
            raise

        logger.info(
            "slack_message_sent",
            transport=self._key,
            slack_user_id=user_id,
            ts=response.get("ts"),
        )

    def validate(self, context: PushContext) -> None:
        """Check the token with ``auth.test``.

        Raises:
            PermanentError: Authentication failed for any reason
        """
        context.check()
        try:
            response = self._client_for(context).auth_test()
        except Exception as e:
            raise PermanentError(f"authentication failed: {e}") from e

        logger.info(
            "slack_transport_connected",
            transport=self._key,
            slack_team=response.get("team"),
            slack_user=response.get("user"),
        )

    def _client_for(self, context: PushContext) -> WebClient:
        remaining = context.remaining()
        if remaining is None:
            return self._client_manager.get_client()
        # WebClient timeouts are whole seconds
        return self._client_manager.get_client(timeout=max(1, math.ceil(remaining)))

    def _raise_if_cancelled(self, context: PushContext, error: Exception) -> None:
        if not context.cancelled:
            return
        logger.warning(
            "slack_request_cancelled",
            transport=self._key,
            error=str(error),
        )
        reason = "push deadline exceeded" if context.deadline_exceeded else "push cancelled"
        raise PushCancelledError(reason) from error

    def _message_options(self, notification: Notification) -> Dict[str, Any]:
        options: Dict[str, Any] = {}

        message = notification.render(self._key)
        if message:
            options["text"] = message

        if isinstance(notification, SlackRichNotification):
            options.update(notification.get_slack_options())

        return options
