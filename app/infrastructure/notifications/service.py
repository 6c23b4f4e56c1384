"""Notification service for dependency injection.

Wires settings, a user store and transports into a ``NotificationDispatcher``
behind a small class-based interface that is easy to construct in
process wiring and to replace with mocks in tests.
"""

from typing import TYPE_CHECKING, Dict, List, Optional

from infrastructure.logging import get_module_logger
from infrastructure.notifications.context import PushContext
from infrastructure.notifications.dispatcher import NotificationDispatcher
from infrastructure.notifications.models import Notification, TransportKey
from infrastructure.notifications.transports.base import Transport
from infrastructure.notifications.transports.slack import SlackTransport
from infrastructure.notifications.transports.writer import WriterTransport
from infrastructure.operations import OperationResult, join_errors

if TYPE_CHECKING:
    from infrastructure.configuration import Settings
    from infrastructure.identity import UserStore
    from integrations.slack.client import SlackClientManager

logger = get_module_logger()


def build_default_transports(
    settings: "Settings",
    slack_client_manager: Optional["SlackClientManager"] = None,
) -> List[Transport]:
    """Create the transports enabled in settings.

    - writer transport (stdout) when NOTIFIER_WRITER_ENABLED is set
    - Slack transport when SLACK_TOKEN is set

    Args:
        settings: Settings instance
        slack_client_manager: Optional shared Slack client manager; created
            from settings.slack.SLACK_TOKEN when omitted

    Returns:
        Transports in registration order
    """
    transports: List[Transport] = []

    if settings.notifier.writer_enabled:
        transports.append(WriterTransport(settings.notifier.writer_transport_key))

    if settings.slack.enabled:
        transports.append(
            SlackTransport(
                settings.slack.SLACK_TRANSPORT_KEY,
                token=settings.slack.SLACK_TOKEN,
                client_manager=slack_client_manager,
            )
        )

    logger.info(
        "built_default_transports",
        transports=[t.key for t in transports],
    )
    return transports


class NotificationService:
    """Class-based notification service.

    A thin facade: all delivery work is delegated to the underlying
    NotificationDispatcher instance.

    Usage:
        from infrastructure.services import get_settings
        from infrastructure.notifications import NotificationService

        service = NotificationService(get_settings(), user_store=store)
        service.startup()
        service.push(notification)
    """

    def __init__(
        self,
        settings: "Settings",
        user_store: Optional["UserStore"] = None,
        transports: Optional[List[Transport]] = None,
        dispatcher: Optional[NotificationDispatcher] = None,
        slack_client_manager: Optional["SlackClientManager"] = None,
    ):
        """Initialize notification service.

        Args:
            settings: Settings instance (required).
            user_store: Recipient resolver; required unless a dispatcher is given.
            transports: Optional transports. If not provided, creates the
                default transports enabled in settings.
            dispatcher: Optional pre-configured NotificationDispatcher instance.
            slack_client_manager: Optional shared Slack client manager used for
                the default Slack transport.

        Raises:
            ValueError: If neither user_store nor dispatcher is given
        """
        if dispatcher is None:
            if user_store is None:
                raise ValueError("user_store is required when no dispatcher is given")

            if transports is None:
                transports = build_default_transports(settings, slack_client_manager)

            dispatcher = NotificationDispatcher(
                user_store=user_store,
                transports=transports,
                max_workers=settings.notifier.max_workers,
            )

        self._dispatcher = dispatcher
        self._settings = settings

    def startup(self, context: Optional[PushContext] = None) -> None:
        """Validate transports if NOTIFIER_VALIDATE_ON_STARTUP is set.

        Raises:
            DispatchError: Grouping the PermanentError of every transport
                that failed validation
        """
        if not self._settings.notifier.validate_on_startup:
            logger.info("transport_validation_skipped")
            return

        results = self.validate(context)
        error = join_errors(
            (result.error for result in results.values() if not result.is_success),
            message="transport validation failed",
        )
        if error is not None:
            raise error

        logger.info("transports_validated", transports=list(results))

    def push(
        self, notification: Notification, context: Optional[PushContext] = None
    ) -> None:
        """Deliver a notification through every transport its recipient wants.

        See NotificationDispatcher.push.
        """
        self._dispatcher.push(notification, context)

    def validate(
        self, context: Optional[PushContext] = None
    ) -> Dict[TransportKey, OperationResult]:
        return self._dispatcher.validate(context)

    def register_transport(self, transport: Transport) -> None:
        """Register a new transport after the existing ones."""
        self._dispatcher.add_transport(transport)

    def get_transport(self, key: TransportKey) -> Optional[Transport]:
        return self._dispatcher.get_transport(key)

    def list_transports(self) -> List[TransportKey]:
        return self._dispatcher.get_available_transports()

    @property
    def dispatcher(self) -> NotificationDispatcher:
        """Access underlying NotificationDispatcher instance."""
        return self._dispatcher
