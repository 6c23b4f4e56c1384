"""Writer transport: prints notifications to a text stream.

Primarily used for local development and debugging, e.g. writing every
notification to stdout.
"""

import sys
from threading import Lock
from typing import Optional, TextIO

from infrastructure.logging import get_module_logger
from infrastructure.notifications.context import PushContext
from infrastructure.notifications.models import Notification, TransportKey
from infrastructure.notifications.transports.base import Transport

logger = get_module_logger()


class WriterTransport(Transport):
    """Writes one line per notification to ``stream``.

    Line format:
        notification: type=<event type>, to=<identities>, message=<rendered message>

    Write failures (``OSError``) propagate unclassified.
    """

    def __init__(self, key: TransportKey, stream: Optional[TextIO] = None):
        """
        Args:
            key: Transport key
            stream: Text stream to write to (default: sys.stdout)
        """
        self._key = key
        self._stream = stream if stream is not None else sys.stdout
        self._lock = Lock()

    @property
    def key(self) -> TransportKey:
        return self._key

    def push(self, notification: Notification, context: PushContext) -> None:
        context.check()

        line = (
            f"notification: type={notification.event_type}, "
            f"to={notification.recipient}, "
            f"message={notification.render(self._key)}\n"
        )

        # Concurrent pushes must not interleave partial lines
        with self._lock:
            self._stream.write(line)
            self._stream.flush()

        logger.debug(
            "notification_written",
            transport=self._key,
            event_type=notification.event_type,
        )
