"""Transport abstract base class and optional capabilities.

All delivery channels (Slack, writer, ...) implement ``Transport``. Optional
behavior is expressed as runtime-checkable protocols that callers probe with
``isinstance`` rather than assume.
"""

from abc import ABC, abstractmethod
from typing import Protocol, runtime_checkable

from infrastructure.notifications.context import PushContext
from infrastructure.notifications.models import Notification, TransportKey


class Transport(ABC):
    """Abstract base class for delivery transports.

    A transport delivers one notification to its recipient through one
    channel. It resolves the address it needs from ``notification.recipient``
    by looking for a namespaced key it understands (``email``,
    ``slack.com/id``, ...).

    Contract:
        - ``key`` is stable for the lifetime of the instance; it is used for
          preference lookups and per-transport message rendering.
        - ``push`` returns None on success and raises on failure.
        - A recipient lacking the address the transport needs is a
          ``PermanentError``: retrying cannot help.
        - ``push`` may be called concurrently from several threads.

    Example Implementation:
        class EmailTransport(Transport):

            @property
            def key(self) -> TransportKey:
                return "email"

            def push(self, notification, context=None):
                address = notification.recipient.get(GENERIC_EMAIL)
                if address is None:
                    raise PermanentError("recipient does not have an email address")
                self._smtp.send(address, notification.render(self.key))
    """

    @property
    @abstractmethod
    def key(self) -> TransportKey:
        """Stable identifier of this transport instance."""
        pass

    @abstractmethod
    def push(self, notification: Notification, context: PushContext) -> None:
        """Deliver ``notification`` to its recipient.

        Args:
            notification: Notification to deliver
            context: Cancellation/deadline of the enclosing dispatch

        Raises:
            PermanentError: When retrying cannot succeed (missing address,
                bad credentials)
            Exception: Any other failure, treated as possibly transient
        """
        pass

    def __repr__(self) -> str:
        return f"{type(self).__name__}(key={self.key!r})"


@runtime_checkable
class Validator(Protocol):
    """Optional startup/health-check capability of a transport.

    ``validate`` raises ``PermanentError`` when the transport is misconfigured
    (for example when authentication fails); a misconfigured transport is
    never retried into health.
    """

    def validate(self, context: PushContext) -> None: ...  # pragma: no cover
