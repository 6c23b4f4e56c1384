"""Notification dispatcher with preference-gated fan-out.

Routes a notification to every registered transport its recipient opted into:
- Resolves the recipient through an injected ``UserStore``
- Skips transports the recipient does not want (not a failure)
- Pushes every eligible transport, even after earlier ones failed
- Reports all failures at once as a ``DispatchError``

Usage Example:
    from infrastructure.notifications import (
        NotificationBuilder,
        NotificationDispatcher,
        SlackTransport,
        WriterTransport,
    )

    dispatcher = NotificationDispatcher(
        user_store=store,
        transports=[WriterTransport("writer"), SlackTransport("slack", token=token)],
    )

    try:
        dispatcher.push(notification)
    except RecipientResolutionError:
        ...  # nobody to notify, no transport was invoked
    except DispatchError as exc:
        permanent = exc.permanent_errors()
"""

import contextvars
from concurrent.futures import ThreadPoolExecutor
from threading import Lock
from typing import Dict, Iterable, List, Optional, Tuple

from infrastructure.identity import User, UserStore
from infrastructure.logging import bind_dispatch_context, get_module_logger
from infrastructure.notifications.context import PushContext
from infrastructure.notifications.models import Notification, TransportKey
from infrastructure.notifications.transports.base import Transport, Validator
from infrastructure.operations import (
    OperationResult,
    RecipientResolutionError,
    is_permanent,
    join_errors,
    permanent,
)

logger = get_module_logger()


class NotificationDispatcher:
    """Preference-gated, multi-transport notification dispatcher.

    Transports are attempted in registration order. With ``max_workers``
    greater than 1 eligible transports are pushed concurrently on a thread
    pool; failures are still reported in registration order.

    The dispatcher keeps no per-push state, so ``push`` may be called from
    several threads at once.

    Attributes:
        user_store: Resolves notification recipients to users
        max_workers: Transports pushed concurrently per notification (1 =
            sequential)

    Example:
        dispatcher = NotificationDispatcher(store, [email, slack], max_workers=4)
        dispatcher.push(notification, PushContext.with_timeout(10))
    """

    def __init__(
        self,
        user_store: UserStore,
        transports: Optional[Iterable[Transport]] = None,
        max_workers: int = 1,
    ):
        """Initialize notification dispatcher.

        Args:
            user_store: Recipient resolver
            transports: Transports to register, in order
            max_workers: Concurrent pushes per notification (default: 1)

        Raises:
            ValueError: If max_workers is below 1 or two transports share a key
        """
        if max_workers < 1:
            raise ValueError("max_workers must be at least 1")

        self.user_store = user_store
        self.max_workers = max_workers
        self._transports: List[Transport] = []
        self._lock = Lock()

        for transport in transports or []:
            self.add_transport(transport)

        logger.info(
            "initialized_notification_dispatcher",
            transports=[t.key for t in self._transports],
            max_workers=max_workers,
        )

    @property
    def transports(self) -> Tuple[Transport, ...]:
        """Registered transports, in registration order."""
        with self._lock:
            return tuple(self._transports)

    def add_transport(self, transport: Transport) -> None:
        """Register a transport after the existing ones.

        Raises:
            ValueError: If a transport with the same key is already registered
        """
        with self._lock:
            if any(t.key == transport.key for t in self._transports):
                raise ValueError(f"transport {transport.key!r} already registered")
            self._transports.append(transport)

    def get_transport(self, key: TransportKey) -> Optional[Transport]:
        for transport in self.transports:
            if transport.key == key:
                return transport
        return None

    def get_available_transports(self) -> List[TransportKey]:
        return [t.key for t in self.transports]

    def push(
        self, notification: Notification, context: Optional[PushContext] = None
    ) -> None:
        """Deliver a notification through every transport its recipient wants.

        Process:
        1. Resolve the recipient from ``notification.recipient``. On failure
           nothing is pushed.
        2. Skip transports the user does not want for this event type.
        3. Push every remaining transport, regardless of earlier failures.
           Once ``context`` is cancelled, transports that have not started
           yet fail with ``PushCancelledError`` without being invoked.
        4. Raise all failures together, or return None.

        Args:
            notification: Notification to deliver
            context: Cancellation/deadline; never cancelled when omitted

        Raises:
            RecipientResolutionError: The user store could not resolve the
                recipient (the store's error is chained as __cause__)
            DispatchError: One or more transports failed
        """
        context = context or PushContext.background()

        with bind_dispatch_context(event_type=notification.event_type):
            try:
                user = self.user_store.find(notification.recipient)
            except Exception as e:
                logger.debug(
                    "failed_to_find_user",
                    identities=str(notification.recipient),
                    error=str(e),
                )
                raise RecipientResolutionError(
                    f"failed to find recipient user: {e}"
                ) from e

            eligible = []
            for transport in self.transports:
                if not user.wants(notification.event_type, transport.key):
                    logger.debug(
                        "notification_not_wanted",
                        user=user.key,
                        transport=transport.key,
                    )
                    continue
                eligible.append(transport)

            if self.max_workers > 1 and len(eligible) > 1:
                errors = self._push_concurrently(eligible, notification, context, user)
            else:
                errors = [
                    self._push_one(transport, notification, context, user)
                    for transport in eligible
                ]

            error = join_errors(errors)

            logger.info(
                "notification_dispatched",
                user=user.key,
                attempted=len(eligible),
                failed=len(error.exceptions) if error else 0,
            )

        if error is not None:
            raise error

    def validate(
        self, context: Optional[PushContext] = None
    ) -> Dict[TransportKey, OperationResult]:
        """Validate every transport that supports it.

        Validation failures are always permanent: a misconfigured transport
        is never retried into health.

        Returns:
            Dict mapping transport key to its OperationResult. Transports
            without a ``validate`` hook report success.

        Example:
            results = dispatcher.validate()
            broken = [k for k, r in results.items() if not r.is_success]
        """
        context = context or PushContext.background()
        results: Dict[TransportKey, OperationResult] = {}

        for transport in self.transports:
            if not isinstance(transport, Validator):
                results[transport.key] = OperationResult.success(
                    message="validation not supported"
                )
                continue

            try:
                transport.validate(context)
            except Exception as e:
                error = e if is_permanent(e) else permanent(e)
                logger.error(
                    "transport_validation_failed",
                    transport=transport.key,
                    error=str(e),
                )
                results[transport.key] = OperationResult.permanent_error(
                    str(error),
                    error_code=type(e).__name__,
                    error=error,
                )
                continue

            results[transport.key] = OperationResult.success(
                message="transport validated"
            )

        return results

    def _push_one(
        self,
        transport: Transport,
        notification: Notification,
        context: PushContext,
        user: User,
    ) -> Optional[Exception]:
        try:
            context.check()
            logger.info("pushing_notification", user=user.key, transport=transport.key)
            transport.push(notification, context)
        except Exception as e:
            logger.error(
                "failed_to_push_notification",
                user=user.key,
                transport=transport.key,
                error=str(e),
                permanent=is_permanent(e),
            )
            return e
        return None

    def _push_concurrently(
        self,
        transports: List[Transport],
        notification: Notification,
        context: PushContext,
        user: User,
    ) -> List[Optional[Exception]]:
        workers = min(self.max_workers, len(transports))
        with ThreadPoolExecutor(
            max_workers=workers, thread_name_prefix="notifier"
        ) as executor:
            # Each task gets its own copy so the bound dispatch context
            # reaches logs written from worker threads
            futures = [
                executor.submit(
                    contextvars.copy_context().run,
                    self._push_one,
                    transport,
                    notification,
                    context,
                    user,
                )
                for transport in transports
            ]
            return [future.result() for future in futures]
