"""Dispatch context binding for structured logging.

Binds dispatch-scoped context (dispatch ID, event type, ...) to structlog's
context variables so every log entry emitted while a notification is being
pushed carries it, including entries written by transports.

Usage:
    from infrastructure.logging import bind_dispatch_context

    with bind_dispatch_context(event_type="com.example.build.failed"):
        logger.info("pushing_notification")

Dependencies:
    - structlog.contextvars
"""

import uuid
from contextlib import contextmanager
from typing import Any, Generator, Optional

import structlog


@contextmanager
def bind_dispatch_context(
    dispatch_id: Optional[str] = None,
    event_type: Optional[str] = None,
    **extra_context: Any,
) -> Generator[str, None, None]:
    """Bind dispatch-scoped context to all logs within the block.

    Args:
        dispatch_id: Unique dispatch identifier. Auto-generated if not provided.
        event_type: Event type of the notification being dispatched.
        **extra_context: Additional key-value pairs to include in logs.

    Yields:
        The dispatch ID in effect for the block.

    Example:
        with bind_dispatch_context(event_type=notification.event_type) as dispatch_id:
            logger.info("dispatch_started")
    """
    context: dict[str, Any] = {"dispatch_id": dispatch_id or str(uuid.uuid4())}

    if event_type is not None:
        context["event_type"] = event_type

    context.update(extra_context)

    previous = structlog.contextvars.get_contextvars()
    structlog.contextvars.bind_contextvars(**context)
    try:
        yield context["dispatch_id"]
    finally:
        structlog.contextvars.unbind_contextvars(*context.keys())
        # Restore anything an outer block had bound under the same names
        restored = {key: previous[key] for key in context if key in previous}
        if restored:
            structlog.contextvars.bind_contextvars(**restored)


def get_dispatch_id() -> Optional[str]:
    """Get the current dispatch ID from the logging context, if any."""
    ctx = structlog.contextvars.get_contextvars()
    return ctx.get("dispatch_id")


def clear_dispatch_context() -> None:
    """Clear all context-variable logging context."""
    structlog.contextvars.clear_contextvars()
