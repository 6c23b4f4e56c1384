"""Error classifiers for dispatch and transport exceptions.

Converts exceptions into ``OperationStatus`` values so that callers can tell
permanent configuration problems from failures that might succeed later.

Key Functions:
- classify_error(): any exception raised by a push → OperationStatus
- classify_slack_error(): slack_sdk exceptions → OperationStatus
- slack_error_code(): extract the Slack API error code, if any

Usage:
    from infrastructure.operations.classifiers import classify_error

    try:
        dispatcher.push(notification)
    except DispatchError as exc:
        retriable = [e for e in exc.exceptions if classify_error(e).is_retriable]
"""

from typing import Optional

from slack_sdk.errors import SlackApiError

from infrastructure.operations.errors import (
    PushCancelledError,
    RecipientNotFoundError,
    error_is,
    is_permanent,
)
from infrastructure.operations.status import OperationStatus

# Slack API error codes that retrying cannot fix
PERMANENT_SLACK_ERRORS = frozenset(
    {
        "account_inactive",
        "channel_not_found",
        "invalid_auth",
        "is_archived",
        "missing_scope",
        "msg_too_long",
        "no_text",
        "not_authed",
        "not_in_channel",
        "restricted_action",
        "token_expired",
        "token_revoked",
        "user_not_found",
        "users_not_found",
    }
)


def classify_error(exc: Optional[BaseException]) -> OperationStatus:
    """Classify an exception raised while dispatching a notification.

    Mapping:
    - None: SUCCESS
    - PermanentError anywhere in the cause chain: PERMANENT_ERROR
    - RecipientNotFoundError anywhere in the chain: NOT_FOUND
    - PushCancelledError: CANCELLED
    - anything else: TRANSIENT_ERROR (unclassified errors may be retried)

    Exception groups are classified by their members: PERMANENT_ERROR only
    when every member is permanent, otherwise TRANSIENT_ERROR.
    """
    if exc is None:
        return OperationStatus.SUCCESS

    if isinstance(exc, BaseExceptionGroup):
        if all(is_permanent(member) for member in exc.exceptions):
            return OperationStatus.PERMANENT_ERROR
        return OperationStatus.TRANSIENT_ERROR

    if is_permanent(exc):
        return OperationStatus.PERMANENT_ERROR

    if error_is(exc, RecipientNotFoundError):
        return OperationStatus.NOT_FOUND

    if error_is(exc, PushCancelledError):
        return OperationStatus.CANCELLED

    return OperationStatus.TRANSIENT_ERROR


def slack_error_code(exc: BaseException) -> Optional[str]:
    """Return the ``error`` field of a Slack API error response, if present."""
    if not isinstance(exc, SlackApiError):
        return None
    response = getattr(exc, "response", None)
    if response is None:
        return None
    try:
        return response.get("error")
    except (AttributeError, TypeError):
        return None


def classify_slack_error(exc: BaseException) -> OperationStatus:
    """Classify slack_sdk exceptions.

    Error Code Mapping:
    - invalid_auth, not_authed, token_revoked, ...: PERMANENT_ERROR
    - channel_not_found, user_not_found, is_archived, ...: PERMANENT_ERROR
    - ratelimited and any other API error: TRANSIENT_ERROR
    - non-API errors (connection, timeout): TRANSIENT_ERROR

    Args:
        exc: Exception raised by the Slack WebClient

    Returns:
        OperationStatus for the failure
    """
    code = slack_error_code(exc)
    if code in PERMANENT_SLACK_ERRORS:
        return OperationStatus.PERMANENT_ERROR
    return OperationStatus.TRANSIENT_ERROR
