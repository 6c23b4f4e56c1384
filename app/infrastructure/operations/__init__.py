"""Operation results, error taxonomy and error classification.

This module contains the error types raised while dispatching notifications,
the aggregate error used for fan-out, standardized result types, and
classifiers that map exceptions to retry-relevant statuses.
"""

from infrastructure.operations.classifiers import (
    PERMANENT_SLACK_ERRORS,
    classify_error,
    classify_slack_error,
    slack_error_code,
)
from infrastructure.operations.errors import (
    DispatchError,
    NotifierError,
    PermanentError,
    PushCancelledError,
    RecipientNotFoundError,
    RecipientResolutionError,
    error_is,
    is_permanent,
    join_errors,
    permanent,
)
from infrastructure.operations.result import OperationResult
from infrastructure.operations.status import OperationStatus

__all__ = [
    "OperationResult",
    "OperationStatus",
    "NotifierError",
    "PermanentError",
    "RecipientNotFoundError",
    "RecipientResolutionError",
    "PushCancelledError",
    "DispatchError",
    "permanent",
    "is_permanent",
    "error_is",
    "join_errors",
    "classify_error",
    "classify_slack_error",
    "slack_error_code",
    "PERMANENT_SLACK_ERRORS",
]
