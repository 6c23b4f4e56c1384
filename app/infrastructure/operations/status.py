"""Operation status enumeration.

Classifies the outcome of a delivery or validation attempt so that callers
(and a future retry layer) can decide whether retrying is worthwhile.
"""

from enum import Enum


class OperationStatus(Enum):
    """Status codes for operation results.

    Attributes:
        SUCCESS: Operation completed successfully
        TRANSIENT_ERROR: Possibly retryable error (network, timeout, rate limit)
        PERMANENT_ERROR: Non-retryable error (missing address, bad credentials)
        NOT_FOUND: Recipient could not be resolved
        CANCELLED: Caller cancelled the operation or its deadline passed
    """

    SUCCESS = "success"
    TRANSIENT_ERROR = "transient_error"
    PERMANENT_ERROR = "permanent_error"
    NOT_FOUND = "not_found"
    CANCELLED = "cancelled"

    @property
    def is_retriable(self) -> bool:
        return self is OperationStatus.TRANSIENT_ERROR
