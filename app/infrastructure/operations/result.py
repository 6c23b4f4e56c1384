"""Operation result dataclass.

Uniform result type used to report per-transport outcomes that are not
raised, such as startup validation of every registered transport.
"""

from typing import Optional, Any
from dataclasses import dataclass

from infrastructure.operations.status import OperationStatus


@dataclass
class OperationResult:
    """Uniform result returned from operations.

    Attributes:
        status: OperationStatus -- high-level outcome
        message: str -- human-friendly message for logs/troubleshooting
        data: Optional[Any] -- optional payload
        error_code: Optional[str] -- optional machine error code
        error: Optional[BaseException] -- the exception behind a failure, if any
    """

    status: OperationStatus
    message: str
    data: Optional[Any] = None
    error_code: Optional[str] = None
    error: Optional[BaseException] = None

    @property
    def is_success(self) -> bool:
        return self.status == OperationStatus.SUCCESS

    @property
    def is_retriable(self) -> bool:
        return self.status.is_retriable

    @classmethod
    def success(
        cls, data: Optional[Any] = None, message: str = "ok"
    ) -> "OperationResult":
        return cls(status=OperationStatus.SUCCESS, message=message, data=data)

    @classmethod
    def error(
        cls,
        status: OperationStatus,
        message: str,
        error_code: Optional[str] = None,
        error: Optional[BaseException] = None,
        data: Optional[Any] = None,
    ) -> "OperationResult":
        return cls(
            status=status,
            message=message,
            error_code=error_code,
            error=error,
            data=data,
        )

    @classmethod
    def transient_error(
        cls,
        message: str,
        error_code: Optional[str] = None,
        error: Optional[BaseException] = None,
    ) -> "OperationResult":
        """Create a transient (possibly retryable) error result."""
        return cls.error(OperationStatus.TRANSIENT_ERROR, message, error_code, error)

    @classmethod
    def permanent_error(
        cls,
        message: str,
        error_code: Optional[str] = None,
        error: Optional[BaseException] = None,
    ) -> "OperationResult":
        """Create a permanent (non-retryable) error result."""
        return cls.error(OperationStatus.PERMANENT_ERROR, message, error_code, error)

    @classmethod
    def from_exception(
        cls, exc: BaseException, error_code: Optional[str] = None
    ) -> "OperationResult":
        """Build a failed result whose status is derived from ``exc``.

        Args:
            exc: Exception raised by the operation
            error_code: Optional machine error code; defaults to the
                exception class name

        Returns:
            OperationResult with the classified status and ``exc`` attached
        """
        # Imported here, classifiers depends on this module
        from infrastructure.operations.classifiers import classify_error

        return cls.error(
            classify_error(exc),
            str(exc) or type(exc).__name__,
            error_code=error_code or type(exc).__name__,
            error=exc,
        )
