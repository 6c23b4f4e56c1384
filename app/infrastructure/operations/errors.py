"""Notifier error taxonomy.

Errors raised while dispatching a notification fall into a few kinds:

- ``PermanentError``: structural failure (missing address, bad credentials);
  retrying cannot help.
- ``RecipientNotFoundError``: the recipient store matched no identity.
- ``PushCancelledError``: the caller cancelled the push or its deadline passed.
- anything else: unclassified, potentially transient.

A single ``push`` reports all of its transport failures at once through
``DispatchError``, an ``ExceptionGroup``. Use ``error_is`` (or
``DispatchError.contains``) to test whether a specific cause is in there,
however deeply it was wrapped.

Usage:
    from infrastructure.operations.errors import DispatchError, error_is, is_permanent

    try:
        dispatcher.push(notification)
    except DispatchError as exc:
        for cause in exc.exceptions:
            if is_permanent(cause):
                ...
"""

from typing import Iterable, List, Optional, Sequence, Type, Union

ErrorTarget = Union[BaseException, Type[BaseException]]


class NotifierError(Exception):
    """Base exception for errors raised by the notifier."""

    pass


class PermanentError(NotifierError):
    """A failure that must not be retried.

    Wraps an underlying exception (exposed as ``cause`` and ``__cause__``) or
    carries a plain message.

    Example:
        >>> raise PermanentError("recipient does not have a Slack ID")
        >>> raise PermanentError(exc)
        >>> raise PermanentError(f"authentication failed: {exc}") from exc
    """

    def __init__(self, cause: Union[BaseException, str]):
        if isinstance(cause, BaseException):
            super().__init__(str(cause))
            self.cause: Optional[BaseException] = cause
            self.__cause__ = cause
        else:
            super().__init__(cause)
            self.cause = None

    def unwrap(self) -> Optional[BaseException]:
        return self.cause if self.cause is not None else self.__cause__


class RecipientNotFoundError(NotifierError, LookupError):
    """Raised by a recipient store when no stored user matches the identities."""

    pass


class RecipientResolutionError(NotifierError):
    """Raised by the dispatcher when the recipient could not be resolved.

    The resolver's own exception is chained as ``__cause__``.
    """

    pass


class PushCancelledError(NotifierError):
    """Raised when a push context is cancelled or its deadline has passed."""

    pass


def permanent(exc: Union[BaseException, str]) -> PermanentError:
    """Mark an error as permanent (non-retriable)."""
    if isinstance(exc, PermanentError):
        return exc
    return PermanentError(exc)


def _matches(exc: BaseException, target: ErrorTarget) -> bool:
    if isinstance(target, type):
        return isinstance(exc, target)
    return exc is target


def _chain(exc: BaseException) -> Iterable[BaseException]:
    """Yield ``exc`` and every exception it explicitly wraps."""
    seen = set()
    current: Optional[BaseException] = exc
    while current is not None and id(current) not in seen:
        seen.add(id(current))
        yield current
        current = current.__cause__


def error_is(exc: Optional[BaseException], target: ErrorTarget) -> bool:
    """Check whether ``target`` appears anywhere inside ``exc``.

    Walks the explicit ``__cause__`` chain (``raise ... from ...`` and
    ``PermanentError`` wrapping) and recurses into exception groups.

    Args:
        exc: Exception to inspect (``None`` never matches)
        target: Exception class (matched with ``isinstance``) or instance
            (matched by identity)

    Returns:
        True if any wrapped exception matches
    """
    if exc is None:
        return False
    for current in _chain(exc):
        if _matches(current, target):
            return True
        if isinstance(current, BaseExceptionGroup):
            if any(error_is(member, target) for member in current.exceptions):
                return True
    return False


def is_permanent(exc: Optional[BaseException]) -> bool:
    """Check whether ``exc`` is, or wraps, a ``PermanentError``.

    Exception groups are not permanent themselves; inspect their members.
    """
    if exc is None:
        return False
    return any(isinstance(current, PermanentError) for current in _chain(exc))


class DispatchError(ExceptionGroup):
    """Aggregate of independent transport failures from one push.

    Never constructed empty (``ExceptionGroup`` refuses an empty sequence);
    use ``join_errors`` which returns ``None`` when there is nothing to report.
    """

    def derive(self, excs: Sequence[Exception]) -> "DispatchError":
        return DispatchError(self.message, excs)

    def contains(self, target: ErrorTarget) -> bool:
        """Membership test against any contained error, however wrapped."""
        return error_is(self, target)

    def permanent_errors(self) -> List[Exception]:
        return [exc for exc in self.exceptions if is_permanent(exc)]

    def retriable_errors(self) -> List[Exception]:
        return [exc for exc in self.exceptions if not is_permanent(exc)]


def join_errors(
    errors: Iterable[Optional[Exception]],
    message: str = "notification push failed",
) -> Optional[DispatchError]:
    """Fold errors into a ``DispatchError``.

    ``None`` entries are dropped. Returns ``None`` when no errors remain, so
    an empty aggregate is never surfaced.
    """
    collected = [exc for exc in errors if exc is not None]
    if not collected:
        return None
    return DispatchError(f"{message} ({len(collected)} error(s))", collected)
