"""Unit tests for infrastructure.operations.errors.

Tests cover:
- PermanentError wrapping and unwrapping
- permanent() / is_permanent()
- error_is() through cause chains and exception groups
- DispatchError and join_errors()
"""

import pytest

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


def _raise_from(exc, cause):
    try:
        raise exc from cause
    except type(exc) as raised:
        return raised


@pytest.mark.unit
class TestPermanentError:
    """Test suite for PermanentError."""

    def test_wraps_exception(self):
        cause = ValueError("bad address")

        exc = PermanentError(cause)

        assert exc.cause is cause
        assert exc.__cause__ is cause
        assert exc.unwrap() is cause
        assert str(exc) == "bad address"

    def test_plain_message(self):
        exc = PermanentError("recipient does not have a Slack ID")

        assert exc.cause is None
        assert exc.unwrap() is None
        assert str(exc) == "recipient does not have a Slack ID"

    def test_unwrap_falls_back_to_chained_cause(self):
        cause = RuntimeError("invalid_auth")

        exc = _raise_from(PermanentError("authentication failed"), cause)

        assert exc.unwrap() is cause

    def test_is_notifier_error(self):
        assert isinstance(PermanentError("x"), NotifierError)

    def test_recipient_not_found_is_lookup_error(self):
        assert isinstance(RecipientNotFoundError("nobody"), LookupError)


@pytest.mark.unit
class TestPermanentHelpers:
    """Test suite for permanent() and is_permanent()."""

    def test_permanent_wraps_plain_exception(self):
        cause = ValueError("x")

        exc = permanent(cause)

        assert isinstance(exc, PermanentError)
        assert exc.cause is cause

    def test_permanent_is_idempotent(self):
        exc = PermanentError("x")

        assert permanent(exc) is exc

    def test_permanent_accepts_message(self):
        assert str(permanent("no address")) == "no address"

    def test_is_permanent(self):
        assert is_permanent(PermanentError("x"))
        assert not is_permanent(ValueError("x"))
        assert not is_permanent(None)

    def test_is_permanent_through_cause_chain(self):
        exc = _raise_from(RuntimeError("outer"), PermanentError("inner"))

        assert is_permanent(exc)

    def test_group_is_not_permanent_itself(self):
        group = DispatchError("failed", [PermanentError("x")])

        assert not is_permanent(group)


@pytest.mark.unit
class TestErrorIs:
    """Test suite for error_is()."""

    def test_matches_class(self):
        assert error_is(RecipientNotFoundError("x"), RecipientNotFoundError)
        assert error_is(RecipientNotFoundError("x"), LookupError)

    def test_matches_instance_by_identity(self):
        target = ValueError("x")

        assert error_is(target, target)
        assert not error_is(ValueError("x"), target)

    def test_walks_cause_chain(self):
        cause = RecipientNotFoundError("nobody")
        exc = _raise_from(RecipientResolutionError("failed to find recipient"), cause)

        assert error_is(exc, RecipientNotFoundError)
        assert error_is(exc, cause)

    def test_walks_permanent_wrapping(self):
        cause = OSError("broken pipe")

        assert error_is(PermanentError(cause), cause)
        assert error_is(PermanentError(cause), OSError)

    def test_recurses_into_groups(self):
        cause = OSError("broken pipe")
        group = DispatchError("failed", [ValueError("a"), PermanentError(cause)])

        assert error_is(group, cause)
        assert error_is(group, ValueError)
        assert not error_is(group, KeyError)

    def test_recurses_into_nested_groups(self):
        inner = DispatchError("inner", [PushCancelledError("push cancelled")])
        outer = DispatchError("outer", [ValueError("a"), inner])

        assert error_is(outer, PushCancelledError)

    def test_none_never_matches(self):
        assert not error_is(None, ValueError)

    def test_cyclic_cause_chain_terminates(self):
        a = ValueError("a")
        b = ValueError("b")
        a.__cause__ = b
        b.__cause__ = a

        assert not error_is(a, KeyError)


@pytest.mark.unit
class TestJoinErrors:
    """Test suite for join_errors() and DispatchError."""

    def test_no_errors_yields_none(self):
        assert join_errors([]) is None
        assert join_errors([None, None]) is None

    def test_collects_errors_in_order(self):
        first = ValueError("first")
        second = PermanentError("second")

        group = join_errors([first, None, second])

        assert isinstance(group, DispatchError)
        assert isinstance(group, ExceptionGroup)
        assert list(group.exceptions) == [first, second]
        assert group.message == "notification push failed (2 error(s))"

    def test_custom_message(self):
        group = join_errors([ValueError("x")], message="transport validation failed")

        assert group.message == "transport validation failed (1 error(s))"

    def test_contains(self):
        cause = OSError("broken pipe")
        group = join_errors([ValueError("x"), PermanentError(cause)])

        assert group.contains(cause)
        assert group.contains(PermanentError)
        assert not group.contains(OSError("other"))

    def test_permanent_and_retriable_partition(self):
        transient = ValueError("rate limited")
        fatal = PermanentError("no address")

        group = join_errors([transient, fatal])

        assert group.permanent_errors() == [fatal]
        assert group.retriable_errors() == [transient]

    def test_subgroup_keeps_dispatch_error_type(self):
        group = join_errors([ValueError("x"), PermanentError("y")])

        permanent_only = group.subgroup(lambda e: isinstance(e, PermanentError))

        assert isinstance(permanent_only, DispatchError)
        assert len(permanent_only.exceptions) == 1

    def test_can_be_caught_with_except_star(self):
        group = join_errors([PermanentError("x"), ValueError("y")])
        caught = []

        try:
            raise group
        except* PermanentError as eg:
            caught.extend(eg.exceptions)
        except* ValueError as eg:
            caught.extend(eg.exceptions)

        assert len(caught) == 2
