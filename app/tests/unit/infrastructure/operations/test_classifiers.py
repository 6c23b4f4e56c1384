"""Unit tests for error classifiers."""

import pytest
from slack_sdk.errors import SlackApiError

from infrastructure.operations.classifiers import (
    PERMANENT_SLACK_ERRORS,
    classify_error,
    classify_slack_error,
    slack_error_code,
)
from infrastructure.operations.errors import (
    DispatchError,
    PermanentError,
    PushCancelledError,
    RecipientNotFoundError,
    RecipientResolutionError,
)
from infrastructure.operations.status import OperationStatus


def _slack_error(code):
    return SlackApiError(
        message=f"The request to the Slack API failed: {code}",
        response={"ok": False, "error": code},
    )


@pytest.mark.unit
class TestClassifyError:
    def test_none_is_success(self):
        assert classify_error(None) == OperationStatus.SUCCESS

    def test_permanent(self):
        assert classify_error(PermanentError("x")) == OperationStatus.PERMANENT_ERROR

    def test_permanent_wrapped_in_cause_chain(self):
        try:
            raise RuntimeError("outer") from PermanentError("inner")
        except RuntimeError as exc:
            assert classify_error(exc) == OperationStatus.PERMANENT_ERROR

    def test_recipient_not_found(self):
        assert classify_error(RecipientNotFoundError("x")) == OperationStatus.NOT_FOUND

    def test_recipient_resolution_wrapping_not_found(self):
        try:
            raise RecipientResolutionError("failed") from RecipientNotFoundError("x")
        except RecipientResolutionError as exc:
            assert classify_error(exc) == OperationStatus.NOT_FOUND

    def test_cancelled(self):
        assert classify_error(PushCancelledError("push cancelled")) == OperationStatus.CANCELLED

    def test_unclassified_is_transient(self):
        assert classify_error(ConnectionError("reset")) == OperationStatus.TRANSIENT_ERROR

    def test_group_of_permanent_errors_is_permanent(self):
        group = DispatchError("failed", [PermanentError("a"), PermanentError("b")])

        assert classify_error(group) == OperationStatus.PERMANENT_ERROR

    def test_mixed_group_is_transient(self):
        group = DispatchError("failed", [PermanentError("a"), TimeoutError("b")])

        assert classify_error(group) == OperationStatus.TRANSIENT_ERROR


@pytest.mark.unit
class TestClassifySlackError:
    @pytest.mark.parametrize(
        "code",
        ["invalid_auth", "not_authed", "token_revoked", "channel_not_found", "user_not_found"],
    )
    def test_permanent_codes(self, code):
        assert classify_slack_error(_slack_error(code)) == OperationStatus.PERMANENT_ERROR

    @pytest.mark.parametrize("code", ["ratelimited", "internal_error", "fatal_error"])
    def test_other_codes_are_transient(self, code):
        assert classify_slack_error(_slack_error(code)) == OperationStatus.TRANSIENT_ERROR

    def test_non_api_error_is_transient(self):
        assert classify_slack_error(ConnectionError("reset")) == OperationStatus.TRANSIENT_ERROR

    def test_ratelimited_is_not_considered_permanent(self):
        assert "ratelimited" not in PERMANENT_SLACK_ERRORS


@pytest.mark.unit
class TestSlackErrorCode:
    def test_extracts_code(self):
        assert slack_error_code(_slack_error("invalid_auth")) == "invalid_auth"

    def test_non_slack_error(self):
        assert slack_error_code(ValueError("x")) is None

    def test_missing_response(self):
        assert slack_error_code(SlackApiError("failed", None)) is None
