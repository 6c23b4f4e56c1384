"""Unit tests for OperationResult and OperationStatus in infrastructure."""

import pytest
from infrastructure.operations.errors import PermanentError, PushCancelledError
from infrastructure.operations.result import OperationResult
from infrastructure.operations.status import OperationStatus


@pytest.mark.unit
class TestOperationStatus:
    def test_operation_status_success(self):
        assert OperationStatus.SUCCESS.value == "success"

    def test_operation_status_transient_error(self):
        assert OperationStatus.TRANSIENT_ERROR.value == "transient_error"

    def test_operation_status_permanent_error(self):
        assert OperationStatus.PERMANENT_ERROR.value == "permanent_error"

    def test_operation_status_not_found(self):
        assert OperationStatus.NOT_FOUND.value == "not_found"

    def test_operation_status_cancelled(self):
        assert OperationStatus.CANCELLED.value == "cancelled"

    def test_only_transient_is_retriable(self):
        assert OperationStatus.TRANSIENT_ERROR.is_retriable
        assert not OperationStatus.PERMANENT_ERROR.is_retriable
        assert not OperationStatus.CANCELLED.is_retriable


@pytest.mark.unit
class TestOperationResultFactories:
    def test_success_factory_minimal(self):
        result = OperationResult.success()
        assert result.status == OperationStatus.SUCCESS
        assert result.is_success

    def test_success_factory_with_data(self):
        data = {"id": "123"}
        result = OperationResult.success(data=data, message="Created")
        assert result.status == OperationStatus.SUCCESS
        assert result.data == data
        assert result.message == "Created"

    def test_error_factory_with_error_code(self):
        result = OperationResult.error(
            OperationStatus.PERMANENT_ERROR, "Not found", error_code="404"
        )
        assert result.error_code == "404"
        assert not result.is_success

    def test_transient_error_is_retriable(self):
        result = OperationResult.transient_error("rate limited")
        assert result.status == OperationStatus.TRANSIENT_ERROR
        assert result.is_retriable

    def test_permanent_error_keeps_exception(self):
        exc = PermanentError("bad token")
        result = OperationResult.permanent_error("bad token", error=exc)
        assert result.status == OperationStatus.PERMANENT_ERROR
        assert result.error is exc
        assert not result.is_retriable


@pytest.mark.unit
class TestOperationResultFromException:
    def test_classifies_permanent(self):
        exc = PermanentError("no address")
        result = OperationResult.from_exception(exc)
        assert result.status == OperationStatus.PERMANENT_ERROR
        assert result.message == "no address"
        assert result.error_code == "PermanentError"
        assert result.error is exc

    def test_classifies_cancelled(self):
        result = OperationResult.from_exception(PushCancelledError("push cancelled"))
        assert result.status == OperationStatus.CANCELLED

    def test_classifies_unknown_as_transient(self):
        result = OperationResult.from_exception(TimeoutError(), error_code="timeout")
        assert result.status == OperationStatus.TRANSIENT_ERROR
        assert result.message == "TimeoutError"
        assert result.error_code == "timeout"
