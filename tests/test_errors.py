"""Tests for lenco_momo.models.errors."""

from __future__ import annotations

import pytest

from lenco_momo.models.errors import (
    APIError,
    AuthenticationError,
    ErrorCode,
    LencoError,
    NotFoundError,
    OperationCancelledError,
    RateLimitError,
    ValidationError,
)


class TestLencoError:
    def test_defaults(self):
        err = LencoError("boom")
        assert err.message == "boom"
        assert err.code == ErrorCode.UNKNOWN_ERROR.value
        assert err.details == {}
        assert err.request_id is None
        assert str(err) == "[UNKNOWN_ERROR] boom"

    def test_to_dict_shape(self):
        err = LencoError(
            message="m",
            code="CUSTOM",
            details={"k": "v"},
            request_id="req_1",
        )
        as_dict = err.to_dict()
        assert as_dict["error"]["code"] == "CUSTOM"
        assert as_dict["error"]["message"] == "m"
        assert as_dict["error"]["details"] == {"k": "v"}
        assert as_dict["error"]["request_id"] == "req_1"


class TestAPIError:
    def test_from_response_with_lenco_body(self):
        err = APIError.from_response(400, {"status": False, "message": "Bad phone", "requestId": "r"})
        assert err.status_code == 400
        assert err.message == "Bad phone"
        assert err.request_id == "r"
        assert err.code == ErrorCode.API_ERROR.value

    def test_from_response_with_string_detail(self):
        err = APIError.from_response(500, {"detail": "oops"})
        assert err.status_code == 500
        assert err.message == "oops"
        assert err.retryable is True

    def test_from_response_with_nested_error(self):
        err = APIError.from_response(409, {"error": {"message": "Duplicate reference"}})
        assert err.message == "Duplicate reference"

    def test_from_response_without_message(self):
        err = APIError.from_response(418, ["not", "a", "dict"])
        assert err.message == "['not', 'a', 'dict']"

    def test_from_response_empty_body(self):
        err = APIError.from_response(503, {})
        assert err.message == "HTTP 503"


class TestSubclasses:
    def test_authentication_error(self):
        err = AuthenticationError()
        assert err.status_code == 401
        assert err.code == ErrorCode.AUTHENTICATION_ERROR.value

    def test_not_found(self):
        err = NotFoundError(resource_type="Collection", resource_id="ref_1")
        assert err.status_code == 404
        assert "Collection not found" in err.message
        assert err.details["resource_id"] == "ref_1"

    def test_rate_limit_retryable(self):
        err = RateLimitError(retry_after=12)
        assert err.status_code == 429
        assert err.retryable is True
        assert err.details["retry_after"] == 12

    def test_validation_error_field(self):
        err = ValidationError("credential required", field="credential")
        assert err.field == "credential"
        assert err.code == ErrorCode.VALIDATION_ERROR.value
        assert isinstance(err, ValueError)

    def test_cancelled_carries_reason(self):
        err = OperationCancelledError("user left")
        assert err.reason == "user left"
        assert err.code == ErrorCode.CANCELLED.value


class TestExceptionCatching:
    def test_inherits_base(self):
        with pytest.raises(LencoError):
            raise ValidationError("bad input")
