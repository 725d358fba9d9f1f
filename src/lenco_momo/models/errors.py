"""Error models for the Lenco mobile-money SDK."""
from __future__ import annotations

from enum import Enum
from typing import Any, Optional


class ErrorCode(str, Enum):
    """Stable error codes carried by every LencoError."""

    UNKNOWN_ERROR = "UNKNOWN_ERROR"
    VALIDATION_ERROR = "VALIDATION_ERROR"
    API_ERROR = "API_ERROR"
    AUTHENTICATION_ERROR = "AUTHENTICATION_ERROR"
    NOT_FOUND = "NOT_FOUND"
    RATE_LIMIT_EXCEEDED = "RATE_LIMIT_EXCEEDED"
    INVALID_RESPONSE = "INVALID_RESPONSE"
    CONNECTION_ERROR = "CONNECTION_ERROR"
    TIMEOUT = "TIMEOUT"
    CANCELLED = "CANCELLED"


class LencoError(Exception):
    """Base exception for the Lenco SDK."""

    def __init__(
        self,
        message: str,
        code: Optional[str] = None,
        details: Optional[dict[str, Any]] = None,
        request_id: Optional[str] = None,
        status_code: Optional[int] = None,
        retryable: bool = False,
    ):
        super().__init__(message)
        self.message = message
        self.code = code or ErrorCode.UNKNOWN_ERROR.value
        self.details = details or {}
        self.request_id = request_id
        self.status_code = status_code
        self.retryable = retryable

    def __str__(self) -> str:
        return f"[{self.code}] {self.message}"

    def to_dict(self) -> dict[str, Any]:
        """Convert error to dictionary."""
        return {
            "error": {
                "code": self.code,
                "message": self.message,
                "details": self.details,
                "request_id": self.request_id,
                "status_code": self.status_code,
            }
        }


class ValidationError(LencoError, ValueError):
    """Invalid input supplied by the caller. Raised before any network call."""

    def __init__(
        self,
        message: str,
        field: Optional[str] = None,
        details: Optional[dict[str, Any]] = None,
    ):
        merged = {"field": field}
        if details:
            merged.update(details)
        super().__init__(message, code=ErrorCode.VALIDATION_ERROR.value, details=merged)
        self.field = field


class APIError(LencoError):
    """Non-success HTTP response from the Lenco API."""

    def __init__(
        self,
        message: str,
        status_code: int,
        code: Optional[str] = None,
        details: Optional[dict[str, Any]] = None,
        request_id: Optional[str] = None,
        retryable: bool = False,
    ):
        super().__init__(
            message,
            code=code or ErrorCode.API_ERROR.value,
            details=details,
            request_id=request_id,
            status_code=status_code,
            retryable=retryable,
        )

    @classmethod
    def from_response(cls, status_code: int, body: Any) -> "APIError":
        """Create an APIError from an HTTP status and decoded body.

        Lenco error bodies look like ``{"status": false, "message": "..."}``;
        ``detail`` and ``error`` keys are accepted as well.
        """
        if not isinstance(body, dict):
            body = {"detail": str(body)}

        message = body.get("message") or body.get("detail") or body.get("error")
        if isinstance(message, dict):
            message = message.get("message")
        if not isinstance(message, str) or not message:
            message = f"HTTP {status_code}"

        details = {k: v for k, v in body.items() if k not in ("message", "detail", "error")}
        request_id = body.get("requestId") or body.get("request_id")
        return cls(
            message=message,
            status_code=status_code,
            details=details,
            request_id=request_id,
            retryable=status_code >= 500,
        )


class AuthenticationError(APIError):
    """The credential was rejected."""

    def __init__(self, message: str = "Invalid or missing API credential"):
        super().__init__(message, status_code=401, code=ErrorCode.AUTHENTICATION_ERROR.value)


class NotFoundError(APIError):
    """Resource not found error."""

    def __init__(self, resource_type: str, resource_id: str):
        super().__init__(
            f"{resource_type} not found: {resource_id}",
            status_code=404,
            code=ErrorCode.NOT_FOUND.value,
            details={"resource_type": resource_type, "resource_id": resource_id},
        )
        self.resource_type = resource_type
        self.resource_id = resource_id


class RateLimitError(APIError):
    """Rate limit exceeded error."""

    def __init__(self, message: str = "Rate limit exceeded", retry_after: Optional[int] = None):
        super().__init__(
            message,
            status_code=429,
            code=ErrorCode.RATE_LIMIT_EXCEEDED.value,
            details={"retry_after": retry_after},
            retryable=True,
        )
        self.retry_after = retry_after


class ResponseFormatError(LencoError):
    """A 2xx response whose body is not a JSON object."""

    def __init__(self, message: str, status_code: Optional[int] = None):
        super().__init__(message, code=ErrorCode.INVALID_RESPONSE.value, status_code=status_code)


class ConnectionError(LencoError):  # noqa: A001
    """The request never reached the API or the connection dropped."""

    def __init__(self, message: str):
        super().__init__(message, code=ErrorCode.CONNECTION_ERROR.value, retryable=True)


class TimeoutError(LencoError):  # noqa: A001
    """The HTTP request timed out. Unrelated to the polling timeout outcome."""

    def __init__(self, message: str = "Request timed out"):
        super().__init__(message, code=ErrorCode.TIMEOUT.value, retryable=True)


class OperationCancelledError(LencoError):
    """A CancellationToken fired while the flow was suspended."""

    def __init__(self, reason: Optional[str] = None):
        super().__init__(
            f"Operation cancelled: {reason}" if reason else "Operation cancelled",
            code=ErrorCode.CANCELLED.value,
            details={"reason": reason},
        )
        self.reason = reason


__all__ = [
    "ErrorCode",
    "LencoError",
    "ValidationError",
    "APIError",
    "AuthenticationError",
    "NotFoundError",
    "RateLimitError",
    "ResponseFormatError",
    "ConnectionError",
    "TimeoutError",
    "OperationCancelledError",
]
