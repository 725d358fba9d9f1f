"""Lenco SDK Models."""
from .base import LencoModel
from .errors import (
    APIError,
    AuthenticationError,
    ConnectionError,
    ErrorCode,
    LencoError,
    NotFoundError,
    OperationCancelledError,
    RateLimitError,
    ResponseFormatError,
    TimeoutError,
    ValidationError,
)
from .collection import (
    OTP_SUBMITTED,
    POLLING_STATUSES,
    TERMINAL_STATUSES,
    Bearer,
    CollectionData,
    CollectionStatus,
    OtpContext,
    PaymentOutcome,
    PaymentRequest,
    Provider,
)

__all__ = [
    "LencoModel",
    "ErrorCode",
    "LencoError",
    "APIError",
    "AuthenticationError",
    "ConnectionError",
    "NotFoundError",
    "OperationCancelledError",
    "RateLimitError",
    "ResponseFormatError",
    "TimeoutError",
    "ValidationError",
    "OTP_SUBMITTED",
    "POLLING_STATUSES",
    "TERMINAL_STATUSES",
    "Bearer",
    "CollectionData",
    "CollectionStatus",
    "OtpContext",
    "PaymentOutcome",
    "PaymentRequest",
    "Provider",
]
