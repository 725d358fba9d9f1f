"""
Lenco mobile-money SDK

Async client and payment orchestration for Lenco mobile-money collections
(MTN, Airtel and Zamtel).
"""

from .cancellation import CancellationToken
from .client import AsyncLencoClient
from .config import LencoSettings, get_settings
from .models.collection import (
    OTP_SUBMITTED,
    Bearer,
    CollectionData,
    CollectionStatus,
    OtpContext,
    PaymentOutcome,
    PaymentRequest,
    Provider,
)
from .models.errors import (
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
from .orchestrator import (
    PaymentOrchestrator,
    get_collection_status,
    process_mobile_money_payment,
    submit_otp,
)

__version__ = "0.1.0"

__all__ = [
    # Entry points
    "process_mobile_money_payment",
    "submit_otp",
    "get_collection_status",
    "PaymentOrchestrator",
    # Client
    "AsyncLencoClient",
    "CancellationToken",
    "LencoSettings",
    "get_settings",
    # Models
    "OTP_SUBMITTED",
    "Bearer",
    "CollectionData",
    "CollectionStatus",
    "OtpContext",
    "PaymentOutcome",
    "PaymentRequest",
    "Provider",
    # Errors
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
]
