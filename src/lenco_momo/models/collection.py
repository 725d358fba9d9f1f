"""Mobile-money collection models for the Lenco SDK."""
from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal
from enum import Enum
from typing import TYPE_CHECKING, Any, Awaitable, Callable, Optional, Union

from pydantic import ConfigDict

from .base import LencoModel

if TYPE_CHECKING:
    from ..cancellation import CancellationToken


class Provider(str, Enum):
    """Mobile-money operator."""

    MTN = "mtn"
    AIRTEL = "airtel"
    ZAMTEL = "zamtel"


class Bearer(str, Enum):
    """Who absorbs the transaction fee."""

    MERCHANT = "merchant"
    CUSTOMER = "customer"


class CollectionStatus(str, Enum):
    """Collection status values reported by the API."""

    PENDING = "pending"
    SUCCESSFUL = "successful"
    FAILED = "failed"
    OTP_REQUIRED = "otp-required"
    PAY_OFFLINE = "pay-offline"


POLLING_STATUSES = frozenset({CollectionStatus.PENDING.value, CollectionStatus.PAY_OFFLINE.value})
TERMINAL_STATUSES = frozenset({CollectionStatus.SUCCESSFUL.value, CollectionStatus.FAILED.value})

# Transition name reported to on_status_changed after an OTP submission.
OTP_SUBMITTED = "otp-submitted"

Amount = Union[int, float, Decimal]


class OtpContext(LencoModel):
    """What the OTP handler gets to know about the pending collection."""

    model_config = ConfigDict(frozen=True)

    reference: str
    provider: str
    phone: str
    amount: Union[Decimal, int, float]


OtpHandler = Callable[[OtpContext], Union[str, Awaitable[str]]]
StatusHandler = Callable[[str, dict[str, Any]], None]


@dataclass(frozen=True)
class PaymentRequest:
    """Everything needed to run one mobile-money collection.

    ``poll_interval`` is in seconds. When ``reference`` is left out a new
    UUID4 is generated each time the request is run. ``provider``, ``phone``,
    ``amount`` and ``credential`` are required; they default to None so that
    a missing one is reported as a ValidationError when the request runs.
    """

    provider: Optional[Union[Provider, str]] = None
    phone: Optional[str] = None
    amount: Optional[Amount] = None
    credential: Optional[str] = None
    bearer: Union[Bearer, str] = Bearer.MERCHANT
    country: str = "zm"
    reference: Optional[str] = None
    poll_interval: float = 3.0
    max_attempts: int = 40
    on_otp_requested: Optional[OtpHandler] = None
    on_status_changed: Optional[StatusHandler] = None
    cancellation_token: Optional["CancellationToken"] = None


class CollectionData(LencoModel):
    """The ``data`` object of an API envelope.

    Only ``status`` and ``reference`` are read; everything else is kept
    as-is so new API fields pass straight through.
    """

    model_config = ConfigDict(extra="allow")

    status: Optional[str] = None
    reference: Optional[str] = None

    @staticmethod
    def extract(envelope: Any) -> dict[str, Any]:
        """Return the raw ``data`` object of ``{"data": {...}}``, or ``{}``."""
        data = envelope.get("data") if isinstance(envelope, dict) else None
        return data if isinstance(data, dict) else {}


class PaymentOutcome(LencoModel):
    """Terminal result of a collection attempt."""

    success: bool
    status: Optional[str] = None
    reference: str
    data: Optional[dict[str, Any]] = None
    error: Optional[str] = None

    @property
    def timed_out(self) -> bool:
        """True when polling ran out of attempts."""
        return self.error == "timeout"


__all__ = [
    "Provider",
    "Bearer",
    "CollectionStatus",
    "POLLING_STATUSES",
    "TERMINAL_STATUSES",
    "OTP_SUBMITTED",
    "OtpContext",
    "OtpHandler",
    "StatusHandler",
    "PaymentRequest",
    "CollectionData",
    "PaymentOutcome",
]
