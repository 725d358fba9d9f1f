"""
Mobile-money payment orchestration.

Drives one collection through its lifecycle:

    initiate -> (otp-required: ask the host for a code, submit it)
             -> successful / failed: done
             -> pending / pay-offline: poll every ``poll_interval`` seconds,
                at most ``max_attempts`` times

Business results (success, failure, missing OTP handler, timeout, unknown
status) come back as a PaymentOutcome. Bad input, transport failures and
cancellation are raised.
"""
from __future__ import annotations

import asyncio
import dataclasses
import inspect
import logging
import math
import uuid
from decimal import Decimal
from enum import Enum
from typing import Any, Optional

import httpx
from pydantic import ValidationError as PydanticValidationError

from .cancellation import CancellationToken
from .client import AsyncLencoClient
from .config import LencoSettings, get_settings
from .models.collection import (
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
    StatusHandler,
)
from .models.errors import ResponseFormatError, ValidationError

logger = logging.getLogger(__name__)

TIMEOUT_ERROR = "timeout"
OTP_HANDLER_MISSING_ERROR = "otp required but no otp handler supplied"


def _enum_text(value: Any) -> str:
    if isinstance(value, Enum):
        value = value.value
    return str(value).lower()


def _validate(request: PaymentRequest) -> tuple[str, str]:
    """Check a request before any I/O and return (operator, bearer)."""
    if not request.credential:
        raise ValidationError("credential required", field="credential")
    if not request.provider or not request.phone or not request.amount:
        raise ValidationError("provider, phone and amount are required")
    if not isinstance(request.phone, str):
        raise ValidationError("phone must be a string", field="phone")

    operator = _enum_text(request.provider)
    if operator not in {p.value for p in Provider}:
        raise ValidationError(f"unsupported provider: {request.provider!r}", field="provider")

    bearer = _enum_text(request.bearer)
    if bearer not in {b.value for b in Bearer}:
        raise ValidationError(f"unsupported bearer: {request.bearer!r}", field="bearer")

    amount = request.amount
    if isinstance(amount, bool) or not isinstance(amount, (int, float, Decimal)):
        raise ValidationError("amount must be a number", field="amount")
    if not (amount.is_finite() if isinstance(amount, Decimal) else math.isfinite(amount)):
        raise ValidationError("amount must be a finite number", field="amount")
    if amount <= 0:
        raise ValidationError("amount must be greater than zero", field="amount")

    if request.poll_interval < 0:
        raise ValidationError("poll_interval must not be negative", field="poll_interval")
    if request.max_attempts < 0:
        raise ValidationError("max_attempts must not be negative", field="max_attempts")

    return operator, bearer


def _read(envelope: Any, reference: str) -> tuple[dict[str, Any], Optional[str], str]:
    """Return (payload, status, latest reference) from an API envelope."""
    payload = CollectionData.extract(envelope)
    try:
        data = CollectionData.model_validate(payload)
    except PydanticValidationError as e:
        raise ResponseFormatError(f"Malformed collection data: {e}") from e
    return payload, data.status, data.reference or reference


def _notify(handler: Optional[StatusHandler], status: Optional[str], payload: dict[str, Any]) -> None:
    if handler is not None:
        handler(status, payload)


class PaymentOrchestrator:
    """
    Runs collect -> (OTP) -> poll for one payment attempt per ``run`` call.

    The orchestrator only keeps read-only transport configuration, so one
    instance can serve many concurrent ``run`` calls.

    Args:
        settings: Transport settings (default: get_settings())
        transport: Optional httpx transport handed to every client
    """

    def __init__(
        self,
        settings: Optional[LencoSettings] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        self._settings = settings or get_settings()
        self._transport = transport

    async def run(self, request: PaymentRequest) -> PaymentOutcome:
        """Drive ``request`` to a terminal outcome.

        Raises:
            ValidationError: invalid request, raised before any network call
            LencoError: a request failed at the transport or HTTP level
            OperationCancelledError: the request's cancellation token fired
        """
        operator, bearer = _validate(request)
        reference = request.reference or str(uuid.uuid4())

        async with AsyncLencoClient(
            api_key=request.credential,
            transport=self._transport,
            settings=self._settings,
        ) as client:
            outcome = await self._drive(client, request, operator, bearer, reference)

        logger.info(
            "Collection ref=%s finished: success=%s status=%s error=%s",
            outcome.reference,
            outcome.success,
            outcome.status,
            outcome.error,
        )
        return outcome

    async def _drive(
        self,
        client: AsyncLencoClient,
        request: PaymentRequest,
        operator: str,
        bearer: str,
        reference: str,
    ) -> PaymentOutcome:
        token = request.cancellation_token
        notify = request.on_status_changed

        logger.info("Initiating %s collection ref=%s", operator, reference)
        envelope = await client.collections.initiate(
            operator=operator,
            bearer=bearer,
            phone=request.phone,
            amount=request.amount,
            reference=reference,
            country=request.country,
            cancellation_token=token,
        )
        payload, status, reference = _read(envelope, reference)
        _notify(notify, status, payload)

        if status == CollectionStatus.OTP_REQUIRED.value:
            if request.on_otp_requested is None:
                logger.warning("Collection ref=%s needs an OTP but no handler was supplied", reference)
                return PaymentOutcome(
                    success=False,
                    status=status,
                    reference=reference,
                    data=payload,
                    error=OTP_HANDLER_MISSING_ERROR,
                )

            otp = await self._collect_otp(
                request,
                OtpContext(reference=reference, provider=operator, phone=request.phone, amount=request.amount),
            )
            envelope = await client.collections.submit_otp(reference, otp, cancellation_token=token)
            payload, status, reference = _read(envelope, reference)
            _notify(notify, OTP_SUBMITTED, payload)

        if status in TERMINAL_STATUSES:
            return PaymentOutcome(
                success=status == CollectionStatus.SUCCESSFUL.value,
                status=status,
                reference=reference,
                data=payload,
            )

        attempts = 0
        while status in POLLING_STATUSES and attempts < request.max_attempts:
            attempts += 1
            await self._wait(request.poll_interval, token)

            logger.debug("Polling ref=%s attempt %d/%d", reference, attempts, request.max_attempts)
            envelope = await client.collections.get_status(reference, cancellation_token=token)
            payload, status, reference = _read(envelope, reference)
            _notify(notify, status, payload)

            if status in TERMINAL_STATUSES:
                return PaymentOutcome(
                    success=status == CollectionStatus.SUCCESSFUL.value,
                    status=status,
                    reference=reference,
                    data=payload,
                )

        if status in POLLING_STATUSES:
            logger.warning(
                "Collection ref=%s still %s after %d polls", reference, status, attempts
            )
            return PaymentOutcome(
                success=False,
                status=status,
                reference=reference,
                data=payload,
                error=TIMEOUT_ERROR,
            )

        # Unknown statuses are neither retried nor treated as success.
        logger.warning("Collection ref=%s returned unrecognized status %r", reference, status)
        return PaymentOutcome(
            success=False,
            status=status,
            reference=reference,
            data=payload,
            error=f"unrecognized status: {status!r}",
        )

    async def _collect_otp(self, request: PaymentRequest, context: OtpContext) -> str:
        """Ask the host for the payer's OTP. The handler may be sync or async."""
        token = request.cancellation_token
        if token is not None:
            token.raise_if_cancelled()

        result = request.on_otp_requested(context)
        if inspect.isawaitable(result):
            result = await result

        if token is not None:
            token.raise_if_cancelled()

        otp = "" if result is None else str(result).strip()
        if not otp:
            raise ValidationError("otp handler returned an empty code", field="otp")
        return otp

    @staticmethod
    async def _wait(seconds: float, token: Optional[CancellationToken]) -> None:
        if token is not None:
            await token.sleep(seconds)
        else:
            await asyncio.sleep(seconds)


async def process_mobile_money_payment(
    request: Optional[PaymentRequest] = None,
    *,
    settings: Optional[LencoSettings] = None,
    transport: Optional[httpx.AsyncBaseTransport] = None,
    **fields: Any,
) -> PaymentOutcome:
    """Run one mobile-money collection from start to finish.

    Pass either a PaymentRequest or its fields as keyword arguments; keyword
    fields given alongside a request override it.

    Example:
        ```python
        outcome = await process_mobile_money_payment(
            provider="mtn",
            phone="260971234567",
            amount=25,
            credential=api_key,
            on_otp_requested=ask_user_for_otp,
            on_status_changed=lambda status, data: print(status),
        )
        if outcome.success:
            ...
        ```
    """
    if request is None:
        request = PaymentRequest(**fields)
    elif fields:
        request = dataclasses.replace(request, **fields)
    return await PaymentOrchestrator(settings=settings, transport=transport).run(request)


async def submit_otp(
    credential: str,
    reference: str,
    otp: str,
    *,
    cancellation_token: Optional[CancellationToken] = None,
    settings: Optional[LencoSettings] = None,
    transport: Optional[httpx.AsyncBaseTransport] = None,
) -> dict[str, Any]:
    """Submit an OTP for a collection and return the raw API response."""
    async with AsyncLencoClient(api_key=credential, transport=transport, settings=settings) as client:
        return await client.collections.submit_otp(
            reference, otp, cancellation_token=cancellation_token
        )


async def get_collection_status(
    credential: str,
    reference: str,
    *,
    cancellation_token: Optional[CancellationToken] = None,
    settings: Optional[LencoSettings] = None,
    transport: Optional[httpx.AsyncBaseTransport] = None,
) -> dict[str, Any]:
    """Fetch a collection's status once and return the raw API response."""
    async with AsyncLencoClient(api_key=credential, transport=transport, settings=settings) as client:
        return await client.collections.get_status(
            reference, cancellation_token=cancellation_token
        )
