"""
Mobile-money collections resource for the Lenco SDK.

Each method performs exactly one request and returns the API envelope
(``{"status": ..., "message": ..., "data": {...}}``) unmodified.
"""
from __future__ import annotations

from decimal import Decimal
from typing import Any, Dict, Optional, Union
from urllib.parse import quote

from ..cancellation import CancellationToken
from .base import AsyncBaseResource


def _json_amount(amount: Union[int, float, Decimal]) -> Union[int, float]:
    """Render an amount as a JSON number."""
    if isinstance(amount, Decimal):
        return int(amount) if amount == amount.to_integral_value() else float(amount)
    return amount


class AsyncCollectionsResource(AsyncBaseResource):
    """Async resource for mobile-money collections.

    Example:
        ```python
        async with AsyncLencoClient(api_key="...") as client:
            envelope = await client.collections.initiate(
                operator="mtn",
                bearer="merchant",
                phone="260971234567",
                amount=10,
                reference="order-42",
                country="zm",
            )
        ```
    """

    async def initiate(
        self,
        operator: str,
        bearer: str,
        phone: str,
        amount: Union[int, float, Decimal],
        reference: str,
        country: str,
        cancellation_token: Optional[CancellationToken] = None,
    ) -> Dict[str, Any]:
        """Start a mobile-money collection.

        Args:
            operator: Lowercase operator name (mtn, airtel, zamtel)
            bearer: Who pays the fee (merchant or customer)
            phone: Payer MSISDN
            amount: Amount to collect
            reference: Client reference for the collection
            country: Country code, e.g. "zm"
            cancellation_token: Optional token that aborts the request

        Returns:
            The raw API envelope
        """
        return await self._post(
            "/collections/mobile-money",
            {
                "operator": operator,
                "bearer": bearer,
                "phone": phone,
                "amount": _json_amount(amount),
                "reference": reference,
                "country": country,
            },
            cancellation_token=cancellation_token,
        )

    async def submit_otp(
        self,
        reference: str,
        otp: str,
        cancellation_token: Optional[CancellationToken] = None,
    ) -> Dict[str, Any]:
        """Submit the payer's one-time passcode for a collection.

        Args:
            reference: Collection reference as last echoed by the API
            otp: The passcode the payer received
            cancellation_token: Optional token that aborts the request

        Returns:
            The raw API envelope
        """
        return await self._post(
            "/collections/mobile-money/submit-otp",
            {"reference": reference, "otp": otp},
            cancellation_token=cancellation_token,
        )

    async def get_status(
        self,
        reference: str,
        cancellation_token: Optional[CancellationToken] = None,
    ) -> Dict[str, Any]:
        """Fetch the current status of a collection.

        Args:
            reference: Collection reference
            cancellation_token: Optional token that aborts the request

        Returns:
            The raw API envelope
        """
        return await self._get(
            f"/collections/status/{quote(reference, safe='')}",
            cancellation_token=cancellation_token,
        )


__all__ = [
    "AsyncCollectionsResource",
]
