"""
Base resource class for the Lenco SDK.
"""
from __future__ import annotations

from typing import TYPE_CHECKING, Any, Dict, Optional

from ..cancellation import CancellationToken

if TYPE_CHECKING:
    from ..client import AsyncLencoClient


class AsyncBaseResource:
    """Base class for async API resources.

    Attributes:
        _client: The async client instance
    """

    def __init__(self, client: "AsyncLencoClient") -> None:
        self._client = client

    async def _get(
        self,
        path: str,
        cancellation_token: Optional[CancellationToken] = None,
    ) -> Dict[str, Any]:
        """Make a GET request.

        Args:
            path: API endpoint path
            cancellation_token: Optional token that aborts the request

        Returns:
            Response data as dictionary
        """
        return await self._client._request(
            "GET",
            path,
            cancellation_token=cancellation_token,
        )

    async def _post(
        self,
        path: str,
        data: Optional[Dict[str, Any]] = None,
        cancellation_token: Optional[CancellationToken] = None,
    ) -> Dict[str, Any]:
        """Make a POST request.

        Args:
            path: API endpoint path
            data: Request body
            cancellation_token: Optional token that aborts the request

        Returns:
            Response data as dictionary
        """
        return await self._client._request(
            "POST",
            path,
            json=data,
            cancellation_token=cancellation_token,
        )


__all__ = [
    "AsyncBaseResource",
]
