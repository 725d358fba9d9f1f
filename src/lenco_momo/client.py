"""
Lenco Python SDK

Async HTTP client for the Lenco mobile-money collection API.

Example usage:
    ```python
    from lenco_momo import AsyncLencoClient

    async with AsyncLencoClient(api_key="your-api-key") as client:
        envelope = await client.collections.get_status("ref_123")
        print(envelope["data"]["status"])
    ```
"""
from __future__ import annotations

import logging
from typing import Any, Optional

import httpx

from .cancellation import CancellationToken
from .config import LencoSettings, get_settings
from .models.errors import (
    APIError,
    AuthenticationError,
    ConnectionError,
    NotFoundError,
    RateLimitError,
    ResponseFormatError,
    TimeoutError,
    ValidationError,
)
from .resources.collections import AsyncCollectionsResource

logger = logging.getLogger(__name__)


class AsyncLencoClient:
    """
    Lenco API client.

    Every request is attempted once. Transport failures surface as
    ConnectionError / TimeoutError and non-2xx responses as APIError
    subclasses; retrying is left to the caller.

    Args:
        api_key: Lenco API secret, sent as a bearer token
        base_url: API base URL (default: settings.base_url)
        timeout: Request timeout in seconds (default: settings.timeout)
        transport: Optional httpx transport, e.g. for a proxy or tests
        settings: Settings to read defaults from
    """

    def __init__(
        self,
        api_key: Optional[str] = None,
        base_url: Optional[str] = None,
        timeout: Optional[float] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
        settings: Optional[LencoSettings] = None,
    ):
        if not api_key:
            raise ValidationError("credential required", field="credential")

        settings = settings or get_settings()
        self._api_key = api_key
        self._base_url = (base_url or settings.base_url).rstrip("/")
        self._timeout = httpx.Timeout(timeout if timeout is not None else settings.timeout)
        self._user_agent = settings.user_agent
        self._transport = transport
        self._client: Optional[httpx.AsyncClient] = None

        self.collections = AsyncCollectionsResource(self)

    async def _get_client(self) -> httpx.AsyncClient:
        """Get or create the HTTP client."""
        if self._client is None or self._client.is_closed:
            self._client = httpx.AsyncClient(
                base_url=self._base_url,
                headers={
                    "Authorization": f"Bearer {self._api_key}",
                    "Accept": "application/json",
                    "Content-Type": "application/json",
                    "User-Agent": self._user_agent,
                },
                timeout=self._timeout,
                transport=self._transport,
            )
        return self._client

    async def _request(
        self,
        method: str,
        path: str,
        json: Optional[dict[str, Any]] = None,
        cancellation_token: Optional[CancellationToken] = None,
    ) -> dict[str, Any]:
        """Make a single HTTP request and decode the JSON object it returns."""
        if cancellation_token is not None:
            cancellation_token.raise_if_cancelled()

        client = await self._get_client()
        url = f"{self._base_url}/{path.lstrip('/')}"
        logger.debug("%s %s", method, url)

        call = client.request(method=method, url=url, json=json)
        try:
            if cancellation_token is not None:
                response = await cancellation_token.guard(call)
            else:
                response = await call
        except httpx.TimeoutException as e:
            raise TimeoutError(f"Request to {path} timed out") from e
        except httpx.RequestError as e:
            raise ConnectionError(f"Request to {path} failed: {e}") from e

        return self._handle_response(response, path)

    def _handle_response(self, response: httpx.Response, path: str) -> dict[str, Any]:
        """Map an HTTP response to its JSON body or an SDK error."""
        status_code = response.status_code

        if status_code == 401:
            raise AuthenticationError()

        if status_code == 404:
            raise NotFoundError("Resource", path)

        if status_code == 429:
            retry_after = response.headers.get("Retry-After")
            raise RateLimitError(
                retry_after=int(retry_after) if retry_after and retry_after.isdigit() else None,
            )

        if status_code >= 400:
            try:
                body = response.json()
            except ValueError:
                body = {"detail": response.text}
            raise APIError.from_response(status_code, body)

        try:
            body = response.json()
        except ValueError as e:
            raise ResponseFormatError(
                f"Expected a JSON body from {path}", status_code=status_code
            ) from e
        if not isinstance(body, dict):
            raise ResponseFormatError(
                f"Expected a JSON object from {path}, got {type(body).__name__}",
                status_code=status_code,
            )
        return body

    async def close(self) -> None:
        """Close the HTTP client."""
        if self._client and not self._client.is_closed:
            await self._client.aclose()
        self._client = None

    async def __aenter__(self) -> "AsyncLencoClient":
        """Async context manager entry."""
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        """Async context manager exit."""
        await self.close()
