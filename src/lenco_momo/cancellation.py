"""
Cooperative cancellation for payment flows.

A CancellationToken is handed to the orchestrator and checked at every
suspension point: before each HTTP call, during each HTTP call and during
the wait between status polls. Code already running inside a host
callback is never interrupted.

Example:
    ```python
    token = CancellationToken()
    task = asyncio.create_task(
        process_mobile_money_payment(request, cancellation_token=token)
    )
    ...
    token.cancel("user closed the checkout")
    await task  # raises OperationCancelledError
    ```
"""
from __future__ import annotations

import asyncio
import inspect
import logging
from typing import Any, Awaitable, Optional, TypeVar

from .models.errors import OperationCancelledError

logger = logging.getLogger(__name__)

T = TypeVar("T")


class CancellationToken:
    """Advisory cancellation signal shared between a caller and one flow.

    Must be cancelled from the thread running the event loop.
    """

    def __init__(self) -> None:
        self._event = asyncio.Event()
        self._reason: Optional[str] = None

    @property
    def cancelled(self) -> bool:
        return self._event.is_set()

    @property
    def reason(self) -> Optional[str]:
        return self._reason

    def cancel(self, reason: Optional[str] = None) -> None:
        """Trigger the token. Calling it again keeps the first reason."""
        if self._event.is_set():
            return
        self._reason = reason
        self._event.set()
        logger.debug("Cancellation requested: %s", reason or "no reason given")

    def raise_if_cancelled(self) -> None:
        if self._event.is_set():
            raise OperationCancelledError(self._reason)

    async def sleep(self, seconds: float) -> None:
        """Sleep for ``seconds`` unless the token fires first.

        Raises:
            OperationCancelledError: as soon as the token is cancelled
        """
        self.raise_if_cancelled()
        if seconds <= 0:
            return
        try:
            await asyncio.wait_for(self._event.wait(), timeout=seconds)
        except asyncio.TimeoutError:
            return
        raise OperationCancelledError(self._reason)

    async def guard(self, awaitable: Awaitable[T]) -> T:
        """Await ``awaitable``, aborting it if the token fires first.

        Raises:
            OperationCancelledError: the token fired before the awaitable finished
        """
        if self._event.is_set():
            if inspect.iscoroutine(awaitable):
                awaitable.close()
            raise OperationCancelledError(self._reason)
        task: asyncio.Future[Any] = asyncio.ensure_future(awaitable)
        waiter = asyncio.ensure_future(self._event.wait())
        try:
            await asyncio.wait({task, waiter}, return_when=asyncio.FIRST_COMPLETED)
        except BaseException:
            task.cancel()
            await asyncio.wait({task})
            raise
        finally:
            waiter.cancel()

        if task.done():
            return task.result()

        task.cancel()
        await asyncio.wait({task})
        raise OperationCancelledError(self._reason)
