"""
Tests for CancellationToken
"""
import asyncio
import time

import pytest

from lenco_momo import CancellationToken, OperationCancelledError


class TestCancel:
    def test_initial_state(self):
        token = CancellationToken()
        assert token.cancelled is False
        assert token.reason is None
        token.raise_if_cancelled()

    def test_cancel_keeps_first_reason(self):
        token = CancellationToken()
        token.cancel("first")
        token.cancel("second")
        assert token.cancelled is True
        assert token.reason == "first"

    def test_raise_if_cancelled(self):
        token = CancellationToken()
        token.cancel("closed")
        with pytest.raises(OperationCancelledError, match="closed"):
            token.raise_if_cancelled()


class TestSleep:
    async def test_sleep_completes(self):
        token = CancellationToken()
        started = time.monotonic()
        await token.sleep(0.02)
        assert time.monotonic() - started >= 0.015

    async def test_cancel_interrupts_sleep(self):
        token = CancellationToken()
        asyncio.get_running_loop().call_later(0.02, token.cancel)

        started = time.monotonic()
        with pytest.raises(OperationCancelledError):
            await token.sleep(30)
        assert time.monotonic() - started < 5

    async def test_sleep_on_cancelled_token(self):
        token = CancellationToken()
        token.cancel()
        with pytest.raises(OperationCancelledError):
            await token.sleep(0)


class TestGuard:
    async def test_returns_result(self):
        token = CancellationToken()

        async def work():
            return 42

        assert await token.guard(work()) == 42

    async def test_propagates_exceptions(self):
        token = CancellationToken()

        async def work():
            raise KeyError("boom")

        with pytest.raises(KeyError):
            await token.guard(work())

    async def test_aborts_slow_work(self):
        token = CancellationToken()
        finished = []

        async def work():
            await asyncio.sleep(30)
            finished.append(True)

        asyncio.get_running_loop().call_later(0.02, token.cancel, "abort")
        with pytest.raises(OperationCancelledError) as exc_info:
            await asyncio.wait_for(token.guard(work()), timeout=5)

        assert exc_info.value.reason == "abort"
        assert finished == []

    async def test_already_cancelled_does_not_start_work(self):
        token = CancellationToken()
        token.cancel()
        started = []

        async def work():
            started.append(True)

        with pytest.raises(OperationCancelledError):
            await token.guard(work())
        assert started == []

    async def test_task_cancellation_unwinds_work_first(self):
        token = CancellationToken()
        started = asyncio.Event()
        unwound = []
        seen_on_exit = []

        async def work():
            started.set()
            try:
                await asyncio.sleep(30)
            finally:
                unwound.append(True)

        async def caller():
            try:
                await token.guard(work())
            except asyncio.CancelledError:
                seen_on_exit.append(list(unwound))
                raise

        task = asyncio.create_task(caller())
        await started.wait()
        task.cancel()
        with pytest.raises(asyncio.CancelledError):
            await task

        assert seen_on_exit == [[True]]
