# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Unit tests for the calling convention runners.

Every convention is exercised through ``CallCapability`` with the real
dispatcher, so the tests cover dispatch, settlement and instrumentation.
"""

from __future__ import annotations

import asyncio
import logging
import threading
from collections.abc import Callable

import pytest

from omnibase_affect import CallCapability, EnumCallEvent
from omnibase_affect.errors import CallbackError


def some_action(count: object, callback: Callable[..., None]) -> None:
    """Callback-style function settling on the next loop turn."""
    loop = asyncio.get_running_loop()
    if count is False:
        loop.call_soon(callback, ValueError("error"))
        return
    assert isinstance(count, int)
    loop.call_soon(callback, None, *range(1, count + 1))


class TestStandardConvention:
    """Test suite for ``call(fn, *args)``."""

    @pytest.mark.asyncio
    async def test_passes_capability_first(self, capability: CallCapability) -> None:
        """Test that the callee receives the capability as first parameter."""
        seen: list[object] = []

        def target(call: CallCapability, value: int) -> int:
            seen.append(call)
            return value * 2

        assert await capability(target, 21) == 42
        assert seen == [capability]

    @pytest.mark.asyncio
    async def test_awaits_coroutine_result(self, capability: CallCapability) -> None:
        """Test that an async callee is awaited."""

        async def target(call: CallCapability) -> str:
            await asyncio.sleep(0)
            return "done"

        assert await capability(target) == "done"

    @pytest.mark.asyncio
    async def test_synchronous_raise_becomes_failed_future(
        self, capability: CallCapability
    ) -> None:
        """Test that a raise at invocation time is not thrown at the call site."""

        def target(call: CallCapability) -> None:
            raise KeyError("missing")

        future = capability(target)
        with pytest.raises(KeyError):
            await future

    @pytest.mark.asyncio
    async def test_calls_are_issued_at_call_site(
        self, capability: CallCapability
    ) -> None:
        """Test that gathered calls are invoked in literal argument order."""
        issued: list[str] = []

        async def target(call: CallCapability, name: str, delay: float) -> str:
            issued.append(name)
            await asyncio.sleep(delay)
            return name

        results = await asyncio.gather(
            capability(target, "slow", 0.02), capability(target, "fast", 0)
        )

        assert issued == ["slow", "fast"]
        assert results == ["slow", "fast"]


class TestPlainConvention:
    """Test suite for ``call.plain(fn, *args)``."""

    @pytest.mark.asyncio
    async def test_plain_omits_capability(self, capability: CallCapability) -> None:
        """Test that plain callees get only their own arguments."""

        def pi(x: int) -> list[object]:
            return [3.14, x]

        assert await capability.plain(pi, 159) == [3.14, 159]

    @pytest.mark.asyncio
    async def test_plain_awaits_awaitable_result(
        self, capability: CallCapability
    ) -> None:
        """Test that an awaitable returned by a plain callee is awaited."""

        async def pi(x: int) -> list[object]:
            return [3.14, x]

        assert await capability.plain(pi, 159) == [3.14, 159]


class TestSynchronousConvention:
    """Test suite for ``call.sync(fn, *args)``."""

    @pytest.mark.asyncio
    async def test_sync_returns_done_future(self, capability: CallCapability) -> None:
        """Test that the result is available without another loop turn."""
        future = capability.sync(lambda: "sync")

        assert future.done()
        assert await future == "sync"

    @pytest.mark.asyncio
    async def test_sync_raise_becomes_failure(
        self, capability: CallCapability
    ) -> None:
        """Test that a synchronous raise settles the future with the error."""

        def simple(fail: bool) -> str:
            if fail:
                raise RuntimeError("failed")
            return "sync"

        with pytest.raises(RuntimeError, match="failed"):
            await capability.sync(simple, True)

    @pytest.mark.asyncio
    async def test_sync_emits_complete_before_returning(
        self, capability: CallCapability
    ) -> None:
        """Test that both call events have fired when ``sync`` returns."""
        future = capability.sync(lambda: 1)
        events = [event for event, _ in capability.bus.get_event_history()]

        assert events == [EnumCallEvent.ON_CALL, EnumCallEvent.ON_CALL_COMPLETE]
        await future


class TestCallbackConventions:
    """Test suite for ``call.from_callback`` and ``call.from_multi_callback``."""

    @pytest.mark.asyncio
    async def test_callback_results(self, capability: CallCapability) -> None:
        """Test error, zero, single and multi result callbacks together."""
        results = await asyncio.gather(
            capability.from_callback(some_action, False),
            capability.from_callback(some_action, 0),
            capability.from_callback(some_action, 1),
            capability.from_multi_callback(some_action, 5),
            return_exceptions=True,
        )

        assert isinstance(results[0], ValueError)
        assert str(results[0]) == "error"
        assert results[1] is None
        assert results[2] == 1
        assert results[3] == [1, 2, 3, 4, 5]

    @pytest.mark.asyncio
    async def test_single_callback_keeps_first_result(
        self, capability: CallCapability
    ) -> None:
        """Test that single-result mode ignores extra results."""

        def action(callback: Callable[..., None]) -> None:
            callback(None, "first", "second")

        assert await capability.from_callback(action) == "first"

    @pytest.mark.asyncio
    async def test_multi_callback_without_results(
        self, capability: CallCapability
    ) -> None:
        """Test that multi-result mode with no results resolves to an empty list."""

        def action(callback: Callable[..., None]) -> None:
            callback(None)

        assert await capability.from_multi_callback(action) == []

    @pytest.mark.asyncio
    async def test_non_exception_error_is_wrapped(
        self, capability: CallCapability
    ) -> None:
        """Test that a non-exception error value is wrapped in CallbackError."""

        def action(callback: Callable[..., None]) -> None:
            callback("broke")

        with pytest.raises(CallbackError) as exc_info:
            await capability.from_callback(action)
        assert exc_info.value.error == "broke"
        _, settled = capability.bus.get_event_history()[-1]
        assert exc_info.value.correlation_id == settled.correlation_id

    @pytest.mark.asyncio
    async def test_repeated_callback_is_ignored(
        self, capability: CallCapability, caplog: pytest.LogCaptureFixture
    ) -> None:
        """Test that only the first callback invocation settles the call."""

        def action(callback: Callable[..., None]) -> None:
            callback(None, 1)
            callback(None, 2)

        with caplog.at_level(logging.WARNING):
            assert await capability.from_callback(action) == 1
        assert any("after the call settled" in r.message for r in caplog.records)

    @pytest.mark.asyncio
    async def test_raise_before_callback_is_failure(
        self, capability: CallCapability
    ) -> None:
        """Test that a raise inside the callback-style function fails the call."""

        def action(callback: Callable[..., None]) -> None:
            raise OSError("device busy")

        with pytest.raises(OSError, match="device busy"):
            await capability.from_callback(action)

    @pytest.mark.asyncio
    async def test_callback_from_other_thread(
        self, capability: CallCapability
    ) -> None:
        """Test that a callback invoked from a worker thread settles the call."""

        def action(value: str, callback: Callable[..., None]) -> None:
            threading.Thread(target=callback, args=(None, value)).start()

        assert await capability.from_callback(action, "threaded") == "threaded"


class TestCallInstrumentation:
    """Test suite for per-call records."""

    @pytest.mark.asyncio
    async def test_records_pair_by_correlation_id(
        self, capability: CallCapability
    ) -> None:
        """Test that pre and post records share one correlation id."""

        def target(call: CallCapability, value: int) -> int:
            return value

        await capability(target, 7)
        (_, before), (_, after) = capability.bus.get_event_history()

        assert before.correlation_id == after.correlation_id
        assert before.args == after.args == (7,)
        assert before.success is None
        assert after.success is True
        assert after.result == 7

    @pytest.mark.asyncio
    async def test_failure_record_carries_error(
        self, capability: CallCapability
    ) -> None:
        """Test that the settled record of a failed call holds the exception."""
        error = ValueError("nope")

        def target(call: CallCapability) -> None:
            raise error

        with pytest.raises(ValueError):
            await capability(target)
        _, after = capability.bus.get_event_history()[-1]

        assert after.success is False
        assert after.result is error

    @pytest.mark.asyncio
    async def test_callback_record_excludes_callback(
        self, capability: CallCapability
    ) -> None:
        """Test that recorded arguments are the issued ones, without the callback."""
        await capability.from_callback(some_action, 1)
        _, before = capability.bus.get_event_history()[0]

        assert before.args == (1,)
        assert before.fn is some_action

    @pytest.mark.asyncio
    async def test_latency_matches_timestamps(
        self, capability: CallCapability
    ) -> None:
        """Test that latency is non-negative and equals end minus start."""

        async def target(call: CallCapability) -> None:
            await asyncio.sleep(0.01)

        await capability(target)
        _, after = capability.bus.get_event_history()[-1]

        assert after.latency_ms is not None
        assert after.latency_ms >= 0
        assert after.end is not None
        elapsed_ms = (after.end - after.start).total_seconds() * 1000
        assert elapsed_ms == pytest.approx(after.latency_ms, abs=1e-2)
