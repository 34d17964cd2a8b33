# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Call runners: one adapter per calling convention.

Every runner follows the same lifecycle:

    1. Build the call record and emit the pre-call event
    2. Invoke the function synchronously at the call site
    3. Reduce its completion signal to a ``ModelCallOutcome``
    4. Emit the post-call event with the settled record
    5. Return the value, or raise the failure unchanged

Ordering:
    Step 2 happens before the runner returns. A function that returns an
    awaitable only suspends once that awaitable is awaited, so a batch of calls
    passed to ``asyncio.gather`` is issued in literal argument order. The
    verification engine relies on this to match calls in declaration order.

The ``invoke`` parameter separates the callable that is recorded (``fn``)
from the callable that is executed. Production dispatch executes ``fn``
itself; the verification engine substitutes a canned-outcome invoker while
the records still name the real target.
"""

from __future__ import annotations

import asyncio
import inspect
import logging
from collections.abc import Awaitable, Callable, Sequence
from typing import TYPE_CHECKING, Optional

from omnibase_affect.enums import EnumCallEvent, EnumCallMode
from omnibase_affect.errors import CallbackError, ModelAffectErrorContext
from omnibase_affect.event_bus import CallEventBus
from omnibase_affect.models import ModelCallOutcome, ModelCallRecord

if TYPE_CHECKING:
    from omnibase_affect.runtime.call_capability import CallCapability

logger = logging.getLogger(__name__)

CallEvents = tuple[EnumCallEvent, EnumCallEvent]
CallRunner = Callable[
    [
        "CallCapability",
        Callable[..., object],
        Sequence[object],
        Optional[Callable[..., object]],
    ],
    "asyncio.Future[object]",
]

CALL_EVENTS: CallEvents = (EnumCallEvent.ON_CALL, EnumCallEvent.ON_CALL_COMPLETE)
METHOD_EVENTS: CallEvents = (
    EnumCallEvent.ON_FUNCTION,
    EnumCallEvent.ON_FUNCTION_COMPLETE,
)


def pre_call(
    bus: CallEventBus,
    events: CallEvents,
    capability: CallCapability,
    fn: Callable[..., object],
    args: Sequence[object],
) -> ModelCallRecord:
    """Create the call record and emit the pre-call event."""
    record = ModelCallRecord(fn=fn, args=tuple(args), context=capability.context)
    bus.emit(events[0], record)
    return record


def post_call(
    bus: CallEventBus,
    events: CallEvents,
    record: ModelCallRecord,
    outcome: ModelCallOutcome,
) -> object:
    """Emit the post-call event, then return the value or raise the failure."""
    settled = record.finalize(outcome)
    bus.emit(events[1], settled)
    logger.debug(
        "Call settled",
        extra={
            "fn_name": settled.fn_name,
            "success": settled.success,
            "latency_ms": settled.latency_ms,
            "correlation_id": str(settled.correlation_id),
        },
    )
    return outcome.unwrap()


async def _settle(
    bus: CallEventBus,
    events: CallEvents,
    record: ModelCallRecord,
    pending: object,
) -> object:
    try:
        value = await pending if inspect.isawaitable(pending) else pending
    except Exception as e:
        outcome = ModelCallOutcome.failure(e)
    else:
        outcome = ModelCallOutcome.success(value)
    return post_call(bus, events, record, outcome)


async def _reraise(error: Exception) -> object:
    raise error


def run_awaitable(
    capability: CallCapability,
    events: CallEvents,
    fn: Callable[..., object],
    args: Sequence[object],
    invoke: Callable[..., object],
    invoke_args: Sequence[object],
) -> asyncio.Future[object]:
    """Run a function whose completion is its return value or awaitable.

    A synchronous raise inside ``invoke`` becomes the failure of the returned
    future; it never escapes to the caller synchronously.
    """
    loop = asyncio.get_running_loop()
    record = pre_call(capability.bus, events, capability, fn, args)
    pending: object
    try:
        pending = invoke(*invoke_args)
    except Exception as e:
        pending = _reraise(e)
    return loop.create_task(_settle(capability.bus, events, record, pending))


def run_standard(
    capability: CallCapability,
    fn: Callable[..., object],
    args: Sequence[object],
    invoke: Optional[Callable[..., object]] = None,
) -> asyncio.Future[object]:
    """Capability-first convention: ``fn(call, *args)``."""
    return run_awaitable(
        capability, CALL_EVENTS, fn, args, invoke or fn, (capability, *args)
    )


def run_plain(
    capability: CallCapability,
    fn: Callable[..., object],
    args: Sequence[object],
    invoke: Optional[Callable[..., object]] = None,
) -> asyncio.Future[object]:
    """Plain convention: ``fn(*args)`` returning a value or awaitable."""
    return run_awaitable(capability, CALL_EVENTS, fn, args, invoke or fn, tuple(args))


def run_synchronous(
    capability: CallCapability,
    fn: Callable[..., object],
    args: Sequence[object],
    invoke: Optional[Callable[..., object]] = None,
) -> asyncio.Future[object]:
    """Synchronous convention: direct return or raise, wrapped in a done future.

    The post-call event fires before this function returns.
    """
    loop = asyncio.get_running_loop()
    record = pre_call(capability.bus, CALL_EVENTS, capability, fn, args)
    try:
        value = (invoke or fn)(*args)
    except Exception as e:
        outcome = ModelCallOutcome.failure(e)
    else:
        outcome = ModelCallOutcome.success(value)

    future: asyncio.Future[object] = loop.create_future()
    try:
        future.set_result(post_call(capability.bus, CALL_EVENTS, record, outcome))
    except Exception as e:
        future.set_exception(e)
    return future


def _run_callback(
    capability: CallCapability,
    fn: Callable[..., object],
    args: Sequence[object],
    invoke: Optional[Callable[..., object]],
    multi: bool,
) -> asyncio.Future[object]:
    loop = asyncio.get_running_loop()
    record = pre_call(capability.bus, CALL_EVENTS, capability, fn, args)
    waiter: asyncio.Future[object] = loop.create_future()

    def settle(error: object, results: tuple[object, ...]) -> None:
        if waiter.done():
            logger.warning(
                "Callback invoked after the call settled, ignoring",
                extra={
                    "fn_name": record.fn_name,
                    "correlation_id": str(record.correlation_id),
                },
            )
            return
        if error is not None:
            if not isinstance(error, BaseException):
                error = CallbackError(
                    error,
                    context=ModelAffectErrorContext.with_correlation(
                        record.correlation_id,
                        operation="callback",
                        function_name=record.fn_name,
                    ),
                )
            waiter.set_exception(error)
        elif multi:
            waiter.set_result(list(results))
        else:
            waiter.set_result(results[0] if results else None)

    def callback(error: object = None, *results: object) -> None:
        try:
            current: Optional[asyncio.AbstractEventLoop] = asyncio.get_running_loop()
        except RuntimeError:
            current = None
        if current is loop:
            settle(error, results)
        else:
            loop.call_soon_threadsafe(settle, error, results)

    try:
        (invoke or fn)(*args, callback)
    except Exception as e:
        if not waiter.done():
            waiter.set_exception(e)
        else:
            logger.warning(
                "Callback function raised after settling, ignoring",
                extra={"fn_name": record.fn_name, "error": str(e)},
            )
    return loop.create_task(_settle(capability.bus, CALL_EVENTS, record, waiter))


def run_from_callback(
    capability: CallCapability,
    fn: Callable[..., object],
    args: Sequence[object],
    invoke: Optional[Callable[..., object]] = None,
) -> asyncio.Future[object]:
    """Single-result callback convention: ``fn(*args, callback(error, result))``."""
    return _run_callback(capability, fn, args, invoke, multi=False)


def run_from_multi_callback(
    capability: CallCapability,
    fn: Callable[..., object],
    args: Sequence[object],
    invoke: Optional[Callable[..., object]] = None,
) -> asyncio.Future[object]:
    """Multi-result callback convention; resolves to the list of all results."""
    return _run_callback(capability, fn, args, invoke, multi=True)


def run_method(
    capability: CallCapability,
    fn: Callable[..., Awaitable[object] | object],
    args: Sequence[object],
) -> asyncio.Future[object]:
    """Run a top-level method on the per-function event channels."""
    return run_awaitable(capability, METHOD_EVENTS, fn, args, fn, (capability, *args))


CALL_RUNNERS: dict[EnumCallMode, CallRunner] = {
    EnumCallMode.STANDARD: run_standard,
    EnumCallMode.PLAIN: run_plain,
    EnumCallMode.SYNCHRONOUS: run_synchronous,
    EnumCallMode.FROM_CALLBACK: run_from_callback,
    EnumCallMode.FROM_MULTI_CALLBACK: run_from_multi_callback,
}


__all__: list[str] = [
    "CALL_EVENTS",
    "CALL_RUNNERS",
    "METHOD_EVENTS",
    "CallRunner",
    "post_call",
    "pre_call",
    "run_awaitable",
    "run_from_callback",
    "run_from_multi_callback",
    "run_method",
    "run_plain",
    "run_standard",
    "run_synchronous",
]
