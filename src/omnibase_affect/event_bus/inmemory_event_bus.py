# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""In-Memory Call Event Bus.

Minimal publish/subscribe sink for the four instrumentation channels emitted
by the dispatch core. ``emit()`` is synchronous so it can be called at the
call site before the dispatched function runs.

Features:
    - Several handlers per event, run in registration order
    - Immediate delivery (inside ``emit()``) or deferred delivery through
      ``loop.call_soon`` (FIFO, so per-chain ordering is preserved)
    - Coroutine handlers scheduled as tasks in emission order
    - Failing handlers are logged and never affect the dispatched call
    - Event history tracking for debugging and testing

Usage:
    ```python
    from omnibase_affect.event_bus import CallEventBus

    bus = CallEventBus()
    bus.on(EnumCallEvent.ON_CALL_COMPLETE, lambda record: print(record.latency_ms))
    ```
"""

from __future__ import annotations

import asyncio
import inspect
import logging
from collections import defaultdict
from typing import Optional

from omnibase_affect.enums import EnumCallEvent, EnumEventDelivery
from omnibase_affect.models import (
    DEFAULT_MAX_HISTORY,
    EventHandler,
    ModelAffectConfig,
    ModelCallRecord,
)

logger = logging.getLogger(__name__)


class CallEventBus:
    """In-memory event bus for call instrumentation.

    Attributes:
        delivery: Immediate or deferred handler delivery
        max_history: Maximum number of events to retain in history
    """

    def __init__(
        self,
        delivery: EnumEventDelivery = EnumEventDelivery.IMMEDIATE,
        max_history: int = DEFAULT_MAX_HISTORY,
    ) -> None:
        self._delivery = delivery
        self._max_history = max_history

        # Event -> handlers in registration order
        self._handlers: dict[EnumCallEvent, list[EventHandler]] = defaultdict(list)

        # Event history for debugging (circular buffer behavior)
        self._event_history: list[tuple[EnumCallEvent, ModelCallRecord]] = []

        # Strong references to running coroutine handlers until they finish
        self._handler_tasks: set[asyncio.Future[object]] = set()

    @property
    def delivery(self) -> EnumEventDelivery:
        return self._delivery

    @property
    def max_history(self) -> int:
        return self._max_history

    def on(self, event: EnumCallEvent | str, handler: EventHandler) -> None:
        """Register a handler for an event channel.

        Raises:
            ValueError: If ``event`` is not one of the four channel names
        """
        channel = EnumCallEvent(event)
        self._handlers[channel].append(handler)
        logger.debug(
            "Event handler added",
            extra={"event": channel.value, "handler": _handler_name(handler)},
        )

    def off(self, event: EnumCallEvent | str, handler: EventHandler) -> None:
        """Remove a previously registered handler; unknown handlers are ignored."""
        channel = EnumCallEvent(event)
        try:
            self._handlers[channel].remove(handler)
        except ValueError:
            # Already removed
            pass

    def emit(self, event: EnumCallEvent, record: ModelCallRecord) -> None:
        """Publish a record to every handler of ``event``."""
        self._event_history.append((event, record))
        if len(self._event_history) > self._max_history:
            self._event_history.pop(0)

        handlers = list(self._handlers.get(event, ()))
        if not handlers:
            return

        if self._delivery is EnumEventDelivery.DEFERRED:
            loop = _running_loop()
            if loop is not None:
                for handler in handlers:
                    loop.call_soon(self._deliver, event, handler, record)
                return

        for handler in handlers:
            self._deliver(event, handler, record)

    def _deliver(
        self,
        event: EnumCallEvent,
        handler: EventHandler,
        record: ModelCallRecord,
    ) -> None:
        try:
            result = handler(record)
            if inspect.isawaitable(result):
                task = asyncio.ensure_future(result)
                self._handler_tasks.add(task)
                task.add_done_callback(
                    lambda t: self._handler_task_done(event, handler, record, t)
                )
        except Exception as e:
            # Log but don't fail the dispatched call or other handlers
            logger.exception(
                "Event handler failed",
                extra={
                    "event": event.value,
                    "handler": _handler_name(handler),
                    "error": str(e),
                    "correlation_id": str(record.correlation_id),
                },
            )

    def _handler_task_done(
        self,
        event: EnumCallEvent,
        handler: EventHandler,
        record: ModelCallRecord,
        task: asyncio.Future[object],
    ) -> None:
        self._handler_tasks.discard(task)
        if task.cancelled():
            return
        error = task.exception()
        if error is not None:
            logger.error(
                "Async event handler failed",
                exc_info=error,
                extra={
                    "event": event.value,
                    "handler": _handler_name(handler),
                    "correlation_id": str(record.correlation_id),
                },
            )

    # =========================================================================
    # Debugging/Observability Methods
    # =========================================================================

    def get_event_history(
        self,
        limit: int = 100,
        event: Optional[EnumCallEvent] = None,
    ) -> list[tuple[EnumCallEvent, ModelCallRecord]]:
        """Get recent events (most recent last), optionally filtered by channel."""
        history = self._event_history
        if event is not None:
            history = [item for item in history if item[0] is event]
        return list(history[-limit:]) if limit else []

    def clear_event_history(self) -> None:
        """Clear event history. Useful for test isolation."""
        self._event_history.clear()

    def get_handler_count(self, event: Optional[EnumCallEvent] = None) -> int:
        if event is not None:
            return len(self._handlers.get(event, ()))
        return sum(len(handlers) for handlers in self._handlers.values())


def configure_event_bus(config: ModelAffectConfig) -> CallEventBus:
    """Build a bus and bind the handler hooks present in ``config``."""
    bus = CallEventBus(delivery=config.event_delivery, max_history=config.max_history)
    for event, handler in config.handlers().items():
        bus.on(event, handler)
    return bus


def _running_loop() -> Optional[asyncio.AbstractEventLoop]:
    try:
        return asyncio.get_running_loop()
    except RuntimeError:
        return None


def _handler_name(handler: EventHandler) -> str:
    return getattr(handler, "__qualname__", None) or repr(handler)


__all__: list[str] = ["CallEventBus", "configure_event_bus"]
