# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""The call capability handed to every effectful function.

Effectful functions are written against this capability instead of calling
their dependencies directly:

    ```python
    async def load_profile(call, user_id):
        user = await call(fetch_user, user_id)
        avatar = await call.from_callback(legacy_avatar_lookup, user["email"])
        return {**user, "avatar": avatar}
    ```

Each mode returns an ``asyncio.Future`` created at the call site. Which
dispatcher sits behind the capability (real execution or scripted
verification) is invisible to the function.
"""

from __future__ import annotations

import asyncio
from collections.abc import Callable, Mapping
from types import MappingProxyType
from typing import TYPE_CHECKING

from omnibase_affect.enums import EnumCallMode
from omnibase_affect.event_bus import CallEventBus

if TYPE_CHECKING:
    from omnibase_affect.runtime.call_dispatcher import CallDispatcher


class CallCapability:
    """Callable dispatch capability with one method per calling convention.

    One capability instance serves one method execution and every nested call
    it makes. ``context`` is read-only; use ``with_context()`` for a variant.
    """

    __slots__ = ("_bus", "_context", "_dispatcher")

    def __init__(
        self,
        bus: CallEventBus,
        context: Mapping[str, object],
        dispatcher: CallDispatcher,
    ) -> None:
        self._bus = bus
        self._context: Mapping[str, object] = MappingProxyType(dict(context))
        self._dispatcher = dispatcher

    @property
    def bus(self) -> CallEventBus:
        return self._bus

    @property
    def context(self) -> Mapping[str, object]:
        return self._context

    @property
    def dispatcher(self) -> CallDispatcher:
        return self._dispatcher

    def __call__(
        self, fn: Callable[..., object], *args: object
    ) -> asyncio.Future[object]:
        """Call ``fn(call, *args)``; ``fn`` receives this capability first."""
        return self._dispatcher.dispatch(EnumCallMode.STANDARD, self, fn, args)

    def plain(self, fn: Callable[..., object], *args: object) -> asyncio.Future[object]:
        """Call ``fn(*args)`` without passing the capability."""
        return self._dispatcher.dispatch(EnumCallMode.PLAIN, self, fn, args)

    def sync(self, fn: Callable[..., object], *args: object) -> asyncio.Future[object]:
        """Call a synchronous ``fn(*args)``; the result is wrapped in a done future."""
        return self._dispatcher.dispatch(EnumCallMode.SYNCHRONOUS, self, fn, args)

    def from_callback(
        self, fn: Callable[..., object], *args: object
    ) -> asyncio.Future[object]:
        """Call ``fn(*args, callback)`` where ``callback(error, result)`` settles it."""
        return self._dispatcher.dispatch(EnumCallMode.FROM_CALLBACK, self, fn, args)

    def from_multi_callback(
        self, fn: Callable[..., object], *args: object
    ) -> asyncio.Future[object]:
        """Call ``fn(*args, callback)`` resolving to the list of all callback results."""
        return self._dispatcher.dispatch(
            EnumCallMode.FROM_MULTI_CALLBACK, self, fn, args
        )

    def with_context(self, partial: Mapping[str, object]) -> CallCapability:
        """Return a capability whose context is ``{**self.context, **partial}``."""
        return CallCapability(
            self._bus, {**self._context, **partial}, self._dispatcher
        )

    def __repr__(self) -> str:
        return (
            f"CallCapability(dispatcher={type(self._dispatcher).__name__}, "
            f"context_keys={sorted(self._context)})"
        )


__all__: list[str] = ["CallCapability"]
