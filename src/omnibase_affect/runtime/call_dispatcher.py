# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Call dispatcher and top-level method binding.

``CallDispatcher`` routes each capability invocation to the runner for its
calling convention. It is the seam the verification engine replaces with an
intercepting dispatcher during scripted tests.

``build_call()`` returns the method initialiser used by ``affect()``: it binds
a function to a capability so that ``await method(*args)`` runs it with the
capability as first parameter and instruments it on the per-function
channels.
"""

from __future__ import annotations

import asyncio
import functools
import logging
from collections.abc import Callable, Mapping, Sequence

from omnibase_affect.enums import EnumCallMode
from omnibase_affect.event_bus import CallEventBus
from omnibase_affect.runtime.call_capability import CallCapability
from omnibase_affect.runtime.call_runners import CALL_RUNNERS, run_method

logger = logging.getLogger(__name__)

MethodInit = Callable[[Callable[..., object]], "AffectMethod"]


class CallDispatcher:
    """Real dispatcher: executes every call through its convention's runner."""

    def dispatch(
        self,
        mode: EnumCallMode,
        capability: CallCapability,
        fn: Callable[..., object],
        args: Sequence[object],
    ) -> asyncio.Future[object]:
        runner = CALL_RUNNERS[mode]
        logger.debug(
            "Dispatching call",
            extra={
                "fn_name": getattr(fn, "__qualname__", repr(fn)),
                "mode": mode.value,
                "arg_count": len(args),
            },
        )
        return runner(capability, fn, args, None)


class AffectMethod:
    """A function bound to a call capability.

    Calling it returns an ``asyncio.Future`` for the function's settlement.
    The original function stays reachable through ``__wrapped__``.
    """

    def __init__(self, fn: Callable[..., object], capability: CallCapability) -> None:
        functools.update_wrapper(self, fn)
        self._fn = fn
        self._capability = capability

    @property
    def capability(self) -> CallCapability:
        return self._capability

    def __call__(self, *args: object) -> asyncio.Future[object]:
        return run_method(self._capability, self._fn, args)

    def with_context(
        self, partial: Mapping[str, object], *args: object
    ) -> asyncio.Future[object]:
        """Run once with the ambient context shallow-merged with ``partial``.

        The ambient capability is not modified.
        """
        return run_method(self._capability.with_context(partial), self._fn, args)

    def __repr__(self) -> str:
        return f"AffectMethod({getattr(self._fn, '__qualname__', self._fn)!r})"


def build_call(
    bus: CallEventBus,
    context: Mapping[str, object],
    dispatcher: CallDispatcher,
) -> MethodInit:
    """Create the capability and return a method initialiser bound to it."""
    capability = CallCapability(bus, context, dispatcher)

    def method_init(fn: Callable[..., object]) -> AffectMethod:
        return AffectMethod(fn, capability)

    return method_init


__all__: list[str] = ["AffectMethod", "CallDispatcher", "MethodInit", "build_call"]
