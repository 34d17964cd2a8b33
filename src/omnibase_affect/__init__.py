# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""omnibase_affect - effectful functions written against a call capability.

Functions receive a ``call`` capability instead of invoking their
dependencies directly. The same function body runs for real through
``affect()`` or against a scripted sequence of expected calls through
``affect_test()``.

Example:
    ```python
    from omnibase_affect import affect, affect_test

    async def load_profile(call, user_id):
        user = await call(fetch_user, user_id)
        return {"id": user_id, "name": user["name"]}

    api = affect({"load_profile": load_profile})
    profile = await api["load_profile"](42)

    await (
        affect_test(load_profile)
        .args(42)
        .calls(fetch_user, 42)
        .call_returns({"name": "Ada"})
        .expects_return({"id": 42, "name": "Ada"})
    )
    ```
"""

from omnibase_affect.enums import EnumCallEvent, EnumCallMode, EnumEventDelivery
from omnibase_affect.errors import (
    AffectError,
    BuilderSequenceError,
    VerificationError,
)
from omnibase_affect.event_bus import CallEventBus
from omnibase_affect.models import ModelAffectConfig, ModelCallRecord
from omnibase_affect.runtime import AffectMethod, CallCapability, affect
from omnibase_affect.testing import ANY_CALLABLE, affect_test

__version__ = "0.1.0"

__all__: list[str] = [
    "ANY_CALLABLE",
    "AffectError",
    "AffectMethod",
    "BuilderSequenceError",
    "CallCapability",
    "CallEventBus",
    "EnumCallEvent",
    "EnumCallMode",
    "EnumEventDelivery",
    "ModelAffectConfig",
    "ModelCallRecord",
    "VerificationError",
    "__version__",
    "affect",
    "affect_test",
]
