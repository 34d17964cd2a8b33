# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Configuration model for ``affect()`` and ``affect_test()``.

Environment Overrides:
    AFFECT_EVENT_DELIVERY: "immediate" or "deferred"
    AFFECT_MAX_HISTORY: Maximum number of events kept in bus history
"""

from __future__ import annotations

import os
from collections.abc import Callable
from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from omnibase_affect.enums import EnumCallEvent, EnumEventDelivery
from omnibase_affect.errors import AffectConfigurationError, ModelAffectErrorContext
from omnibase_affect.models.model_call_record import ModelCallRecord

EventHandler = Callable[[ModelCallRecord], Any]

DEFAULT_MAX_HISTORY: int = 1000


class ModelAffectConfig(BaseModel):
    """Event hooks, base context and event bus tuning.

    Attributes:
        on_call: Handler for the pre-call event of every dispatched call
        on_call_complete: Handler for the post-call event of every dispatched call
        on_function: Handler for the pre-call event of top-level methods
        on_function_complete: Handler for the post-call event of top-level methods
        context: Base context exposed as ``call.context``
        event_delivery: Run handlers inside ``emit()`` or schedule them
        max_history: Number of emitted events kept for inspection

    Example:
        >>> config = ModelAffectConfig(
        ...     on_call_complete=lambda record: print(record.latency_ms),
        ...     context={"request_id": "abc"},
        ... )
        >>> api = affect({"get_user": get_user}, config)
    """

    model_config = ConfigDict(
        frozen=True,
        extra="forbid",
        arbitrary_types_allowed=True,
    )

    on_call: Optional[EventHandler] = None
    on_call_complete: Optional[EventHandler] = None
    on_function: Optional[EventHandler] = None
    on_function_complete: Optional[EventHandler] = None
    context: dict[str, Any] = Field(default_factory=dict)
    event_delivery: EnumEventDelivery = EnumEventDelivery.IMMEDIATE
    max_history: int = Field(default=DEFAULT_MAX_HISTORY, ge=0)

    def handlers(self) -> dict[EnumCallEvent, EventHandler]:
        """Return the configured hooks keyed by event channel."""
        hooks = {
            EnumCallEvent.ON_CALL: self.on_call,
            EnumCallEvent.ON_CALL_COMPLETE: self.on_call_complete,
            EnumCallEvent.ON_FUNCTION: self.on_function,
            EnumCallEvent.ON_FUNCTION_COMPLETE: self.on_function_complete,
        }
        return {event: handler for event, handler in hooks.items() if handler}

    @classmethod
    def from_env(cls, **overrides: object) -> ModelAffectConfig:
        """Build a config from keyword overrides plus environment variables.

        Explicit keyword overrides win over the environment.

        Raises:
            AffectConfigurationError: If an environment value is invalid
        """
        values: dict[str, object] = {}
        delivery = os.getenv("AFFECT_EVENT_DELIVERY")
        if delivery:
            values["event_delivery"] = delivery.strip().lower()
        max_history = os.getenv("AFFECT_MAX_HISTORY")
        if max_history:
            values["max_history"] = max_history.strip()
        values.update(overrides)
        try:
            return cls.model_validate(values)
        except ValidationError as e:
            raise AffectConfigurationError(
                f"Invalid affect configuration: {e.error_count()} error(s)",
                context=ModelAffectErrorContext(operation="load_config"),
                errors=e.errors(include_url=False),
            ) from e


__all__: list[str] = ["DEFAULT_MAX_HISTORY", "EventHandler", "ModelAffectConfig"]
