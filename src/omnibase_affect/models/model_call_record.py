# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Instrumentation record emitted before and after every dispatched call.

A record is created when a call is issued (pre-call event) and a settled copy
is produced when the call completes (post-call event). Both share one
``correlation_id`` so consumers can pair them.

Timing:
    ``start`` is the wall-clock UTC issuance timestamp. ``latency_ms`` is
    measured with ``time.perf_counter()``, which is monotonic, and ``end`` is
    derived as ``start + latency``, so ``end - start`` always equals the
    latency and is never negative even if the wall clock steps backwards.
"""

from __future__ import annotations

import time
from collections.abc import Callable, Mapping
from datetime import UTC, datetime, timedelta
from typing import Any, Optional
from uuid import UUID, uuid4

from pydantic import BaseModel, ConfigDict, Field, PrivateAttr

from omnibase_affect.models.model_call_outcome import ModelCallOutcome


class ModelCallRecord(BaseModel):
    """One call's instrumentation record.

    Attributes:
        fn: The function that was called
        args: Positional arguments as issued (without capability or callback)
        context: Ambient context of the capability that issued the call
        correlation_id: Shared by the pre-call and post-call records
        start: Issuance timestamp (UTC)
        end: Settlement timestamp (UTC), None until settled
        latency_ms: ``end - start`` in milliseconds, None until settled
        success: True/False once settled, None before
        result: Result value on success, exception on failure
    """

    model_config = ConfigDict(
        frozen=True,
        extra="forbid",
        arbitrary_types_allowed=True,
    )

    fn: Callable[..., Any] = Field(description="The function that was called")
    args: tuple[Any, ...] = Field(default=(), description="Issued positional arguments")
    context: Mapping[str, Any] = Field(
        default_factory=dict, description="Ambient capability context"
    )
    correlation_id: UUID = Field(default_factory=uuid4)
    start: datetime = Field(default_factory=lambda: datetime.now(UTC))
    end: Optional[datetime] = None
    latency_ms: Optional[float] = None
    success: Optional[bool] = None
    result: Any = None

    _started_at: float = PrivateAttr(default_factory=time.perf_counter)

    @property
    def fn_name(self) -> str:
        return getattr(self.fn, "__qualname__", None) or repr(self.fn)

    @property
    def is_settled(self) -> bool:
        return self.success is not None

    def finalize(self, outcome: ModelCallOutcome) -> ModelCallRecord:
        """Return the settled copy of this record for the post-call event."""
        latency_ms = max(0.0, (time.perf_counter() - self._started_at) * 1000)
        settled = self.model_copy(
            update={
                "end": self.start + timedelta(milliseconds=latency_ms),
                "latency_ms": latency_ms,
                "success": outcome.is_success,
                "result": outcome.payload,
            }
        )
        return settled


__all__: list[str] = ["ModelCallRecord"]
