# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Event delivery strategy for the call event bus."""

from enum import Enum


class EnumEventDelivery(str, Enum):
    """When handlers run relative to ``emit()``.

    IMMEDIATE runs handlers inside ``emit()``. DEFERRED schedules them on the
    running loop with ``call_soon``; FIFO scheduling keeps per-chain order.
    """

    IMMEDIATE = "immediate"
    DEFERRED = "deferred"


__all__: list[str] = ["EnumEventDelivery"]
