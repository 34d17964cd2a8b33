# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Event channel names emitted by the dispatch core."""

from enum import Enum


class EnumCallEvent(str, Enum):
    """The four instrumentation channels.

    Per-call channels fire for every capability invocation, including nested
    ones. Per-function channels fire only for top-level method invocations.
    Both carry the same ``ModelCallRecord`` shape.
    """

    ON_CALL = "on_call"
    ON_CALL_COMPLETE = "on_call_complete"
    ON_FUNCTION = "on_function"
    ON_FUNCTION_COMPLETE = "on_function_complete"


__all__: list[str] = ["EnumCallEvent"]
