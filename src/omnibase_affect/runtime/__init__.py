# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Dispatch core.

Exports:
    affect: Bind a nested mapping of effectful functions to a capability
    AffectMethod: A function bound to a capability
    CallCapability: The capability passed to effectful functions
    CallDispatcher: Routes capability calls to convention runners
    build_call: Create a capability and its method initialiser
    build_functions: Recursive function-tree builder
"""

from omnibase_affect.runtime.affect import affect, resolve_config
from omnibase_affect.runtime.call_capability import CallCapability
from omnibase_affect.runtime.call_dispatcher import (
    AffectMethod,
    CallDispatcher,
    MethodInit,
    build_call,
)
from omnibase_affect.runtime.call_runners import CALL_RUNNERS
from omnibase_affect.runtime.function_tree import build_functions

__all__: list[str] = [
    "CALL_RUNNERS",
    "AffectMethod",
    "CallCapability",
    "CallDispatcher",
    "MethodInit",
    "affect",
    "build_call",
    "build_functions",
    "resolve_config",
]
