# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Test helpers for omnibase_affect unit tests.

Available Utilities:
    Sample functions:
        - inner: Synchronous leaf call returning ``(inner x)``
        - outer: Two nested calls, rethrows ``ValueError`` with a prefix
        - calls_each: One call followed by an ``asyncio.gather`` batch

    Event recording:
        - EventRecorder: Collects records from every event channel
"""

from tests.helpers.affect_functions import calls_each, inner, outer
from tests.helpers.event_recorder import EventRecorder

__all__ = [
    "EventRecorder",
    "calls_each",
    "inner",
    "outer",
]
