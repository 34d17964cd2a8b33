# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Event bus for call instrumentation.

Exports:
    CallEventBus: In-memory publish/subscribe sink for the four call events
    configure_event_bus: Build a bus bound to a ModelAffectConfig's hooks
"""

from omnibase_affect.event_bus.inmemory_event_bus import (
    CallEventBus,
    configure_event_bus,
)

__all__: list[str] = ["CallEventBus", "configure_event_bus"]
