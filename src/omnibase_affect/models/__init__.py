# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""omnibase_affect Models Module.

Exports:
    ModelAffectConfig: Event hooks, base context and bus tuning
    ModelCallOutcome: Common success/failure settlement of a call
    ModelCallRecord: Pre/post call instrumentation record
"""

from omnibase_affect.models.model_affect_config import (
    DEFAULT_MAX_HISTORY,
    EventHandler,
    ModelAffectConfig,
)
from omnibase_affect.models.model_call_outcome import ModelCallOutcome
from omnibase_affect.models.model_call_record import ModelCallRecord

__all__: list[str] = [
    "DEFAULT_MAX_HISTORY",
    "EventHandler",
    "ModelAffectConfig",
    "ModelCallOutcome",
    "ModelCallRecord",
]
