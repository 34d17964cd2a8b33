# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""omnibase_affect Enumerations Module.

Exports:
    EnumAffectErrorCode: Error classification for all package errors
    EnumArgumentTag: Literal or wildcard expected argument position
    EnumBuilderState: Fluent test builder declaration states
    EnumCallEvent: Instrumentation event channel names
    EnumCallMode: Calling conventions of the call capability
    EnumEventDelivery: Immediate or deferred event handler delivery
    EnumFrameMode: Return, throw or execute mode of an expectation frame
    EnumOutcomeKind: Success or failure of a settled call
"""

from omnibase_affect.enums.enum_affect_error_code import EnumAffectErrorCode
from omnibase_affect.enums.enum_argument_tag import EnumArgumentTag
from omnibase_affect.enums.enum_builder_state import EnumBuilderState
from omnibase_affect.enums.enum_call_event import EnumCallEvent
from omnibase_affect.enums.enum_call_mode import EnumCallMode
from omnibase_affect.enums.enum_event_delivery import EnumEventDelivery
from omnibase_affect.enums.enum_frame_mode import EnumFrameMode
from omnibase_affect.enums.enum_outcome_kind import EnumOutcomeKind

__all__: list[str] = [
    "EnumAffectErrorCode",
    "EnumArgumentTag",
    "EnumBuilderState",
    "EnumCallEvent",
    "EnumCallMode",
    "EnumEventDelivery",
    "EnumFrameMode",
    "EnumOutcomeKind",
]
