# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Declaration state machine for the fluent test builder."""

from enum import Enum


class EnumBuilderState(str, Enum):
    """States of ``AffectTestBuilder``.

    Transitions:
        START --args()--> AWAITING_NEXT_CALL_OR_FINISH
        AWAITING_NEXT_CALL_OR_FINISH --calls()--> AWAITING_OUTCOME
        AWAITING_NEXT_CALL_OR_FINISH --calls_all()--> AWAITING_NEXT_CALL_OR_FINISH
        AWAITING_OUTCOME --call_returns()/call_throws()/call_execute()-->
            AWAITING_NEXT_CALL_OR_FINISH
        AWAITING_NEXT_CALL_OR_FINISH --expects_*()/run()--> FINISHED
    """

    START = "start"
    AWAITING_OUTCOME = "awaiting_outcome"
    AWAITING_NEXT_CALL_OR_FINISH = "awaiting_next_call_or_finish"
    FINISHED = "finished"


__all__: list[str] = ["EnumBuilderState"]
