# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Scripted verification of effectful functions.

Exports:
    affect_test: Begin a fluent test declaration for a function
    AffectTestBuilder: The fluent declaration builder
    ANY_CALLABLE: Wildcard marker for callable argument positions
    ExpectationStack: Ordered frames with a forward-only cursor
    ModelExpectationFrame: One declared call and its canned outcome
    ModelExpectedArgument: Literal or wildcard expected argument
    ModelOutcomeExpectation: Expected settlement of the function under test
    VerificationEngine: Matching and judging for one scripted execution
"""

from omnibase_affect.testing.affect_test import AffectTestBuilder, affect_test
from omnibase_affect.testing.expectation_stack import ExpectationStack, FrameDeclaration
from omnibase_affect.testing.model_expectation_frame import (
    ModelExpectationFrame,
    ModelOutcomeExpectation,
)
from omnibase_affect.testing.model_expected_argument import (
    ANY_CALLABLE,
    ModelExpectedArgument,
)
from omnibase_affect.testing.structural import structurally_equal
from omnibase_affect.testing.verification_engine import (
    InterceptingDispatcher,
    VerificationEngine,
)

__all__: list[str] = [
    "ANY_CALLABLE",
    "AffectTestBuilder",
    "ExpectationStack",
    "FrameDeclaration",
    "InterceptingDispatcher",
    "ModelExpectationFrame",
    "ModelExpectedArgument",
    "ModelOutcomeExpectation",
    "VerificationEngine",
    "affect_test",
    "structurally_equal",
]
