# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""omnibase_affect Errors Module.

Exports:
    ModelAffectErrorContext: Configuration model for bundled error context
    AffectError: Base error class
    AffectConfigurationError: Invalid configuration or environment override
    CallbackError: Non-exception error reported through a callback
    VerificationAbort: Internal sentinel unwinding the function under test
    BuilderSequenceError: Builder method called in an illegal state
    BuilderArgumentError: Builder method received an unusable argument
    VerificationError: Base of all failures reported by a scripted run
    MatchFailureError: Intercepted call did not match its frame
    IdentityMismatchError / ArgumentMismatchError / UnexpectedExtraCallError
    OutcomeMismatchError / ErrorKindMismatchError / ErrorMessageMismatchError
    UnconsumedExpectationsError: Frames left unconsumed at completion

Reporting Priority:
    A failed scripted run reports exactly one error, chosen in this order:
    MatchFailureError > OutcomeMismatchError > UnconsumedExpectationsError.
"""

from omnibase_affect.errors.affect_errors import (
    AffectBuilderError,
    AffectConfigurationError,
    AffectError,
    ArgumentMismatchError,
    BuilderArgumentError,
    BuilderSequenceError,
    CallbackError,
    ErrorKindMismatchError,
    ErrorMessageMismatchError,
    IdentityMismatchError,
    MatchFailureError,
    OutcomeMismatchError,
    UnconsumedExpectationsError,
    UnexpectedExtraCallError,
    VerificationAbort,
    VerificationError,
)
from omnibase_affect.errors.model_affect_error_context import ModelAffectErrorContext

__all__: list[str] = [
    "AffectBuilderError",
    "AffectConfigurationError",
    "AffectError",
    "ArgumentMismatchError",
    "BuilderArgumentError",
    "BuilderSequenceError",
    "CallbackError",
    "ErrorKindMismatchError",
    "ErrorMessageMismatchError",
    "IdentityMismatchError",
    "MatchFailureError",
    "ModelAffectErrorContext",
    "OutcomeMismatchError",
    "UnconsumedExpectationsError",
    "UnexpectedExtraCallError",
    "VerificationAbort",
    "VerificationError",
]
