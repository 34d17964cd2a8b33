# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Affect Error Classes.

Error Hierarchy:
    AffectError (base, carries EnumAffectErrorCode + structured context)
    ├── AffectConfigurationError
    ├── CallbackError
    ├── VerificationAbort (internal sentinel, never reported)
    ├── AffectBuilderError
    │   ├── BuilderSequenceError
    │   └── BuilderArgumentError
    └── VerificationError (also AssertionError)
        ├── MatchFailureError
        │   ├── IdentityMismatchError
        │   ├── ArgumentMismatchError
        │   └── UnexpectedExtraCallError
        ├── OutcomeMismatchError
        │   ├── ErrorKindMismatchError
        │   └── ErrorMessageMismatchError
        └── UnconsumedExpectationsError

Builder errors surface synchronously at declaration time. Verification
errors surface only through the coroutine returned by the test builder.
``VerificationError`` subclasses ``AssertionError`` so test runners report a
failed scripted run as a test failure rather than an error.
"""

from typing import Any, Optional
from uuid import UUID

from omnibase_affect.enums import EnumAffectErrorCode
from omnibase_affect.errors.model_affect_error_context import ModelAffectErrorContext


class AffectError(Exception):
    """Base error class for omnibase_affect.

    Structured Fields (via ModelAffectErrorContext):
        operation: Operation being performed
        frame_number: Expectation frame display index
        function_name: Function being called or tested
        correlation_id: Call record correlation ID

    Example:
        >>> context = ModelAffectErrorContext(operation="match_call")
        >>> raise AffectError("Operation failed", context=context, attempt=1)
    """

    def __init__(
        self,
        message: str,
        error_code: Optional[EnumAffectErrorCode] = None,
        context: Optional[ModelAffectErrorContext] = None,
        **extra_context: object,
    ) -> None:
        """Initialize AffectError with structured fields.

        Args:
            message: Human-readable error message
            error_code: Error code (defaults to VERIFICATION_ABORTED)
            context: Bundled error context
            **extra_context: Additional context information
        """
        structured_context: dict[str, object] = dict(extra_context)

        correlation_id: Optional[UUID] = None
        if context is not None:
            if context.operation is not None:
                structured_context["operation"] = context.operation
            if context.frame_number is not None:
                structured_context["frame_number"] = context.frame_number
            if context.function_name is not None:
                structured_context["function_name"] = context.function_name
            correlation_id = context.correlation_id

        super().__init__(message)
        self.message = message
        self.error_code = error_code or EnumAffectErrorCode.VERIFICATION_ABORTED
        self.correlation_id = correlation_id
        self.context = structured_context

    def __str__(self) -> str:
        return self.message


class AffectConfigurationError(AffectError):
    """Raised when a ``ModelAffectConfig`` or environment override is invalid."""

    def __init__(
        self,
        message: str,
        context: Optional[ModelAffectErrorContext] = None,
        **extra_context: object,
    ) -> None:
        super().__init__(
            message=message,
            error_code=EnumAffectErrorCode.INVALID_CONFIGURATION,
            context=context,
            **extra_context,
        )


class CallbackError(AffectError):
    """Raised when a callback-style function reports a non-exception error.

    The original value is kept on ``error`` so it can still be inspected or
    compared structurally.
    """

    def __init__(
        self,
        error: object,
        context: Optional[ModelAffectErrorContext] = None,
        **extra_context: object,
    ) -> None:
        super().__init__(
            message=f"Callback reported error: {error!r}",
            error_code=EnumAffectErrorCode.CALLBACK_ERROR,
            context=context,
            **extra_context,
        )
        self.error = error


class VerificationAbort(AffectError):
    """Sentinel thrown into the function under test on a match failure.

    Catching it inside the function under test does not hide the captured
    cause; the engine always reports the original failure.
    """

    def __init__(self) -> None:
        super().__init__(
            message="call verification failed within test",
            error_code=EnumAffectErrorCode.VERIFICATION_ABORTED,
        )


# =============================================================================
# Declaration-time errors
# =============================================================================


class AffectBuilderError(AffectError):
    """Base class for errors raised while declaring a scripted test."""


class BuilderSequenceError(AffectBuilderError):
    """Raised when a builder method is called in an illegal state.

    Example:
        >>> affect_test(main).calls(fetch)
        BuilderSequenceError: .args(*args) must be called before .calls()
    """

    def __init__(
        self,
        message: str,
        context: Optional[ModelAffectErrorContext] = None,
        **extra_context: object,
    ) -> None:
        super().__init__(
            message=message,
            error_code=EnumAffectErrorCode.BUILDER_SEQUENCE_MISUSE,
            context=context,
            **extra_context,
        )


class BuilderArgumentError(AffectBuilderError):
    """Raised when a builder method receives an argument it cannot accept."""

    def __init__(
        self,
        message: str,
        context: Optional[ModelAffectErrorContext] = None,
        **extra_context: object,
    ) -> None:
        super().__init__(
            message=message,
            error_code=EnumAffectErrorCode.BUILDER_INVALID_ARGUMENT,
            context=context,
            **extra_context,
        )


# =============================================================================
# Verification errors (reported through the scripted run)
# =============================================================================


class VerificationError(AffectError, AssertionError):
    """Base class for failures reported by a scripted test run.

    Attributes:
        expected: What the test declared, when applicable
        actual: What the function under test did, when applicable
    """

    def __init__(
        self,
        message: str,
        error_code: Optional[EnumAffectErrorCode] = None,
        context: Optional[ModelAffectErrorContext] = None,
        expected: object = None,
        actual: object = None,
        **extra_context: object,
    ) -> None:
        super().__init__(
            message=message,
            error_code=error_code,
            context=context,
            **extra_context,
        )
        self.expected = expected
        self.actual = actual


class MatchFailureError(VerificationError):
    """An intercepted call did not match its expectation frame."""


class IdentityMismatchError(MatchFailureError):
    """The intercepted target is not the function the frame expects."""

    def __init__(self, message: str, **kwargs: Any) -> None:
        super().__init__(
            message, error_code=EnumAffectErrorCode.IDENTITY_MISMATCH, **kwargs
        )


class ArgumentMismatchError(MatchFailureError):
    """The intercepted arguments differ from the frame's expected arguments."""

    def __init__(self, message: str, **kwargs: Any) -> None:
        super().__init__(
            message, error_code=EnumAffectErrorCode.ARGUMENT_MISMATCH, **kwargs
        )


class UnexpectedExtraCallError(MatchFailureError):
    """A call was issued after every expectation frame was consumed."""

    def __init__(self, message: str, **kwargs: Any) -> None:
        super().__init__(
            message, error_code=EnumAffectErrorCode.UNEXPECTED_EXTRA_CALL, **kwargs
        )


class OutcomeMismatchError(VerificationError):
    """The function under test settled differently from the declared outcome."""

    def __init__(self, message: str, **kwargs: Any) -> None:
        kwargs.setdefault("error_code", EnumAffectErrorCode.OUTCOME_MISMATCH)
        super().__init__(message, **kwargs)


class ErrorKindMismatchError(OutcomeMismatchError):
    """The raised exception type differs from the expected exception type."""

    def __init__(self, message: str, **kwargs: Any) -> None:
        super().__init__(
            message, error_code=EnumAffectErrorCode.ERROR_KIND_MISMATCH, **kwargs
        )


class ErrorMessageMismatchError(OutcomeMismatchError):
    """The raised exception message differs from the expected message."""

    def __init__(self, message: str, **kwargs: Any) -> None:
        super().__init__(
            message, error_code=EnumAffectErrorCode.ERROR_MESSAGE_MISMATCH, **kwargs
        )


class UnconsumedExpectationsError(VerificationError):
    """The run finished with expectation frames left on the stack."""

    def __init__(self, message: str, **kwargs: Any) -> None:
        super().__init__(
            message,
            error_code=EnumAffectErrorCode.UNCONSUMED_EXPECTATIONS,
            **kwargs,
        )


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
    "OutcomeMismatchError",
    "UnconsumedExpectationsError",
    "UnexpectedExtraCallError",
    "VerificationAbort",
    "VerificationError",
]
