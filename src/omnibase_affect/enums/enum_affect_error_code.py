# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Error codes for omnibase_affect errors."""

from enum import Enum


class EnumAffectErrorCode(str, Enum):
    """Classification of every error raised by the package."""

    BUILDER_SEQUENCE_MISUSE = "BUILDER_SEQUENCE_MISUSE"
    BUILDER_INVALID_ARGUMENT = "BUILDER_INVALID_ARGUMENT"
    IDENTITY_MISMATCH = "IDENTITY_MISMATCH"
    ARGUMENT_MISMATCH = "ARGUMENT_MISMATCH"
    UNEXPECTED_EXTRA_CALL = "UNEXPECTED_EXTRA_CALL"
    UNCONSUMED_EXPECTATIONS = "UNCONSUMED_EXPECTATIONS"
    OUTCOME_MISMATCH = "OUTCOME_MISMATCH"
    ERROR_KIND_MISMATCH = "ERROR_KIND_MISMATCH"
    ERROR_MESSAGE_MISMATCH = "ERROR_MESSAGE_MISMATCH"
    VERIFICATION_ABORTED = "VERIFICATION_ABORTED"
    CALLBACK_ERROR = "CALLBACK_ERROR"
    INVALID_CONFIGURATION = "INVALID_CONFIGURATION"


__all__: list[str] = ["EnumAffectErrorCode"]
