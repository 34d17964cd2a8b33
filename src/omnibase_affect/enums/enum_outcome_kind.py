# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Settlement kind of a dispatched call."""

from enum import Enum


class EnumOutcomeKind(str, Enum):
    """Success or failure of a settled call."""

    SUCCESS = "success"
    FAILURE = "failure"


__all__: list[str] = ["EnumOutcomeKind"]
