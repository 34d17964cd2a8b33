# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Expectation frame mode enumeration."""

from enum import Enum


class EnumFrameMode(str, Enum):
    """How a matched expectation frame satisfies the intercepted call."""

    RETURN = "return"
    THROW = "throw"
    EXECUTE = "execute"


__all__: list[str] = ["EnumFrameMode"]
