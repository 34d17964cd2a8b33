# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Tag of an expected argument position."""

from enum import Enum


class EnumArgumentTag(str, Enum):
    """LITERAL compares structurally; WILDCARD only checks the value's kind."""

    LITERAL = "literal"
    WILDCARD = "wildcard"


__all__: list[str] = ["EnumArgumentTag"]
