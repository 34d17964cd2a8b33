# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Calling convention enumeration for the call capability.

Each member names one adapter in the dispatch core. All adapters produce the
same outcome shape (an ``asyncio.Future`` resolving to the value or raising
the failure), so callers never care which convention a dependency uses.
"""

from enum import Enum


class EnumCallMode(str, Enum):
    """Calling conventions understood by ``CallCapability``.

    Attributes:
        STANDARD: Function receives the capability as its first parameter.
        PLAIN: Function is invoked with its arguments only.
        SYNCHRONOUS: Function returns directly or raises; result is wrapped.
        FROM_CALLBACK: Trailing ``callback(error, result)`` settles the call.
        FROM_MULTI_CALLBACK: Trailing ``callback(error, *results)`` settles
            the call with the list of all results.
    """

    STANDARD = "standard"
    PLAIN = "plain"
    SYNCHRONOUS = "synchronous"
    FROM_CALLBACK = "from_callback"
    FROM_MULTI_CALLBACK = "from_multi_callback"

    @property
    def receives_capability(self) -> bool:
        """Whether the invoked function gets the capability as first argument."""
        return self is EnumCallMode.STANDARD

    @property
    def uses_callback(self) -> bool:
        """Whether the invoked function settles through a trailing callback."""
        return self in (EnumCallMode.FROM_CALLBACK, EnumCallMode.FROM_MULTI_CALLBACK)


__all__: list[str] = ["EnumCallMode"]
