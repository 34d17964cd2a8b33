# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Common success/failure outcome of a dispatched call.

Every calling convention adapter reduces its completion signal to one
``ModelCallOutcome`` before the post-call event fires.
"""

from __future__ import annotations

from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, Field

from omnibase_affect.enums import EnumOutcomeKind


class ModelCallOutcome(BaseModel):
    """Settlement of a call: a value on success, an exception on failure.

    Example:
        >>> ModelCallOutcome.success(9).unwrap()
        9
        >>> ModelCallOutcome.failure(ValueError("broke")).unwrap()
        Traceback (most recent call last):
        ValueError: broke
    """

    model_config = ConfigDict(
        frozen=True,
        extra="forbid",
        arbitrary_types_allowed=True,
    )

    kind: EnumOutcomeKind = Field(description="Whether the call succeeded or failed")
    value: Any = Field(default=None, description="Result value on success")
    error: Optional[BaseException] = Field(
        default=None, description="Raised exception on failure"
    )

    @classmethod
    def success(cls, value: object) -> ModelCallOutcome:
        return cls(kind=EnumOutcomeKind.SUCCESS, value=value)

    @classmethod
    def failure(cls, error: BaseException) -> ModelCallOutcome:
        return cls(kind=EnumOutcomeKind.FAILURE, error=error)

    @property
    def is_success(self) -> bool:
        return self.kind is EnumOutcomeKind.SUCCESS

    @property
    def payload(self) -> object:
        """The value on success, the exception on failure."""
        return self.value if self.is_success else self.error

    def unwrap(self) -> object:
        """Return the value, or raise the failure unchanged."""
        if self.is_success:
            return self.value
        assert self.error is not None
        raise self.error


__all__: list[str] = ["ModelCallOutcome"]
