# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Affect Error Context Configuration Model.

Bundles the structured fields shared by verification and dispatch errors so
error constructors keep a short parameter list.
"""

from typing import Optional
from uuid import UUID, uuid4

from pydantic import BaseModel, ConfigDict, Field


class ModelAffectErrorContext(BaseModel):
    """Configuration model for affect error context.

    Attributes:
        operation: Operation being performed (match_call, judge_outcome, ...)
        frame_number: Display index of the expectation frame involved ("#2", "#3[1]")
        function_name: Name of the function being called or tested
        correlation_id: Correlation ID of the call record, when one exists

    Example:
        >>> context = ModelAffectErrorContext(
        ...     operation="match_call",
        ...     frame_number="#2",
        ...     function_name="fetch_user",
        ... )
        >>> raise IdentityMismatchError("#2: Unexpected call(a)", context=context)
    """

    model_config = ConfigDict(
        frozen=True,
        extra="forbid",
    )

    operation: Optional[str] = Field(
        default=None,
        description="Operation being performed (match_call, judge_outcome, ...)",
    )
    frame_number: Optional[str] = Field(
        default=None,
        description="Display index of the expectation frame involved",
    )
    function_name: Optional[str] = Field(
        default=None,
        description="Name of the function being called or tested",
    )
    correlation_id: Optional[UUID] = Field(
        default=None,
        description="Correlation ID of the related call record",
    )

    @classmethod
    def with_correlation(
        cls,
        correlation_id: Optional[UUID] = None,
        **kwargs: object,
    ) -> "ModelAffectErrorContext":
        """Create a context, generating a correlation ID when none is given."""
        return cls(correlation_id=correlation_id or uuid4(), **kwargs)  # type: ignore[arg-type]


__all__ = ["ModelAffectErrorContext"]
