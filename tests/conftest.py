# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Pytest configuration and shared fixtures for omnibase_affect tests.

Every test collected under ``tests/unit`` gets the ``unit`` marker, so the
suite can be narrowed with ``pytest -m unit``.
"""

from __future__ import annotations

import pytest

from omnibase_affect import CallCapability, CallEventBus
from omnibase_affect.runtime import CallDispatcher
from tests.helpers import EventRecorder


def pytest_collection_modifyitems(
    config: pytest.Config,
    items: list[pytest.Item],
) -> None:
    """Mark tests living below ``tests/unit`` as unit tests."""
    for item in items:
        if "unit" in item.path.parts and item.get_closest_marker("unit") is None:
            item.add_marker(pytest.mark.unit)


# =============================================================================
# Shared Fixtures
# =============================================================================


@pytest.fixture
def recorder() -> EventRecorder:
    """Fresh event recorder wired through ``recorder.config()``."""
    return EventRecorder()


@pytest.fixture
def event_bus() -> CallEventBus:
    """Event bus with immediate delivery and default history."""
    return CallEventBus()


@pytest.fixture
def capability(event_bus: CallEventBus) -> CallCapability:
    """Capability backed by the real dispatcher and an empty context."""
    return CallCapability(event_bus, {}, CallDispatcher())
