# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Rebind a nested mapping of functions to the call capability."""

from __future__ import annotations

from collections.abc import Mapping

from omnibase_affect.runtime.call_dispatcher import MethodInit


def build_functions(
    methods: Mapping[str, object], method_init: MethodInit
) -> dict[str, object]:
    """Copy ``methods``, binding callables and recursing into nested mappings.

    Non-callable, non-mapping values (including lists) pass through unchanged.
    """
    built: dict[str, object] = {}
    for name, item in methods.items():
        if isinstance(item, Mapping):
            built[name] = build_functions(item, method_init)
        elif callable(item):
            built[name] = method_init(item)
        else:
            built[name] = item
    return built


__all__: list[str] = ["build_functions"]
