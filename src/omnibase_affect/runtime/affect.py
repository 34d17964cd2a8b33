# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Public entry point turning effectful functions into plain awaitables."""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Optional, Union

from pydantic import ValidationError

from omnibase_affect.errors import AffectConfigurationError, ModelAffectErrorContext
from omnibase_affect.event_bus import configure_event_bus
from omnibase_affect.models import ModelAffectConfig
from omnibase_affect.runtime.call_dispatcher import CallDispatcher, build_call
from omnibase_affect.runtime.function_tree import build_functions

logger = logging.getLogger(__name__)

AffectConfigInput = Union[ModelAffectConfig, Mapping[str, object], None]


def resolve_config(config: AffectConfigInput) -> ModelAffectConfig:
    """Accept a config model, a plain mapping, or None (defaults).

    Raises:
        AffectConfigurationError: If a mapping does not validate
    """
    if config is None:
        return ModelAffectConfig()
    if isinstance(config, ModelAffectConfig):
        return config
    try:
        return ModelAffectConfig.model_validate(dict(config))
    except ValidationError as e:
        raise AffectConfigurationError(
            f"Invalid affect configuration: {e.error_count()} error(s)",
            context=ModelAffectErrorContext(operation="resolve_config"),
            errors=e.errors(include_url=False),
        ) from e


def affect(
    methods: Mapping[str, object],
    config: AffectConfigInput = None,
) -> dict[str, object]:
    """Bind every function in ``methods`` to a fresh call capability.

    Args:
        methods: Possibly nested mapping of effectful functions. Each function
            takes the capability as its first parameter.
        config: Event hooks, base context and bus tuning.

    Returns:
        Mapping of the same shape whose functions take their arguments only
        and return an awaitable.

    Example:
        >>> api = affect({"users": {"load_profile": load_profile}})
        >>> profile = await api["users"]["load_profile"](42)
    """
    resolved = resolve_config(config)
    bus = configure_event_bus(resolved)
    method_init = build_call(bus, resolved.context, CallDispatcher())
    built = build_functions(methods, method_init)
    logger.debug(
        "Affect functions built",
        extra={"method_count": len(built), "delivery": resolved.event_delivery.value},
    )
    return built


__all__: list[str] = ["AffectConfigInput", "affect", "resolve_config"]
