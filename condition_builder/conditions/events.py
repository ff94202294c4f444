"""Extension point for the rule types a condition allows.

Handlers are registered once at startup, in order. When a condition
resolves its rule types, every handler registered for its class (or a
parent class) receives a `RegisterConditionRuleTypesEvent` and may append,
remove, or replace entries of `event.condition_rule_types` in place.

Usage:
    from condition_builder.conditions import on_register_condition_rule_types
    from condition_builder.entries import EntryCondition

    @on_register_condition_rule_types(condition_class=EntryCondition)
    def add_featured_rule(event):
        event.condition_rule_types.append(FeaturedConditionRule)
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any, Callable

from .registry import normalize_type

if TYPE_CHECKING:
    from .base import BaseCondition

logger = logging.getLogger(__name__)


@dataclass
class RegisterConditionRuleTypesEvent:
    """Mutable event passed to rule type handlers.

    Attributes:
        condition: The condition instance resolving its rule types.
        condition_rule_types: Rule type identifiers (or rule classes) the
            condition will allow once every handler has run.
    """

    condition: BaseCondition
    condition_rule_types: list[Any] = field(default_factory=list)


Handler = Callable[[RegisterConditionRuleTypesEvent], None]

_handlers: list[tuple[type | None, Handler]] = []
_resolving = 0


def on_register_condition_rule_types(
    handler: Handler | None = None,
    *,
    condition_class: type | None = None,
):
    """Register a rule type handler.

    Works as a direct call or as a decorator. With `condition_class`, the
    handler only runs for instances of that class and its subclasses.

    Raises:
        RuntimeError: If called while a condition is resolving its rule types.
    """

    def decorator(fn: Handler) -> Handler:
        if _resolving:
            raise RuntimeError(
                "Rule type handlers must be registered before conditions resolve their rule types"
            )
        _handlers.append((condition_class, fn))
        logger.debug(
            "Registered rule type handler %s for %s",
            getattr(fn, "__qualname__", fn),
            condition_class.__name__ if condition_class else "all conditions",
        )
        return fn

    if handler is not None:
        return decorator(handler)
    return decorator


def clear_condition_rule_type_handlers() -> None:
    """Remove every registered handler (for tests only)."""
    _handlers.clear()


def registered_handler_count() -> int:
    return len(_handlers)


def _unique(types: list[Any]) -> list[str]:
    seen: set[str] = set()
    out: list[str] = []
    for rule_type in types:
        type_id = normalize_type(rule_type)
        if type_id not in seen:
            seen.add(type_id)
            out.append(type_id)
    return out


def trigger_register_condition_rule_types(
    condition: BaseCondition, condition_rule_types: list[Any]
) -> list[str]:
    """Run the matching handlers and return the final rule type identifiers."""
    global _resolving

    event = RegisterConditionRuleTypesEvent(
        condition=condition,
        condition_rule_types=list(condition_rule_types),
    )
    _resolving += 1
    try:
        for condition_class, handler in list(_handlers):
            if condition_class is not None and not isinstance(condition, condition_class):
                continue
            handler(event)
    finally:
        _resolving -= 1

    resolved = _unique(event.condition_rule_types)
    logger.debug("Resolved %d rule types for %s", len(resolved), type(condition).__name__)
    return resolved
