"""Type identifier registry for conditions and condition rules.

Concrete condition and rule classes register themselves when they are
defined, keyed by their stable type identifier. Configuration documents
refer to classes only through these identifiers.
"""

from __future__ import annotations

import inspect
import logging
from typing import TYPE_CHECKING, Any

from .errors import UnknownTypeError

if TYPE_CHECKING:
    from .base import BaseCondition, BaseConditionRule

logger = logging.getLogger(__name__)

CONDITION_TYPES: dict[str, type[BaseCondition]] = {}
RULE_TYPES: dict[str, type[BaseConditionRule]] = {}


def type_identifier(cls: type) -> str:
    """Return the stable identifier for a condition or rule class."""
    handle = getattr(cls, "type_handle", None)
    if isinstance(handle, str) and handle:
        return handle
    return f"{cls.__module__}.{cls.__qualname__}"


def normalize_type(rule_type: Any) -> str:
    """Convert a rule class or identifier to an identifier string."""
    if isinstance(rule_type, str):
        return rule_type
    if inspect.isclass(rule_type):
        return type_identifier(rule_type)
    raise TypeError(f"Expected a type identifier or class, got {type(rule_type).__name__}")


def _register(table: dict[str, type], cls: type, kind: str) -> None:
    type_id = type_identifier(cls)
    existing = table.get(type_id)
    if existing is not None and existing is not cls:
        logger.warning("Replacing %s type %s (%r -> %r)", kind, type_id, existing, cls)
    table[type_id] = cls


def register_condition_type(cls: type[BaseCondition]) -> type[BaseCondition]:
    """Register a concrete condition class. Abstract classes are skipped."""
    if not inspect.isabstract(cls):
        _register(CONDITION_TYPES, cls, "condition")
    return cls


def register_rule_type(cls: type[BaseConditionRule]) -> type[BaseConditionRule]:
    """Register a condition rule class.

    Non-selectable rule classes are registered too, so a document naming one
    fails validation instead of failing the lookup.
    """
    _register(RULE_TYPES, cls, "condition rule")
    return cls


def get_condition_class(type_id: str) -> type[BaseCondition]:
    try:
        return CONDITION_TYPES[type_id]
    except KeyError as e:
        raise UnknownTypeError(type_id, CONDITION_TYPES, kind="condition") from e


def get_rule_class(type_id: str) -> type[BaseConditionRule]:
    try:
        return RULE_TYPES[type_id]
    except KeyError as e:
        raise UnknownTypeError(type_id, RULE_TYPES, kind="condition rule") from e


def find_rule_class(type_id: str) -> type[BaseConditionRule] | None:
    """Return the rule class for `type_id`, or None when it is not registered."""
    return RULE_TYPES.get(type_id)


def list_condition_types() -> list[str]:
    return sorted(CONDITION_TYPES)


def list_rule_types() -> list[str]:
    return sorted(RULE_TYPES)
