"""Conversion between conditions and their config documents.

A config document looks like:

    type: condition_builder.entries.conditions.EntryCondition
    conditionRules:
      - type: condition_builder.entries.rules.TitleConditionRule
        uid: 6f1c0f4e-...
        operator: contains
        value: news

`create_condition(encode_condition(c))` reproduces `c`: same condition type,
same rules in the same order with the same uids and settings.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import TYPE_CHECKING, Any, Iterable, Mapping

import yaml
from pydantic import ValidationError

from .errors import ConfigDecodeError
from .registry import get_condition_class, get_rule_class
from .schemas import ConditionConfig, ConditionRuleConfig

if TYPE_CHECKING:
    from .base import BaseCondition, BaseConditionRule

logger = logging.getLogger(__name__)


def _validation_message(e: ValidationError) -> str:
    parts = []
    for error in e.errors():
        loc = ".".join(str(p) for p in error.get("loc", ())) or "<root>"
        parts.append(f"{loc}: {error.get('msg')}")
    return "; ".join(parts)


# =============================================================================
# Rules
# =============================================================================


def decode_rule(type_id: str, fields: Mapping[str, Any]) -> BaseConditionRule:
    """Create a rule of type `type_id` from its fields.

    Raises:
        UnknownTypeError: If `type_id` is not a registered rule type.
        ConfigDecodeError: If the fields are invalid for that rule type.
    """
    rule_class = get_rule_class(type_id)
    try:
        return rule_class(**fields)
    except ValidationError as e:
        raise ConfigDecodeError(
            f"Invalid config for condition rule '{type_id}': {_validation_message(e)}"
        ) from e


def create_condition_rule(config: Mapping[str, Any]) -> BaseConditionRule:
    """Create a rule from a config containing its `type`."""
    if not isinstance(config, Mapping):
        raise ConfigDecodeError(
            f"Condition rule config must be a mapping, got {type(config).__name__}"
        )
    try:
        envelope = ConditionRuleConfig.model_validate(dict(config))
    except ValidationError as e:
        raise ConfigDecodeError(f"Invalid condition rule config: {_validation_message(e)}") from e

    fields = {k: v for k, v in config.items() if k != "type"}
    if envelope.uid is None:
        fields.pop("uid", None)
    return decode_rule(envelope.type, fields)


# =============================================================================
# Conditions
# =============================================================================


def create_condition(
    config: Mapping[str, Any],
    condition_rule_types: Iterable[Any] | None = None,
) -> BaseCondition:
    """Create a condition from its config document.

    `condition_rule_types`, when given, overrides the condition's rule types
    before any rule is validated.

    Raises:
        UnknownTypeError: If the condition or a rule type is not registered.
        ConfigDecodeError: If the document is malformed.
        InvalidRuleError: If a rule is not allowed in the condition.
    """
    if not isinstance(config, Mapping):
        raise ConfigDecodeError(f"Condition config must be a mapping, got {type(config).__name__}")
    try:
        envelope = ConditionConfig.model_validate(dict(config))
    except ValidationError as e:
        raise ConfigDecodeError(f"Invalid condition config: {_validation_message(e)}") from e

    condition_class = get_condition_class(envelope.type)
    condition = condition_class()
    if condition_rule_types is not None:
        condition.set_condition_rule_types(condition_rule_types)
    condition.set_condition_rules(envelope.condition_rules)

    logger.debug(
        "Decoded %s with %d rules", condition_class.__name__, len(envelope.condition_rules)
    )
    return condition


def encode_condition(condition: BaseCondition) -> dict[str, Any]:
    return condition.get_config()


# =============================================================================
# YAML
# =============================================================================


def parse_condition_yaml(text: str, condition_rule_types: Iterable[Any] | None = None) -> BaseCondition:
    """Create a condition from a YAML config document."""
    try:
        data = yaml.safe_load(text)
    except yaml.YAMLError as e:
        raise ConfigDecodeError(f"Invalid YAML condition config: {e}") from e
    if data is None:
        raise ConfigDecodeError("Empty condition config")
    return create_condition(data, condition_rule_types=condition_rule_types)


def load_condition_file(path: str | Path, condition_rule_types: Iterable[Any] | None = None) -> BaseCondition:
    """Load a condition from a YAML file."""
    path = Path(path)
    if not path.exists():
        raise FileNotFoundError(f"Condition file not found: {path}")

    with open(path, "r", encoding="utf-8") as f:
        text = f.read()
    return parse_condition_yaml(text, condition_rule_types=condition_rule_types)


def dump_condition_yaml(condition: BaseCondition) -> str:
    """Serialize a condition's config document as YAML."""
    return yaml.safe_dump(encode_condition(condition), sort_keys=False, allow_unicode=True)
