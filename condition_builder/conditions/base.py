"""Base condition and condition rule classes.

A condition owns an ordered list of rules. Which rule types it allows comes
from the class-defined `condition_rule_types()` list, passed through the
registered rule type handlers (see `events`) the first time it is needed.
Every mutation is validated against that list, and a failed mutation leaves
the condition exactly as it was.
"""

from __future__ import annotations

import logging
import re
import uuid
import weakref
from abc import ABC, abstractmethod
from typing import Any, ClassVar, Iterable, Mapping

from pydantic import BaseModel, ConfigDict, Field, PrivateAttr

from .codec import create_condition_rule, decode_rule
from .errors import InvalidRuleError, RuleNotFoundError
from .events import trigger_register_condition_rule_types
from .registry import (
    find_rule_class,
    normalize_type,
    register_condition_type,
    register_rule_type,
    type_identifier,
)

logger = logging.getLogger(__name__)


def generate_uid() -> str:
    """Generate a new opaque rule uid."""
    return str(uuid.uuid4())


def _label_from_class_name(name: str, suffix: str) -> str:
    if name.endswith(suffix) and name != suffix:
        name = name[: -len(suffix)]
    words = re.findall(r"[A-Z]+(?=[A-Z][a-z]|$)|[A-Z]?[a-z0-9]+|[A-Z]+", name)
    if not words:
        return name
    return " ".join([words[0]] + [w if w.isupper() else w.lower() for w in words[1:]])


# =============================================================================
# Condition Rules
# =============================================================================


class BaseConditionRule(BaseModel):
    """A single typed, configurable rule belonging to one condition.

    Subclasses declare their configuration as pydantic fields (all with
    defaults, so a fresh rule of any type can be created from a bare
    `{"type": ...}` config). Only classes that set `selectable = True` may be
    added to a condition; base kinds leave it False. The uid is fixed once
    the rule is created.
    """

    model_config = ConfigDict(extra="forbid", validate_assignment=True)

    selectable: ClassVar[bool] = False
    label: ClassVar[str | None] = None
    type_handle: ClassVar[str | None] = None

    uid: str = Field(
        default_factory=generate_uid, min_length=1, frozen=True, description="Stable rule identifier"
    )

    _condition: Any = PrivateAttr(default=None)

    @classmethod
    def __pydantic_init_subclass__(cls, **kwargs: Any) -> None:
        super().__pydantic_init_subclass__(**kwargs)
        register_rule_type(cls)

    @classmethod
    def type_id(cls) -> str:
        return type_identifier(cls)

    @classmethod
    def display_name(cls) -> str:
        return cls.label or _label_from_class_name(cls.__name__, "ConditionRule")

    @classmethod
    def is_selectable(cls) -> bool:
        return cls.selectable

    @property
    def condition(self) -> BaseCondition | None:
        """The condition this rule belongs to, if it is still alive."""
        return self._condition() if self._condition is not None else None

    def set_condition(self, condition: BaseCondition) -> None:
        """Set the owning condition. Only the condition itself calls this."""
        self._condition = weakref.ref(condition)

    def get_config(self) -> dict[str, Any]:
        """Return the rule's config, enough to recreate an equivalent rule."""
        return {"type": self.type_id(), **self.model_dump(mode="json")}


# =============================================================================
# Conditions
# =============================================================================


class BaseCondition(ABC):
    """Base class for conditions.

    Subclasses implement `condition_rule_types()`; everything else is shared.
    """

    label: ClassVar[str | None] = None
    type_handle: ClassVar[str | None] = None

    def __init__(
        self,
        condition_rules: Iterable[BaseConditionRule | Mapping[str, Any]] | None = None,
        condition_rule_types: Iterable[Any] | None = None,
    ):
        self._condition_rule_types: tuple[str, ...] | None = None
        self._condition_rules: list[BaseConditionRule] = []

        if condition_rule_types is not None:
            self.set_condition_rule_types(condition_rule_types)
        if condition_rules is not None:
            self.set_condition_rules(condition_rules)

    def __init_subclass__(cls, **kwargs: Any) -> None:
        super().__init_subclass__(**kwargs)
        register_condition_type(cls)

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(rules={len(self._condition_rules)})"

    @classmethod
    def type_id(cls) -> str:
        return type_identifier(cls)

    @classmethod
    def display_name(cls) -> str:
        return cls.label or _label_from_class_name(cls.__name__, "Condition")

    def get_add_rule_label(self) -> str:
        """Label for the "Add a rule" action."""
        return "Add a rule"

    # -------------------------------------------------------------------------
    # Rule types
    # -------------------------------------------------------------------------

    @abstractmethod
    def condition_rule_types(self) -> list[Any]:
        """Return the rule types this condition class allows.

        Override this rather than `get_condition_rule_types()` so registered
        handlers can still modify the class-defined list. Entries are type
        identifiers or rule classes.
        """

    def get_condition_rule_types(self) -> tuple[str, ...]:
        """Return the effective rule type identifiers, resolving them once."""
        if self._condition_rule_types is None:
            resolved = trigger_register_condition_rule_types(self, list(self.condition_rule_types()))
            self._condition_rule_types = tuple(resolved)
        return self._condition_rule_types

    def set_condition_rule_types(self, condition_rule_types: Iterable[Any]) -> None:
        """Override the effective rule types.

        The given list is used as-is: it is never merged with the class
        list or passed to handlers, and it replaces any cached resolution.
        """
        types: list[str] = []
        for rule_type in condition_rule_types:
            type_id = normalize_type(rule_type)
            if type_id not in types:
                types.append(type_id)
        self._condition_rule_types = tuple(types)

    def with_condition_rule_types(self, condition_rule_types: Iterable[Any]) -> BaseCondition:
        """Set the rule types and return the condition."""
        self.set_condition_rule_types(condition_rule_types)
        return self

    def get_rule_type_options(self) -> list[dict[str, str]]:
        """Return selectable rule types as value/label pairs, sorted by label.

        Sorting only affects this list, never the stored rule order.
        """
        options = []
        for type_id in self.get_condition_rule_types():
            rule_class = find_rule_class(type_id)
            if rule_class is None or not rule_class.is_selectable():
                continue
            options.append({"value": type_id, "label": rule_class.display_name()})
        return sorted(options, key=lambda option: option["label"].lower())

    # -------------------------------------------------------------------------
    # Rules
    # -------------------------------------------------------------------------

    def get_condition_rules(self) -> list[BaseConditionRule]:
        """Return the condition's rules in order.

        This is the live list, not a copy. Change membership through
        `add_condition_rule()`, `set_condition_rules()` and friends only.
        """
        return self._condition_rules

    def get_condition_rule(self, uid: str) -> BaseConditionRule:
        return self._condition_rules[self._index_of(uid)]

    def set_condition_rules(self, rules: Iterable[BaseConditionRule | Mapping[str, Any]]) -> None:
        """Replace all rules.

        Mappings are decoded into rules first. Either every rule is valid and
        the new list is installed, or an error is raised and the current
        rules are left untouched.

        Raises:
            UnknownTypeError: A config names an unregistered rule type.
            ConfigDecodeError: A config is malformed.
            InvalidRuleError: A rule is not allowed in this condition.
        """
        new_rules = [
            rule if isinstance(rule, BaseConditionRule) else create_condition_rule(rule)
            for rule in rules
        ]

        uids: set[str] = set()
        for rule in new_rules:
            self._validate_rule(rule, uids)
            uids.add(rule.uid)

        for rule in new_rules:
            rule.set_condition(self)
        self._condition_rules = new_rules

    def add_condition_rule(self, rule: BaseConditionRule) -> None:
        """Append a rule.

        Raises:
            InvalidRuleError: The rule is not allowed in this condition.
        """
        self._validate_rule(rule, {r.uid for r in self._condition_rules})
        rule.set_condition(self)
        self._condition_rules.append(rule)

    def add_new_condition_rule(self, rule_type: Any = None) -> BaseConditionRule:
        """Create a default-configured rule and append it.

        Without `rule_type`, the first selectable effective rule type is used.
        """
        if rule_type is None:
            candidates = []
            for type_id in self.get_condition_rule_types():
                rule_class = find_rule_class(type_id)
                if rule_class is not None and rule_class.is_selectable():
                    candidates.append(type_id)
            if not candidates:
                raise InvalidRuleError(f"{type(self).__name__} has no selectable rule types")
            type_id = candidates[0]
        else:
            type_id = normalize_type(rule_type)

        rule = decode_rule(type_id, {})
        self.add_condition_rule(rule)
        return rule

    def remove_condition_rule(self, uid: str) -> BaseConditionRule:
        """Remove and return the rule with the given uid."""
        return self._condition_rules.pop(self._index_of(uid))

    def switch_condition_rule_type(self, uid: str, rule_type: Any) -> BaseConditionRule:
        """Replace a rule with a fresh rule of another type.

        The new rule keeps the old rule's uid and position.
        """
        index = self._index_of(uid)
        new_rule = decode_rule(normalize_type(rule_type), {"uid": uid})

        rules = list(self._condition_rules)
        rules[index] = new_rule
        self.set_condition_rules(rules)
        return new_rule

    def reorder_condition_rules(self, uids: Iterable[str]) -> None:
        """Reorder rules to match `uids`, which must list every rule uid once."""
        uids = list(uids)
        by_uid = {rule.uid: rule for rule in self._condition_rules}
        if len(uids) != len(by_uid) or set(uids) != set(by_uid):
            raise InvalidRuleError(
                f"Rule order must list each of the {len(by_uid)} rule uids exactly once"
            )
        self._condition_rules = [by_uid[uid] for uid in uids]

    # -------------------------------------------------------------------------
    # Serialization
    # -------------------------------------------------------------------------

    def get_config(self) -> dict[str, Any]:
        return {
            "type": self.type_id(),
            "conditionRules": [rule.get_config() for rule in self._condition_rules],
        }

    # -------------------------------------------------------------------------
    # Internals
    # -------------------------------------------------------------------------

    def _index_of(self, uid: str) -> int:
        for index, rule in enumerate(self._condition_rules):
            if rule.uid == uid:
                return index
        raise RuleNotFoundError(uid)

    def _validate_rule(self, rule: BaseConditionRule, taken_uids: set[str]) -> None:
        type_id = rule.type_id()
        if not rule.is_selectable():
            reason = f"Condition rule type '{type_id}' is not selectable"
        elif type_id not in self.get_condition_rule_types():
            reason = f"Condition rule type '{type_id}' is not allowed in {type(self).__name__}"
        elif rule.uid in taken_uids:
            reason = f"Duplicate condition rule uid '{rule.uid}'"
        elif rule.condition is not None and rule.condition is not self:
            reason = f"Condition rule '{rule.uid}' already belongs to another condition"
        else:
            return

        logger.warning("Rejected condition rule: %s", reason)
        raise InvalidRuleError(reason)
