"""Exceptions raised by the conditions domain."""

from __future__ import annotations

from typing import Iterable


class ConditionError(Exception):
    """Base class for condition and condition rule errors."""

    pass


class UnknownTypeError(ConditionError, LookupError):
    """Raised when a type identifier does not resolve to a registered class."""

    def __init__(self, type_id: str, known: Iterable[str] = (), kind: str = "condition rule"):
        self.type_id = type_id
        self.known = sorted(known)
        self.kind = kind
        super().__init__(f"Unknown {kind} type '{type_id}'. Known: {', '.join(self.known)}")


class InvalidRuleError(ConditionError, ValueError):
    """Raised when a rule may not be part of a condition."""

    pass


class ConfigDecodeError(ConditionError, ValueError):
    """Raised when a configuration document is malformed."""

    pass


class RuleNotFoundError(ConditionError, KeyError):
    """Raised when no rule with the given uid belongs to the condition."""

    def __init__(self, uid: str):
        self.uid = uid
        super().__init__(f"No condition rule with uid '{uid}'")

    def __str__(self) -> str:
        return self.args[0]
