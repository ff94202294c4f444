"""Reusable base rule kinds.

These are not selectable on their own; concrete rules subclass them and
add a label (and, for multi-select rules, their options).
"""

from __future__ import annotations

from enum import Enum
from typing import ClassVar

from pydantic import Field, field_validator, model_validator

from .base import BaseConditionRule


class TextOperator(str, Enum):
    """Operators for text rules."""

    EQ = "="
    NE = "!="
    BEGINS_WITH = "beginsWith"
    ENDS_WITH = "endsWith"
    CONTAINS = "contains"
    NOT_EMPTY = "notEmpty"
    EMPTY = "empty"


class NumberOperator(str, Enum):
    """Operators for number rules."""

    EQ = "="
    NE = "!="
    LT = "<"
    LE = "<="
    GT = ">"
    GE = ">="
    NOT_EMPTY = "notEmpty"
    EMPTY = "empty"


class SelectOperator(str, Enum):
    """Operators for multi-select rules."""

    IN = "in"
    NOT_IN = "notIn"


VALUELESS_OPERATORS = {"notEmpty", "empty"}


class BaseTextConditionRule(BaseConditionRule):
    """Compares a text attribute against a value."""

    selectable: ClassVar[bool] = False

    operator: TextOperator = Field(TextOperator.EQ, description="Comparison operator")
    value: str = Field("", description="Text to compare with")


class BaseNumberConditionRule(BaseConditionRule):
    """Compares a numeric attribute against a value."""

    selectable: ClassVar[bool] = False

    operator: NumberOperator = Field(NumberOperator.EQ, description="Comparison operator")
    value: float | None = Field(None, description="Number to compare with")

    @model_validator(mode="after")
    def check_valueless_operator(self) -> BaseNumberConditionRule:
        if self.operator.value in VALUELESS_OPERATORS and self.value is not None:
            raise ValueError(f"Operator '{self.operator.value}' does not take a value")
        return self


class BaseLightswitchConditionRule(BaseConditionRule):
    """Matches an on/off attribute."""

    selectable: ClassVar[bool] = False

    value: bool = Field(True, description="Whether the attribute should be on")


class BaseMultiSelectConditionRule(BaseConditionRule):
    """Matches an attribute against a subset of fixed options."""

    selectable: ClassVar[bool] = False
    options: ClassVar[tuple[str, ...]] = ()

    operator: SelectOperator = Field(SelectOperator.IN, description="Membership operator")
    values: list[str] = Field(default_factory=list, description="Selected option values")

    @field_validator("values")
    @classmethod
    def check_values(cls, values: list[str]) -> list[str]:
        unknown = [v for v in values if v not in cls.options]
        if unknown:
            raise ValueError(f"Unknown option(s) {unknown}; allowed: {list(cls.options)}")
        if len(set(values)) != len(values):
            raise ValueError("Option values must be unique")
        return values
