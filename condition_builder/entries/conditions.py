"""Conditions for filtering entries and users."""

from condition_builder.conditions import BaseCondition

from .rules import (
    AdminConditionRule,
    EmailConditionRule,
    HasUrlConditionRule,
    SlugConditionRule,
    StatusConditionRule,
    TitleConditionRule,
    UserGroupConditionRule,
)


class EntryCondition(BaseCondition):
    """Filters entries."""

    def condition_rule_types(self) -> list:
        return [
            TitleConditionRule,
            SlugConditionRule,
            StatusConditionRule,
            HasUrlConditionRule,
        ]


class UserCondition(BaseCondition):
    """Filters users."""

    def condition_rule_types(self) -> list:
        return [
            EmailConditionRule,
            AdminConditionRule,
            UserGroupConditionRule,
        ]
