"""Entries domain - entry and user conditions and their rules."""

from .conditions import EntryCondition, UserCondition
from .rules import (
    AdminConditionRule,
    CommentCountConditionRule,
    EmailConditionRule,
    HasUrlConditionRule,
    SlugConditionRule,
    StatusConditionRule,
    TitleConditionRule,
    UserGroupConditionRule,
)

__all__ = [
    # Conditions
    "EntryCondition",
    "UserCondition",
    # Entry rules
    "TitleConditionRule",
    "SlugConditionRule",
    "StatusConditionRule",
    "HasUrlConditionRule",
    "CommentCountConditionRule",
    # User rules
    "EmailConditionRule",
    "AdminConditionRule",
    "UserGroupConditionRule",
]
