"""Condition rules for entries and users."""

from typing import ClassVar

from condition_builder.conditions.rules import (
    BaseLightswitchConditionRule,
    BaseMultiSelectConditionRule,
    BaseNumberConditionRule,
    BaseTextConditionRule,
)


# =============================================================================
# Entry Rules
# =============================================================================


class TitleConditionRule(BaseTextConditionRule):
    selectable: ClassVar[bool] = True


class SlugConditionRule(BaseTextConditionRule):
    selectable: ClassVar[bool] = True


class StatusConditionRule(BaseMultiSelectConditionRule):
    selectable: ClassVar[bool] = True
    options: ClassVar[tuple[str, ...]] = ("live", "pending", "expired", "disabled")


class HasUrlConditionRule(BaseLightswitchConditionRule):
    selectable: ClassVar[bool] = True
    label: ClassVar[str] = "Has URL"


class CommentCountConditionRule(BaseNumberConditionRule):
    """Not part of `EntryCondition` by default; extensions may add it."""

    selectable: ClassVar[bool] = True


# =============================================================================
# User Rules
# =============================================================================


class EmailConditionRule(BaseTextConditionRule):
    selectable: ClassVar[bool] = True


class AdminConditionRule(BaseLightswitchConditionRule):
    selectable: ClassVar[bool] = True
    label: ClassVar[str] = "Admin"


class UserGroupConditionRule(BaseMultiSelectConditionRule):
    selectable: ClassVar[bool] = True
    label: ClassVar[str] = "User group"
    options: ClassVar[tuple[str, ...]] = ("editors", "authors", "subscribers")
