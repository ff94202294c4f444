"""Tests for the base rule kinds and the entry/user conditions."""

import pytest
from pydantic import ValidationError

from condition_builder.conditions import (
    BaseMultiSelectConditionRule,
    BaseTextConditionRule,
    InvalidRuleError,
    NumberOperator,
    TextOperator,
)
from condition_builder.entries import (
    AdminConditionRule,
    CommentCountConditionRule,
    EmailConditionRule,
    EntryCondition,
    HasUrlConditionRule,
    SlugConditionRule,
    StatusConditionRule,
    TitleConditionRule,
    UserCondition,
    UserGroupConditionRule,
)


class TestBaseRuleKinds:
    def test_base_kinds_not_selectable(self):
        assert BaseTextConditionRule.is_selectable() is False
        assert BaseMultiSelectConditionRule.is_selectable() is False
        assert TitleConditionRule.is_selectable() is True

    def test_text_defaults(self):
        rule = TitleConditionRule()
        assert rule.operator == TextOperator.EQ
        assert rule.value == ""

    def test_operator_serialized_as_string(self):
        rule = SlugConditionRule(operator="beginsWith", value="news-")
        assert rule.get_config()["operator"] == "beginsWith"

    def test_unknown_operator(self):
        with pytest.raises(ValidationError):
            TitleConditionRule(operator="like")

    def test_multi_select_options(self):
        rule = StatusConditionRule(values=["live", "pending"])
        assert rule.get_config()["values"] == ["live", "pending"]

        with pytest.raises(ValidationError):
            StatusConditionRule(values=["archived"])
        with pytest.raises(ValidationError):
            StatusConditionRule(values=["live", "live"])

    def test_options_are_per_class(self):
        UserGroupConditionRule(values=["editors"])
        with pytest.raises(ValidationError):
            StatusConditionRule(values=["editors"])

    def test_assignment_is_validated(self):
        rule = StatusConditionRule()
        with pytest.raises(ValidationError):
            rule.values = ["archived"]

    def test_number_rule(self):
        rule = CommentCountConditionRule(operator=">=", value=3)
        assert rule.operator == NumberOperator.GE
        assert rule.get_config()["value"] == 3.0

    def test_valueless_number_operator(self):
        CommentCountConditionRule(operator="empty")
        with pytest.raises(ValidationError):
            CommentCountConditionRule(operator="notEmpty", value=1)

    def test_lightswitch_default(self):
        assert HasUrlConditionRule().value is True


class TestEntryAndUserConditions:
    def test_entry_rule_types(self):
        assert EntryCondition().get_condition_rule_types() == (
            TitleConditionRule.type_id(),
            SlugConditionRule.type_id(),
            StatusConditionRule.type_id(),
            HasUrlConditionRule.type_id(),
        )

    def test_user_rules_not_allowed_in_entries(self, entry_condition: EntryCondition):
        with pytest.raises(InvalidRuleError):
            entry_condition.add_condition_rule(EmailConditionRule())
        assert len(entry_condition.get_condition_rules()) == 3

    def test_comment_count_not_allowed_by_default(self):
        with pytest.raises(InvalidRuleError):
            EntryCondition().add_condition_rule(CommentCountConditionRule())

    def test_user_condition_options(self):
        labels = [o["label"] for o in UserCondition().get_rule_type_options()]
        assert labels == ["Admin", "Email", "User group"]

    def test_user_condition(self):
        condition = UserCondition(condition_rules=[
            AdminConditionRule(value=False),
            UserGroupConditionRule(values=["authors"]),
        ])
        config = condition.get_config()
        assert config["type"] == "condition_builder.entries.conditions.UserCondition"
        assert [r["type"] for r in config["conditionRules"]] == [
            AdminConditionRule.type_id(),
            UserGroupConditionRule.type_id(),
        ]
