"""Pydantic models for condition config documents and API requests/responses."""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field


# =============================================================================
# Config Documents
# =============================================================================


class ConditionRuleConfig(BaseModel):
    """Envelope of a rule config. Rule-specific fields pass through as extras."""

    model_config = ConfigDict(extra="allow")

    type: str = Field(..., min_length=1, description="Rule type identifier")
    uid: str | None = Field(None, min_length=1, description="Stable rule identifier")


class ConditionConfig(BaseModel):
    """Envelope of a condition config document."""

    model_config = ConfigDict(populate_by_name=True)

    type: str = Field(..., min_length=1, description="Condition type identifier")
    condition_rules: list[Any] = Field(
        default_factory=list,
        alias="conditionRules",
        description="Rule configs (or rule instances) in order",
    )


# =============================================================================
# API Models
# =============================================================================


class RuleTypeOption(BaseModel):
    """A rule type the condition allows, with its display label."""

    value: str
    label: str


class ConditionRequest(BaseModel):
    """Current condition state sent by the builder UI."""

    model_config = ConfigDict(populate_by_name=True)

    config: dict[str, Any] = Field(..., description="Condition config document")
    condition_rule_types: list[str] | None = Field(
        None,
        alias="conditionRuleTypes",
        description="Rule types previously returned for this condition",
    )


class AddRuleRequest(ConditionRequest):
    type: str | None = Field(None, description="Rule type to add (first available if omitted)")


class RemoveRuleRequest(ConditionRequest):
    uid: str


class SwitchRuleTypeRequest(ConditionRequest):
    uid: str
    type: str


class ReorderRulesRequest(ConditionRequest):
    uids: list[str]


class ConditionResponse(BaseModel):
    """Condition state returned to the builder UI."""

    model_config = ConfigDict(populate_by_name=True)

    config: dict[str, Any]
    condition_rule_types: list[str] = Field(..., alias="conditionRuleTypes")
    rule_type_options: list[RuleTypeOption] = Field(..., alias="ruleTypeOptions")
    add_rule_label: str = Field(..., alias="addRuleLabel")


class ConditionTypesResponse(BaseModel):
    types: list[str]
    total: int
