"""Condition builder API endpoints.

The builder UI keeps no server-side state: every request carries the
current condition config (and the rule types it was given earlier), and
every response carries the updated config.
"""

from contextlib import contextmanager

from fastapi import APIRouter, HTTPException

from .base import BaseCondition
from .codec import create_condition, encode_condition
from .errors import ConfigDecodeError, InvalidRuleError, RuleNotFoundError, UnknownTypeError
from .registry import list_condition_types
from .schemas import (
    AddRuleRequest,
    ConditionRequest,
    ConditionResponse,
    ConditionTypesResponse,
    RemoveRuleRequest,
    ReorderRulesRequest,
    RuleTypeOption,
    SwitchRuleTypeRequest,
)

router = APIRouter(prefix="/conditions", tags=["Conditions"])


@contextmanager
def _condition_errors():
    try:
        yield
    except RuleNotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e)) from e
    except ConfigDecodeError as e:
        raise HTTPException(status_code=422, detail=str(e)) from e
    except (UnknownTypeError, InvalidRuleError) as e:
        raise HTTPException(status_code=400, detail=str(e)) from e


def _load(request: ConditionRequest) -> BaseCondition:
    """Rebuild the condition a request describes.

    `conditionRuleTypes` is trusted client input: it replaces the resolved
    rule types unchanged, so it may allow types the condition class and its
    handlers do not. It is meant to echo back a set this API returned.
    """
    return create_condition(request.config, condition_rule_types=request.condition_rule_types)


def _respond(condition: BaseCondition) -> ConditionResponse:
    return ConditionResponse(
        config=encode_condition(condition),
        condition_rule_types=list(condition.get_condition_rule_types()),
        rule_type_options=[RuleTypeOption(**o) for o in condition.get_rule_type_options()],
        add_rule_label=condition.get_add_rule_label(),
    )


@router.get("/types", response_model=ConditionTypesResponse)
async def list_types() -> ConditionTypesResponse:
    """List registered condition types."""
    types = list_condition_types()
    return ConditionTypesResponse(types=types, total=len(types))


@router.post("/render", response_model=ConditionResponse)
async def render(request: ConditionRequest) -> ConditionResponse:
    """Validate a condition config and return its canonical form.

    Rules dragged into a new order are sent in that order, so this is also
    how a client-side reorder is applied.
    """
    with _condition_errors():
        return _respond(_load(request))


@router.post("/add-rule", response_model=ConditionResponse)
async def add_rule(request: AddRuleRequest) -> ConditionResponse:
    """Append a new rule, of the first available type unless `type` is given."""
    with _condition_errors():
        condition = _load(request)
        condition.add_new_condition_rule(request.type)
        return _respond(condition)


@router.post("/remove-rule", response_model=ConditionResponse)
async def remove_rule(request: RemoveRuleRequest) -> ConditionResponse:
    """Remove the rule with the given uid."""
    with _condition_errors():
        condition = _load(request)
        condition.remove_condition_rule(request.uid)
        return _respond(condition)


@router.post("/switch-rule-type", response_model=ConditionResponse)
async def switch_rule_type(request: SwitchRuleTypeRequest) -> ConditionResponse:
    """Replace a rule with a new rule of another type, in place."""
    with _condition_errors():
        condition = _load(request)
        condition.switch_condition_rule_type(request.uid, request.type)
        return _respond(condition)


@router.post("/reorder", response_model=ConditionResponse)
async def reorder(request: ReorderRulesRequest) -> ConditionResponse:
    """Reorder rules to match the given uid order."""
    with _condition_errors():
        condition = _load(request)
        condition.reorder_condition_rules(request.uids)
        return _respond(condition)
