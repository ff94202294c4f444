"""Pytest fixtures for test suite."""

import pytest

from condition_builder.conditions import clear_condition_rule_type_handlers
from condition_builder.core import get_settings
from condition_builder.entries import (
    EntryCondition,
    HasUrlConditionRule,
    StatusConditionRule,
    TitleConditionRule,
)

from sample_types import ARule, BRule, KCondition


# =============================================================================
# Global State
# =============================================================================


@pytest.fixture(autouse=True)
def clean_handlers():
    """Rule type handlers are process-wide; start and end every test without any."""
    clear_condition_rule_type_handlers()
    yield
    clear_condition_rule_type_handlers()


@pytest.fixture
def clean_settings():
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


# =============================================================================
# Conditions
# =============================================================================


@pytest.fixture
def k_condition() -> KCondition:
    """Condition with rule types [A, B] and no rules."""
    return KCondition()


@pytest.fixture
def k_condition_with_rules() -> KCondition:
    """Condition with rules A, B, A (in that order)."""
    condition = KCondition()
    condition.set_condition_rules([
        ARule(uid="a-1", note="first"),
        BRule(uid="b-1", count=2),
        ARule(uid="a-2", note="second"),
    ])
    return condition


@pytest.fixture
def entry_condition() -> EntryCondition:
    """Entry condition with a title, status and has-URL rule."""
    return EntryCondition(condition_rules=[
        TitleConditionRule(uid="title", operator="contains", value="news"),
        StatusConditionRule(uid="status", operator="notIn", values=["expired", "disabled"]),
        HasUrlConditionRule(uid="has-url", value=False),
    ])
