"""Conditions domain - rule composition, validation, and config documents."""

from .base import BaseCondition, BaseConditionRule, generate_uid
from .codec import (
    create_condition,
    create_condition_rule,
    decode_rule,
    dump_condition_yaml,
    encode_condition,
    load_condition_file,
    parse_condition_yaml,
)
from .errors import (
    ConditionError,
    ConfigDecodeError,
    InvalidRuleError,
    RuleNotFoundError,
    UnknownTypeError,
)
from .events import (
    RegisterConditionRuleTypesEvent,
    clear_condition_rule_type_handlers,
    on_register_condition_rule_types,
    registered_handler_count,
    trigger_register_condition_rule_types,
)
from .registry import (
    get_condition_class,
    get_rule_class,
    list_condition_types,
    list_rule_types,
)
from .router import router
from .rules import (
    BaseLightswitchConditionRule,
    BaseMultiSelectConditionRule,
    BaseNumberConditionRule,
    BaseTextConditionRule,
    NumberOperator,
    SelectOperator,
    TextOperator,
)
from .schemas import ConditionConfig, ConditionRuleConfig, ConditionResponse, RuleTypeOption

__all__ = [
    # Router
    "router",
    # Base classes
    "BaseCondition",
    "BaseConditionRule",
    "generate_uid",
    # Base rule kinds
    "BaseTextConditionRule",
    "BaseNumberConditionRule",
    "BaseLightswitchConditionRule",
    "BaseMultiSelectConditionRule",
    "TextOperator",
    "NumberOperator",
    "SelectOperator",
    # Codec
    "create_condition",
    "create_condition_rule",
    "decode_rule",
    "encode_condition",
    "parse_condition_yaml",
    "load_condition_file",
    "dump_condition_yaml",
    # Errors
    "ConditionError",
    "UnknownTypeError",
    "InvalidRuleError",
    "ConfigDecodeError",
    "RuleNotFoundError",
    # Extension point
    "RegisterConditionRuleTypesEvent",
    "on_register_condition_rule_types",
    "trigger_register_condition_rule_types",
    "clear_condition_rule_type_handlers",
    "registered_handler_count",
    # Registry
    "get_condition_class",
    "get_rule_class",
    "list_condition_types",
    "list_rule_types",
    # Schemas
    "ConditionConfig",
    "ConditionRuleConfig",
    "ConditionResponse",
    "RuleTypeOption",
]
