"""Startup loading of extension modules.

An extension module registers its rule type handlers when it is imported,
for example:

    # my_plugin/conditions.py
    from condition_builder.conditions import on_register_condition_rule_types
    from condition_builder.entries import CommentCountConditionRule, EntryCondition

    @on_register_condition_rule_types(condition_class=EntryCondition)
    def add_comment_count(event):
        event.condition_rule_types.append(CommentCountConditionRule)

and is listed in the `CONDITION_BUILDER_EXTENSIONS` setting. Loading happens
before the app serves requests, so no handler is added while conditions are
resolving their rule types.
"""

import importlib
import logging
from types import ModuleType
from typing import Iterable

from condition_builder.conditions import registered_handler_count

logger = logging.getLogger(__name__)


def load_extensions(module_paths: Iterable[str]) -> list[ModuleType]:
    """Import each extension module. Import errors propagate."""
    modules = []
    for path in module_paths:
        before = registered_handler_count()
        module = importlib.import_module(path)
        logger.info(
            "Loaded extension %s (%d rule type handlers)",
            path,
            registered_handler_count() - before,
        )
        modules.append(module)
    return modules
