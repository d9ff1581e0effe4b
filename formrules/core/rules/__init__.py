"""
Rule catalog, config building and field/form validation.
"""

from .catalog import RULE_TEMPLATES, get_rule_template, group_by_category
from .config_builder import UnknownRuleError, build_validation_config
from .consistency import check_config
from .resolver import get_rules_for_field_type
from .rule_config import CUSTOM_RULE_ID, FormDefinitionLoader, RuleSelection
from .rule_engine import FormValidator, compile_checks, validate_field, validate_form

__all__ = [
    "RULE_TEMPLATES",
    "get_rule_template",
    "group_by_category",
    "get_rules_for_field_type",
    "build_validation_config",
    "UnknownRuleError",
    "CUSTOM_RULE_ID",
    "check_config",
    "compile_checks",
    "validate_field",
    "validate_form",
    "FormValidator",
    "FormDefinitionLoader",
    "RuleSelection",
]
