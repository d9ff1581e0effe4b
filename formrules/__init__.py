"""
formrules - validation rule engine for form builders.

Maps field types to applicable rule templates, builds declarative
validation configs from selected rules, and validates field values and
whole form submissions against those configs.
"""

from formrules.core.models import (
    ActiveRule,
    CustomRule,
    FormField,
    RuleTemplate,
    ValidationConfig,
    ValidationError,
    ValidationResult,
)
from formrules.core.patterns import PREDEFINED_PATTERNS, combine_patterns, lookup_description
from formrules.core.rules import (
    RULE_TEMPLATES,
    FormDefinitionLoader,
    FormValidator,
    RuleSelection,
    UnknownRuleError,
    build_validation_config,
    check_config,
    get_rules_for_field_type,
    validate_field,
    validate_form,
)

__version__ = "0.1.0"

__all__ = [
    "ActiveRule",
    "CustomRule",
    "FormField",
    "RuleTemplate",
    "ValidationConfig",
    "ValidationError",
    "ValidationResult",
    "PREDEFINED_PATTERNS",
    "lookup_description",
    "combine_patterns",
    "RULE_TEMPLATES",
    "get_rules_for_field_type",
    "build_validation_config",
    "UnknownRuleError",
    "check_config",
    "validate_field",
    "validate_form",
    "FormValidator",
    "FormDefinitionLoader",
    "RuleSelection",
]
