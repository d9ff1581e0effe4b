"""
Core data models for the form validation rule engine.

All models use Pydantic for runtime validation and serialization.
"""

from .form_field import FormField
from .rule_template import (
    RULE_CATEGORIES,
    ActiveRule,
    RuleCategory,
    RuleParams,
    RuleTemplate,
)
from .validation_config import CustomRule, ValidationConfig
from .validation_result import ValidationError, ValidationResult

__all__ = [
    "ValidationConfig",
    "CustomRule",
    "ValidationError",
    "ValidationResult",
    "RuleTemplate",
    "RuleCategory",
    "RuleParams",
    "ActiveRule",
    "FormField",
    "RULE_CATEGORIES",
]
