"""
Field check implementations.

Provides validators for required values, string length, numeric ranges and
regex patterns. A ValidationConfig is compiled into a list of these.
"""

from .base_validator import BaseValidator, RuleViolation, as_number, as_string, format_number
from .length_validator import MaxLengthValidator, MinLengthValidator
from .range_validator import MaxValueValidator, MinValueValidator
from .regex_validator import RegexValidator
from .required_field_validator import RequiredFieldValidator

__all__ = [
    "BaseValidator",
    "RuleViolation",
    "RequiredFieldValidator",
    "MinLengthValidator",
    "MaxLengthValidator",
    "MinValueValidator",
    "MaxValueValidator",
    "RegexValidator",
    "as_string",
    "as_number",
    "format_number",
]
