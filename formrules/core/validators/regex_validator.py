"""
RegexValidator - validates field values against a regular expression pattern.
"""

import re
from re import Pattern
from typing import Any

from formrules.core.patterns import CUSTOM_PATTERN_DESCRIPTION, compile_pattern, lookup_description

from .base_validator import BaseValidator, as_string


class RegexValidator(BaseValidator):
    """
    Validates that a field value matches a regular expression pattern.

    The pattern is searched, not anchored: only anchors written into the
    pattern itself constrain where it must match. String patterns are
    compiled with browser RegExp semantics (compile_pattern); compiled
    Pattern objects are used as given.

    Parameters:
    - pattern: Regular expression source (string or compiled Pattern)
    - message: Optional message that replaces the standard one
    """

    def __init__(self, field_name: str, field_label: str = "", parameters: dict[str, Any] | None = None):
        super().__init__(field_name, field_label, parameters)

        pattern = self.parameters.get("pattern")
        if not pattern:
            raise ValueError("RegexValidator requires 'pattern' parameter")

        # Compile pattern
        try:
            if isinstance(pattern, str):
                self.source = pattern
                self.pattern: Pattern = compile_pattern(pattern)
            elif isinstance(pattern, Pattern):
                self.source = pattern.pattern
                self.pattern = pattern
            else:
                raise ValueError(f"Pattern must be string or compiled Pattern, got {type(pattern)}")
        except re.error as e:
            raise ValueError(f"Invalid regex pattern: {e}")

    def validate(self, value: Any) -> None:
        """
        Validate that the value matches the regex pattern.

        Raises:
            RuleViolation: If the value doesn't match the pattern
        """
        if self.pattern.search(as_string(value)):
            return

        description = lookup_description(self.source)
        if description != CUSTOM_PATTERN_DESCRIPTION:
            self.fail(f"{self.label} must be: {description.lower()}")
        self.fail(f"{self.label} has an invalid format")

    @property
    def rule_type(self) -> str:
        return "pattern"
