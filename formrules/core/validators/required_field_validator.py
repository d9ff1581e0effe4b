"""
RequiredFieldValidator - ensures a field has a non-blank value.
"""

from typing import Any

from .base_validator import BaseValidator, as_string


class RequiredFieldValidator(BaseValidator):
    """
    Validates that a required field is present and not blank.

    Fails if the value is None or renders to a whitespace-only string.
    """

    def validate(self, value: Any) -> None:
        if as_string(value).strip() == "":
            self.fail(f"{self.label} is required")

    @property
    def rule_type(self) -> str:
        return "required"
