"""
Length validators - check the character count of a value.
"""

from typing import Any

from .base_validator import BaseValidator, as_string, format_number


class _LengthValidator(BaseValidator):
    """
    Shared setup for length checks.

    Parameters:
    - value: The length bound (inclusive)
    - message: Optional message that replaces the standard one
    """

    def __init__(self, field_name: str, field_label: str = "", parameters: dict[str, Any] | None = None):
        super().__init__(field_name, field_label, parameters)

        bound = self.parameters.get("value")
        if bound is None:
            raise ValueError(f"{self.__class__.__name__} requires 'value' parameter")
        self.bound = bound


class MinLengthValidator(_LengthValidator):
    """Validates that a value has at least `value` characters."""

    def validate(self, value: Any) -> None:
        if len(as_string(value)) < self.bound:
            self.fail(f"{self.label} must be at least {format_number(self.bound)} characters")

    @property
    def rule_type(self) -> str:
        return "minLength"


class MaxLengthValidator(_LengthValidator):
    """Validates that a value has at most `value` characters."""

    def validate(self, value: Any) -> None:
        if len(as_string(value)) > self.bound:
            self.fail(f"{self.label} must be at most {format_number(self.bound)} characters")

    @property
    def rule_type(self) -> str:
        return "maxLength"
