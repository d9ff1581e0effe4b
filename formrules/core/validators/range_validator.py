"""
Range validators - check numeric values against a minimum or maximum.
"""

from typing import Any

from .base_validator import BaseValidator, as_number, format_number


class _RangeValidator(BaseValidator):
    """
    Shared setup for numeric bound checks.

    Non-numeric values are skipped: a string is numeric only when the whole
    trimmed string parses to a finite number.

    Parameters:
    - value: The bound (inclusive)
    - message: Optional message that replaces the standard one
    """

    default_label = "Value"

    def __init__(self, field_name: str, field_label: str = "", parameters: dict[str, Any] | None = None):
        super().__init__(field_name, field_label, parameters)

        bound = self.parameters.get("value")
        if bound is None:
            raise ValueError(f"{self.__class__.__name__} requires 'value' parameter")
        self.bound = bound


class MinValueValidator(_RangeValidator):
    """Validates that a numeric value is at least `value`."""

    def validate(self, value: Any) -> None:
        number = as_number(value)
        if number is None:
            return

        if number < self.bound:
            self.fail(f"{self.label} must be at least {format_number(self.bound)}")

    @property
    def rule_type(self) -> str:
        return "min"


class MaxValueValidator(_RangeValidator):
    """Validates that a numeric value is at most `value`."""

    def validate(self, value: Any) -> None:
        number = as_number(value)
        if number is None:
            return

        if number > self.bound:
            self.fail(f"{self.label} must be at most {format_number(self.bound)}")

    @property
    def rule_type(self) -> str:
        return "max"
