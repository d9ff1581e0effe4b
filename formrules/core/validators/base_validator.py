"""
Base validator interface for all field checks.

All validators must inherit from BaseValidator and implement the validate() method.
"""

import math
from abc import ABC, abstractmethod
from typing import Any


class RuleViolation(Exception):
    """Raised when a field check fails."""

    def __init__(self, rule_name: str, field_name: str, message: str):
        self.rule_name = rule_name
        self.field_name = field_name
        self.message = message
        super().__init__(f"[{rule_name}] {field_name}: {message}")


def as_string(value: Any) -> str:
    """
    Render a response value the way a browser form would display it.

    None becomes "", booleans become "true"/"false", integral floats lose
    their trailing ".0" and sequences are joined with commas.
    """
    if value is None:
        return ""
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, float):
        return format_number(value)
    if isinstance(value, (list, tuple)):
        return ",".join(as_string(v) for v in value)
    return str(value)


def as_number(value: Any) -> int | float | None:
    """
    Return the numeric reading of a value, or None if it is not numeric.

    Numbers are taken as-is (booleans excluded). Strings count only when the
    whole trimmed string parses to a finite number.
    """
    if isinstance(value, bool):
        return None
    if isinstance(value, (int, float)):
        return value
    if not isinstance(value, str):
        return None

    text = value.strip()
    if not text or "_" in text:
        return None
    try:
        number = float(text)
    except ValueError:
        return None
    if not math.isfinite(number):
        return None
    return number


def format_number(number: int | float) -> str:
    """Format a bound for messages: 10.0 -> "10", 2.5 -> "2.5"."""
    if isinstance(number, float):
        if math.isnan(number):
            return "NaN"
        if math.isinf(number):
            return "Infinity" if number > 0 else "-Infinity"
        if number.is_integer():
            return str(int(number))
    return str(number)


class BaseValidator(ABC):
    """
    Abstract base class for all validators.

    Each validator implements one compiled check from a validation config
    (min_length, max_length, min, max, pattern). Checks only see non-blank
    values; required/blank handling happens before they run.
    """

    default_label = "This field"

    def __init__(self, field_name: str, field_label: str = "", parameters: dict[str, Any] | None = None):
        """
        Initialize validator.

        Args:
            field_name: Id of the field to validate
            field_label: Label used in error messages
            parameters: Check-specific parameters (e.g., "value" bound, "pattern", "message")
        """
        self.field_name = field_name
        self.field_label = field_label
        self.parameters = parameters or {}
        self.message = self.parameters.get("message")

    @property
    def label(self) -> str:
        return self.field_label or self.default_label

    def fail(self, message: str) -> None:
        """Raise a RuleViolation, preferring a configured custom message."""
        raise RuleViolation(
            rule_name=self.rule_type,
            field_name=self.field_name,
            message=self.message or message,
        )

    @abstractmethod
    def validate(self, value: Any) -> None:
        """
        Validate a value against this check.

        Args:
            value: The raw response value

        Raises:
            RuleViolation: If validation fails
        """
        pass

    @property
    @abstractmethod
    def rule_type(self) -> str:
        """Return the check type identifier."""
        pass

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(field={self.field_name}, params={self.parameters})"
