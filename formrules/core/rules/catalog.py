"""
Rule template catalog.

The fixed, ordered list of rule templates users can pick from in the field
editor. Templates are created once at import time and never mutated.
"""

from typing import Any, Iterable

from formrules.core.models import RuleTemplate
from formrules.core.patterns import get_pattern


def _value_rule(
    rule_id: str, config_key: str, name: str, description: str, category: str
) -> RuleTemplate:
    """Template whose config entry is the numeric `value` parameter."""

    def generate_validation(params: dict[str, Any] | None = None) -> dict[str, Any]:
        value = (params or {}).get("value")
        if isinstance(value, bool) or not isinstance(value, (int, float)):
            return {}
        return {config_key: value}

    return RuleTemplate(
        id=rule_id,
        name=name,
        description=description,
        category=category,
        generate_validation=generate_validation,
    )


def _pattern_rule(rule_id: str, name: str, description: str, category: str) -> RuleTemplate:
    """Template that always sets the registry pattern stored under `rule_id`."""
    pattern = get_pattern(rule_id)

    def generate_pattern() -> str:
        return pattern

    def generate_validation(params: dict[str, Any] | None = None) -> dict[str, Any]:
        return {"pattern": generate_pattern()}

    return RuleTemplate(
        id=rule_id,
        name=name,
        description=description,
        category=category,
        generate_validation=generate_validation,
        generate_pattern=generate_pattern,
    )


RULE_TEMPLATES: tuple[RuleTemplate, ...] = (
    # Text rules
    _value_rule("minLength", "minLength", "Minimum Length",
                "Require at least a certain number of characters", "text"),
    _value_rule("maxLength", "maxLength", "Maximum Length",
                "Limit the maximum number of characters", "text"),
    _pattern_rule("lettersOnly", "Letters Only", "Allow only alphabetic characters and spaces", "text"),
    _pattern_rule("alphanumeric", "Letters & Numbers",
                  "Allow only letters and numbers (no special characters)", "text"),
    _pattern_rule("noSpaces", "No Spaces", "Prevent spaces in the input", "text"),

    # Number rules
    _value_rule("min", "min", "Minimum Value", "Set a minimum numeric value", "number"),
    _value_rule("max", "max", "Maximum Value", "Set a maximum numeric value", "number"),
    _pattern_rule("numbersOnly", "Numbers Only", "Allow only numeric characters", "number"),

    # Contact rules
    _pattern_rule("email", "Email Format", "Validate email address format", "contact"),
    _pattern_rule("phone", "Phone Number", "Validate general phone number format", "contact"),
    _pattern_rule("indianPhone", "Indian Phone", "Validate Indian mobile number (10 digits)", "contact"),
    _pattern_rule("url", "Website URL", "Validate website URL format", "contact"),

    # Format rules
    _pattern_rule("postalCode", "Postal Code (India)", "Validate Indian postal code (6 digits)", "format"),
    _pattern_rule("usZipCode", "ZIP Code (US)", "Validate US ZIP code", "format"),
    _pattern_rule("date", "Date (YYYY-MM-DD)", "Validate date format", "format"),
    _pattern_rule("creditCard", "Credit Card", "Validate credit card number", "format"),

    # Security rules
    _pattern_rule("username", "Username", "Validate username format (3-20 chars)", "security"),
    _pattern_rule("password", "Strong Password",
                  "Require strong password (8+ chars, mixed case, number)", "security"),

    # College rules
    _pattern_rule("rollNumber", "Roll Number", "Validate roll number format (e.g., CB21CS001)", "college"),
    _pattern_rule("registrationNumber", "Registration Number",
                  "Validate registration number (10-15 digits)", "college"),
    _pattern_rule("collegeEmail", "College Email", "Validate college email (.edu, .ac.in)", "college"),
    _pattern_rule("cgpa", "CGPA", "Validate CGPA (0.00 to 10.00)", "college"),
    _pattern_rule("percentage", "Percentage", "Validate percentage (0 to 100)", "college"),
    _pattern_rule("semester", "Semester", "Validate semester number (1-8)", "college"),
    _pattern_rule("batchYear", "Batch Year", "Validate batch year (2000-2099)", "college"),
    _pattern_rule("section", "Section", "Validate section (A-Z)", "college"),
    _pattern_rule("department", "Department Name", "Validate department name format", "college"),
)

_TEMPLATES_BY_ID: dict[str, RuleTemplate] = {t.id: t for t in RULE_TEMPLATES}


def get_rule_template(rule_id: str) -> RuleTemplate | None:
    """Return the catalog template with this id, or None."""
    return _TEMPLATES_BY_ID.get(rule_id)


def group_by_category(templates: Iterable[RuleTemplate]) -> dict[str, list[RuleTemplate]]:
    """
    Group templates by category for display.

    Categories appear in the order first seen; templates keep their input order.
    """
    grouped: dict[str, list[RuleTemplate]] = {}
    for template in templates:
        grouped.setdefault(template.category, []).append(template)
    return grouped
