"""
Field and form validation.

Compiles a ValidationConfig into executable checks and evaluates field
values (or whole sets of form responses) against them, producing
field-scoped ValidationError records.
"""

import logging
from typing import Any, Iterable, Mapping

from formrules.core.models import (
    CustomRule,
    FormField,
    ValidationConfig,
    ValidationError,
    ValidationResult,
)
from formrules.core.patterns import get_pattern
from formrules.core.validators import (
    BaseValidator,
    MaxLengthValidator,
    MaxValueValidator,
    MinLengthValidator,
    MinValueValidator,
    RegexValidator,
    RequiredFieldValidator,
    RuleViolation,
    as_number,
    as_string,
)

logger = logging.getLogger(__name__)

# custom rule type -> bound check
_VALUE_RULES: dict[str, type[BaseValidator]] = {
    "minLength": MinLengthValidator,
    "maxLength": MaxLengthValidator,
    "min": MinValueValidator,
    "max": MaxValueValidator,
}

_NAMED_PATTERN_RULES = ("email", "url", "phone", "alphanumeric", "lettersOnly", "numbersOnly", "noSpaces")

_NAMED_PATTERN_MESSAGES = {
    "email": "must be a valid email address",
    "url": "must be a valid URL",
    "phone": "must be a valid phone number",
}


def _regex_check(
    pattern: Any, field_id: str, field_label: str, message: str | None = None
) -> RegexValidator | None:
    """Compile a pattern check, or log and return None when the pattern is malformed."""
    try:
        return RegexValidator(field_id, field_label, {"pattern": pattern, "message": message})
    except ValueError as e:
        logger.warning(
            f"Invalid regex pattern for field {field_id}: {pattern!r} ({e})",
            extra={"field_id": field_id, "pattern": str(pattern)},
        )
        return None


def _custom_rule_check(rule: CustomRule, field_id: str, field_label: str) -> BaseValidator | None:
    """Compile one custom rule; rules that cannot be compiled are skipped."""
    if rule.type in _VALUE_RULES:
        bound = as_number(rule.value)
        if bound is None:
            logger.debug(f"Skipping {rule.type} custom rule on {field_id}: non-numeric value {rule.value!r}")
            return None
        return _VALUE_RULES[rule.type](field_id, field_label, {"value": bound, "message": rule.message})

    if rule.type in ("pattern", "custom"):
        if not isinstance(rule.value, str) or not rule.value:
            return None
        return _regex_check(rule.value, field_id, field_label, rule.message)

    if rule.type in _NAMED_PATTERN_RULES:
        message = rule.message
        if message is None and rule.type in _NAMED_PATTERN_MESSAGES:
            message = f"{field_label or 'This field'} {_NAMED_PATTERN_MESSAGES[rule.type]}"
        return _regex_check(get_pattern(rule.type), field_id, field_label, message)

    # "required" custom rules carry no check; only config.required gates blank values
    return None


def is_required(config: ValidationConfig) -> bool:
    """True if the config marks the field as required."""
    return bool(config.required)


def compile_checks(config: ValidationConfig, field_id: str, field_label: str = "") -> list[BaseValidator]:
    """
    Compile a config into the ordered checks run on non-blank values.

    Order: minLength, maxLength, min, max, pattern, then custom rules.
    Malformed patterns are logged as warnings and left out, so a bad
    pattern never blocks a submission.

    Args:
        config: The validation config
        field_id: Id reported on errors
        field_label: Label used in messages

    Returns:
        List of validators
    """
    checks: list[BaseValidator] = []

    if config.min_length is not None:
        checks.append(MinLengthValidator(field_id, field_label, {"value": config.min_length}))
    if config.max_length is not None:
        checks.append(MaxLengthValidator(field_id, field_label, {"value": config.max_length}))
    if config.min is not None:
        checks.append(MinValueValidator(field_id, field_label, {"value": config.min}))
    if config.max is not None:
        checks.append(MaxValueValidator(field_id, field_label, {"value": config.max}))

    if config.pattern:
        regex_check = _regex_check(config.pattern, field_id, field_label)
        if regex_check is not None:
            checks.append(regex_check)

    for rule in config.custom_rules or ():
        check = _custom_rule_check(rule, field_id, field_label)
        if check is not None:
            checks.append(check)

    return checks


def _run_checks(
    value: Any,
    field_id: str,
    field_label: str,
    required: bool,
    checks: Iterable[BaseValidator],
) -> list[ValidationError]:
    errors: list[ValidationError] = []

    if required:
        try:
            RequiredFieldValidator(field_id, field_label).validate(value)
        except RuleViolation as violation:
            # required and blank: nothing else is checked
            return [ValidationError(field=field_id, field_label=field_label, message=violation.message)]

    if as_string(value).strip() == "":
        return errors

    for check in checks:
        try:
            check.validate(value)
        except RuleViolation as violation:
            errors.append(ValidationError(field=field_id, field_label=field_label, message=violation.message))

    return errors


def validate_field(
    value: Any,
    field_id: str,
    field_label: str,
    config: ValidationConfig | Mapping[str, Any] | None,
) -> list[ValidationError]:
    """
    Validate a single field value against its validation config.

    A required blank value yields exactly one "is required" error. A blank
    optional value yields no errors. Otherwise every configured check runs
    and all failures are returned.

    Args:
        value: The raw response value (None for missing)
        field_id: Field identifier
        field_label: Label used in messages ("This field" when empty)
        config: ValidationConfig or its serialized mapping

    Returns:
        List of ValidationError (empty when the value is valid)
    """
    if not isinstance(config, ValidationConfig):
        config = ValidationConfig.from_dict(config)

    return _run_checks(
        value,
        field_id,
        field_label,
        is_required(config),
        compile_checks(config, field_id, field_label),
    )


def _as_form_field(field: FormField | Mapping[str, Any]) -> FormField:
    if isinstance(field, FormField):
        return field
    return FormField.model_validate(field)


def validate_form(
    responses: Mapping[str, Any],
    fields: Iterable[FormField | Mapping[str, Any]],
) -> ValidationResult:
    """
    Validate an entire form.

    Fields are validated in the given order; missing responses count as None.

    Args:
        responses: Mapping of field id to submitted value
        fields: FormField objects or their serialized mappings

    Returns:
        ValidationResult with all errors in field order
    """
    errors: list[ValidationError] = []

    for raw_field in fields:
        field = _as_form_field(raw_field)
        errors.extend(
            validate_field(
                responses.get(field.id),
                field.id,
                field.display_label,
                field.effective_validation(),
            )
        )

    return ValidationResult(errors=errors)


class FormValidator:
    """
    Validates many response sets against one form definition.

    Checks are compiled once per field at construction, so malformed
    patterns are reported once rather than on every submission.
    """

    def __init__(self, fields: Iterable[FormField | Mapping[str, Any]]):
        """
        Initialize the validator with the form's fields.

        Args:
            fields: FormField objects or their serialized mappings
        """
        self.fields = [_as_form_field(f) for f in fields]
        self._compiled: list[tuple[FormField, bool, list[BaseValidator]]] = []
        self._build_checks()

    def _build_checks(self) -> None:
        for field in self.fields:
            config = field.effective_validation()
            checks = compile_checks(config, field.id, field.display_label)
            self._compiled.append((field, is_required(config), checks))

    def validate(self, responses: Mapping[str, Any]) -> ValidationResult:
        """Validate one set of responses."""
        errors: list[ValidationError] = []
        for field, required, checks in self._compiled:
            errors.extend(
                _run_checks(
                    responses.get(field.id),
                    field.id,
                    field.display_label,
                    required,
                    checks,
                )
            )
        return ValidationResult(errors=errors)

    def validate_batch(self, batch: Iterable[Mapping[str, Any]]) -> list[ValidationResult]:
        """Validate several response sets, one result each."""
        return [self.validate(responses) for responses in batch]

    def get_rule_summary(self) -> dict[str, Any]:
        """
        Get summary of compiled checks.

        Returns:
            Dictionary with field and check counts by type
        """
        counts: dict[str, int] = {}
        for _, required, checks in self._compiled:
            if required:
                counts["required"] = counts.get("required", 0) + 1
            for check in checks:
                counts[check.rule_type] = counts.get(check.rule_type, 0) + 1

        return {
            "total_fields": len(self.fields),
            "required_fields": sum(1 for _, required, _ in self._compiled if required),
            "checks_by_type": counts,
        }
