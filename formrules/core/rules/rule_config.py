"""
Rule configuration management.

Loads form field definitions (with their validation rules) from YAML files,
and tracks the active rule selection for a field while it is being edited.
"""

import os
from pathlib import Path
from typing import Any

import yaml

from formrules.core.models import ActiveRule, FormField, RuleParams, ValidationConfig
from formrules.core.patterns import find_pattern_id

from .catalog import get_rule_template
from .config_builder import build_validation_config, validated_config

_TRUTHY = ("1", "true", "yes", "on")

# free-form pattern typed by the user in the rule editor
CUSTOM_RULE_ID = "custom"


class FormDefinitionLoader:
    """
    Loads form field definitions from YAML configuration files.

    Expected YAML format:
    ```yaml
    fields:
      - id: student_email
        label: Student Email
        fieldType: email
        required: true
        rules:
          - ruleId: collegeEmail
          - ruleId: maxLength
            params:
              value: 120

      - id: cgpa
        label: CGPA
        fieldType: cgpa
        validation:
          required: true
          min: 0
          max: 10
    ```

    A field gives either a literal `validation` mapping or `required` +
    `rules`, which are merged in order by build_validation_config.
    """

    def __init__(self, config_path: str | Path, strict: bool | None = None):
        """
        Initialize the form definition loader.

        Args:
            config_path: Path to the YAML configuration file
            strict: Reject unknown rule ids (default: FORMRULES_STRICT_RULES env, on when unset)
        """
        self.config_path = Path(config_path)
        if not self.config_path.exists():
            raise FileNotFoundError(f"Form definition file not found: {config_path}")

        if strict is None:
            strict = os.getenv("FORMRULES_STRICT_RULES", "true").strip().lower() in _TRUTHY
        self.strict = strict

    def load_fields(self) -> list[FormField]:
        """
        Load and parse field definitions from the YAML file.

        Returns:
            List of FormField objects suitable for validate_form / FormValidator

        Raises:
            ValueError: If YAML is invalid or a field definition is malformed
            UnknownRuleError: If strict and a rule id is not in the catalog
        """
        with open(self.config_path) as f:
            try:
                config = yaml.safe_load(f)
            except yaml.YAMLError as e:
                raise ValueError(f"Invalid YAML in {self.config_path}: {e}")

        if not isinstance(config, dict) or "fields" not in config:
            raise ValueError("Configuration file must contain 'fields' section")

        field_defs = config["fields"]
        if not isinstance(field_defs, list):
            raise ValueError("'fields' must be a list")

        return [self._parse_field(field_def, idx) for idx, field_def in enumerate(field_defs)]

    def _parse_field(self, field_def: Any, idx: int) -> FormField:
        """
        Parse a single field definition.

        Args:
            field_def: The field definition from YAML
            idx: Position of the field (for error messages)

        Returns:
            Parsed FormField

        Raises:
            ValueError: If the field definition is invalid
        """
        if not isinstance(field_def, dict):
            raise ValueError(f"Field #{idx} must be a mapping")
        if "id" not in field_def:
            raise ValueError(f"Field #{idx} is missing 'id'")

        field_id = str(field_def["id"])

        if "validation" in field_def and "rules" in field_def:
            raise ValueError(f"Field '{field_id}' sets both 'validation' and 'rules'")

        if "rules" in field_def:
            rules = field_def["rules"] or []
            if not isinstance(rules, list):
                raise ValueError(f"Rules for field '{field_id}' must be a list")
            for rule in rules:
                if not isinstance(rule, dict) or "ruleId" not in rule:
                    raise ValueError(f"Rule for field '{field_id}' is missing 'ruleId'")
            required = field_def.get("required", False)
            if not isinstance(required, bool):
                raise ValueError(f"'required' for field '{field_id}' must be true or false, got {required!r}")
            validation = build_validation_config(
                rules,
                required=required,
                strict=self.strict,
            )
        else:
            validation = ValidationConfig.from_dict(field_def.get("validation"))

        return FormField.model_validate({
            "id": field_id,
            "label": field_def.get("label", ""),
            "fieldType": field_def.get("fieldType", field_def.get("type", "text")),
            "validation": validation,
            "min": field_def.get("min"),
            "max": field_def.get("max"),
        })


class RuleSelection:
    """
    The active rules chosen for one field while it is being edited.

    The ordered rule list is the single source of truth; the field's
    ValidationConfig is rebuilt from it on every change.
    """

    def __init__(self, required: bool = False):
        """Initialize an empty selection."""
        self.rules: list[ActiveRule] = []
        self.required = required

    @classmethod
    def from_config(cls, config: ValidationConfig) -> "RuleSelection":
        """
        Reconstruct the active rules behind a saved config.

        Bounds come first (minLength, maxLength, min, max), then the pattern,
        as its catalog rule when one matches exactly, otherwise as a custom
        pattern.
        """
        selection = cls(required=bool(config.required))
        for rule_id, bound in (
            ("minLength", config.min_length),
            ("maxLength", config.max_length),
            ("min", config.min),
            ("max", config.max),
        ):
            if bound is not None:
                selection.add_rule(rule_id, {"value": bound})

        if config.pattern:
            pattern_id = find_pattern_id(config.pattern)
            if pattern_id is not None and get_rule_template(pattern_id) is not None:
                selection.add_rule(pattern_id)
            else:
                selection.add_rule(CUSTOM_RULE_ID, {"pattern": config.pattern})
        return selection

    def has_rule(self, rule_id: str) -> bool:
        return any(r.rule_id == rule_id for r in self.rules)

    def add_rule(self, rule_id: str, params: dict[str, Any] | None = None) -> "RuleSelection":
        """Add a rule; a rule id already in the selection is ignored."""
        if not self.has_rule(rule_id):
            self.rules.append(ActiveRule(rule_id=rule_id, params=RuleParams(**params) if params else None))
        return self

    def remove_rule(self, index: int) -> "RuleSelection":
        """Remove the rule at `index`."""
        del self.rules[index]
        return self

    def update_params(self, index: int, params: dict[str, Any]) -> "RuleSelection":
        """Replace the parameters of the rule at `index`."""
        self.rules[index] = self.rules[index].model_copy(update={"params": RuleParams(**params)})
        return self

    def set_required(self, required: bool) -> "RuleSelection":
        self.required = required
        return self

    def build(self) -> ValidationConfig:
        """
        Build the validation config for the current selection.

        Catalog rules merge in order as in build_validation_config. A
        `custom` rule sets the pattern from its params; unknown ids are
        skipped.
        """
        merged: dict[str, Any] = {"required": self.required}

        for rule in self.rules:
            template = get_rule_template(rule.rule_id)
            if template is not None:
                merged.update(template.generate_validation(rule.params_dict()))
            elif rule.rule_id == CUSTOM_RULE_ID:
                if rule.params and rule.params.pattern:
                    merged["pattern"] = rule.params.pattern

        return validated_config(merged)

    def __len__(self) -> int:
        return len(self.rules)
