"""
Validation config builder.

Merges a list of selected rule templates (with parameters) and a required
flag into a single ValidationConfig.
"""

import logging
from typing import Any, Iterable, Mapping

from formrules.core.models import ActiveRule, ValidationConfig

from .catalog import get_rule_template
from .consistency import check_config

logger = logging.getLogger(__name__)

RuleSelectionInput = ActiveRule | Mapping[str, Any]


class UnknownRuleError(ValueError):
    """Raised by strict builds when a selected rule id is not in the catalog."""

    def __init__(self, rule_id: str):
        self.rule_id = rule_id
        super().__init__(f"Unknown rule id: {rule_id!r}")


def _unpack(rule: RuleSelectionInput) -> tuple[str, dict[str, Any] | None]:
    """Return (rule_id, params) from an ActiveRule or a {ruleId, params} mapping."""
    if isinstance(rule, ActiveRule):
        return rule.rule_id, rule.params_dict()
    rule_id = rule.get("ruleId", rule.get("rule_id", ""))
    params = rule.get("params")
    return rule_id, dict(params) if params else None


def build_validation_config(
    selected_rules: Iterable[RuleSelectionInput],
    required: bool = False,
    strict: bool = False,
) -> ValidationConfig:
    """
    Build a ValidationConfig from selected rule templates.

    Rules are applied in order and shallow-merged, so when two rules set the
    same key (two pattern rules, say) the later one wins.

    Args:
        selected_rules: ActiveRule objects or {"ruleId", "params"} mappings
        required: Value of the config's required flag
        strict: Raise on unknown rule ids instead of skipping them

    Returns:
        The merged ValidationConfig

    Raises:
        UnknownRuleError: If strict is set and a rule id is not in the catalog
    """
    merged: dict[str, Any] = {"required": required}

    for rule in selected_rules:
        rule_id, params = _unpack(rule)

        template = get_rule_template(rule_id)
        if template is not None:
            merged.update(template.generate_validation(params))
        elif strict:
            raise UnknownRuleError(rule_id)
        else:
            logger.debug(f"Skipping unknown rule id '{rule_id}'")

    return validated_config(merged)


def validated_config(merged: dict[str, Any]) -> ValidationConfig:
    """Validate a merged config dict, logging any inconsistencies as warnings."""
    config = ValidationConfig.model_validate(merged)

    for issue in check_config(config):
        logger.warning(f"Inconsistent validation config: {issue}", extra={"config": config.to_dict()})

    return config
