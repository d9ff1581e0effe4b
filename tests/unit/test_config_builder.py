"""
Unit tests for building validation configs from selected rules.
"""

import logging

import pytest

from formrules.core.models import ActiveRule, RuleParams, ValidationConfig
from formrules.core.patterns import PREDEFINED_PATTERNS
from formrules.core.rules import (
    RuleSelection,
    UnknownRuleError,
    build_validation_config,
    check_config,
)

EMAIL_PATTERN = PREDEFINED_PATTERNS["email"].pattern
PHONE_PATTERN = PREDEFINED_PATTERNS["phone"].pattern


class TestBuildValidationConfig:
    """Tests for build_validation_config"""

    def test_merges_rules_in_order(self):
        config = build_validation_config(
            [{"ruleId": "minLength", "params": {"value": 5}}, {"ruleId": "email"}],
            True,
        )

        assert config.to_dict() == {"required": True, "minLength": 5, "pattern": EMAIL_PATTERN}

    def test_required_defaults_to_false(self):
        assert build_validation_config([]).to_dict() == {"required": False}

    def test_last_pattern_wins(self):
        config = build_validation_config([{"ruleId": "email"}, {"ruleId": "phone"}])
        assert config.pattern == PHONE_PATTERN

        config = build_validation_config([{"ruleId": "phone"}, {"ruleId": "email"}])
        assert config.pattern == EMAIL_PATTERN

    def test_disjoint_keys_do_not_conflict(self):
        config = build_validation_config([
            {"ruleId": "min", "params": {"value": 1}},
            {"ruleId": "max", "params": {"value": 9}},
            {"ruleId": "numbersOnly"},
        ])
        assert config.to_dict() == {
            "required": False,
            "min": 1,
            "max": 9,
            "pattern": PREDEFINED_PATTERNS["numbersOnly"].pattern,
        }

    def test_unknown_rule_ids_skipped(self):
        config = build_validation_config([{"ruleId": "doesNotExist"}, {"ruleId": "maxLength", "params": {"value": 3}}])
        assert config.to_dict() == {"required": False, "maxLength": 3}

    def test_strict_rejects_unknown_rule_ids(self):
        with pytest.raises(UnknownRuleError) as exc_info:
            build_validation_config([{"ruleId": "doesNotExist"}], strict=True)

        assert exc_info.value.rule_id == "doesNotExist"
        assert isinstance(exc_info.value, ValueError)

    def test_value_rule_without_value_adds_nothing(self):
        config = build_validation_config([{"ruleId": "minLength"}, {"ruleId": "max", "params": {}}])
        assert config.to_dict() == {"required": False}

    def test_accepts_active_rules(self):
        rules = [
            ActiveRule(rule_id="maxLength", params=RuleParams(value=10)),
            ActiveRule(rule_id="lettersOnly"),
        ]
        config = build_validation_config(rules)
        assert config.max_length == 10
        assert config.pattern == PREDEFINED_PATTERNS["lettersOnly"].pattern

    def test_custom_rule_id_has_no_template(self):
        config = build_validation_config([{"ruleId": "custom", "params": {"pattern": "^INV-[0-9]+$"}}])
        assert config.to_dict() == {"required": False}

        with pytest.raises(UnknownRuleError):
            build_validation_config([{"ruleId": "custom", "params": {"pattern": "^INV-[0-9]+$"}}], strict=True)

    def test_out_of_range_values_pass_through(self):
        config = build_validation_config([{"ruleId": "minLength", "params": {"value": -4}}])
        assert config.min_length == -4

    def test_inconsistent_config_logs_warning(self, caplog):
        with caplog.at_level(logging.WARNING):
            config = build_validation_config([
                {"ruleId": "min", "params": {"value": 10}},
                {"ruleId": "max", "params": {"value": 1}},
            ])

        assert config.min == 10 and config.max == 1
        assert any("min (10) is greater than max (1)" in r.getMessage() for r in caplog.records)


class TestCheckConfig:
    """Tests for check_config"""

    def test_sound_config_has_no_issues(self):
        config = ValidationConfig(required=True, min_length=1, max_length=5, min=0, max=10, pattern="^a")
        assert check_config(config) == []

    def test_inverted_length_bounds(self):
        issues = check_config(ValidationConfig(min_length=8, max_length=3))
        assert issues == ["minLength (8) is greater than maxLength (3)"]

    def test_negative_length(self):
        assert check_config(ValidationConfig(max_length=-1)) == ["maxLength is negative (-1)"]

    def test_malformed_pattern(self):
        issues = check_config(ValidationConfig(pattern="["))
        assert len(issues) == 1
        assert issues[0].startswith("pattern does not compile")


class TestRuleSelection:
    """Tests for the editing-session RuleSelection"""

    def test_add_rules_and_build(self):
        selection = RuleSelection(required=True) \
            .add_rule("minLength", {"value": 3}) \
            .add_rule("email")

        assert selection.build().to_dict() == {"required": True, "minLength": 3, "pattern": EMAIL_PATTERN}

    def test_duplicate_rule_ignored(self):
        selection = RuleSelection().add_rule("email").add_rule("email")
        assert len(selection) == 1

    def test_remove_rule(self):
        selection = RuleSelection().add_rule("minLength", {"value": 3}).add_rule("email")
        selection.remove_rule(0)

        assert [r.rule_id for r in selection.rules] == ["email"]
        assert selection.build().min_length is None

    def test_update_params(self):
        selection = RuleSelection().add_rule("minLength", {"value": 3})
        selection.update_params(0, {"value": 5})
        assert selection.build().min_length == 5

    def test_set_required(self):
        assert RuleSelection().set_required(True).build().required is True

    def test_custom_pattern_rule(self):
        selection = RuleSelection().add_rule("custom", {"pattern": "^INV-[0-9]+$"})
        assert selection.build().pattern == "^INV-[0-9]+$"

    def test_custom_rule_without_pattern_adds_nothing(self):
        assert RuleSelection().add_rule("custom").build().pattern is None

    def test_custom_pattern_follows_merge_order(self):
        selection = RuleSelection().add_rule("email").add_rule("custom", {"pattern": "^x$"})
        assert selection.build().pattern == "^x$"

        selection = RuleSelection().add_rule("custom", {"pattern": "^x$"}).add_rule("email")
        assert selection.build().pattern == EMAIL_PATTERN

    def test_unknown_rule_skipped_in_build(self):
        selection = RuleSelection().add_rule("doesNotExist").add_rule("maxLength", {"value": 4})
        assert selection.build().to_dict() == {"required": False, "maxLength": 4}

    def test_from_config_round_trip(self):
        config = build_validation_config(
            [
                {"ruleId": "minLength", "params": {"value": 3}},
                {"ruleId": "maxLength", "params": {"value": 10}},
                {"ruleId": "collegeEmail"},
            ],
            required=True,
        )

        selection = RuleSelection.from_config(config)

        assert [r.rule_id for r in selection.rules] == ["minLength", "maxLength", "collegeEmail"]
        assert selection.build() == config

    def test_from_config_unknown_pattern_becomes_custom(self):
        selection = RuleSelection.from_config(ValidationConfig(pattern="^Z+$"))

        assert selection.rules[0].rule_id == "custom"
        assert selection.rules[0].params.pattern == "^Z+$"
        assert selection.build().pattern == "^Z+$"

    def test_from_config_registry_pattern_without_template_becomes_custom(self):
        hex_color = PREDEFINED_PATTERNS["hexColor"].pattern
        selection = RuleSelection.from_config(ValidationConfig(pattern=hex_color))

        assert selection.rules[0].rule_id == "custom"
        assert selection.build().pattern == hex_color
