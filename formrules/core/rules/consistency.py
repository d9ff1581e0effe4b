"""
Sanity checks for validation configs.

Catches configurations that can never be satisfied or that would produce
confusing double errors at validation time. Issues are reported, not raised.
"""

import re

from formrules.core.models import ValidationConfig
from formrules.core.patterns import compile_pattern


def check_config(config: ValidationConfig) -> list[str]:
    """
    Report inconsistencies in a validation config.

    Args:
        config: The config to inspect

    Returns:
        Human-readable issue descriptions (empty when the config is sound)
    """
    issues: list[str] = []

    for key, bound in (("minLength", config.min_length), ("maxLength", config.max_length)):
        if bound is not None and bound < 0:
            issues.append(f"{key} is negative ({bound})")

    if (
        config.min_length is not None
        and config.max_length is not None
        and config.min_length > config.max_length
    ):
        issues.append(
            f"minLength ({config.min_length}) is greater than maxLength ({config.max_length})"
        )

    if config.min is not None and config.max is not None and config.min > config.max:
        issues.append(f"min ({config.min}) is greater than max ({config.max})")

    if config.pattern:
        try:
            compile_pattern(config.pattern)
        except re.error as e:
            issues.append(f"pattern does not compile: {e}")

    return issues
