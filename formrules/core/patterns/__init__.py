"""
Predefined regular-expression patterns and lookup helpers.
"""

from .dialect import compile_pattern, translate_pattern
from .registry import (
    CUSTOM_PATTERN_DESCRIPTION,
    PREDEFINED_PATTERNS,
    PatternEntry,
    check_sample,
    combine_patterns,
    find_pattern_id,
    get_pattern,
    lookup_description,
)

__all__ = [
    "PatternEntry",
    "PREDEFINED_PATTERNS",
    "CUSTOM_PATTERN_DESCRIPTION",
    "get_pattern",
    "find_pattern_id",
    "lookup_description",
    "combine_patterns",
    "check_sample",
    "compile_pattern",
    "translate_pattern",
]
