"""
Predefined pattern registry.

A fixed catalog of named regular expressions with human-readable descriptions.
Rule templates embed these patterns and the validator uses the descriptions
to turn a pattern mismatch into a readable message.
"""

import re
from types import MappingProxyType
from typing import NamedTuple

from .dialect import compile_pattern


class PatternEntry(NamedTuple):
    """A predefined regex source and its description."""

    pattern: str
    description: str


CUSTOM_PATTERN_DESCRIPTION = "Custom pattern"

_PATTERNS: dict[str, PatternEntry] = {
    "email": PatternEntry(
        r"^[a-zA-Z0-9._%+-]+@[a-zA-Z0-9.-]+\.[a-zA-Z]{2,}$",
        "Valid email address",
    ),
    "url": PatternEntry(
        r"^(https?:\/\/)?(www\.)?[-a-zA-Z0-9@:%._\+~#=]{1,256}\.[a-zA-Z0-9()]{1,6}\b([-a-zA-Z0-9()@:%_\+.~#?&//=]*)$",
        "Valid URL",
    ),
    "phone": PatternEntry(
        r"^[\+]?[(]?[0-9]{3}[)]?[-\s\.]?[0-9]{3}[-\s\.]?[0-9]{4,6}$",
        "Valid phone number",
    ),
    "alphanumeric": PatternEntry(r"^[a-zA-Z0-9]+$", "Letters and numbers only"),
    "lettersOnly": PatternEntry(r"^[a-zA-Z\s]+$", "Letters only (with spaces)"),
    "numbersOnly": PatternEntry(r"^[0-9]+$", "Numbers only"),
    "noSpaces": PatternEntry(r"^\S+$", "No spaces allowed"),
    "indianPhone": PatternEntry(
        r"^[6-9]\d{9}$",
        "Valid Indian phone number (10 digits starting with 6-9)",
    ),
    "usPhone": PatternEntry(
        r"^\(?[2-9]\d{2}\)?[-. ]?\d{3}[-. ]?\d{4}$",
        "Valid US phone number",
    ),
    "postalCode": PatternEntry(r"^[1-9][0-9]{5}$", "Valid Indian postal code (6 digits)"),
    "usZipCode": PatternEntry(r"^\d{5}(-\d{4})?$", "Valid US ZIP code"),
    "username": PatternEntry(
        r"^[a-zA-Z][a-zA-Z0-9_]{2,19}$",
        "Username (3-20 chars, starts with letter, allows underscores)",
    ),
    "password": PatternEntry(
        r"^(?=.*[a-z])(?=.*[A-Z])(?=.*\d)[a-zA-Z\d@$!%*?&]{8,}$",
        "Password (min 8 chars, 1 uppercase, 1 lowercase, 1 number)",
    ),
    "date": PatternEntry(
        r"^\d{4}-(0[1-9]|1[0-2])-(0[1-9]|[12]\d|3[01])$",
        "Date in YYYY-MM-DD format",
    ),
    "time": PatternEntry(r"^([01]\d|2[0-3]):([0-5]\d)$", "Time in HH:MM format (24-hour)"),
    "creditCard": PatternEntry(
        r"^(?:4[0-9]{12}(?:[0-9]{3})?|5[1-5][0-9]{14}|3[47][0-9]{13})$",
        "Valid credit card number (Visa, MasterCard, Amex)",
    ),
    "hexColor": PatternEntry(r"^#([A-Fa-f0-9]{6}|[A-Fa-f0-9]{3})$", "Valid hex color code"),
    # College / academic identifiers
    "rollNumber": PatternEntry(
        r"^[A-Z]{2,4}\d{2}[A-Z]{1,3}\d{3,4}$",
        "Roll number (e.g., CB21CS001, RA2011003010234)",
    ),
    "registrationNumber": PatternEntry(r"^\d{10,15}$", "Registration number (10-15 digits)"),
    "collegeEmail": PatternEntry(
        r"^[a-zA-Z0-9._%+-]+@[a-zA-Z0-9.-]+\.(edu|ac\.in|edu\.in)$",
        "College email (.edu, .ac.in, .edu.in)",
    ),
    "cgpa": PatternEntry(r"^([0-9](\.\d{1,2})?|10(\.0{1,2})?)$", "CGPA (0.00 to 10.00)"),
    "percentage": PatternEntry(
        r"^(100(\.0{1,2})?|[0-9]{1,2}(\.\d{1,2})?)$",
        "Percentage (0.00 to 100.00)",
    ),
    "semester": PatternEntry(r"^[1-8]$", "Semester number (1-8)"),
    "year": PatternEntry(r"^(19|20)\d{2}$", "Year (1900-2099)"),
    "batchYear": PatternEntry(r"^20[0-9]{2}$", "Batch year (2000-2099)"),
    "section": PatternEntry(r"^[A-Z]$", "Section (A-Z)"),
    "department": PatternEntry(r"^[A-Za-z\s&]+$", "Department name (letters, spaces, &)"),
}

PREDEFINED_PATTERNS = MappingProxyType(_PATTERNS)

# pattern source -> id; first registration wins, matching lookup order
_IDS_BY_PATTERN: dict[str, str] = {}
for _pattern_id, _entry in _PATTERNS.items():
    _IDS_BY_PATTERN.setdefault(_entry.pattern, _pattern_id)


def get_pattern(pattern_id: str) -> str:
    """
    Return the regex source registered under an id.

    Raises:
        KeyError: If no pattern has that id
    """
    return PREDEFINED_PATTERNS[pattern_id].pattern


def find_pattern_id(pattern: str) -> str | None:
    """Return the id of the registry entry whose source equals `pattern` exactly."""
    return _IDS_BY_PATTERN.get(pattern)


def lookup_description(pattern: str) -> str:
    """
    Get a human-readable description for a regex source.

    Only exact string equality counts; two equivalent but differently
    spelled patterns are not considered the same.

    Returns:
        The registered description, or "Custom pattern" when unknown
    """
    pattern_id = find_pattern_id(pattern)
    if pattern_id is None:
        return CUSTOM_PATTERN_DESCRIPTION
    return PREDEFINED_PATTERNS[pattern_id].description


def combine_patterns(patterns: list[str]) -> str:
    """
    Combine several patterns with AND logic.

    The result matches a value only if every pattern matches somewhere in it.

    Examples:
        >>> combine_patterns([])
        ''
        >>> combine_patterns(["^abc$"])
        '^abc$'
        >>> combine_patterns(["abc", "def"])
        '^(?=.*abc)(?=.*def).*$'
    """
    if not patterns:
        return ""
    if len(patterns) == 1:
        return patterns[0]
    lookaheads = "".join(f"(?=.*{p})" for p in patterns)
    return f"^{lookaheads}.*$"


def check_sample(pattern: str, value: str) -> bool | None:
    """
    Check a sample value against a pattern, for live feedback while editing.

    Returns:
        True/False for match/mismatch, None if the pattern does not compile
    """
    try:
        compiled = compile_pattern(pattern)
    except re.error:
        return None
    return compiled.search(value) is not None

