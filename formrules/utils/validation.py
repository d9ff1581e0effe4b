"""
Standalone input checks for common field kinds.

Each check returns None when the value is acceptable (or empty, since
emptiness is the required check's job) and a user-facing message otherwise.
They are independent of ValidationConfig and can be used directly by a
renderer for built-in field types.
"""

import math
import re
from typing import Any
from urllib.parse import urlsplit

_EMAIL_RE = re.compile(r"^[^\s@]+@[^\s@]+\.[^\s@]+$")
_NON_DIGIT_RE = re.compile(r"\D")
_SPECIAL_CHAR_RE = re.compile(r'[!@#$%^&*(),.?":{}|<>]')

PASSWORD_MAX_LENGTH = 10


def validate_email(email: str | None) -> str | None:
    """
    Check that a value looks like an email address.

    Examples:
        >>> validate_email("name@domain.com") is None
        True
        >>> validate_email("name@domain")
        'Please enter a valid email address (e.g., name@domain.com)'
    """
    if not email:
        return None
    if _EMAIL_RE.match(email):
        return None
    return "Please enter a valid email address (e.g., name@domain.com)"


def validate_url(url: str | None) -> str | None:
    """
    Check that a value is an absolute URL (scheme and host present).

    Examples:
        >>> validate_url("https://example.com") is None
        True
        >>> validate_url("example.com")
        'Please enter a valid URL (e.g., https://example.com)'
    """
    if not url:
        return None
    try:
        parts = urlsplit(url.strip())
    except ValueError:
        parts = None
    if parts is not None and parts.scheme and parts.netloc:
        return None
    return "Please enter a valid URL (e.g., https://example.com)"


def validate_phone(phone: str | None) -> str | None:
    """
    Check that a phone number has exactly 10 digits, ignoring punctuation.

    Examples:
        >>> validate_phone("(987) 654-3210") is None
        True
        >>> validate_phone("12345")
        'Phone number must be exactly 10 digits'
    """
    if not phone:
        return None
    if len(_NON_DIGIT_RE.sub("", phone)) != 10:
        return "Phone number must be exactly 10 digits"
    return None


def validate_password(password: str | None) -> str | None:
    """
    Check password composition.

    Passwords may be at most 10 characters and must include an uppercase
    letter, a lowercase letter, a digit and a special character. All missing
    classes are listed in one message.

    Examples:
        >>> validate_password("Ab1!") is None
        True
        >>> validate_password("abc")
        'Password must include: uppercase, number, special character'
    """
    if not password:
        return None

    if len(password) > PASSWORD_MAX_LENGTH:
        return f"Password cannot exceed {PASSWORD_MAX_LENGTH} characters"

    missing = []
    if not re.search(r"[A-Z]", password):
        missing.append("uppercase")
    if not re.search(r"[a-z]", password):
        missing.append("lowercase")
    if not re.search(r"[0-9]", password):
        missing.append("number")
    if not _SPECIAL_CHAR_RE.search(password):
        missing.append("special character")

    if missing:
        return f"Password must include: {', '.join(missing)}"
    return None


def validate_percentage(value: Any) -> str | None:
    """
    Check that a value is a number between 0 and 100.

    Examples:
        >>> validate_percentage("42.5") is None
        True
        >>> validate_percentage(120)
        'invalid percentage'
    """
    if value is None or value == "":
        return None

    try:
        number = float(value)
    except (TypeError, ValueError):
        return "Please enter a valid number"
    if math.isnan(number):
        return "Please enter a valid number"

    if number > 100:
        return "invalid percentage"
    if number < 0:
        return "Percentage cannot be negative"
    return None
