"""
Standalone input checks.
"""

from .validation import (
    validate_email,
    validate_password,
    validate_percentage,
    validate_phone,
    validate_url,
)

__all__ = [
    "validate_email",
    "validate_url",
    "validate_phone",
    "validate_password",
    "validate_percentage",
]
