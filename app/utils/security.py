"""
GetUs.Fit API - Security Utilities.

Credential validation and input helper functions.
"""

import re
from typing import Any, Tuple

USERNAME_PATTERN = re.compile(r"^[a-zA-Z0-9_]{2,30}$")
MIN_PASSWORD_LENGTH = 8
# Matches the width of the date columns
MAX_DATE_LENGTH = 32


def validate_username(username: str) -> Tuple[bool, str]:
    """
    Validate username format.

    Usernames are 2-30 characters of letters, digits and underscores.

    Args:
        username: Username to validate.

    Returns:
        Tuple[bool, str]: (is_valid, error_message)

    Example:
        >>> validate_username("alice_1")
        (True, '')
        >>> validate_username("a")[0]
        False
    """
    if not USERNAME_PATTERN.match(username):
        return False, "Username must be 2-30 characters (letters, numbers, underscores)."
    return True, ""


def validate_password_strength(password: str) -> Tuple[bool, str]:
    """
    Validate password strength requirements.

    Args:
        password: Password string to validate.

    Returns:
        Tuple[bool, str]: (is_valid, error_message)

    Example:
        >>> validate_password_strength("short")
        (False, 'Password must be at least 8 characters.')
        >>> validate_password_strength("password123")
        (True, '')
    """
    if len(password) < MIN_PASSWORD_LENGTH:
        return False, f"Password must be at least {MIN_PASSWORD_LENGTH} characters."
    return True, ""


def is_numeric(value: Any) -> bool:
    """
    Check whether a caller-supplied value reads as a number.

    Numbers and numeric strings both qualify; booleans do not.

    Example:
        >>> is_numeric("400")
        True
        >>> is_numeric("lots")
        False
    """
    if isinstance(value, bool) or value is None:
        return False
    try:
        float(value)
    except (TypeError, ValueError):
        return False
    return True


def is_date_key(value: Any) -> bool:
    """
    Check that a caller-supplied date can key a stored entry.

    Dates are opaque strings (normally YYYY-MM-DD) of at most
    MAX_DATE_LENGTH characters.

    Example:
        >>> is_date_key("2024-01-01")
        True
        >>> is_date_key(["2024-01-01"])
        False
    """
    return isinstance(value, str) and 0 < len(value.strip()) <= MAX_DATE_LENGTH


def sanitize_string(value: str, max_length: int = 255) -> str:
    """
    Sanitize a string by stripping whitespace and limiting length.

    Example:
        >>> sanitize_string("  Hello World  ")
        'Hello World'
    """
    return value.strip()[:max_length]
