# src/curconv/shared/validators.py
"""
Input Validators - Command-line and Configuration Validation

This module validates the values a user hands to the converter: the amount
argument, the rates source location and the color mode.

Files that USE this module:
- curconv.config.settings (validates configuration values)
- curconv.adapters.sources.factory (is_remote_location picks the source type)
- curconv.app (parse_amount for the <amount> argument)
- tests.test_validators (unit tests)

Files that this module USES:
- curconv.domain.errors (InvalidAmountError)
"""

import math
import re
from urllib.parse import urlparse

from curconv.domain.errors import InvalidAmountError

COLOR_MODES = ("auto", "always", "never")

_URL_SCHEME = re.compile(r"^https?://", re.IGNORECASE)


def is_remote_location(location: str) -> bool:
    """Return True if the location is an http(s) URL."""
    return bool(location) and bool(_URL_SCHEME.match(location.strip()))


def validate_source_location(location: str) -> bool:
    """
    Validate a rates source location.

    Args:
        location: File path or http(s) URL

    Returns:
        True if valid, False otherwise
    """
    if not location or not location.strip():
        return False

    if is_remote_location(location):
        parsed = urlparse(location.strip())
        return bool(parsed.netloc)

    # Any other non-empty string is treated as a filesystem path
    return "\x00" not in location


def parse_amount(value: str) -> float:
    """
    Parse the amount argument of a conversion.

    Accepts anything float() accepts except NaN and infinities.

    Args:
        value: Raw command-line text

    Returns:
        The amount as float

    Raises:
        InvalidAmountError: If the text is empty, not a number or not finite
    """
    if value is None or not value.strip():
        raise InvalidAmountError("amount is empty")

    try:
        amount = float(value)
    except ValueError as e:
        raise InvalidAmountError(f"{value!r} is not a number") from e

    if not math.isfinite(amount):
        raise InvalidAmountError(f"{value!r} is not a finite number")
    return amount
