# src/curconv/shared/__init__.py
"""
Shared Utilities - Cross-cutting Concerns

This package contains shared utilities used across all layers:
- Input validation
- Logging configuration
"""

from curconv.shared.validators import (
    COLOR_MODES,
    is_remote_location,
    parse_amount,
    validate_source_location,
)
from curconv.shared.logging_conf import FILE_ONLY, setup_logging

__all__ = [
    "COLOR_MODES",
    "is_remote_location",
    "parse_amount",
    "validate_source_location",
    "setup_logging",
    "FILE_ONLY",
]
