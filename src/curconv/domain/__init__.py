# src/curconv/domain/__init__.py
"""
Domain Layer - Pure Business Objects

This package contains the rate record model and the error hierarchy.
No dependencies on infrastructure or external systems.
"""

from curconv.domain.models import RateRecord
from curconv.domain.errors import (
    ConverterError,
    InvalidAmountError,
    MalformedDataError,
    NonFiniteResultError,
    RateNotFoundError,
    SourceUnavailableError,
    ZeroReferencePriceError,
)

__all__ = [
    "RateRecord",
    "ConverterError",
    "SourceUnavailableError",
    "MalformedDataError",
    "InvalidAmountError",
    "RateNotFoundError",
    "ZeroReferencePriceError",
    "NonFiniteResultError",
]
