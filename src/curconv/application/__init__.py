# src/curconv/application/__init__.py
"""
Application Layer - Use Cases

This package contains the conversion logic and the service that ties it
to a rate source.
"""

from curconv.application.converter import convert, find_reference_prices
from curconv.application.service import Conversion, ConverterService

__all__ = [
    "convert",
    "find_reference_prices",
    "Conversion",
    "ConverterService",
]
