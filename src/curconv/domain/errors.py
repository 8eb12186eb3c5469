# src/curconv/domain/errors.py
"""
Domain Errors - Conversion Exceptions

This module defines the exceptions raised while loading a rate snapshot
and converting between currencies. Every one of them is terminal for a
single CLI invocation.
"""


class ConverterError(Exception):
    """Base exception for currency converter errors."""
    pass


class SourceUnavailableError(ConverterError):
    """Raised when the rates file cannot be read or the HTTP request fails."""
    pass


class MalformedDataError(ConverterError):
    """Raised when the rates payload cannot be decoded into rate records."""
    pass


class InvalidAmountError(ConverterError):
    """Raised when the amount argument is not a valid number."""
    pass


class RateNotFoundError(ConverterError):
    """Raised when one or both currency codes are absent from the snapshot."""

    def __init__(self, from_code: str, to_code: str):
        self.from_code = from_code
        self.to_code = to_code
        super().__init__(f"conversion rate from {from_code} to {to_code} not found")


class ZeroReferencePriceError(ConverterError):
    """Raised when the source currency has a zero reference price."""

    def __init__(self, code: str):
        self.code = code
        super().__init__(f"reference price of {code} is zero, cannot convert from it")


class NonFiniteResultError(ConverterError):
    """Raised when a conversion overflows to infinity or yields NaN."""

    def __init__(self, from_code: str, to_code: str):
        self.from_code = from_code
        self.to_code = to_code
        super().__init__(f"conversion from {from_code} to {to_code} does not give a finite amount")
