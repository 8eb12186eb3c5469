# src/curconv/application/service.py
"""
Converter Service - Rate Snapshot Use Cases

Wraps a RateSource and exposes the two things the CLI does with it:
list the snapshot and convert an amount.

Files that USE this module:
- curconv.app (run builds a ConverterService per invocation)
- tests.test_service (unit tests)

Files that this module USES:
- curconv.adapters.sources.base (RateSource interface)
- curconv.application.converter (convert)
"""
from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Optional, Tuple

from curconv.adapters.sources.base import RateSource
from curconv.application.converter import convert
from curconv.domain.models import RateRecord

log = logging.getLogger(__name__)


@dataclass(frozen=True)
class Conversion:
    """
    Outcome of one conversion.

    Attributes:
        amount: Amount in the source currency
        from_code: Source currency code
        to_code: Target currency code
        result: Converted amount, unrounded
    """
    amount: float
    from_code: str
    to_code: str
    result: float


class ConverterService:
    def __init__(self, source: RateSource):
        self.source = source
        self._rates: Optional[Tuple[RateRecord, ...]] = None

    def rates(self) -> Tuple[RateRecord, ...]:
        """Load the snapshot on first use and return it."""
        if self._rates is None:
            self._rates = self.source.load_rates()
        return self._rates

    def convert(self, amount: float, from_code: str, to_code: str) -> Conversion:
        result = convert(self.rates(), from_code, to_code, amount)
        log.info("Converted %s %s -> %s %s", amount, from_code, result, to_code)
        return Conversion(amount=amount, from_code=from_code, to_code=to_code, result=result)
