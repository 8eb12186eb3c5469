# src/curconv/application/converter.py
"""
Converter - Cross-rate Computation

Every record in a snapshot quotes its currency against the same base, so
the cross-rate between two currencies is the ratio of their reference
prices: ``amount * (to_price / from_price)``.

Files that USE this module:
- curconv.application.service (ConverterService.convert)
- tests.test_converter (unit tests)

Files that this module USES:
- curconv.domain (RateRecord, RateNotFoundError, ZeroReferencePriceError)
"""
from __future__ import annotations

import math
from typing import Iterable, Optional, Tuple

from curconv.domain.errors import NonFiniteResultError, RateNotFoundError, ZeroReferencePriceError
from curconv.domain.models import RateRecord


def find_reference_prices(
    rates: Iterable[RateRecord], from_code: str, to_code: str
) -> Tuple[float, float]:
    """
    Look up the reference prices of two currencies in one pass.

    The first record with a matching code wins; codes compare exactly.

    Returns:
        (from_price, to_price)

    Raises:
        RateNotFoundError: If either code is not in the snapshot
    """
    from_price: Optional[float] = None
    to_price: Optional[float] = None

    for rate in rates:
        if from_price is None and rate.code == from_code:
            from_price = rate.reference_price
        if to_price is None and rate.code == to_code:
            to_price = rate.reference_price
        if from_price is not None and to_price is not None:
            break

    if from_price is None or to_price is None:
        raise RateNotFoundError(from_code, to_code)
    return from_price, to_price


def convert(rates: Iterable[RateRecord], from_code: str, to_code: str, amount: float) -> float:
    """
    Convert an amount from one currency to another.

    Args:
        rates: Rate snapshot
        from_code: Code of the currency the amount is in
        to_code: Code of the target currency
        amount: Amount to convert (not validated)

    Returns:
        Converted amount, unrounded

    Raises:
        RateNotFoundError: If either code is not in the snapshot
        ZeroReferencePriceError: If the source currency's price is zero
        NonFiniteResultError: If the result overflows or is NaN
    """
    from_price, to_price = find_reference_prices(rates, from_code, to_code)
    if from_price == 0:
        raise ZeroReferencePriceError(from_code)
    result = amount * (to_price / from_price)
    if not math.isfinite(result):
        raise NonFiniteResultError(from_code, to_code)
    return result
