# src/curconv/domain/models.py
"""
Domain Models - Rate Records

This module contains the single domain entity of the converter: one
currency's entry in a central bank rate snapshot.

Files that USE this module:
- curconv.adapters.sources.* (sources decode payloads into RateRecord)
- curconv.application.* (converter and service read reference prices)
- curconv.adapters.formatting.formatter (rates table rows)
- tests.* (tests build RateRecord instances as fixtures)

Files that this module USES:
- pydantic (field aliases and numeric-string coercion)
"""

from __future__ import annotations  # Enable postponed evaluation of annotations

from typing import Optional  # Type hints for optional values

from pydantic import BaseModel, ConfigDict, Field  # Data validation and field configuration


class RateRecord(BaseModel):
    """
    One currency in a rate snapshot.

    Wire names follow the upstream payload (``cb_price``, ``nbu_buy_price``,
    ``nbu_cell_price``); the Python attribute names are accepted too.

    Attributes:
        title: Display name of the currency
        code: Short currency identifier, e.g. "USD"
        reference_price: Price against the snapshot's base currency
        buy_price: Optional buy price, kept as received
        sell_price: Optional sell price, kept as received
        date: Snapshot date as received (not parsed)
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True, extra="ignore")

    title: str
    code: str
    reference_price: float = Field(..., alias="cb_price", allow_inf_nan=False)
    buy_price: Optional[str] = Field(default=None, alias="nbu_buy_price")
    sell_price: Optional[str] = Field(default=None, alias="nbu_cell_price")
    date: str
