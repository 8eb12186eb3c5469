# src/curconv/adapters/sources/__init__.py
"""
Rate Source Adapters - Loading Rate Snapshots

This package contains the adapters that produce a rate snapshot.
All sources implement the RateSource interface.
"""

from curconv.adapters.sources.base import RateSource, decode_rates
from curconv.adapters.sources.factory import build_source
from curconv.adapters.sources.file import FileRateSource
from curconv.adapters.sources.http import HttpRateSource

__all__ = [
    "RateSource",
    "decode_rates",
    "build_source",
    "FileRateSource",
    "HttpRateSource",
]
