# src/curconv/adapters/sources/factory.py
"""Pick the rate source implementation for a configured location."""
from typing import Optional

from curconv.adapters.sources.base import RateSource
from curconv.adapters.sources.file import FileRateSource
from curconv.adapters.sources.http import HttpRateSource
from curconv.shared.validators import is_remote_location


def build_source(location: str, timeout: Optional[int] = None) -> RateSource:
    """Return an HttpRateSource for http(s) URLs, otherwise a FileRateSource."""
    location = location.strip()
    if is_remote_location(location):
        return HttpRateSource(location, timeout=timeout)
    return FileRateSource(location)
