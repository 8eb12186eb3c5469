# src/curconv/adapters/sources/http.py
"""
HTTP Rate Source - Rate Snapshot from a Remote Endpoint

This module fetches the rates array with a single GET request. There is
no caching and no retry: a failed request fails the invocation.

Files that USE this module:
- curconv.adapters.sources.factory (build_source for http(s) URLs)
- tests.test_sources (unit tests)

Files that this module USES:
- curconv.adapters.sources.base (RateSource, decode_rates)
- requests (HTTP client)
"""
import logging
from typing import Optional, Tuple

import requests

from curconv.adapters.sources.base import RateSource, decode_rates
from curconv.domain.errors import SourceUnavailableError
from curconv.domain.models import RateRecord

log = logging.getLogger(__name__)

DEFAULT_TIMEOUT = 10


class HttpRateSource(RateSource):
    def __init__(self, url: str, timeout: Optional[int] = None):
        """
        Initialize HTTP rate source.

        Args:
            url: Endpoint returning the rates JSON array
            timeout: Optional HTTP timeout in seconds (defaults to 10)

        Raises:
            ValueError: If the URL is empty
        """
        if not url:
            raise ValueError("Rates URL is empty.")
        self.url = url
        self.timeout = timeout or DEFAULT_TIMEOUT

    def load_rates(self) -> Tuple[RateRecord, ...]:
        """
        Fetch and decode the rates array.

        Raises:
            SourceUnavailableError: On timeout, connection failure or non-2xx status
            MalformedDataError: If the body is not a valid rates array
        """
        try:
            log.info("Fetching rates from %s", self.url)
            resp = requests.get(self.url, timeout=self.timeout, headers={"Accept": "application/json"})
            resp.raise_for_status()
        except requests.exceptions.Timeout as e:
            log.info("Rates endpoint timeout after %d seconds", self.timeout)
            raise SourceUnavailableError(f"request to {self.url} timed out after {self.timeout}s") from e
        except requests.exceptions.HTTPError as e:
            status = e.response.status_code if e.response is not None else "?"
            log.info("Rates endpoint HTTP error %s: %s", status, e)
            raise SourceUnavailableError(f"{self.url} returned HTTP {status}") from e
        except requests.exceptions.RequestException as e:
            log.info("Rates request failed: %s", e)
            raise SourceUnavailableError(f"request to {self.url} failed: {e}") from e

        rates = decode_rates(resp.content)
        log.info("Fetched %d rates from %s", len(rates), self.url)
        return rates
