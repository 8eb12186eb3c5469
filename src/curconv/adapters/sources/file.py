# src/curconv/adapters/sources/file.py
"""
File Rate Source - Rate Snapshot from a Local JSON File

Files that USE this module:
- curconv.adapters.sources.factory (build_source for plain paths)
- tests.test_sources (unit tests)

Files that this module USES:
- curconv.adapters.sources.base (RateSource, decode_rates)
"""
import logging
from pathlib import Path
from typing import Tuple, Union

from curconv.adapters.sources.base import RateSource, decode_rates
from curconv.domain.errors import SourceUnavailableError
from curconv.domain.models import RateRecord

log = logging.getLogger(__name__)


class FileRateSource(RateSource):
    def __init__(self, path: Union[str, Path]):
        self.path = Path(path)

    def load_rates(self) -> Tuple[RateRecord, ...]:
        """
        Read and decode the rates file.

        Raises:
            SourceUnavailableError: If the file cannot be opened or read
            MalformedDataError: If the content is not a valid rates array
        """
        log.info("Loading rates from file %s", self.path)
        try:
            with open(self.path, "rb") as f:
                payload = f.read()
        except OSError as e:
            log.info("Cannot read rates file %s: %s", self.path, e)
            raise SourceUnavailableError(f"cannot read {self.path}: {e.strerror or e}") from e

        rates = decode_rates(payload)
        log.info("Loaded %d rates from %s", len(rates), self.path)
        return rates
