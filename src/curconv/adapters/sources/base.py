# src/curconv/adapters/sources/base.py
"""
Base Rate Source Interface and Payload Decoding

This module defines the abstract base class for rate sources and the
decoder that turns a raw JSON payload into rate records. Sources differ
only in how they obtain the bytes; decoding is shared.

Files that USE this module:
- curconv.adapters.sources.file (FileRateSource implements RateSource)
- curconv.adapters.sources.http (HttpRateSource implements RateSource)
- curconv.application.service (ConverterService depends on RateSource)
- tests.test_sources (unit tests)

Files that this module USES:
- curconv.domain (RateRecord, MalformedDataError)
- pydantic (TypeAdapter validates the record list)
"""
import json
import logging
from abc import ABC, abstractmethod
from typing import List, Tuple, Union

from pydantic import TypeAdapter, ValidationError

from curconv.domain.errors import MalformedDataError
from curconv.domain.models import RateRecord

log = logging.getLogger(__name__)

_RECORDS = TypeAdapter(List[RateRecord])


class RateSource(ABC):
    @abstractmethod
    def load_rates(self) -> Tuple[RateRecord, ...]:
        """Return the rate snapshot in source order."""
        raise NotImplementedError


def decode_rates(payload: Union[bytes, str]) -> Tuple[RateRecord, ...]:
    """
    Decode a JSON array of rate objects.

    Args:
        payload: Raw JSON text or bytes

    Returns:
        Tuple of RateRecord in payload order

    Raises:
        MalformedDataError: If the payload is not JSON, not an array, or an
            element does not match the rate shape
    """
    try:
        data = json.loads(payload)
    except (ValueError, UnicodeDecodeError) as e:
        log.info("Rates payload is not valid JSON: %s", e)
        raise MalformedDataError(f"invalid JSON: {e}") from e

    if not isinstance(data, list):
        log.info("Rates payload has unexpected type: %r", type(data))
        raise MalformedDataError(f"expected a JSON array of rates, got {type(data).__name__}")

    try:
        records = _RECORDS.validate_python(data)
    except ValidationError as e:
        log.info("Rates payload does not match the rate schema: %s", e)
        raise MalformedDataError(f"invalid rate record: {_first_error(e)}") from e

    log.debug("Decoded %d rate records", len(records))
    return tuple(records)


def _first_error(exc: ValidationError) -> str:
    """Summarize the first validation error as 'index.field: message'."""
    errors = exc.errors()
    if not errors:
        return str(exc)
    first = errors[0]
    where = ".".join(str(p) for p in first.get("loc", ()))
    extra = f" (and {len(errors) - 1} more)" if len(errors) > 1 else ""
    return f"{where}: {first.get('msg', 'invalid')}{extra}"
