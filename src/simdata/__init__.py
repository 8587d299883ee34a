from __future__ import annotations

from .constants import APR_MULTIPLIER, MISSING_EVENT_T0, PRICE_MULTIPLIER
from .core.errors import EventDecodeError, MalformedRowError
from .core.models import DecodedEvent, RawEventRow, WideInt
from .decoding.catalog import EventCatalog, build_event_catalog
from .decoding.decoder import decode_event, decode_rows

__all__ = [
    "APR_MULTIPLIER",
    "MISSING_EVENT_T0",
    "PRICE_MULTIPLIER",
    "EventDecodeError",
    "MalformedRowError",
    "DecodedEvent",
    "RawEventRow",
    "WideInt",
    "EventCatalog",
    "build_event_catalog",
    "decode_event",
    "decode_rows",
]
