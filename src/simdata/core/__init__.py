"""Core data models, configurations, and errors.

This package provides:
- Data models (RawEventRow, DecodedEvent, WideInt, AprRecord, PriceRecord)
- Configuration classes (AprFormatConfig, PriceFetchConfig, EventFormatConfig)
- Domain errors (MalformedRowError, EventDecodeError and subclasses)
"""

from simdata.core.config import AprFormatConfig, EventFormatConfig, PriceFetchConfig
from simdata.core.errors import EventDecodeError, MalformedRowError
from simdata.core.models import AprRecord, DecodedEvent, DecodeStats, PriceRecord, RawEventRow, WideInt

__all__ = [
    "AprFormatConfig",
    "EventFormatConfig",
    "PriceFetchConfig",
    "EventDecodeError",
    "MalformedRowError",
    "AprRecord",
    "DecodedEvent",
    "DecodeStats",
    "PriceRecord",
    "RawEventRow",
    "WideInt",
]
