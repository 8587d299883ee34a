"""Event-log decoding against a multi-source interface catalog.

This package provides:
- Interface catalog (CatalogEntry, EventCatalog, build_event_catalog)
- Raw dump reader that yields typed RawEventRow records
- Decoder that turns rows into DecodedEvent objects, dropping failures
"""

from simdata.decoding.catalog import CatalogEntry, EventCatalog, build_event_catalog
from simdata.decoding.decoder import DecodeOutput, decode_event, decode_rows
from simdata.decoding.rows import parse_raw_event_row, read_raw_event_rows

__all__ = [
    "CatalogEntry",
    "EventCatalog",
    "build_event_catalog",
    "DecodeOutput",
    "decode_event",
    "decode_rows",
    "parse_raw_event_row",
    "read_raw_event_rows",
]
