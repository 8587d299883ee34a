"""Event-log decoder over an `EventCatalog`.

This module translates `RawEventRow` records into `DecodedEvent` objects:
- topic0 selects the first catalog entry with that signature hash
- indexed inputs are read from the remaining topics (padding is not checked)
- non-indexed inputs are ABI-decoded from the data section (eth-abi)

Matching is non-strict by default: a data section that does not fit the
event's inputs still yields the indexed arguments. `decode_rows` catches
per-row `EventDecodeError`s, logs the offending topic0 and moves on.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable
from dataclasses import dataclass, field
from typing import Any

from eth_abi import decode as abi_decode
from eth_abi.exceptions import DecodingError
from eth_utils import decode_hex

from simdata.abi_events import AbiInput, get_canonical_type, get_data_inputs, get_indexed_inputs
from simdata.core.errors import (
    DataMismatchError,
    EmptyTopicsError,
    EventDecodeError,
    SignatureNotFoundError,
    TopicsMismatchError,
)
from simdata.core.models import DecodedEvent, DecodeStats, RawEventRow
from simdata.decoding.catalog import EventCatalog
from simdata.decoding.utils import decode_topic_word, is_dynamic_topic_type, normalize_value

logger = logging.getLogger(__name__)


# ---------- helper functions ----------


def _decode_topic(topic: str, abi_input: AbiInput, topic0: str) -> Any:
    """Decode one indexed topic; hashed (dynamic) types come back as the raw topic."""
    if is_dynamic_topic_type(abi_input.type):
        return topic
    try:
        value = decode_topic_word(decode_hex(topic), abi_input.type)
    except ValueError as e:
        raise TopicsMismatchError(f"topic for {abi_input.name or abi_input.type!r} does not decode: {e}", topic0) from e
    return normalize_value(value, abi_input)


def _put(args: dict[str, Any] | list[Any], name: str, value: Any) -> None:
    if isinstance(args, list):
        args.append(value)
    else:
        args[name] = value


# ---------- main decoder ----------


def decode_event(*, row: RawEventRow, catalog: EventCatalog, strict: bool = False) -> DecodedEvent:
    """Decode one raw log against the catalog or raise an `EventDecodeError`."""
    if not row.topics:
        raise EmptyTopicsError(f"event #{row.event_number} has no topics")

    topic0 = row.topics[0]
    entry = catalog.find(topic0)
    if entry is None:
        raise SignatureNotFoundError(f"no catalog event with signature {topic0}", topic0)

    event = entry.event
    unnamed = any(not event_input.name for event_input in event.inputs)
    args: dict[str, Any] | list[Any] = [] if unnamed else {}

    # Indexed inputs, one topic each after topic0
    arg_topics = row.topics[1:]
    for i, event_input in enumerate(get_indexed_inputs(event)):
        if i >= len(arg_topics):
            raise TopicsMismatchError(
                f"{event.name}: missing topic for indexed input {event_input.name or i!r}", topic0
            )
        _put(args, event_input.name, _decode_topic(arg_topics[i], event_input, topic0))

    # Non-indexed inputs from the data section
    data_inputs = get_data_inputs(event)
    if data_inputs:
        data = decode_hex(row.data)
        if not data:
            if strict:
                raise DataMismatchError(f"{event.name}: empty data for non-indexed inputs", topic0)
        else:
            try:
                values = abi_decode([get_canonical_type(i) for i in data_inputs], data)
            except (DecodingError, ValueError) as e:
                if strict:
                    raise DataMismatchError(f"{event.name}: data does not decode: {e}", topic0) from e
            else:
                for event_input, value in zip(data_inputs, values):
                    _put(args, event_input.name, normalize_value(value, event_input))

    return DecodedEvent(event_name=event.name, args=args or None, row=row)


@dataclass(kw_only=True)
class DecodeOutput:
    events: list[DecodedEvent] = field(default_factory=list)
    stats: DecodeStats = field(default_factory=DecodeStats)


def decode_rows(rows: Iterable[RawEventRow], catalog: EventCatalog, *, strict: bool = False) -> DecodeOutput:
    """Decode every row in order; failed rows are logged and dropped."""
    out = DecodeOutput()
    for row in rows:
        out.stats.rows += 1
        try:
            out.events.append(decode_event(row=row, catalog=catalog, strict=strict))
        except EventDecodeError as e:
            logger.warning("Error decoding event: %s (%s)", row.topic0, e)
            out.stats.record_failure(row.topic0)
        else:
            out.stats.decoded += 1
    return out
