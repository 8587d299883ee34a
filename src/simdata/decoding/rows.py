"""Read the simulator's raw event dump into typed `RawEventRow` records.

Layout: a header line, then one row per log:
`eventNumber,emitter,data,topic0,topic1,topic2`. Topic cells may be blank
when the log has fewer topics.
"""

from __future__ import annotations

from collections.abc import Sequence
from pathlib import Path

import pandas as pd
from eth_utils import is_hex, is_hex_address

from simdata.core.errors import MalformedRowError
from simdata.core.models import RawEventRow

RAW_EVENT_COLUMNS = ["event_number", "emitter", "data", "topic0", "topic1", "topic2"]


def _is_topic(value: str) -> bool:
    return len(value) == 66 and value.startswith("0x") and is_hex(value)


def parse_raw_event_row(fields: Sequence[str], *, source: str, row: int) -> RawEventRow:
    """Validate one positional row; raise `MalformedRowError` on bad fields."""
    event_number_s, emitter, data, *topic_cells = (f.strip() for f in fields)

    try:
        event_number = int(event_number_s)
    except ValueError:
        raise MalformedRowError(source, row, f"event number {event_number_s!r} is not an integer") from None

    if not is_hex_address(emitter):
        raise MalformedRowError(source, row, f"emitter {emitter!r} is not an address")

    if not (data.startswith("0x") and is_hex(data) and len(data) % 2 == 0):
        raise MalformedRowError(source, row, f"data {data[:18]!r} is not 0x-prefixed hex")

    # Trailing blank cells are absent topics; a gap in the middle is not allowed
    while topic_cells and not topic_cells[-1]:
        topic_cells.pop()
    for t in topic_cells:
        if not _is_topic(t):
            raise MalformedRowError(source, row, f"topic {t!r} is not a 32-byte hex value")

    return RawEventRow(
        event_number=event_number,
        emitter=emitter,
        data=data.lower(),
        topics=tuple(t.lower() for t in topic_cells),
    )


def read_raw_event_rows(path: Path) -> list[RawEventRow]:
    """Read the whole dump; the header is discarded and blank lines are skipped.

    A row with more fields than `RAW_EVENT_COLUMNS` raises `MalformedRowError`.
    """
    source = str(path)
    too_long = f"expected at most {len(RAW_EVENT_COLUMNS)} fields"

    def _reject(fields: list[str]) -> None:
        raise MalformedRowError(source, None, f"event {fields[0]!r} has {len(fields)} fields, {too_long}")

    df = pd.read_csv(
        path,
        header=None,
        skiprows=1,
        names=RAW_EVENT_COLUMNS,
        dtype=str,
        keep_default_na=False,
        skip_blank_lines=True,
        engine="python",
        on_bad_lines=_reject,
    ).fillna("")
    # pandas turns the extra leading fields of an overlong first row into an index
    if not df.empty and not isinstance(df.index, pd.RangeIndex):
        raise MalformedRowError(source, 1, too_long)

    rows: list[RawEventRow] = []
    for i, fields in enumerate(df.itertuples(index=False, name=None), start=1):
        if not any(f.strip() for f in fields):
            continue
        rows.append(parse_raw_event_row(fields, source=source, row=i))
    return rows
