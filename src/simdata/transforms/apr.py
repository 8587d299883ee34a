"""Aave APR export (Dune CSV) → `AprRecord` series."""

from __future__ import annotations

from collections.abc import Sequence
from pathlib import Path

import pandas as pd

from simdata.core.errors import MalformedRowError
from simdata.core.models import AprRecord
from simdata.transforms.rescale import date_to_epoch_seconds, parse_decimal, scale_to_int


def parse_apr_row(
    fields: Sequence[str],
    *,
    multiplier: int,
    value_column: int = 1,
    date_column: int = 2,
    source: str = "<memory>",
    row: int = 0,
) -> AprRecord:
    """Turn one CSV row into an `AprRecord`; raise `MalformedRowError` on bad fields."""
    if len(fields) <= max(value_column, date_column):
        raise MalformedRowError(source, row, f"expected at least {max(value_column, date_column) + 1} columns")
    try:
        apr = parse_decimal(fields[value_column])
    except ValueError as e:
        raise MalformedRowError(source, row, f"apr: {e}") from None
    try:
        timestamp = date_to_epoch_seconds(fields[date_column])
    except (ValueError, OverflowError) as e:
        raise MalformedRowError(source, row, f"date: {e}") from None
    return AprRecord(timestamp=timestamp, apr=scale_to_int(apr, multiplier))


def format_apr_csv(
    path: Path,
    *,
    multiplier: int,
    value_column: int = 1,
    date_column: int = 2,
) -> list[AprRecord]:
    """Read one APR CSV (header discarded, blank lines skipped), keeping row order."""
    df = pd.read_csv(
        path,
        dtype=str,
        keep_default_na=False,
        skip_blank_lines=True,
        index_col=False,
    ).fillna("")

    out: list[AprRecord] = []
    for i, fields in enumerate(df.itertuples(index=False, name=None), start=1):
        if not any(f.strip() for f in fields):
            continue
        out.append(
            parse_apr_row(
                fields,
                multiplier=multiplier,
                value_column=value_column,
                date_column=date_column,
                source=str(path),
                row=i,
            )
        )
    return out
