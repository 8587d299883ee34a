"""Rescale helpers shared by the APR and price formatters.

Values are multiplied in exact decimal arithmetic and rounded half away
from zero, so `2.5 * 1e18` and `1800.123456789 * 1e9` come out exact.
"""

from __future__ import annotations

import decimal
from decimal import ROUND_HALF_UP, Decimal

import pandas as pd

_PRECISION = 80


def parse_decimal(value: str | float | int) -> Decimal:
    """Parse a finite decimal; raise ValueError otherwise."""
    try:
        d = Decimal(str(value).strip())
    except decimal.InvalidOperation:
        raise ValueError(f"{value!r} is not a number") from None
    if not d.is_finite():
        raise ValueError(f"{value!r} is not a finite number")
    return d


def scale_to_int(value: str | float | int | Decimal, multiplier: int) -> int:
    """Return `round(value * multiplier)`, halves rounded away from zero."""
    d = value if isinstance(value, Decimal) else parse_decimal(value)
    with decimal.localcontext() as ctx:
        ctx.prec = _PRECISION
        return int((d * multiplier).to_integral_value(rounding=ROUND_HALF_UP))


def date_to_epoch_seconds(text: str) -> int:
    """Parse a date string as UTC and return whole epoch seconds."""
    ts = pd.to_datetime(text.strip(), utc=True)
    if pd.isna(ts):
        raise ValueError(f"{text!r} is not a date")
    return int(ts.timestamp())


def ms_to_seconds(ms: float | int) -> int:
    return int(ms) // 1000
