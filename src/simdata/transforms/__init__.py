"""CSV / API → rescaled JSON series.

This package provides:
- rescale: exact decimal scaling and timestamp helpers
- apr: Aave APR CSV formatter
- prices: CoinGecko market chart formatter
"""

from simdata.transforms.apr import format_apr_csv, parse_apr_row
from simdata.transforms.prices import format_market_chart, format_price_point
from simdata.transforms.rescale import date_to_epoch_seconds, ms_to_seconds, parse_decimal, scale_to_int

__all__ = [
    "format_apr_csv",
    "parse_apr_row",
    "format_market_chart",
    "format_price_point",
    "date_to_epoch_seconds",
    "ms_to_seconds",
    "parse_decimal",
    "scale_to_int",
]
