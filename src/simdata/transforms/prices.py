"""CoinGecko market chart → `PriceRecord` series."""

from __future__ import annotations

from simdata.clients.coingecko import MarketChart
from simdata.core.models import PriceRecord
from simdata.transforms.rescale import ms_to_seconds, scale_to_int


def format_price_point(timestamp_ms: float, price: float, *, multiplier: int) -> PriceRecord:
    return PriceRecord(timestamp=ms_to_seconds(timestamp_ms), exchange_rate=scale_to_int(price, multiplier))


def format_market_chart(chart: MarketChart, *, multiplier: int) -> list[PriceRecord]:
    """Rescale every price point, keeping API order. Caps and volumes are ignored."""
    return [format_price_point(ts, price, multiplier=multiplier) for ts, price in chart.prices]
