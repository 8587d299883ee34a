from simdata.clients.coingecko import MarketChart
from simdata.constants import PRICE_MULTIPLIER
from simdata.core.models import PriceRecord
from simdata.transforms.prices import format_market_chart, format_price_point


def test_format_price_point() -> None:
    record = format_price_point(1609459200000, 1800.123456789, multiplier=PRICE_MULTIPLIER)
    assert record == PriceRecord(timestamp=1609459200, exchange_rate=1_800_123_456_789)
    assert record.to_dict() == {"timestamp": 1609459200, "exchangeRate": 1800123456789}


def test_format_market_chart_keeps_order_and_ignores_caps() -> None:
    chart = MarketChart.model_validate(
        {
            "prices": [[1609545600000, 0.5], [1609459200000, 0.0000000015]],
            "market_caps": [[1609545600000, 1e9]],
            "total_volumes": [],
        }
    )

    assert format_market_chart(chart, multiplier=PRICE_MULTIPLIER) == [
        PriceRecord(timestamp=1609545600, exchange_rate=500_000_000),
        PriceRecord(timestamp=1609459200, exchange_rate=2),
    ]


def test_empty_chart() -> None:
    assert format_market_chart(MarketChart(prices=[]), multiplier=PRICE_MULTIPLIER) == []
