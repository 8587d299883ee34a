"""High-level jobs: each reads its inputs, transforms them and writes one JSON file.

- `format_apr(config)`      → `{usd: [...], eth: [...]}` of `{timestamp, apr}`
- `fetch_prices(config)`    → `{usd: [...], eth: [...]}` of `{timestamp, exchangeRate}`
- `format_events(config)`   → `[{eventName, args}, ...]`
"""

from __future__ import annotations

import logging
import time
from dataclasses import dataclass
from pathlib import Path
from typing import Generic, TypeVar

from simdata.abi_events import load_artifacts
from simdata.clients.coingecko import CoinGecko, VsCurrency
from simdata.core.config import AprFormatConfig, EventFormatConfig, PriceFetchConfig
from simdata.core.interfaces import IMarketChartProvider
from simdata.core.models import AprRecord, PriceRecord
from simdata.decoding.catalog import EventCatalog, build_event_catalog
from simdata.decoding.decoder import DecodeOutput, decode_rows
from simdata.decoding.rows import read_raw_event_rows
from simdata.storage.json_files import write_json
from simdata.transforms.apr import format_apr_csv
from simdata.transforms.prices import format_market_chart

logger = logging.getLogger(__name__)

R = TypeVar("R", AprRecord, PriceRecord)


@dataclass(kw_only=True)
class SeriesOutput(Generic[R]):
    out_path: Path
    usd: list[R]
    eth: list[R]

    def to_dict(self) -> dict[str, list[R]]:
        return {"usd": self.usd, "eth": self.eth}


@dataclass(kw_only=True)
class EventsOutput:
    out_path: Path
    catalog: EventCatalog
    decoded: DecodeOutput


# ---------------------------------------------------------------------------
# APR
# ---------------------------------------------------------------------------


def format_apr(config: AprFormatConfig) -> SeriesOutput[AprRecord]:
    """Rescale the USDC and WETH APR exports and write them as one JSON object."""
    def _read(path: Path) -> list[AprRecord]:
        return format_apr_csv(
            path,
            multiplier=config.multiplier,
            value_column=config.value_column,
            date_column=config.date_column,
        )

    out = SeriesOutput(out_path=config.out_path, usd=_read(config.usd_csv), eth=_read(config.eth_csv))
    write_json(config.out_path, out)
    logger.info("wrote %d usd / %d eth APR points → %s", len(out.usd), len(out.eth), config.out_path)
    return out


# ---------------------------------------------------------------------------
# Prices
# ---------------------------------------------------------------------------


async def fetch_prices(
    config: PriceFetchConfig,
    provider: IMarketChartProvider | None = None,
) -> SeriesOutput[PriceRecord]:
    """Fetch USD then ETH charts (sequentially), rescale and write them.

    When no provider is given a `CoinGecko` client is created and closed here.
    """
    owned = provider is None
    if provider is None:
        provider = CoinGecko(config.api_url, timeout_s=config.timeout_s)
    to_ts = config.to_ts if config.to_ts is not None else int(time.time())

    try:
        series: dict[VsCurrency, list[PriceRecord]] = {}
        for vs in (VsCurrency.USD, VsCurrency.ETH):
            chart = await provider.market_chart_range(
                contract=config.contract,
                vs_currency=vs,
                from_ts=config.from_ts,
                to_ts=to_ts,
            )
            series[vs] = format_market_chart(chart, multiplier=config.multiplier)
            logger.info("fetched %d %s price points", len(series[vs]), vs.value)
    finally:
        if owned:
            await provider.aclose()

    out = SeriesOutput(out_path=config.out_path, usd=series[VsCurrency.USD], eth=series[VsCurrency.ETH])
    write_json(config.out_path, out)
    logger.info("wrote prices → %s", config.out_path)
    return out


# ---------------------------------------------------------------------------
# Simulator events
# ---------------------------------------------------------------------------


def format_events(config: EventFormatConfig, catalog: EventCatalog | None = None) -> EventsOutput:
    """Decode the simulator's raw event dump against the artifact catalog."""
    if catalog is None:
        catalog = build_event_catalog(load_artifacts(config.artifacts_dir, config.artifact_names))
    logger.info("catalog: %d events from %d artifacts", len(catalog), len(config.artifact_names))

    rows = read_raw_event_rows(config.events_csv)
    decoded = decode_rows(rows, catalog, strict=config.strict)
    write_json(config.out_path, decoded.events)
    logger.info(
        "decoded %d/%d events (%d failed) → %s",
        decoded.stats.decoded,
        decoded.stats.rows,
        decoded.stats.failed,
        config.out_path,
    )
    return EventsOutput(out_path=config.out_path, catalog=catalog, decoded=decoded)
