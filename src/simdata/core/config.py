from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path

from simdata.constants import (
    APR_MULTIPLIER,
    COINGECKO_API_URL,
    DEFAULT_ARTIFACTS,
    POOL_ADDRESS,
    POOL_DEPLOY_TIME,
    PRICE_MULTIPLIER,
)


@dataclass(frozen=True)
class AprFormatConfig:
    """Configuration for the Aave APR CSV formatter."""

    usd_csv: Path = Path("./USDC.csv")
    eth_csv: Path = Path("./WETH.csv")
    out_path: Path = Path("./data/historicAaveApr.json")
    multiplier: int = APR_MULTIPLIER
    # 0-based CSV columns holding the APR value and its date
    value_column: int = 1
    date_column: int = 2


@dataclass(frozen=True)
class PriceFetchConfig:
    """Configuration for the CoinGecko historic price fetcher."""

    api_url: str = COINGECKO_API_URL
    contract: str = POOL_ADDRESS
    from_ts: int = POOL_DEPLOY_TIME
    to_ts: int | None = None  # None → now
    out_path: Path = Path("../config/historicPrices.json")
    multiplier: int = PRICE_MULTIPLIER
    timeout_s: int = 30


@dataclass(frozen=True)
class EventFormatConfig:
    """Configuration for the simulator event formatter."""

    events_csv: Path = Path("../data/rawEventsOut.csv")
    artifacts_dir: Path = Path("../out")
    artifact_names: tuple[str, ...] = field(default=DEFAULT_ARTIFACTS)
    out_path: Path = Path("../data/simulatorEvents.json")
    strict: bool = False
