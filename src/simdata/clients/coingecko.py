"""Minimal async client for the CoinGecko public API.

This module provides:
- `VsCurrency`: quote currencies the price job asks for
- `MarketChart`: validated `/market_chart/range` payload
- `CoinGecko`: an async client with sane timeouts

No retries: a failed request raises and aborts the caller.
"""

from __future__ import annotations

from enum import Enum

import httpx
from pydantic import BaseModel

from simdata.constants import COINGECKO_API_URL


class VsCurrency(str, Enum):
    USD = "usd"
    ETH = "eth"


class MarketChart(BaseModel):
    """`[timestamp_ms, value]` series as returned by CoinGecko."""

    prices: list[tuple[float, float]]
    market_caps: list[tuple[float, float]] = []
    total_volumes: list[tuple[float, float]] = []


def market_chart_range_path(contract: str) -> str:
    return f"/coins/ethereum/contract/{contract.lower()}/market_chart/range"


class CoinGecko:
    """Minimal async CoinGecko client.

    Parameters
    ----------
    base_url : str
        API root, e.g. ``https://api.coingecko.com/api/v3``.
    timeout_s : int
        Per-operation timeout in seconds.
    transport : httpx.AsyncBaseTransport | None
        Optional transport override (tests use ``httpx.MockTransport``).
    """

    def __init__(
        self,
        base_url: str = COINGECKO_API_URL,
        *,
        timeout_s: int = 30,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self.base_url = base_url.rstrip("/")
        self.client = httpx.AsyncClient(
            base_url=self.base_url,
            timeout=httpx.Timeout(timeout_s),
            headers={"accept": "application/json"},
            transport=transport,
        )

    async def market_chart_range(
        self,
        *,
        contract: str,
        vs_currency: VsCurrency,
        from_ts: int,
        to_ts: int,
    ) -> MarketChart:
        """Fetch the historic chart of an Ethereum token contract."""
        r = await self.client.get(
            market_chart_range_path(contract),
            params={"vs_currency": vs_currency.value, "from": from_ts, "to": to_ts},
        )
        r.raise_for_status()
        return MarketChart.model_validate(r.json())

    async def aclose(self) -> None:
        """Close the underlying HTTP client."""
        await self.client.aclose()
