from __future__ import annotations

from typing import Protocol, runtime_checkable

from simdata.clients.coingecko import MarketChart, VsCurrency


# ---------------------------------------------------------------------------
# IMarketChartProvider
# ---------------------------------------------------------------------------

@runtime_checkable
class IMarketChartProvider(Protocol):
    """
    Abstract provider of historic market charts for a token contract.

    Domain expectations:
    - It returns a validated `MarketChart` for one quote currency.
    - It hides the underlying HTTP API.
    """

    async def market_chart_range(
        self,
        *,
        contract: str,
        vs_currency: VsCurrency,
        from_ts: int,
        to_ts: int,
    ) -> MarketChart:
        """
        Return the chart for `contract` quoted in `vs_currency` over [from_ts, to_ts].

        Implementations:
        - CoinGecko client (current `CoinGecko` class)
        - In-memory provider for testing
        """
        ...

    async def aclose(self) -> None:
        """Release any underlying connections."""
        ...
