import httpx
import pytest

from simdata.clients.coingecko import CoinGecko, VsCurrency
from simdata.constants import POOL_ADDRESS, POOL_DEPLOY_TIME

CHART = {"prices": [[1609459200000, 1800.123456789]], "market_caps": [], "total_volumes": []}


@pytest.mark.asyncio
async def test_market_chart_range_request() -> None:
    seen: list[httpx.Request] = []

    def handler(request: httpx.Request) -> httpx.Response:
        seen.append(request)
        return httpx.Response(200, json=CHART)

    client = CoinGecko(transport=httpx.MockTransport(handler))
    try:
        chart = await client.market_chart_range(
            contract=POOL_ADDRESS.upper().replace("0X", "0x"),
            vs_currency=VsCurrency.ETH,
            from_ts=POOL_DEPLOY_TIME,
            to_ts=1700000000,
        )
    finally:
        await client.aclose()

    (request,) = seen
    assert request.method == "GET"
    assert request.url.host == "api.coingecko.com"
    assert request.url.path == f"/api/v3/coins/ethereum/contract/{POOL_ADDRESS}/market_chart/range"
    assert request.url.params["vs_currency"] == "eth"
    assert request.url.params["from"] == str(POOL_DEPLOY_TIME)
    assert request.url.params["to"] == "1700000000"
    assert chart.prices == [(1609459200000.0, 1800.123456789)]


@pytest.mark.asyncio
async def test_http_errors_propagate() -> None:
    client = CoinGecko(transport=httpx.MockTransport(lambda request: httpx.Response(429)))
    try:
        with pytest.raises(httpx.HTTPStatusError):
            await client.market_chart_range(contract=POOL_ADDRESS, vs_currency=VsCurrency.USD, from_ts=0, to_ts=1)
    finally:
        await client.aclose()
