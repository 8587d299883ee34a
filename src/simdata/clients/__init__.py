from simdata.clients.coingecko import CoinGecko, MarketChart, VsCurrency

__all__ = ["CoinGecko", "MarketChart", "VsCurrency"]
