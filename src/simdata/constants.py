from __future__ import annotations

# Simulator events whose signature is not declared by any loaded artifact
MISSING_EVENT_T0 = "0xc31bc4fb7f1c35cfd7aa34780f09c3f0a97653a70920593b2284de94a4772957"

# Rescale multipliers. Prices use 1e9: 1e18 overflows what the simulator can parse.
APR_MULTIPLIER = 10**18
PRICE_MULTIPLIER = 10**9

# Integers wider than this are serialized as decimal strings
MAX_NATIVE_INT_BITS = 48

COINGECKO_API_URL = "https://api.coingecko.com/api/v3"
POOL_ADDRESS = "0x0cec1a9154ff802e7934fc916ed7ca50bde6844e"
POOL_DEPLOY_TIME = 1613465549

DEFAULT_ARTIFACTS: tuple[str, ...] = (
    "ERC20",
    "Claimer",
    "ContinuousGDA",
    "DrawAccumulatorLib",
    "DrawAuction",
    "ERC4626",
    "PrizePool",
    "TieredLiquidityDistributor",
    "TwabController",
    "Vault",
    "VaultFactory",
)
