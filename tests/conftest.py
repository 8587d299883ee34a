import json
import logging
from pathlib import Path
from typing import Any
from unittest.mock import AsyncMock

import pytest
from eth_abi import encode
from eth_utils import keccak

from simdata.abi_events import ContractArtifact
from simdata.core.models import RawEventRow
from simdata.decoding.catalog import EventCatalog, build_event_catalog

ALICE = "0x1234567890123456789012345678901234567890"
BOB = "0xd8da6bf26964af9d7eed9e03e53415d37aa96045"
EMITTER = "0x5fbdb2315678afecb367f032d93f642f64180aa3"


def topic0_of(signature: str) -> str:
    return "0x" + keccak(text=signature).hex()


def address_topic(address: str) -> str:
    return "0x" + "0" * 24 + address[2:].lower()


def uint_topic(value: int) -> str:
    return "0x" + value.to_bytes(32, "big").hex()


def encode_data(types: list[str], values: list[Any]) -> str:
    return "0x" + encode(types, values).hex()


def _input(name: str, typ: str, indexed: bool = False, **extra: Any) -> dict[str, Any]:
    return {"name": name, "type": typ, "internalType": typ, "indexed": indexed, **extra}


ERC20_ABI = [
    {"type": "function", "name": "transfer", "inputs": [], "outputs": [], "stateMutability": "nonpayable"},
    {
        "type": "event",
        "name": "Transfer",
        "anonymous": False,
        "inputs": [_input("from", "address", True), _input("to", "address", True), _input("amount", "uint256")],
    },
    {
        "type": "event",
        "name": "Approval",
        "anonymous": False,
        "inputs": [_input("owner", "address", True), _input("spender", "address", True), _input("amount", "uint256")],
    },
]

PRIZE_POOL_ABI = [
    {"type": "error", "name": "DrawNotFinished", "inputs": []},
    {
        "type": "event",
        "name": "DrawAwarded",
        "anonymous": False,
        "inputs": [
            _input("drawId", "uint24", True),
            _input("winningRandomNumber", "uint256"),
            _input("lastNumTiers", "uint8"),
            _input("numTiers", "uint8"),
            _input("reserve", "uint104"),
            _input("prizeTokensPerShare", "uint128"),
            _input("drawOpenedAt", "uint48"),
        ],
    },
    {
        "type": "event",
        "name": "ClaimedPrize",
        "anonymous": False,
        "inputs": [
            _input("vault", "address", True),
            _input("tiers", "uint8[]"),
            _input(
                "claim",
                "tuple",
                components=[_input("winner", "address"), _input("prizeIndex", "uint32")],
            ),
            _input("tag", "bytes32"),
        ],
    },
]

# Same Transfer signature as ERC20 but a different argument name
VAULT_ABI = [
    {
        "type": "event",
        "name": "Transfer",
        "anonymous": False,
        "inputs": [_input("from", "address", True), _input("to", "address", True), _input("value", "uint256")],
    },
    {
        "type": "event",
        "name": "Deposit",
        "anonymous": False,
        "inputs": [_input("", "address", True), _input("", "uint256")],
    },
]

TRANSFER_T0 = topic0_of("Transfer(address,address,uint256)")
DRAW_AWARDED_T0 = topic0_of("DrawAwarded(uint24,uint256,uint8,uint8,uint104,uint128,uint48)")
CLAIMED_PRIZE_T0 = topic0_of("ClaimedPrize(address,uint8[],(address,uint32),bytes32)")
DEPOSIT_T0 = topic0_of("Deposit(address,uint256)")


# The CLI tests configure the package logger; undo that between tests
@pytest.fixture(autouse=True)
def _reset_simdata_logger():
    logger = logging.getLogger("simdata")
    level, handlers = logger.level, list(logger.handlers)
    yield
    logger.setLevel(level)
    logger.handlers[:] = handlers


@pytest.fixture
def artifacts() -> list[ContractArtifact]:
    return [
        ContractArtifact(name="ERC20", abi=ERC20_ABI),
        ContractArtifact(name="PrizePool", abi=PRIZE_POOL_ABI),
        ContractArtifact(name="Vault", abi=VAULT_ABI),
    ]


@pytest.fixture
def catalog(artifacts: list[ContractArtifact]) -> EventCatalog:
    return build_event_catalog(artifacts)


@pytest.fixture
def artifacts_dir(tmp_path: Path) -> Path:
    """Foundry-style out/ directory holding the three test artifacts."""
    out = tmp_path / "out"
    for name, abi in (("ERC20", ERC20_ABI), ("PrizePool", PRIZE_POOL_ABI), ("Vault", VAULT_ABI)):
        d = out / f"{name}.sol"
        d.mkdir(parents=True)
        (d / f"{name}.json").write_text(json.dumps({"abi": abi, "bytecode": {"object": "0x"}}))
    return out


@pytest.fixture
def transfer_row() -> RawEventRow:
    return RawEventRow(
        event_number=1,
        emitter=EMITTER,
        data=encode_data(["uint256"], [2**200]),
        topics=(TRANSFER_T0, address_topic(ALICE), address_topic(BOB)),
    )


@pytest.fixture
def mock_market_charts():
    provider = AsyncMock()
    provider.market_chart_range = AsyncMock()
    provider.aclose = AsyncMock()
    return provider
