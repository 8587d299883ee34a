"""Core data models shared by the formatters.

This module defines:
- `RawEventRow`: one positional log record read from the simulator dump.
- `WideInt`: marker type for integers that must leave the process as strings.
- `DecodedEvent`: a log successfully decoded against the interface catalog.
- `DecodeStats`: counters for one decoding run.
- `AprRecord` / `PriceRecord`: rescaled time-series points.

Design notes
------------
- Decoded integers from ABI types wider than 48 bits are `WideInt`; they
  keep full precision in memory and are written as decimal strings.
- Rescaled records carry plain ints: timestamps are epoch seconds and the
  value is already multiplied by its fixed power of ten.
"""

from __future__ import annotations

from collections import Counter
from dataclasses import dataclass, field
from typing import Any


# === Raw input ===


@dataclass(slots=True, frozen=True)
class RawEventRow:
    """Raw log as dumped by the simulator, minimally normalized."""

    event_number: int
    emitter: str  # 0x...
    data: str  # "0x..."
    topics: tuple[str, ...]  # lowercased 0x..., blank cells dropped

    @property
    def topic0(self) -> str | None:
        return self.topics[0] if self.topics else None


# === Decoded output ===


class WideInt(int):
    """Integer decoded from an ABI type wider than 48 bits."""

    __slots__ = ()

    def __repr__(self) -> str:
        return f"WideInt({int(self)})"


DecodedArgs = dict[str, Any] | list[Any]


@dataclass(slots=True, frozen=True)
class DecodedEvent:
    """Decoded log: event name plus its arguments (None when nothing decoded)."""

    event_name: str
    args: DecodedArgs | None
    row: RawEventRow | None = None

    def to_dict(self) -> dict[str, Any]:
        out: dict[str, Any] = {"eventName": self.event_name}
        if self.args is not None:
            out["args"] = self.args
        return out


@dataclass(slots=True)
class DecodeStats:
    """Counters for one run of the row decoder."""

    rows: int = 0
    decoded: int = 0
    failed: int = 0
    failed_by_topic0: Counter[str] = field(default_factory=Counter)

    def record_failure(self, topic0: str | None) -> None:
        self.failed += 1
        self.failed_by_topic0[topic0 or "<none>"] += 1


# === Rescaled time series ===


@dataclass(slots=True, frozen=True)
class AprRecord:
    timestamp: int
    apr: int

    def to_dict(self) -> dict[str, int]:
        return {"timestamp": self.timestamp, "apr": self.apr}


@dataclass(slots=True, frozen=True)
class PriceRecord:
    timestamp: int
    exchange_rate: int

    def to_dict(self) -> dict[str, int]:
        return {"timestamp": self.timestamp, "exchangeRate": self.exchange_rate}
