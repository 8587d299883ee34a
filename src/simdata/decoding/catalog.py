"""Interface catalog: the flat list of events the decoder matches logs against.

This module exposes:
- `CatalogEntry` → one event from one source, with its precomputed topic0
- `EventCatalog` → ordered, immutable union of entries (first match wins)
- `build_event_catalog(sources)` → concatenate the events of many ABIs

The catalog is built once and passed explicitly to the decoder.
"""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass, field

from simdata.abi_events import AbiEvent, ContractArtifact, get_event_topic0, get_events_from_abi


@dataclass(frozen=True)
class CatalogEntry:
    """One event signature drawn from a named interface description."""

    source: str
    event: AbiEvent
    topic0: str  # lowercased 0x-hex


@dataclass(frozen=True)
class EventCatalog:
    """Ordered event catalog; duplicates are kept and the first one wins on lookup."""

    entries: tuple[CatalogEntry, ...] = ()
    _by_topic0: dict[str, CatalogEntry] = field(default_factory=dict, init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        for entry in self.entries:
            self._by_topic0.setdefault(entry.topic0, entry)

    def __len__(self) -> int:
        return len(self.entries)

    def __iter__(self) -> Iterator[CatalogEntry]:
        return iter(self.entries)

    def find(self, topic0: str) -> CatalogEntry | None:
        """Return the first entry whose signature hash equals `topic0`."""
        return self._by_topic0.get(topic0.lower())

    def topic0s(self) -> list[str]:
        """Distinct signature hashes in catalog order."""
        return list(self._by_topic0)


def make_catalog_entry(source: str, event: AbiEvent) -> CatalogEntry:
    return CatalogEntry(source=source, event=event, topic0=get_event_topic0(event).lower())


def build_event_catalog(sources: Iterable[ContractArtifact]) -> EventCatalog:
    """Concatenate the event entries of every source, preserving source order."""
    entries: list[CatalogEntry] = []
    for source in sources:
        for event in get_events_from_abi(source.abi):
            entries.append(make_catalog_entry(source.name, event))
    return EventCatalog(tuple(entries))
