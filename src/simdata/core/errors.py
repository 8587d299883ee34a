"""Exception types raised by the formatters and the event decoder."""

from __future__ import annotations


class MalformedRowError(ValueError):
    """An input row could not be parsed into a typed record.

    `row` counts non-blank data rows from 1 (header and blank lines excluded);
    it is `None` when the reader cannot tell which row failed.
    """

    def __init__(self, source: str, row: int | None, reason: str) -> None:
        where = f"non-blank data row {row}" if row is not None else "data"
        super().__init__(f"{source}: {where}: {reason}")
        self.source = source
        self.row = row
        self.reason = reason


class EventDecodeError(Exception):
    """Base class for per-log decoding failures (caught row by row)."""

    def __init__(self, message: str, topic0: str | None = None) -> None:
        super().__init__(message)
        self.topic0 = topic0


class EmptyTopicsError(EventDecodeError):
    """The log carries no topics, so no signature to match."""


class SignatureNotFoundError(EventDecodeError):
    """No catalog entry matches the log's signature hash."""


class TopicsMismatchError(EventDecodeError):
    """An indexed input has no matching topic, or the topic does not decode."""


class DataMismatchError(EventDecodeError):
    """The data section does not decode against the event's non-indexed inputs."""
