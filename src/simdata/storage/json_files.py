"""Compact JSON output for the formatters.

`WideInt` values are written as decimal strings; every other int stays a
JSON number. Objects exposing `to_dict()` (records, decoded events) are
expanded first.
"""

from __future__ import annotations

import json
from collections.abc import Mapping
from pathlib import Path
from typing import Any

from simdata.core.models import WideInt


def to_jsonable(value: Any) -> Any:
    """Recursively convert records and wide ints into plain JSON values."""
    if isinstance(value, WideInt):
        return str(int(value))
    if hasattr(value, "to_dict"):
        return to_jsonable(value.to_dict())
    if isinstance(value, Mapping):
        return {str(k): to_jsonable(v) for k, v in value.items()}
    if isinstance(value, (list, tuple)):
        return [to_jsonable(v) for v in value]
    return value


def dumps_compact(value: Any) -> str:
    return json.dumps(to_jsonable(value), separators=(",", ":"), ensure_ascii=False)


def write_json(path: Path, value: Any) -> Path:
    """Write `value` as one compact JSON document, creating parent dirs."""
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(dumps_compact(value), encoding="utf-8")
    return path
