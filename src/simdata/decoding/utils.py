"""Decoding utilities: ABI type predicates and value normalization."""

from __future__ import annotations

import re
from typing import Any

from eth_utils import to_checksum_address

from simdata.abi_events import AbiInput
from simdata.constants import MAX_NATIVE_INT_BITS
from simdata.core.models import WideInt

_ARRAY_SUFFIX = re.compile(r"^(.*)\[(\d*)\]$")


def is_dynamic_topic_type(abi_type: str) -> bool:
    """Indexed values of these types are stored as a hash, not the value itself."""
    return abi_type in ("string", "bytes", "tuple") or _ARRAY_SUFFIX.match(abi_type) is not None


def int_bits(abi_type: str) -> int:
    """Bit width of an `intN` / `uintN` type (bare `int`/`uint` is 256)."""
    digits = abi_type.removeprefix("u").removeprefix("int")
    return int(digits) if digits else 256


def decode_topic_word(word: bytes, abi_type: str) -> Any:
    """Read a static indexed value from its 32-byte topic.

    Padding bytes are not checked: an address is the low 20 bytes, an integer
    is the whole word and `bytesN` is the first N bytes. A bool must be 0 or 1.
    """
    if len(word) != 32:
        raise ValueError(f"topic is {len(word)} bytes, expected 32")
    if abi_type == "address":
        return "0x" + word[-20:].hex()
    if abi_type == "bool":
        flag = int.from_bytes(word, "big")
        if flag not in (0, 1):
            raise ValueError(f"{flag} is not a boolean")
        return bool(flag)
    if abi_type.startswith("uint"):
        return int.from_bytes(word, "big")
    if abi_type.startswith("int"):
        return int.from_bytes(word, "big", signed=True)
    if abi_type.startswith("bytes"):
        return word[: int(abi_type[len("bytes"):])]
    raise ValueError(f"unsupported indexed type {abi_type!r}")


def normalize_value(value: Any, abi_input: AbiInput) -> Any:
    """Convert one eth-abi decoded value into its output shape.

    - address → checksum string
    - bytes / bytesN → 0x-hex string
    - (u)intN → int, or `WideInt` when N > 48
    - arrays → lists, tuples → dict by component name (list if any is unnamed)
    """
    t = abi_input.type
    m = _ARRAY_SUFFIX.match(t)
    if m:
        item = abi_input.model_copy(update={"type": m.group(1)})
        return [normalize_value(v, item) for v in value]
    if t == "tuple":
        components = abi_input.components or ()
        if any(not c.name for c in components):
            return [normalize_value(v, c) for v, c in zip(value, components)]
        return {c.name: normalize_value(v, c) for v, c in zip(value, components)}
    if t == "address":
        return to_checksum_address(value)
    if t.startswith("bytes"):
        return "0x" + bytes(value).hex()
    if t.startswith("int") or t.startswith("uint"):
        return WideInt(value) if int_bits(t) > MAX_NATIVE_INT_BITS else int(value)
    return value
