import json
from collections.abc import Iterable, Sequence
from pathlib import Path
from typing import Any, Literal

from eth_utils.abi import event_signature_to_log_topic
from pydantic import BaseModel, ConfigDict


class AbiInput(BaseModel):
    model_config = ConfigDict(frozen=True)

    indexed: bool = False
    internalType: str | None = None
    name: str = ""
    type: str
    components: tuple["AbiInput", ...] | None = None


AbiInput.model_rebuild()


class AbiEvent(BaseModel):
    model_config = ConfigDict(frozen=True)

    anonymous: bool = False
    inputs: tuple[AbiInput, ...] = ()
    name: str
    type: Literal["event"]


class ContractArtifact(BaseModel):
    """Build artifact of one contract; only its ABI is used."""

    name: str = ""
    abi: list[dict[str, Any]]


def get_canonical_type(event_input: AbiInput) -> str:
    """ABI type with tuple components expanded, e.g. `(uint256,address)[]`."""
    if event_input.type.startswith("tuple"):
        inner = ",".join(get_canonical_type(c) for c in event_input.components or ())
        return f"({inner}){event_input.type[len('tuple'):]}"
    return event_input.type


def get_event_signature(event: AbiEvent):
    return f"{event.name}({','.join(get_canonical_type(event_input) for event_input in event.inputs)})"


def get_event_topic0(event: AbiEvent):
    return "0x" + event_signature_to_log_topic(get_event_signature(event)).hex()


def get_indexed_inputs(event: AbiEvent) -> list[AbiInput]:
    return [event_input for event_input in event.inputs if event_input.indexed]


def get_data_inputs(event: AbiEvent) -> list[AbiInput]:
    return [event_input for event_input in event.inputs if not event_input.indexed]


def get_events_from_abi(abi: Sequence[dict[str, Any]]) -> list[AbiEvent]:
    """Validate the event entries of an ABI, keeping declaration order."""
    return [AbiEvent.model_validate(entry) for entry in abi if entry.get("type") == "event"]


def load_artifact(path: Path) -> ContractArtifact:
    artifact = ContractArtifact.model_validate(json.loads(path.read_text()))
    if not artifact.name:
        artifact.name = path.stem
    return artifact


def artifact_path(artifacts_dir: Path, name: str) -> Path:
    """Foundry layout: `<out>/<Name>.sol/<Name>.json`."""
    return artifacts_dir / f"{name}.sol" / f"{name}.json"


def load_artifacts(artifacts_dir: Path, names: Iterable[str]) -> list[ContractArtifact]:
    return [load_artifact(artifact_path(artifacts_dir, name)) for name in names]
