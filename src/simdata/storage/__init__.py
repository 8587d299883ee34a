"""Storage components for the one-shot JSON outputs.

This package provides:
- dumps_compact / write_json: compact JSON with wide ints as strings
"""

from simdata.storage.json_files import dumps_compact, to_jsonable, write_json

__all__ = [
    "dumps_compact",
    "to_jsonable",
    "write_json",
]
