from __future__ import annotations

import json
from pathlib import Path
from typing import Any

from .fs import write_json_atomic


def read_json_list_of_dicts(path: str | Path) -> list[dict[str, Any]]:
    """Read a JSON array of objects; a missing file reads as ``[]``.

    Raises ``ValueError`` (``json.JSONDecodeError`` included) when the
    document is not an array of objects and ``OSError`` when it cannot be read.
    """
    try:
        with open(path, encoding="utf-8") as f:
            loaded = json.load(f)
    except FileNotFoundError:
        return []
    if not isinstance(loaded, list):
        raise ValueError(f"{path}: expected a JSON array, got {type(loaded).__name__}")
    if not all(isinstance(x, dict) for x in loaded):
        raise ValueError(f"{path}: every element must be a JSON object")
    return loaded


def write_json_list(path: str | Path, data: list[dict[str, Any]]) -> None:
    write_json_atomic(path, data)
