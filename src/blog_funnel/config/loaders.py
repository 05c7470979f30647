from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Callable

import yaml

_READERS: dict[str, Callable[[str], Any]] = {
    ".yaml": yaml.safe_load,
    ".yml": yaml.safe_load,
    ".json": json.loads,
}


def load_config(path: str | Path) -> dict[str, Any]:
    """Read a yaml or json seed file whose root is a mapping."""
    path = Path(path)
    reader = _READERS.get(path.suffix.lower())
    if reader is None:
        raise ValueError(f"Unsupported config format: {path.suffix}")
    data = reader(path.read_text(encoding="utf-8")) or {}
    if not isinstance(data, dict):
        raise ValueError(f"{path.name}: expected a mapping at the top level")
    return data


def load_list(path: str | Path, key: str) -> list[Any]:
    items = load_config(path).get(key) or []
    if not isinstance(items, list):
        raise ValueError(f"{key} must be a list")
    return items
