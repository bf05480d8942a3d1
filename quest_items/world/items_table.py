"""Read-only lookup table mapping quest item names to (p1, p2) parameters."""
from __future__ import annotations

from pathlib import Path
from typing import Any, Dict, Mapping
import logging

import yaml

logger = logging.getLogger(__name__)

PARAM_COLUMNS = ("p1", "p2")


class ItemsTable:
    """Name -> {p1: item group, p2: group index}."""

    def __init__(self, rows: Mapping[str, Mapping[str, Any]]) -> None:
        self._rows: Dict[str, Dict[str, int]] = {}
        for name, row in rows.items():
            if not isinstance(row, Mapping):
                raise ValueError(f"Items table row must be a mapping: {name}")
            parsed: Dict[str, int] = {}
            for column in PARAM_COLUMNS:
                if column not in row:
                    raise ValueError(f"Items table row {name} is missing column {column}")
                try:
                    parsed[column] = int(row[column])
                except (TypeError, ValueError) as exc:
                    raise ValueError(f"Items table value {name}.{column} is not an integer") from exc
            self._rows[str(name)] = parsed

    def has_entry(self, name: str) -> bool:
        return name in self._rows

    def get_param(self, column: str, name: str) -> int:
        if column not in PARAM_COLUMNS:
            raise KeyError(f"Unknown items table column: {column}")
        if name not in self._rows:
            raise KeyError(f"Unknown items table entry: {name}")
        return self._rows[name][column]

    def __len__(self) -> int:
        return len(self._rows)


def load_items_table(path: Path | str) -> ItemsTable:
    """Load an items table from YAML with a top-level `items` mapping."""
    path = Path(path)
    data = yaml.safe_load(path.read_text(encoding="utf-8"))
    if not isinstance(data, dict) or not isinstance(data.get("items"), dict):
        raise ValueError(f"Items table {path} must contain an 'items' mapping")
    table = ItemsTable(data["items"])
    logger.debug("Loaded %d item names from %s", len(table), path)
    return table
