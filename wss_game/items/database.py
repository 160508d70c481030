"""
Item database - declarative item records loaded from JSON.

File format:
    {
        "items": [
            {"id": "spring", "type": "water_bonus", "repeating": true},
            {"id": "merchant", "type": "trader"}
        ]
    }

Every record is checked against ITEM_SCHEMA with jsonschema and then
test-built, so a record that is kept can always produce an item.
"""

from __future__ import annotations

import copy
import json
import logging
from pathlib import Path
from typing import Any, Optional

import jsonschema

from wss_game.items.base import (
    Item,
    ItemDefinitionError,
    create_item,
    get_all_item_types,
)

ITEM_SCHEMA: dict[str, Any] = {
    "type": "object",
    "required": ["id", "type"],
    "properties": {
        "id": {"type": "string", "minLength": 1},
        "type": {"type": "string"},
        "repeating": {"type": "boolean"},
    },
    "additionalProperties": False,
}


class ItemDatabase:
    """
    Database of item records keyed by id.

    Records are stored, not items: each get() builds a new instance so
    one placement never shares state with another.
    """

    def __init__(self, data_path: Path | str = "game/data/database"):
        self.data_path = Path(data_path)
        self._records: dict[str, dict[str, Any]] = {}
        self.logger = logging.getLogger(__name__)

    def load(self, filename: str = "items.json") -> int:
        """
        Load item records from a JSON file under data_path.

        Invalid records are logged and skipped.

        Returns:
            Number of records loaded from this file
        """
        path = self.data_path / filename
        if not path.exists():
            self.logger.warning(f"Item file not found: {path}")
            return 0

        try:
            with open(path, 'r', encoding='utf-8') as f:
                data = json.load(f)
        except (OSError, json.JSONDecodeError) as e:
            self.logger.error(f"Failed to load {path}: {e}")
            return 0

        records = data.get('items', []) if isinstance(data, dict) else data
        if not isinstance(records, list):
            self.logger.error(f"Expected a list of item records in {path}")
            return 0

        loaded = 0
        for record in records:
            try:
                self._add(record)
            except ItemDefinitionError as e:
                self.logger.error(f"Invalid item record in {path}: {e}")
                continue
            loaded += 1

        self.logger.info(f"Loaded {loaded} item records from {path}")
        return loaded

    def register(self, item_id: str, record: dict[str, Any]) -> None:
        """
        Register a record under an id.

        Raises:
            ItemDefinitionError: The record is invalid
        """
        self._add({**record, 'id': item_id})

    def get(self, item_id: str) -> Optional[Item]:
        """Build a fresh item for an id, or None if unknown."""
        record = self._records.get(item_id)
        if record is None:
            return None
        return create_item(record)

    def get_record(self, item_id: str) -> Optional[dict[str, Any]]:
        """Get a copy of the raw record for an id."""
        record = self._records.get(item_id)
        return copy.deepcopy(record) if record is not None else None

    def ids(self) -> list[str]:
        """Get all known item ids."""
        return list(self._records)

    def __contains__(self, item_id: str) -> bool:
        return item_id in self._records

    def __len__(self) -> int:
        return len(self._records)

    def _add(self, record: Any) -> None:
        """Validate a record, test-build it and store it."""
        validate_record(record)
        create_item(record)
        if record['id'] in self._records:
            self.logger.warning(f"Duplicate item id replaced: {record['id']}")
        self._records[record['id']] = copy.deepcopy(record)


def validate_record(record: Any) -> None:
    """
    Check a record against ITEM_SCHEMA and the registered item types.

    Raises:
        ItemDefinitionError: Schema violation or unknown type
    """
    try:
        jsonschema.validate(instance=record, schema=ITEM_SCHEMA)
    except jsonschema.ValidationError as e:
        raise ItemDefinitionError(e.message) from e

    if record['type'] not in get_all_item_types():
        raise ItemDefinitionError(f"Unknown item type: {record['type']!r}")
