"""
Map cell - a square of terrain holding items.
"""

from __future__ import annotations

import logging
from typing import Iterable, Optional

from wss_game.items.base import EffectContext, Item, Player

logger = logging.getLogger(__name__)


class Cell:
    """
    A map square and the items lying on it.

    Terrain is only a label here; movement costs belong to the map.
    """

    def __init__(self, terrain: str = "plains", items: Optional[Iterable[Item]] = None):
        self.terrain = terrain
        self.items: list[Item] = list(items or [])

    def add_item(self, item: Item) -> None:
        self.items.append(item)

    def has_item(self, item_type: type) -> bool:
        """Check if any item of a type is on this cell."""
        return any(isinstance(item, item_type) for item in self.items)

    def collect_items(
        self,
        player: Player,
        context: Optional[EffectContext] = None,
    ) -> list[Item]:
        """
        Apply every item on the cell to the player, in order.

        Items that are not repeatable are removed once applied.

        Returns:
            The removed items
        """
        context = context or EffectContext()
        kept: list[Item] = []
        removed: list[Item] = []

        for item in self.items:
            item.apply(player, context)
            if item.repeatable():
                kept.append(item)
            else:
                removed.append(item)

        self.items = kept
        if removed:
            logger.debug("Removed %d consumed item(s) from %s cell", len(removed), self.terrain)
        return removed

    def __repr__(self) -> str:
        return f"Cell(terrain={self.terrain!r}, items={self.items!r})"
