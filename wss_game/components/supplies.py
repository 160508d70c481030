"""
Supplies component - the player's food, water and gold counters.
"""

from __future__ import annotations

import logging
from enum import Enum, auto
from typing import Optional

from wss_engine.core.component import Component

logger = logging.getLogger(__name__)


class ClampPolicy(Enum):
    """How resource counters are bounded after a change."""
    NONE = auto()       # Unbounded in both directions
    CEILING = auto()    # Food/water capped at their maximum
    BOUNDED = auto()    # Capped at maximum and floored at zero


class Supplies(Component):
    """
    Player resource counters.

    Items talk to the player only through get_gold/add_gold/add_food/
    add_water. With the default ClampPolicy.NONE no bounds are applied,
    so counters can go negative (debt, starvation) and any mechanic that
    cares about that lives elsewhere.

    Attributes:
        food: Current food
        water: Current water
        gold: Current gold
        max_food: Food cap (None for no cap)
        max_water: Water cap (None for no cap)
        clamp: Bounding policy applied to starting values and every change
    """
    food: int = 0
    water: int = 0
    gold: int = 0
    max_food: Optional[int] = None
    max_water: Optional[int] = None
    clamp: ClampPolicy = ClampPolicy.NONE

    def model_post_init(self, __context):
        """Bring starting values inside the clamp policy."""
        self.food = self._bound(self.food, self.max_food)
        self.water = self._bound(self.water, self.max_water)
        self.gold = self._bound(self.gold, None)

    def get_gold(self) -> int:
        return self.gold

    def add_gold(self, delta: int) -> None:
        before = self.gold
        self.gold = self._bound(before + delta, None)
        logger.debug("Gold %+d: %d -> %d", delta, before, self.gold)

    def add_food(self, delta: int) -> None:
        before = self.food
        self.food = self._bound(before + delta, self.max_food)
        logger.debug("Food %+d: %d -> %d", delta, before, self.food)

    def add_water(self, delta: int) -> None:
        before = self.water
        self.water = self._bound(before + delta, self.max_water)
        logger.debug("Water %+d: %d -> %d", delta, before, self.water)

    def snapshot(self) -> tuple[int, int, int]:
        """Get (food, water, gold)."""
        return (self.food, self.water, self.gold)

    def _bound(self, value: int, maximum: Optional[int]) -> int:
        """Apply the clamp policy to a new counter value."""
        if self.clamp is ClampPolicy.NONE:
            return value
        if maximum is not None:
            value = min(value, maximum)
        if self.clamp is ClampPolicy.BOUNDED:
            value = max(0, value)
        return value
