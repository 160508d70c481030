"""
Game configuration - starting supplies, bounds and logging.
"""

from __future__ import annotations

import logging
from typing import Optional

from wss_game.components.supplies import ClampPolicy, Supplies


class SurvivalConfig:
    """Configuration for a survival run."""

    def __init__(
        self,
        start_food: int = 10,
        start_water: int = 10,
        start_gold: int = 0,
        max_food: Optional[int] = None,
        max_water: Optional[int] = None,
        clamp: ClampPolicy = ClampPolicy.NONE,
        log_level: str = "INFO",
        data_path: str = "game/data/database",
    ):
        self.start_food = start_food
        self.start_water = start_water
        self.start_gold = start_gold
        self.max_food = max_food
        self.max_water = max_water
        self.clamp = clamp
        self.log_level = log_level
        self.data_path = data_path

    def new_supplies(self) -> Supplies:
        """Create player supplies from the starting values."""
        return Supplies(
            food=self.start_food,
            water=self.start_water,
            gold=self.start_gold,
            max_food=self.max_food,
            max_water=self.max_water,
            clamp=self.clamp,
        )

    def configure_logging(self) -> None:
        """Set up root logging at the configured level."""
        logging.basicConfig(
            level=getattr(logging, self.log_level.upper(), logging.INFO),
            format="%(asctime)s %(name)s %(levelname)s: %(message)s",
        )
