"""
Bonus items - fixed resource pickups.
"""

from __future__ import annotations

from typing import Optional

from wss_game.items.base import EffectContext, ItemEvent, Player, register_item


@register_item("water_bonus")
class WaterBonus:
    """
    Adds a fixed amount of water.

    The amount lives on the item rather than coming from the terrain
    the item sits on.
    """

    AMOUNT = 5

    def __init__(self, repeating: bool = False):
        self.repeating = repeating

    def apply(self, player: Player, context: Optional[EffectContext] = None) -> None:
        context = context or EffectContext()
        player.add_water(self.AMOUNT)
        context.notify(
            ItemEvent.BONUS_COLLECTED,
            "Collected water bonus.",
            item=self,
            resource="water",
            amount=self.AMOUNT,
        )

    def repeatable(self) -> bool:
        return self.repeating

    def __repr__(self) -> str:
        return f"WaterBonus(repeating={self.repeating})"


@register_item("food_bonus")
class FoodBonus:
    """Adds a fixed amount of food."""

    AMOUNT = 5

    def __init__(self, repeating: bool = False):
        self.repeating = repeating

    def apply(self, player: Player, context: Optional[EffectContext] = None) -> None:
        context = context or EffectContext()
        player.add_food(self.AMOUNT)
        context.notify(
            ItemEvent.BONUS_COLLECTED,
            "Collected food bonus.",
            item=self,
            resource="food",
            amount=self.AMOUNT,
        )

    def repeatable(self) -> bool:
        return self.repeating

    def __repr__(self) -> str:
        return f"FoodBonus(repeating={self.repeating})"
