"""
Trader - a random food/water for gold exchange.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum, auto
from typing import Optional

from wss_game.items.base import (
    EffectContext,
    ItemEvent,
    Player,
    RandomSource,
    register_item,
)

logger = logging.getLogger(__name__)


class TradeOutcome(Enum):
    """Result of settling a trade offer."""
    ACCEPTED = auto()
    DECLINED = auto()


@dataclass(frozen=True)
class TradeOffer:
    """
    A single trade proposal, valid for one application.

    Attributes:
        food: Food the trader gives (0-2)
        water: Water the trader gives (0-2)
        gold_asked: Gold the trader wants (1-3)
    """
    food: int
    water: int
    gold_asked: int

    def affordable_by(self, player: Player) -> bool:
        """Check if the player has at least the asked gold."""
        return player.get_gold() >= self.gold_asked

    def describe(self) -> str:
        return (
            f"Trader wants {self.gold_asked} gold. "
            f"He will give {self.food} food and {self.water} water."
        )


@register_item("trader")
class Trader:
    """
    Offers a fresh random trade on every application.

    The trader is stateless: each apply draws a new offer and settles it
    immediately. It is never consumed.
    """

    MAX_FOOD = 3        # food offered is drawn from [0, MAX_FOOD)
    MAX_WATER = 3       # water offered is drawn from [0, MAX_WATER)
    MAX_GOLD = 3        # gold asked is drawn from [1, MAX_GOLD]

    def apply(self, player: Player, context: Optional[EffectContext] = None) -> None:
        context = context or EffectContext()
        offer = self.make_offer(context.rng)
        context.notify(ItemEvent.TRADE_OFFERED, offer.describe(), offer=offer)
        self.settle(player, offer, context)

    def repeatable(self) -> bool:
        return True

    @classmethod
    def make_offer(cls, rng: RandomSource) -> TradeOffer:
        """Draw food, water and gold asked, in that order."""
        food = rng.randrange(cls.MAX_FOOD)
        water = rng.randrange(cls.MAX_WATER)
        gold_asked = rng.randrange(cls.MAX_GOLD) + 1
        return TradeOffer(food=food, water=water, gold_asked=gold_asked)

    @staticmethod
    def settle(
        player: Player,
        offer: TradeOffer,
        context: Optional[EffectContext] = None,
    ) -> TradeOutcome:
        """
        Carry out an offer if the player can pay for it.

        A declined trade leaves the player untouched.

        Returns:
            ACCEPTED or DECLINED
        """
        if context is None:
            context = EffectContext()

        if not offer.affordable_by(player):
            logger.info("Trade declined: %d gold asked, %d held",
                        offer.gold_asked, player.get_gold())
            context.notify(ItemEvent.TRADE_DECLINED,
                           "Player cannot afford trade.", offer=offer)
            return TradeOutcome.DECLINED

        player.add_food(offer.food)
        player.add_water(offer.water)
        player.add_gold(-offer.gold_asked)
        logger.info("Trade accepted: %s", offer)
        context.notify(ItemEvent.TRADE_ACCEPTED, "Trade accepted!", offer=offer)
        return TradeOutcome.ACCEPTED

    def __repr__(self) -> str:
        return "Trader()"

