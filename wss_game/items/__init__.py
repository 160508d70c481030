"""
Items module - things a player can pick up or interact with.

Provides:
- The Item capability and effect context
- Bonus pickups (water, food)
- Trader
- Item database loaded from JSON
"""

from wss_game.items.base import (
    Item,
    Player,
    RandomSource,
    EffectContext,
    ItemEvent,
    ItemDefinitionError,
    register_item,
    get_item_type,
    get_all_item_types,
    create_item,
)
from wss_game.items.bonuses import WaterBonus, FoodBonus
from wss_game.items.trader import Trader, TradeOffer, TradeOutcome
from wss_game.items.database import ItemDatabase, ITEM_SCHEMA, validate_record

__all__ = [
    # Capability
    "Item",
    "Player",
    "RandomSource",
    "EffectContext",
    "ItemEvent",
    "ItemDefinitionError",
    # Registry
    "register_item",
    "get_item_type",
    "get_all_item_types",
    "create_item",
    # Variants
    "WaterBonus",
    "FoodBonus",
    "Trader",
    "TradeOffer",
    "TradeOutcome",
    # Database
    "ItemDatabase",
    "ITEM_SCHEMA",
    "validate_record",
]
