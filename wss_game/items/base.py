"""
Item capability - the contract between an item and the player.

An item is anything with ``apply(player, context)`` and ``repeatable()``.
Variants satisfy the Item protocol structurally; there is no shared
base class because there is no shared state.
"""

from __future__ import annotations

import logging
import random
from dataclasses import dataclass, field
from enum import Enum, auto
from typing import TYPE_CHECKING, Any, Optional, Protocol, runtime_checkable

if TYPE_CHECKING:
    from wss_engine.core.events import EventBus

logger = logging.getLogger(__name__)


class ItemEvent(Enum):
    """Status notifications published while items are applied."""
    BONUS_COLLECTED = auto()
    TRADE_OFFERED = auto()
    TRADE_ACCEPTED = auto()
    TRADE_DECLINED = auto()


class ItemDefinitionError(ValueError):
    """Raised when an item record cannot be turned into an item."""


@runtime_checkable
class Player(Protocol):
    """Resource counters an item may touch."""

    def get_gold(self) -> int: ...

    def add_gold(self, delta: int) -> None: ...

    def add_food(self, delta: int) -> None: ...

    def add_water(self, delta: int) -> None: ...


@runtime_checkable
class RandomSource(Protocol):
    """Anything that draws integers like random.Random.randrange."""

    def randrange(self, stop: int) -> int: ...


@dataclass
class EffectContext:
    """
    Collaborators handed to an item for a single application.

    Attributes:
        rng: Random source for items with random effects
        events: Bus receiving status notifications (None to skip)
    """
    rng: RandomSource = field(default_factory=random.Random)
    events: Optional[EventBus] = None

    def notify(self, event_type: ItemEvent, message: str, **data: Any) -> None:
        """Publish a status line on the event bus, if there is one."""
        logger.debug(message)
        if self.events is not None:
            self.events.publish(event_type, message=message, **data)


@runtime_checkable
class Item(Protocol):
    """Capability implemented by every item variant."""

    def apply(self, player: Player, context: Optional[EffectContext] = None) -> None:
        """Apply this item's effect to the player."""
        ...

    def repeatable(self) -> bool:
        """Whether this item survives being applied."""
        ...


# Registry of item types, keyed by record type name
_item_registry: dict[str, type] = {}


def register_item(type_name: str):
    """
    Decorator to register an item class under a record type name.

    Usage:
        @register_item("water_bonus")
        class WaterBonus:
            ...
    """
    def decorator(cls: type) -> type:
        _item_registry[type_name] = cls
        return cls
    return decorator


def get_item_type(type_name: str) -> Optional[type]:
    """Get item class by record type name."""
    return _item_registry.get(type_name)


def get_all_item_types() -> dict[str, type]:
    """Get all registered item types."""
    return _item_registry.copy()


def create_item(record: dict[str, Any]) -> Item:
    """
    Build an item from a record like ``{"type": "water_bonus", "repeating": True}``.

    Keys other than ``type`` and ``id`` are passed to the item constructor.

    Raises:
        ItemDefinitionError: Unknown type or bad constructor arguments
    """
    type_name = record.get('type')
    cls = _item_registry.get(type_name)
    if cls is None:
        raise ItemDefinitionError(f"Unknown item type: {type_name!r}")

    kwargs = {k: v for k, v in record.items() if k not in ('type', 'id')}
    try:
        return cls(**kwargs)
    except TypeError as e:
        raise ItemDefinitionError(f"Invalid arguments for {type_name}: {e}") from e
