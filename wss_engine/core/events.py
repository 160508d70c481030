"""
Typed event bus for status notifications.

Uses Enums for event types to prevent magic strings. Game code
publishes status messages here instead of printing them, and any
number of sinks (console, UI log, tests) can subscribe.

Usage:
    class ItemEvent(Enum):
        BONUS_COLLECTED = auto()

    event_bus.subscribe(ItemEvent.BONUS_COLLECTED, on_bonus)
    event_bus.publish(ItemEvent.BONUS_COLLECTED, amount=5, message="...")
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Callable

logger = logging.getLogger(__name__)


@dataclass
class Event:
    """
    Event data container.

    Attributes:
        type: The event type (Enum member)
        data: Dictionary of event-specific data
    """
    type: Enum
    data: dict[str, Any] = field(default_factory=dict)

    def get(self, key: str, default: Any = None) -> Any:
        """Get event data by key."""
        return self.data.get(key, default)

    def __getitem__(self, key: str) -> Any:
        """Get event data by key (dict-style)."""
        return self.data[key]


# Type alias for event handlers
EventHandler = Callable[[Event], None]


class EventBus:
    """
    Publish/subscribe hub for Enum-typed events.

    Handlers run in subscription order. A handler error is logged and
    never reaches the publisher.
    """

    def __init__(self):
        self._handlers: dict[Enum, list[EventHandler]] = {}

    def subscribe(self, event_type: Enum, handler: EventHandler) -> None:
        """
        Subscribe to an event type.

        Args:
            event_type: The event type to listen for
            handler: Callback function(event: Event)
        """
        self._handlers.setdefault(event_type, []).append(handler)

    def subscribe_all(self, event_types: type[Enum], handler: EventHandler) -> None:
        """Subscribe one handler to every member of an event Enum."""
        for event_type in event_types:
            self.subscribe(event_type, handler)

    def publish(self, event_type: Enum, **data: Any) -> Event:
        """
        Publish an event.

        Args:
            event_type: The event type
            **data: Event data as keyword arguments

        Returns:
            The Event object
        """
        event = Event(type=event_type, data=data)

        for handler in list(self._handlers.get(event_type, [])):
            try:
                handler(event)
            except Exception:
                logger.exception("Error in event handler for %s", event_type)

        return event
