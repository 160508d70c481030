"""
Core engine module.

Exports:
- Component: Component base
- EventBus, Event: Event system
"""

from wss_engine.core.component import Component
from wss_engine.core.events import EventBus, Event, EventHandler

__all__ = [
    # Components
    "Component",
    # Events
    "EventBus",
    "Event",
    "EventHandler",
]
