"""
WSS Engine

Small runtime pieces shared by the wilderness survival game: validated
data components and a typed event bus.

Quick Start:
    from wss_engine.core import EventBus

    bus = EventBus()
    bus.subscribe(MyEvents.SOMETHING, on_something)
    bus.publish(MyEvents.SOMETHING, message="hello")
"""

__version__ = "0.1.0"
__author__ = "Developer"

from wss_engine.core import (
    Component,
    EventBus,
    Event,
)

__all__ = [
    "Component",
    "EventBus",
    "Event",
]
