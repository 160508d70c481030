import os
import sys
import pytest

# Ensure game modules can be imported
sys.path.append(os.getcwd())


class ScriptedRandom:
    """Random source returning a fixed sequence of draws."""

    def __init__(self, values):
        self.values = list(values)
        self.calls = []

    def randrange(self, stop):
        self.calls.append(stop)
        value = self.values.pop(0)
        assert 0 <= value < stop, f"scripted value {value} outside [0, {stop})"
        return value


@pytest.fixture
def event_bus():
    """Fresh EventBus for each test."""
    from wss_engine.core.events import EventBus
    return EventBus()


@pytest.fixture
def supplies():
    """Unbounded supplies with a little of everything."""
    from wss_game.components.supplies import Supplies
    return Supplies(food=10, water=10, gold=5)


@pytest.fixture
def scripted_rng():
    """Factory for fixed-sequence random sources."""
    return ScriptedRandom


@pytest.fixture
def recorded(event_bus):
    """Collect every item event published on the bus."""
    from wss_game.items.base import ItemEvent

    events = []
    event_bus.subscribe_all(ItemEvent, events.append)
    return events
