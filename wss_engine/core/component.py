"""
Component base class for data components.

Components are pydantic models holding the state a game object carries
(resource counters, caps, policies). Keeping them as validated models
makes them easy to build from config and easy to inspect in tests.

Usage:
    class Supplies(Component):
        food: int = 0
        water: int = 0
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict


class Component(BaseModel):
    """
    Base class for all components.

    Components use pydantic for:
    - Validation on construction and assignment
    - Type hints
    - Default values
    """

    model_config = ConfigDict(
        arbitrary_types_allowed=True,
        validate_assignment=True,
        extra='forbid',
    )
