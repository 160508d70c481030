"""
Game components - data models attached to the player.
"""

from wss_game.components.supplies import Supplies, ClampPolicy

__all__ = [
    "Supplies",
    "ClampPolicy",
]
