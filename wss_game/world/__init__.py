"""
World module - map cells and item collection.
"""

from wss_game.world.cell import Cell

__all__ = [
    "Cell",
]
