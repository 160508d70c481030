"""
Wilderness survival game module.

Provides game-specific pieces built on top of the engine:
- Components (player supplies)
- Items (bonuses, trader, item database)
- World (cells and item collection)
- Config (starting supplies, bounds, logging)
"""
