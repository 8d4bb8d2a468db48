"""
Wayfarer - simulation core for a turn-based text RPG.

Layers:
- models: Pydantic data models (attributes, items, characters, enemies, locations)
- skills: Stateless rule functions (dice, combat math, loot, encounters, abilities)
- services: Stateful orchestrators (encounter generation, combat sessions)
- engine: The exploration layer that drives everything
- content: Static game content (items, bestiary, starter world)
"""

__version__ = "0.1.0"
