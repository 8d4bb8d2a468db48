"""
Static game content: items, enemies and the starter world.
"""

from wayfarer.content.bestiary import (
    ENEMY_TEMPLATES,
    UNKNOWN_CREATURE,
    spawn_enemy,
    template_for,
)
from wayfarer.content.items import get_item, item_names
from wayfarer.content.starter_world import TOWN_SQUARE, create_starter_world

__all__ = [
    "ENEMY_TEMPLATES",
    "UNKNOWN_CREATURE",
    "TOWN_SQUARE",
    "create_starter_world",
    "get_item",
    "item_names",
    "spawn_enemy",
    "template_for",
]
