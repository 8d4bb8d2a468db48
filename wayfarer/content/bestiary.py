"""
Bestiary for Wayfarer.

Static enemy templates keyed by type. Encounters spawn fresh
enemies from these; the templates themselves are frozen.
"""

from __future__ import annotations

import logging

from wayfarer.content.items import (
    BANDIT_MASK,
    CRUSTY_BREAD,
    GOBLIN_EAR,
    MINOR_HEALING_POTION,
    SPIDER_SILK,
    WOLF_PELT,
    get_item,
)
from wayfarer.models.attributes import Attributes
from wayfarer.models.enemy import Enemy, EnemyTemplate, EnemyType
from wayfarer.models.item import LootDrop

logger = logging.getLogger(__name__)


def _attributes(
    strength: int,
    agility: int,
    intelligence: int,
    stamina: int,
    wisdom: int,
    fury: int,
    endurance: int,
    faith: int,
) -> Attributes:
    return Attributes(
        strength=strength,
        agility=agility,
        intelligence=intelligence,
        stamina=stamina,
        wisdom=wisdom,
        fury=fury,
        endurance=endurance,
        faith=faith,
    )


ENEMY_TEMPLATES: dict[EnemyType, EnemyTemplate] = {
    EnemyType.GOBLIN: EnemyTemplate(
        name="Goblin Scavenger",
        enemy_type=EnemyType.GOBLIN,
        attributes=_attributes(6, 7, 3, 4, 2, 4, 4, 1),
        min_damage=2,
        max_damage=4,
        experience_reward=10,
        min_gold=1,
        max_gold=5,
        loot=(
            LootDrop(item=get_item(GOBLIN_EAR), drop_chance=0.6, min_quantity=1, max_quantity=2),
            LootDrop(item=get_item(CRUSTY_BREAD), drop_chance=0.15),
        ),
    ),
    EnemyType.WOLF: EnemyTemplate(
        name="Forest Wolf",
        enemy_type=EnemyType.WOLF,
        attributes=_attributes(7, 8, 2, 6, 2, 5, 6, 1),
        min_damage=3,
        max_damage=6,
        experience_reward=15,
        min_gold=3,
        max_gold=10,
        loot=(LootDrop(item=get_item(WOLF_PELT), drop_chance=0.7),),
    ),
    EnemyType.FOREST_SPIDER: EnemyTemplate(
        name="Giant Forest Spider",
        enemy_type=EnemyType.FOREST_SPIDER,
        attributes=_attributes(5, 9, 2, 5, 1, 3, 4, 1),
        min_damage=2,
        max_damage=5,
        experience_reward=12,
        min_gold=2,
        max_gold=7,
        loot=(
            LootDrop(item=get_item(SPIDER_SILK), drop_chance=0.5, min_quantity=1, max_quantity=3),
        ),
    ),
    EnemyType.BANDIT: EnemyTemplate(
        name="Road Bandit",
        enemy_type=EnemyType.BANDIT,
        attributes=_attributes(8, 7, 5, 7, 4, 5, 5, 3),
        min_damage=4,
        max_damage=7,
        experience_reward=20,
        min_gold=10,
        max_gold=25,
        loot=(
            LootDrop(item=get_item(BANDIT_MASK), drop_chance=0.2),
            LootDrop(item=get_item(MINOR_HEALING_POTION), drop_chance=0.1),
        ),
    ),
}

UNKNOWN_CREATURE = EnemyTemplate(
    name="Unknown Creature",
    attributes=Attributes(),
    min_damage=1,
    max_damage=3,
    experience_reward=5,
    min_gold=0,
    max_gold=1,
)


def template_for(enemy_type: EnemyType | str) -> EnemyTemplate:
    """Template for a type; unknown types fall back to the Unknown Creature."""
    template = ENEMY_TEMPLATES.get(enemy_type)
    if template is None:
        logger.warning("No template for enemy type %r; using %s", enemy_type, UNKNOWN_CREATURE.name)
        return UNKNOWN_CREATURE
    return template


def spawn_enemy(enemy_type: EnemyType | str) -> Enemy:
    """Create a fresh enemy of the given type."""
    return template_for(enemy_type).instantiate()
