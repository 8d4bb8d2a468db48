"""
Loot Skill.

Rolls the gold and items an enemy drops on defeat.
"""

from __future__ import annotations

import random

from pydantic import BaseModel, Field

from wayfarer.models.enemy import Enemy
from wayfarer.models.item import Item
from wayfarer.skills.dice import roll_chance, roll_range


class LootResult(BaseModel):
    """Drops rolled for one enemy."""

    gold: int = Field(default=0, ge=0)
    items: list[Item] = Field(default_factory=list)


def roll_loot(enemy: Enemy, rng: random.Random | None = None) -> LootResult:
    """
    Roll an enemy's drops.

    Gold is uniform in [min_gold, max_gold]. Each loot table entry is
    checked independently; stackable drops roll a quantity in the
    entry's range, non-stackable drops are always a single item. Every
    dropped item is a fresh instance, never the table's template.

    Args:
        enemy: The defeated enemy
        rng: Optional random source

    Returns:
        LootResult with the gold and new item instances
    """
    gold = roll_range(enemy.min_gold, enemy.max_gold, rng)
    items: list[Item] = []

    for drop in enemy.loot:
        if not roll_chance(drop.drop_chance, rng).success:
            continue
        quantity = 1
        if drop.item.stackable:
            quantity = roll_range(drop.min_quantity, drop.max_quantity, rng)
        items.append(drop.item.new_instance(quantity))

    return LootResult(gold=gold, items=items)
