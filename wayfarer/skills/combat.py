"""
Combat Math Skill.

Damage rolls, counter-hits, rage gain and flee checks. Pure functions
over models; the CombatSession decides when each one applies.
"""

from __future__ import annotations

import random
from collections.abc import Iterable

from wayfarer.models.combat import CombatConfig
from wayfarer.models.enemy import Enemy
from wayfarer.skills.dice import ChanceResult, roll_chance, roll_half_open, roll_range

DEFAULT_COMBAT_CONFIG = CombatConfig()


def roll_attack_damage(
    stat: int,
    config: CombatConfig | None = None,
    rng: random.Random | None = None,
) -> int:
    """
    Roll player damage from a scaling stat.

    Damage is uniform in [stat, stat + spread), floored at the
    configured minimum.
    """
    config = config or DEFAULT_COMBAT_CONFIG
    damage = roll_half_open(stat, stat + config.attack_spread, rng)
    return max(config.minimum_damage, damage)


def counter_hit_damage(basic_damage: int, config: CombatConfig | None = None) -> int:
    """Bonus hit dealt when a stance negates an attack."""
    config = config or DEFAULT_COMBAT_CONFIG
    return max(config.minimum_damage, round(basic_damage * config.counter_multiplier))


def roll_enemy_damage(enemy: Enemy, rng: random.Random | None = None) -> int:
    """Uniform damage in the enemy's inclusive [min, max] range."""
    return roll_range(enemy.min_damage, enemy.max_damage, rng)


def rage_from_damage(amount: int, config: CombatConfig | None = None) -> int:
    """Rage earned for dealing or taking `amount` damage."""
    if amount <= 0:
        return 0
    config = config or DEFAULT_COMBAT_CONFIG
    return int(amount * config.rage_coefficient)


def roll_flee(
    config: CombatConfig | None = None, rng: random.Random | None = None
) -> ChanceResult:
    """Attempt to escape; succeeds when the roll is at most the flee chance."""
    config = config or DEFAULT_COMBAT_CONFIG
    return roll_chance(config.flee_chance, rng)


def first_living(enemies: Iterable[Enemy]) -> Enemy | None:
    """Default target: the first enemy in roster order still standing."""
    return next((enemy for enemy in enemies if not enemy.is_defeated()), None)
