"""
Encounter Skill.

Turns a location's encounter configuration into a concrete roster.
"""

from __future__ import annotations

import random
from collections.abc import Callable

from pydantic import BaseModel, Field

from wayfarer.models.enemy import Enemy, EnemyType
from wayfarer.models.location import Location
from wayfarer.skills.dice import choose, roll_chance, roll_range


class EncounterResult(BaseModel):
    """Outcome of an encounter roll."""

    triggered: bool = False
    roll: float | None = Field(default=None, description="None when no roll was made")
    enemies: list[Enemy] = Field(default_factory=list)


def roll_encounter(
    location: Location,
    spawn: Callable[[EnemyType], Enemy],
    rng: random.Random | None = None,
) -> EncounterResult:
    """
    Roll for an encounter at a location.

    No roll is made when the location has no possible enemies or a
    chance of 0. A roll equal to the chance triggers. On a trigger the
    enemy count is uniform in [1, max_enemies] and each slot picks a
    type uniformly from the pool.

    Args:
        location: Where the roll happens
        spawn: Creates a fresh enemy for a type
        rng: Optional random source
    """
    if not location.possible_enemies or location.encounter_chance <= 0:
        return EncounterResult()

    check = roll_chance(location.encounter_chance, rng)
    if not check.success:
        return EncounterResult(roll=check.roll)

    count = roll_range(1, location.max_enemies, rng)
    enemies = [spawn(choose(location.possible_enemies, rng)) for _ in range(count)]
    return EncounterResult(triggered=True, roll=check.roll, enemies=enemies)
