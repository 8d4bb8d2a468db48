"""Encounter generation service."""

from __future__ import annotations

import logging
import random
from collections.abc import Callable
from dataclasses import dataclass, field

from wayfarer.content.bestiary import spawn_enemy
from wayfarer.models.enemy import Enemy, EnemyType
from wayfarer.models.location import Location
from wayfarer.skills.encounters import EncounterResult, roll_encounter
from wayfarer.skills.loot import LootResult, roll_loot

logger = logging.getLogger(__name__)


@dataclass
class EncounterGenerator:
    """Rolls encounter rosters for locations and loot for defeated enemies."""

    rng: random.Random | None = None
    spawn: Callable[[EnemyType], Enemy] = field(default=spawn_enemy)

    def roll(self, location: Location) -> EncounterResult:
        """Roll at a location, keeping the drawn value for reporting."""
        result = roll_encounter(location, self.spawn, self.rng)
        if result.triggered:
            logger.info(
                "Encounter at %s: %s",
                location.location_id,
                ", ".join(enemy.name for enemy in result.enemies),
            )
        else:
            logger.debug("No encounter at %s (roll=%s)", location.location_id, result.roll)
        return result

    def roll_encounter(self, location: Location) -> list[Enemy]:
        """Fresh enemies for a fight; empty means no encounter."""
        return self.roll(location).enemies

    def get_dropped_loot(self, enemy: Enemy) -> LootResult:
        return roll_loot(enemy, self.rng)
