"""
Location Models for Wayfarer.

Locations carry the encounter configuration read by the encounter
generator, plus the exits that make up the world graph.
"""

from __future__ import annotations

import logging

from pydantic import BaseModel, Field, field_validator

from wayfarer.models.enemy import EnemyType

logger = logging.getLogger(__name__)


class Location(BaseModel):
    """A place the character can occupy."""

    location_id: str = Field(min_length=1)
    name: str
    description: str = ""
    exits: dict[str, str] = Field(default_factory=dict, description="direction -> location_id")
    possible_enemies: list[EnemyType] = Field(default_factory=list)
    encounter_chance: float = Field(default=0.0, description="Probability in [0, 1]")
    max_enemies: int = 1

    @field_validator("encounter_chance")
    @classmethod
    def clamp_chance(cls, value: float) -> float:
        return min(max(value, 0.0), 1.0)

    @field_validator("max_enemies")
    @classmethod
    def at_least_one(cls, value: int) -> int:
        return max(1, value)

    @field_validator("exits")
    @classmethod
    def lowercase_directions(cls, value: dict[str, str]) -> dict[str, str]:
        return {direction.lower(): target for direction, target in value.items()}

    def add_exit(self, direction: str, target_id: str) -> bool:
        direction = direction.lower()
        if direction in self.exits:
            logger.warning("Exit %r already exists for location %r", direction, self.location_id)
            return False
        self.exits[direction] = target_id
        return True

    def exit_to(self, direction: str) -> str | None:
        """Target location id for a direction (case-insensitive)."""
        return self.exits.get(direction.strip().lower())

    def add_possible_enemy(self, enemy_type: EnemyType) -> None:
        if enemy_type not in self.possible_enemies:
            self.possible_enemies.append(enemy_type)

    def exits_description(self) -> str:
        if not self.exits:
            return "There are no obvious exits."
        return f"You can go: {', '.join(self.exits)}."

    def look_description(self) -> str:
        return "\n".join(
            [f"Location: {self.name}", self.description, self.exits_description()]
        )


class World(BaseModel):
    """All locations, keyed by lowercase id."""

    locations: dict[str, Location] = Field(default_factory=dict)

    def add(self, location: Location) -> bool:
        key = location.location_id.lower()
        if key in self.locations:
            logger.warning("Location %r already exists; not adding duplicate", key)
            return False
        self.locations[key] = location
        return True

    def get(self, location_id: str) -> Location | None:
        return self.locations.get(location_id.lower())

    def require(self, location_id: str) -> Location:
        location = self.get(location_id)
        if location is None:
            raise ValueError(f"Unknown location: {location_id}")
        return location

    def __contains__(self, location_id: str) -> bool:
        return location_id.lower() in self.locations
