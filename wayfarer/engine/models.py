"""
Engine Data Models for Wayfarer.

Defines the exploration-layer data structures:
- GameState: Which mode the engine is in
- EngineConfig: World entry points and combat tuning
- ExplorationResult: Response to an exploration command
"""

from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, Field

from wayfarer.models.combat import CombatConfig, TurnOutcome
from wayfarer.models.errors import GameErrorKind


class GameState(str, Enum):
    """Top-level engine modes."""

    CHARACTER_CREATION = "character_creation"
    EXPLORING = "exploring"
    COMBAT = "combat"


class EngineConfig(BaseModel):
    """Configuration for the game engine."""

    start_location_id: str = "town_square"
    respawn_location_id: str = Field(
        default="town_square", description="Where a defeated character wakes up"
    )
    starting_gold: int = Field(default=0, ge=0)
    combat: CombatConfig = Field(default_factory=CombatConfig)


class ExplorationResult(BaseModel):
    """Response to an exploration command."""

    success: bool = True
    lines: list[str] = Field(default_factory=list)
    error: GameErrorKind | None = None
    reason: str = ""
    state: GameState
    location_id: str | None = None
    combat: TurnOutcome | None = Field(
        default=None, description="Opening of a combat this command started"
    )

    @property
    def text(self) -> str:
        return "\n".join(self.lines)
