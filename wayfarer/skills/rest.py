"""
Rest and Recovery Skills.

Full rest outside combat: health, mana and energy refill, rage drains.
"""

from __future__ import annotations

from pydantic import BaseModel, Field

from wayfarer.models.character import Character


class RestResult(BaseModel):
    """Result of a full rest."""

    hp_recovered: int = Field(ge=0)
    mana_recovered: int = Field(ge=0)
    energy_recovered: int = Field(ge=0)
    rage_lost: int = Field(ge=0)
    message: str


def take_full_rest(character: Character) -> RestResult:
    """
    Restore a character to full.

    Returns how much of each pool changed so callers can report it.
    """
    hp_before = character.hp_current
    mana_before = character.mana_current
    energy_before = character.energy_current
    rage_before = character.rage_current

    character.restore_to_max()

    return RestResult(
        hp_recovered=character.hp_current - hp_before,
        mana_recovered=character.mana_current - mana_before,
        energy_recovered=character.energy_current - energy_before,
        rage_lost=rage_before - character.rage_current,
        message=(
            f"You rest and recover. Health: {character.hp_current}/{character.hp_max}."
        ),
    )
