"""
Combat Models for Wayfarer.

Value types exchanged with a CombatSession: the actions a player can
submit, the turn phases, and the outcome returned by every transition.
"""

from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, Field

from wayfarer.models.ability import AbilityId
from wayfarer.models.errors import GameErrorKind
from wayfarer.models.item import Item


class ActionType(str, Enum):
    """Discrete requests a player can submit during combat."""

    ATTACK = "attack"
    CAST = "cast"
    ITEM = "item"
    FLEE = "flee"
    OPEN_SKILLS = "open_skills"
    SELECT_SKILL = "select_skill"
    BACK = "back"


class PlayerAction(BaseModel):
    """A player request, with its argument where the action takes one."""

    action_type: ActionType
    skill_id: AbilityId | None = Field(default=None, description="For SELECT_SKILL")
    item_name: str | None = Field(
        default=None, description="For ITEM; None uses the first healing item"
    )

    @classmethod
    def attack(cls) -> PlayerAction:
        return cls(action_type=ActionType.ATTACK)

    @classmethod
    def cast(cls) -> PlayerAction:
        return cls(action_type=ActionType.CAST)

    @classmethod
    def flee(cls) -> PlayerAction:
        return cls(action_type=ActionType.FLEE)

    @classmethod
    def use_item(cls, item_name: str | None = None) -> PlayerAction:
        return cls(action_type=ActionType.ITEM, item_name=item_name)

    @classmethod
    def open_skills(cls) -> PlayerAction:
        return cls(action_type=ActionType.OPEN_SKILLS)

    @classmethod
    def select_skill(cls, skill_id: AbilityId) -> PlayerAction:
        return cls(action_type=ActionType.SELECT_SKILL, skill_id=skill_id)

    @classmethod
    def back(cls) -> PlayerAction:
        return cls(action_type=ActionType.BACK)


class CombatPhase(str, Enum):
    """Turn state machine phases."""

    START = "start"
    PLAYER_MAIN = "player_main"
    PLAYER_SKILLS = "player_skills"
    RESOLVING_ACTION = "resolving_action"
    ENEMY_TURN = "enemy_turn"
    ENDED = "ended"


class CombatResult(str, Enum):
    """How a finished combat ended."""

    VICTORY = "victory"
    DEFEAT = "defeat"
    FLED = "fled"


class CombatConfig(BaseModel):
    """Combat balancing constants."""

    flee_chance: float = Field(default=0.75, ge=0.0, le=1.0)
    rage_coefficient: float = Field(
        default=0.5,
        ge=0.0,
        description="Rage gained per point of damage dealt or taken",
    )
    counter_multiplier: float = Field(default=1.1, ge=0.0)
    attack_spread: int = Field(
        default=5, ge=1, description="Player damage is in [stat, stat + spread)"
    )
    minimum_damage: int = Field(default=1, ge=0)


class CombatSummary(BaseModel):
    """Rewards and casualties of a finished combat."""

    result: CombatResult
    slain: list[str] = Field(default_factory=list)
    gold: int = Field(default=0, ge=0)
    items: list[Item] = Field(default_factory=list)
    experience: int = Field(default=0, ge=0)
    levels_gained: int = Field(default=0, ge=0)

    def summary_lines(self) -> list[str]:
        """Post-combat report shown by the exploration layer."""
        lines: list[str] = []
        if self.slain:
            lines.append("Enemies Slain:")
            lines.extend(f"- {name}" for name in self.slain)
        if self.items:
            lines.append("Loot Obtained:")
            lines.extend(f"- {item.label()}" for item in self.items)
        if self.gold > 0:
            lines.append(f"You found {self.gold} gold coins.")
        if self.experience > 0:
            lines.append(f"You gained {self.experience} experience.")
        return lines


class TurnOutcome(BaseModel):
    """
    Everything one submitted action produced.

    `transitions` is the phase trail walked during the call, ending in
    `phase`. Rejected actions carry `error` and leave state unchanged.
    """

    lines: list[str] = Field(default_factory=list)
    phase: CombatPhase
    transitions: list[CombatPhase] = Field(default_factory=list)
    turn_consumed: bool = False
    error: GameErrorKind | None = None
    reason: str = ""
    result: CombatResult | None = None
    summary: CombatSummary | None = None

    @property
    def ended(self) -> bool:
        return self.phase == CombatPhase.ENDED

    @property
    def accepted(self) -> bool:
        return self.error is None


class SkillOption(BaseModel):
    """A skills-menu entry."""

    ability_id: AbilityId
    name: str
    cost_label: str
    usable: bool
    reason: str = ""
