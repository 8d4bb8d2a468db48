"""
Ability and Spell Models for Wayfarer.

Abilities are resource-gated special actions chosen from the skills
menu; spells are the single class spell a caster uses from the main menu.
"""

from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field

from wayfarer.models.attributes import CharacterClass, ResourceType

COUNTERATTACK_RAGE_COST = 10


class AbilityId(str, Enum):
    """Known abilities."""

    COUNTERATTACK = "counterattack"


class Ability(BaseModel):
    """A class ability with a fixed resource cost."""

    model_config = ConfigDict(frozen=True)

    ability_id: AbilityId
    name: str
    description: str = ""
    character_class: CharacterClass
    resource: ResourceType
    cost: int = Field(ge=0)
    stance: bool = Field(
        default=False,
        description="Stances stay active until consumed or combat ends",
    )

    def cost_label(self) -> str:
        return f"{self.cost} {self.resource.value.title()}"


COUNTERATTACK = Ability(
    ability_id=AbilityId.COUNTERATTACK,
    name="Counterattack",
    description="Brace to parry the next incoming attack and strike back.",
    character_class=CharacterClass.FIGHTER,
    resource=ResourceType.RAGE,
    cost=COUNTERATTACK_RAGE_COST,
    stance=True,
)


def get_ability(ability_id: AbilityId) -> Ability:
    """Look up an ability definition."""
    match ability_id:
        case AbilityId.COUNTERATTACK:
            return COUNTERATTACK
        case _:
            raise ValueError(f"Unknown ability: {ability_id}")


def abilities_for_class(character_class: CharacterClass) -> tuple[Ability, ...]:
    """Abilities listed in a class's skills menu."""
    match character_class:
        case CharacterClass.FIGHTER:
            return (COUNTERATTACK,)
        case (
            CharacterClass.WIZARD
            | CharacterClass.SCOUT
            | CharacterClass.RANGER
            | CharacterClass.CLERIC
        ):
            return ()
        case _:
            raise ValueError(f"Unknown class: {character_class}")


# =============================================================================
# Spells
# =============================================================================


class SpellEffect(str, Enum):
    """What a spell does when it resolves."""

    DAMAGE = "damage"
    HEAL = "heal"


class Spell(BaseModel):
    """A class spell paid for with mana."""

    model_config = ConfigDict(frozen=True)

    name: str
    character_class: CharacterClass
    effect: SpellEffect
    stat: str = Field(description="Attribute the spell scales with")
    mana_cost: int = Field(default=10, ge=0)
    heal_multiplier: int = Field(default=2, ge=0, description="Stat multiplier for heals")


ARCANE_BOLT = Spell(
    name="Arcane Bolt",
    character_class=CharacterClass.WIZARD,
    effect=SpellEffect.DAMAGE,
    stat="intelligence",
)

HUNTERS_SHOT = Spell(
    name="Hunter's Shot",
    character_class=CharacterClass.RANGER,
    effect=SpellEffect.DAMAGE,
    stat="agility",
)

MEND = Spell(
    name="Mend",
    character_class=CharacterClass.CLERIC,
    effect=SpellEffect.HEAL,
    stat="faith",
)


def spell_for_class(character_class: CharacterClass) -> Spell | None:
    """The class spell, or None for classes that cannot cast."""
    match character_class:
        case CharacterClass.WIZARD:
            return ARCANE_BOLT
        case CharacterClass.RANGER:
            return HUNTERS_SHOT
        case CharacterClass.CLERIC:
            return MEND
        case CharacterClass.FIGHTER | CharacterClass.SCOUT:
            return None
        case _:
            raise ValueError(f"Unknown class: {character_class}")
