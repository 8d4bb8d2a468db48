"""
Attribute Models for Wayfarer.

Defines the eight base stats shared by characters and enemies,
the closed sets of playable classes, races and origins, and the
derived resource pool formulas.
"""

from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, Field

# Points of each pool granted per point of its driving attribute.
# Shared by Character and Enemy so both derive pools identically.
POOL_PER_POINT = 10

BASE_RESOURCE_STAT = 3
PRIMARY_STAT_BOOST = 7
SECONDARY_STAT_BOOST = 4


# =============================================================================
# Closed Sets
# =============================================================================


class CharacterClass(str, Enum):
    """Playable classes."""

    FIGHTER = "fighter"  # Strength / Fury
    WIZARD = "wizard"  # Intelligence / Wisdom
    SCOUT = "scout"  # Agility / Endurance
    RANGER = "ranger"  # Agility / Wisdom
    CLERIC = "cleric"  # Faith / Wisdom


class Race(str, Enum):
    """Playable races."""

    HUMAN = "human"
    ELF = "elf"
    DWARF = "dwarf"
    ORC = "orc"
    TROLL = "troll"


class Origin(str, Enum):
    """Backgrounds, each belonging to exactly one race."""

    # Human
    CITIZEN_OF_STONECREST = "citizen_of_stonecrest"
    ACOLYTE_OF_THE_SUN_TEMPLE = "acolyte_of_the_sun_temple"
    REAVER_OF_THE_BROKEN_COAST = "reaver_of_the_broken_coast"

    # Elf
    WHISPERWIND_FOREST_DWELLER = "whisperwind_forest_dweller"
    LOREMASTER_OF_SILVERSPIRE = "loremaster_of_silverspire"
    SHADOW_WALKER_OF_THE_HIDDEN_PATHS = "shadow_walker_of_the_hidden_paths"

    # Dwarf
    CLAN_HOLD_OF_IRONPEAK = "clan_hold_of_ironpeak"
    DEEP_ROADS_PROSPECTOR = "deep_roads_prospector"
    GUARDIAN_OF_THE_ANCESTRAL_TOMBS = "guardian_of_the_ancestral_tombs"

    # Orc
    BLOODFANG_TRIBE_WARRIOR = "bloodfang_tribe_warrior"
    SPIRIT_CALLER_OF_THE_ASH_PLAINS = "spirit_caller_of_the_ash_plains"
    STRONGHOLD_ARTIFICER = "stronghold_artificer"

    # Troll
    MOSSROCK_VALLEY_GUARDIAN = "mossrock_valley_guardian"
    RIVERBEND_SHAMAN = "riverbend_shaman"
    HIGH_PEAK_CLAN_MEMBER = "high_peak_clan_member"


class ResourceType(str, Enum):
    """Consumable pools that gate special actions."""

    MANA = "mana"
    RAGE = "rage"
    ENERGY = "energy"


def display_name(member: Enum) -> str:
    """Human-readable name for an enum member (e.g. 'Citizen Of Stonecrest')."""
    return str(member.value).replace("_", " ").title()


def origins_for_race(race: Race) -> tuple[Origin, ...]:
    """Origins a character of the given race may choose."""
    match race:
        case Race.HUMAN:
            return (
                Origin.CITIZEN_OF_STONECREST,
                Origin.ACOLYTE_OF_THE_SUN_TEMPLE,
                Origin.REAVER_OF_THE_BROKEN_COAST,
            )
        case Race.ELF:
            return (
                Origin.WHISPERWIND_FOREST_DWELLER,
                Origin.LOREMASTER_OF_SILVERSPIRE,
                Origin.SHADOW_WALKER_OF_THE_HIDDEN_PATHS,
            )
        case Race.DWARF:
            return (
                Origin.CLAN_HOLD_OF_IRONPEAK,
                Origin.DEEP_ROADS_PROSPECTOR,
                Origin.GUARDIAN_OF_THE_ANCESTRAL_TOMBS,
            )
        case Race.ORC:
            return (
                Origin.BLOODFANG_TRIBE_WARRIOR,
                Origin.SPIRIT_CALLER_OF_THE_ASH_PLAINS,
                Origin.STRONGHOLD_ARTIFICER,
            )
        case Race.TROLL:
            return (
                Origin.MOSSROCK_VALLEY_GUARDIAN,
                Origin.RIVERBEND_SHAMAN,
                Origin.HIGH_PEAK_CLAN_MEMBER,
            )
        case _:
            raise ValueError(f"Unknown race: {race}")


def primary_resource(character_class: CharacterClass) -> ResourceType:
    """The pool a class spends and displays."""
    match character_class:
        case CharacterClass.FIGHTER:
            return ResourceType.RAGE
        case CharacterClass.WIZARD | CharacterClass.RANGER | CharacterClass.CLERIC:
            return ResourceType.MANA
        case CharacterClass.SCOUT:
            return ResourceType.ENERGY
        case _:
            raise ValueError(f"Unknown class: {character_class}")


# =============================================================================
# Attributes
# =============================================================================


class DerivedPools(BaseModel):
    """Maximum resource pools computed from attributes."""

    max_health: int = Field(ge=0)
    max_mana: int = Field(ge=0)
    max_rage: int = Field(ge=0)
    max_energy: int = Field(ge=0)


class Attributes(BaseModel):
    """
    The eight base stats.

    Stamina, Wisdom, Fury and Endurance drive the health, mana,
    rage and energy pools respectively.
    """

    strength: int = Field(default=5, ge=0)
    agility: int = Field(default=5, ge=0)
    intelligence: int = Field(default=5, ge=0)
    stamina: int = Field(default=5, ge=0)
    wisdom: int = Field(default=BASE_RESOURCE_STAT, ge=0)
    fury: int = Field(default=BASE_RESOURCE_STAT, ge=0)
    endurance: int = Field(default=BASE_RESOURCE_STAT, ge=0)
    faith: int = Field(default=BASE_RESOURCE_STAT, ge=0)

    model_config = {"validate_assignment": True}

    def get(self, stat: str) -> int:
        """Get a stat by name."""
        if stat not in type(self).model_fields:
            raise ValueError(f"Unknown attribute: {stat}")
        return getattr(self, stat)

    def increment_all(self, amount: int = 1) -> None:
        """Raise every stat by the same amount (used on level-up)."""
        for stat in type(self).model_fields:
            setattr(self, stat, getattr(self, stat) + amount)

    def derive_pools(self) -> DerivedPools:
        """Compute the maximum pools from the current values."""
        return DerivedPools(
            max_health=self.stamina * POOL_PER_POINT,
            max_mana=self.wisdom * POOL_PER_POINT,
            max_rage=self.fury * POOL_PER_POINT,
            max_energy=self.endurance * POOL_PER_POINT,
        )


def apply_class_specialization(
    attributes: Attributes, character_class: CharacterClass
) -> Attributes:
    """
    Specialize attributes for a class, in place.

    The four resource-driving stats are reset to the low baseline, then
    the class's main stats get the primary boost and its supporting stat
    the secondary boost.

    Args:
        attributes: Attributes to mutate
        character_class: The chosen class

    Returns:
        The same Attributes instance
    """
    attributes.wisdom = BASE_RESOURCE_STAT
    attributes.fury = BASE_RESOURCE_STAT
    attributes.endurance = BASE_RESOURCE_STAT
    attributes.faith = BASE_RESOURCE_STAT

    match character_class:
        case CharacterClass.FIGHTER:
            attributes.strength += PRIMARY_STAT_BOOST
            attributes.fury += PRIMARY_STAT_BOOST
            attributes.stamina += SECONDARY_STAT_BOOST
        case CharacterClass.WIZARD:
            attributes.intelligence += PRIMARY_STAT_BOOST
            attributes.wisdom += PRIMARY_STAT_BOOST
        case CharacterClass.SCOUT:
            attributes.agility += PRIMARY_STAT_BOOST
            attributes.endurance += PRIMARY_STAT_BOOST
        case CharacterClass.RANGER:
            attributes.agility += PRIMARY_STAT_BOOST
            attributes.wisdom += SECONDARY_STAT_BOOST
        case CharacterClass.CLERIC:
            attributes.faith += PRIMARY_STAT_BOOST
            attributes.wisdom += PRIMARY_STAT_BOOST
            attributes.stamina += SECONDARY_STAT_BOOST
        case _:
            raise ValueError(f"Unknown class: {character_class}")

    return attributes
