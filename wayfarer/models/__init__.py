"""
Wayfarer data models.

Pydantic models for characters, enemies, items, locations and the
values exchanged with a combat session.
"""

from wayfarer.models.ability import (
    ARCANE_BOLT,
    COUNTERATTACK,
    COUNTERATTACK_RAGE_COST,
    HUNTERS_SHOT,
    MEND,
    Ability,
    AbilityId,
    Spell,
    SpellEffect,
    abilities_for_class,
    get_ability,
    spell_for_class,
)
from wayfarer.models.attributes import (
    Attributes,
    CharacterClass,
    DerivedPools,
    Origin,
    Race,
    ResourceType,
    apply_class_specialization,
    display_name,
    origins_for_race,
    primary_resource,
)
from wayfarer.models.character import (
    Character,
    ExperienceResult,
    LevelUp,
    create_character,
)
from wayfarer.models.combat import (
    ActionType,
    CombatConfig,
    CombatPhase,
    CombatResult,
    CombatSummary,
    PlayerAction,
    SkillOption,
    TurnOutcome,
)
from wayfarer.models.enemy import Enemy, EnemyTemplate, EnemyType
from wayfarer.models.errors import ActionResult, GameErrorKind
from wayfarer.models.item import Item, ItemType, LootDrop
from wayfarer.models.location import Location, World

__all__ = [
    # Attributes
    "Attributes",
    "CharacterClass",
    "DerivedPools",
    "Origin",
    "Race",
    "ResourceType",
    "apply_class_specialization",
    "display_name",
    "origins_for_race",
    "primary_resource",
    # Character
    "Character",
    "ExperienceResult",
    "LevelUp",
    "create_character",
    # Abilities
    "Ability",
    "AbilityId",
    "ARCANE_BOLT",
    "COUNTERATTACK",
    "COUNTERATTACK_RAGE_COST",
    "HUNTERS_SHOT",
    "MEND",
    "Spell",
    "SpellEffect",
    "abilities_for_class",
    "get_ability",
    "spell_for_class",
    # Items
    "Item",
    "ItemType",
    "LootDrop",
    # Enemies & Locations
    "Enemy",
    "EnemyTemplate",
    "EnemyType",
    "Location",
    "World",
    # Combat
    "ActionType",
    "CombatConfig",
    "CombatPhase",
    "CombatResult",
    "CombatSummary",
    "PlayerAction",
    "SkillOption",
    "TurnOutcome",
    # Errors
    "ActionResult",
    "GameErrorKind",
]
