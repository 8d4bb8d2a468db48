"""
Stateless Skills for Wayfarer.

Skills are pure rule functions that:
- Take structured input (Pydantic models)
- Draw randomness only from an injectable random source
- Return structured output
- NEVER maintain state between calls
"""

from wayfarer.skills.abilities import (
    activate_ability,
    available_skills,
    can_activate,
    clear_stance,
    consume_stance,
)
from wayfarer.skills.combat import (
    counter_hit_damage,
    first_living,
    rage_from_damage,
    roll_attack_damage,
    roll_enemy_damage,
    roll_flee,
)
from wayfarer.skills.dice import (
    ChanceResult,
    choose,
    get_rng,
    roll_chance,
    roll_half_open,
    roll_range,
    roll_unit,
)
from wayfarer.skills.encounters import EncounterResult, roll_encounter
from wayfarer.skills.loot import LootResult, roll_loot
from wayfarer.skills.rest import RestResult, take_full_rest

__all__ = [
    # Dice
    "ChanceResult",
    "choose",
    "get_rng",
    "roll_chance",
    "roll_half_open",
    "roll_range",
    "roll_unit",
    # Combat
    "counter_hit_damage",
    "first_living",
    "rage_from_damage",
    "roll_attack_damage",
    "roll_enemy_damage",
    "roll_flee",
    # Abilities
    "activate_ability",
    "available_skills",
    "can_activate",
    "clear_stance",
    "consume_stance",
    # Loot & Encounters
    "EncounterResult",
    "LootResult",
    "roll_encounter",
    "roll_loot",
    # Rest
    "RestResult",
    "take_full_rest",
]
