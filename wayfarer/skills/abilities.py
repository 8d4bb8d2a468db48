"""
Ability Skill.

Activation checks and stance bookkeeping for resource-gated abilities.
"""

from __future__ import annotations

from wayfarer.models.ability import Ability, AbilityId, abilities_for_class, get_ability
from wayfarer.models.character import NOT_AVAILABLE, Character
from wayfarer.models.combat import SkillOption
from wayfarer.models.errors import ActionResult, GameErrorKind


def can_activate(character: Character, ability: Ability) -> ActionResult:
    """
    Check whether a character may activate an ability right now.

    Requires a matching class, an inactive stance and enough of the
    ability's resource.
    """
    if not character.initialized:
        return ActionResult.fail(GameErrorKind.NOT_INITIALIZED, NOT_AVAILABLE)
    if character.character_class != ability.character_class:
        return ActionResult.fail(
            GameErrorKind.INVALID_TRANSITION, f"You cannot use {ability.name}."
        )
    if ability.stance and character.active_stance == ability.ability_id:
        return ActionResult.fail(
            GameErrorKind.INVALID_TRANSITION, f"{ability.name} is already active."
        )
    current, _ = character.resource(ability.resource)
    if current < ability.cost:
        return ActionResult.fail(
            GameErrorKind.INSUFFICIENT_RESOURCE, f"Not enough {ability.resource.value}!"
        )
    return ActionResult.ok()


def activate_ability(character: Character, ability_id: AbilityId) -> ActionResult:
    """
    Pay for and activate an ability.

    Nothing is deducted when the activation check fails.
    """
    ability = get_ability(ability_id)
    check = can_activate(character, ability)
    if not check.success:
        return check

    spent = character.spend_resource(ability.resource, ability.cost)
    if not spent.success:
        return spent

    if ability.stance:
        character.active_stance = ability.ability_id
    return ActionResult.ok(f"{character.name} readies {ability.name}!")


def consume_stance(character: Character, ability_id: AbilityId) -> bool:
    """
    Use up an active stance.

    Returns:
        True exactly once per activation, False if the stance is not active
    """
    if character.active_stance != ability_id:
        return False
    character.active_stance = None
    return True


def clear_stance(character: Character) -> None:
    """Drop any stance; stances never outlive a combat."""
    character.active_stance = None


def available_skills(character: Character) -> list[SkillOption]:
    """Skills-menu entries for the character's class, flagged by usability."""
    if not character.initialized or character.character_class is None:
        return []
    options = []
    for ability in abilities_for_class(character.character_class):
        check = can_activate(character, ability)
        options.append(
            SkillOption(
                ability_id=ability.ability_id,
                name=ability.name,
                cost_label=ability.cost_label(),
                usable=check.success,
                reason=check.reason,
            )
        )
    return options
