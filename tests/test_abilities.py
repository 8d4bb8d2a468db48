"""Tests for resource-gated abilities and stances."""

from __future__ import annotations

from wayfarer.models import (
    COUNTERATTACK,
    AbilityId,
    CharacterClass,
    GameErrorKind,
    abilities_for_class,
    spell_for_class,
)
from wayfarer.skills import (
    activate_ability,
    available_skills,
    can_activate,
    clear_stance,
    consume_stance,
)

# --- Definition Tests ---


class TestDefinitions:
    """Tests for ability and spell tables."""

    def test_fighter_has_counterattack(self):
        assert abilities_for_class(CharacterClass.FIGHTER) == (COUNTERATTACK,)
        assert COUNTERATTACK.cost == 10
        assert COUNTERATTACK.cost_label() == "10 Rage"

    def test_other_classes_have_no_abilities(self):
        for character_class in CharacterClass:
            if character_class != CharacterClass.FIGHTER:
                assert abilities_for_class(character_class) == ()

    def test_spells(self):
        assert spell_for_class(CharacterClass.WIZARD).name == "Arcane Bolt"
        assert spell_for_class(CharacterClass.RANGER).name == "Hunter's Shot"
        assert spell_for_class(CharacterClass.CLERIC).name == "Mend"
        assert spell_for_class(CharacterClass.FIGHTER) is None
        assert spell_for_class(CharacterClass.SCOUT) is None


# --- Counterattack Tests ---


class TestCounterattack:
    """Tests for activating and consuming Counterattack."""

    def test_fails_below_cost(self, fighter):
        fighter.rage_current = 9
        result = activate_ability(fighter, AbilityId.COUNTERATTACK)
        assert not result.success
        assert result.error == GameErrorKind.INSUFFICIENT_RESOURCE
        assert fighter.rage_current == 9
        assert fighter.active_stance is None

    def test_deducts_exact_cost(self, fighter):
        fighter.rage_current = 25
        result = activate_ability(fighter, AbilityId.COUNTERATTACK)
        assert result.success
        assert fighter.rage_current == 15
        assert fighter.active_stance == AbilityId.COUNTERATTACK

    def test_cannot_stack(self, fighter):
        fighter.rage_current = 30
        activate_ability(fighter, AbilityId.COUNTERATTACK)
        result = activate_ability(fighter, AbilityId.COUNTERATTACK)
        assert result.error == GameErrorKind.INVALID_TRANSITION
        assert fighter.rage_current == 20

    def test_wrong_class(self, wizard):
        result = can_activate(wizard, COUNTERATTACK)
        assert result.error == GameErrorKind.INVALID_TRANSITION

    def test_consumed_exactly_once(self, fighter):
        fighter.rage_current = 10
        activate_ability(fighter, AbilityId.COUNTERATTACK)
        assert consume_stance(fighter, AbilityId.COUNTERATTACK) is True
        assert consume_stance(fighter, AbilityId.COUNTERATTACK) is False

    def test_reactivate_after_consume(self, fighter):
        fighter.rage_current = 20
        activate_ability(fighter, AbilityId.COUNTERATTACK)
        consume_stance(fighter, AbilityId.COUNTERATTACK)
        assert activate_ability(fighter, AbilityId.COUNTERATTACK).success

    def test_clear_stance(self, fighter):
        fighter.rage_current = 10
        activate_ability(fighter, AbilityId.COUNTERATTACK)
        clear_stance(fighter)
        assert fighter.active_stance is None


class TestAvailableSkills:
    """Tests for the skills menu listing."""

    def test_fighter_listing(self, fighter):
        options = available_skills(fighter)
        assert [option.name for option in options] == ["Counterattack"]
        assert not options[0].usable
        fighter.rage_current = 10
        assert available_skills(fighter)[0].usable

    def test_caster_listing_empty(self, wizard):
        assert available_skills(wizard) == []
