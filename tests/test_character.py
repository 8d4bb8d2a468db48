"""Tests for the Character model: initialization, pools, progression and inventory."""

from __future__ import annotations

import pytest

from wayfarer.content import get_item
from wayfarer.models import (
    Attributes,
    Character,
    CharacterClass,
    GameErrorKind,
    Item,
    Origin,
    Race,
    ResourceType,
    create_character,
)
from wayfarer.models.character import THRESHOLD_SENTINEL

# --- Initialization Tests ---


class TestInitialize:
    """Tests for one-time character initialization."""

    def test_starts_uninitialized(self):
        character = Character()
        assert not character.initialized
        assert character.stats_summary() == "Character data not available yet."

    def test_initialize_applies_class(self, fighter):
        assert fighter.initialized
        assert fighter.attributes.strength == 12
        assert fighter.hp_max == 90
        assert fighter.hp_current == 90
        assert fighter.rage_max == 100
        assert fighter.rage_current == 0
        assert fighter.mana_current == fighter.mana_max == 30

    def test_reinitialize_rejected(self, fighter):
        result = fighter.initialize(
            "Other", Race.HUMAN, CharacterClass.WIZARD, Origin.CITIZEN_OF_STONECREST
        )
        assert not result.success
        assert result.error == GameErrorKind.ALREADY_INITIALIZED
        assert fighter.name == "Brom"
        assert fighter.character_class == CharacterClass.FIGHTER

    def test_origin_must_match_race(self):
        with pytest.raises(ValueError):
            create_character(
                "Grok", Race.ORC, CharacterClass.FIGHTER, Origin.CITIZEN_OF_STONECREST
            )

    def test_empty_name(self):
        with pytest.raises(ValueError):
            create_character(" ", Race.HUMAN, CharacterClass.SCOUT, Origin.CITIZEN_OF_STONECREST)

    def test_base_attributes_copied(self):
        base = Attributes(strength=8)
        character = create_character(
            "Tess", Race.HUMAN, CharacterClass.SCOUT, Origin.CITIZEN_OF_STONECREST, base
        )
        assert character.attributes.strength == 8
        assert character.attributes is not base
        assert base.agility == 5

    def test_starting_gold(self):
        character = create_character(
            "Tess",
            Race.HUMAN,
            CharacterClass.SCOUT,
            Origin.CITIZEN_OF_STONECREST,
            starting_gold=15,
        )
        assert character.gold == 15

    def test_primary_resource(self, fighter, wizard):
        assert fighter.primary_resource == ResourceType.RAGE
        assert wizard.primary_resource == ResourceType.MANA
        assert Character().primary_resource is None


# --- Pool Tests ---


class TestPools:
    """Tests for health and resource pools."""

    def test_take_damage_floors_at_zero(self, wizard):
        lost = wizard.take_damage(500)
        assert lost == 50
        assert wizard.hp_current == 0
        assert wizard.is_defeated()

    def test_heal_capped(self, wizard):
        wizard.take_damage(10)
        assert wizard.heal(50) == 10
        assert wizard.hp_current == wizard.hp_max

    def test_uninitialized_ignores_damage(self):
        assert Character().take_damage(5) == 0

    def test_restore_to_max_drains_rage(self, fighter):
        fighter.take_damage(30)
        fighter.mana_current = 0
        fighter.rage_current = 40
        fighter.restore_to_max()
        assert fighter.hp_current == fighter.hp_max
        assert fighter.mana_current == fighter.mana_max
        assert fighter.energy_current == fighter.energy_max
        assert fighter.rage_current == 0

    def test_recalculate_caps_current(self, wizard):
        wizard.attributes.wisdom = 2
        wizard.recalculate_pools()
        assert wizard.mana_max == 20
        assert wizard.mana_current == 20


class TestSpendResource:
    """Tests for spending mana, rage and energy."""

    def test_spend(self, wizard):
        result = wizard.spend_resource(ResourceType.MANA, 10)
        assert result.success
        assert wizard.mana_current == 90

    def test_not_enough(self, fighter):
        result = fighter.spend_resource(ResourceType.RAGE, 10)
        assert not result.success
        assert result.error == GameErrorKind.INSUFFICIENT_RESOURCE
        assert result.reason == "Not enough rage!"
        assert fighter.rage_current == 0

    def test_pool_not_used(self, wizard):
        wizard.attributes.fury = 0
        wizard.recalculate_pools()
        result = wizard.spend_resource(ResourceType.RAGE, 5)
        assert result.reason == "You do not use rage."

    def test_non_positive_amount(self, wizard):
        result = wizard.spend_resource(ResourceType.MANA, 0)
        assert not result.success
        assert wizard.mana_current == 100

    def test_uninitialized(self):
        result = Character().spend_resource(ResourceType.MANA, 1)
        assert result.error == GameErrorKind.NOT_INITIALIZED

    def test_gain_capped(self, fighter):
        assert fighter.gain_resource(ResourceType.RAGE, 150) == 100
        assert fighter.rage_current == 100


# --- Progression Tests ---


class TestProgression:
    """Tests for experience and level-ups."""

    def test_non_positive_is_noop(self, fighter):
        result = fighter.gain_experience(0)
        assert result.levels_gained == 0
        assert fighter.experience == 0

    def test_below_threshold(self, fighter):
        fighter.gain_experience(40)
        assert fighter.level == 1
        assert fighter.experience == 40

    def test_exact_threshold(self, fighter):
        """XP equal to the threshold gives exactly one level and resets XP."""
        result = fighter.gain_experience(100)
        assert result.levels_gained == 1
        assert fighter.level == 2
        assert fighter.experience == 0
        assert fighter.experience_to_next == 150

    def test_level_up_raises_stats(self, fighter):
        fighter.mana_current = 0
        fighter.rage_current = 20
        fighter.gain_experience(100)
        assert fighter.attributes.strength == 13
        assert fighter.attributes.stamina == 10
        assert fighter.hp_max == 100
        assert fighter.hp_current == 100
        assert fighter.mana_current == fighter.mana_max == 40
        assert fighter.rage_current == 20

    def test_health_gain_keeps_damage(self, fighter):
        fighter.take_damage(50)
        result = fighter.gain_experience(100)
        assert result.level_ups[0].health_gained == 10
        assert fighter.hp_current == 50

    def test_multiple_levels(self, fighter):
        result = fighter.gain_experience(475)
        assert result.levels_gained == 3
        assert fighter.level == 4
        assert fighter.experience == 0
        assert fighter.experience_to_next == 338
        assert result.messages[-1] == "Brom reached Level 4! Stats increased."

    def test_leftover_experience(self, fighter):
        fighter.gain_experience(130)
        assert fighter.level == 2
        assert fighter.experience == 30

    def test_invalid_threshold_clamped(self, fighter):
        fighter.experience_to_next = 0
        result = fighter.gain_experience(5)
        assert result.levels_gained == 0
        assert fighter.experience_to_next == THRESHOLD_SENTINEL

    def test_uninitialized(self):
        result = Character().gain_experience(10)
        assert result.error == GameErrorKind.NOT_INITIALIZED


# --- Gold & Inventory Tests ---


class TestGoldAndInventory:
    """Tests for gold and inventory management."""

    def test_gold(self, wizard):
        assert wizard.add_gold(10)
        assert not wizard.spend_gold(11)
        assert wizard.spend_gold(4)
        assert wizard.gold == 6
        assert not wizard.add_gold(-3)

    def test_stackables_merge(self, wizard):
        wizard.add_item(get_item("Goblin Ear", 2))
        wizard.add_item(get_item("Goblin Ear", 3))
        assert len(wizard.inventory) == 1
        assert wizard.inventory[0].quantity == 5

    def test_non_stackables_do_not_merge(self, wizard):
        wizard.add_item(get_item("Bandit Mask"))
        wizard.add_item(get_item("Bandit Mask"))
        assert len(wizard.inventory) == 2

    def test_added_item_is_a_copy(self, wizard):
        item = Item(name="Wolf Pelt", stackable=True)
        wizard.add_item(item)
        item.add_quantity(4)
        assert wizard.inventory[0].quantity == 1

    def test_remove_from_stack(self, wizard):
        wizard.add_item(get_item("Spider Silk", 3))
        assert wizard.remove_item("spider silk", 2)
        assert wizard.inventory[0].quantity == 1
        assert not wizard.remove_item("Spider Silk", 2)
        assert wizard.remove_item("Spider Silk")
        assert wizard.inventory == []

    def test_remove_missing(self, wizard):
        assert not wizard.remove_item("Goblin Ear")

    def test_inventory_summary(self, wizard):
        assert "Your inventory is empty." in wizard.inventory_summary()
        wizard.add_item(get_item("Wolf Pelt", 2))
        wizard.add_gold(7)
        summary = wizard.inventory_summary()
        assert "- Wolf Pelt (x2) - Value: 5g" in summary
        assert "Gold: 7g" in summary

    def test_stats_summary(self, fighter):
        summary = fighter.stats_summary()
        assert "Name: Brom (Dwarf Fighter from Clan Hold Of Ironpeak)" in summary
        assert "Level: 1 (XP: 0/100)" in summary
        assert "Health: 90 / 90" in summary
        assert "Rage:   0 / 100 (FUR: 10)" in summary
