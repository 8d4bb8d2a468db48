"""Tests for random rolls, loot drops and encounter generation."""

from __future__ import annotations

import random
from unittest.mock import patch

import pytest

from wayfarer.content import ENEMY_TEMPLATES, UNKNOWN_CREATURE, spawn_enemy, template_for
from wayfarer.models import Attributes, EnemyTemplate, EnemyType, Item, Location, LootDrop
from wayfarer.services import EncounterGenerator
from wayfarer.skills import (
    choose,
    roll_chance,
    roll_encounter,
    roll_half_open,
    roll_loot,
    roll_range,
)

# --- Dice Tests ---


class TestRolls:
    """Tests for the random roll helpers."""

    def test_roll_range_inclusive(self):
        rng = random.Random(7)
        values = {roll_range(2, 4, rng) for _ in range(300)}
        assert values == {2, 3, 4}

    def test_roll_half_open_excludes_upper(self):
        rng = random.Random(7)
        values = {roll_half_open(5, 10, rng) for _ in range(300)}
        assert values == {5, 6, 7, 8, 9}

    def test_degenerate_ranges(self):
        assert roll_range(3, 3) == 3
        assert roll_range(5, 1) == 5
        assert roll_half_open(4, 4) == 4

    def test_chance_boundary_counts(self, scripted_rng):
        assert roll_chance(0.3, scripted_rng(uniforms=[0.3])).success

    def test_chance_above_fails(self, scripted_rng):
        assert not roll_chance(0.3, scripted_rng(uniforms=[0.30001])).success

    def test_zero_chance_never_succeeds(self, scripted_rng):
        assert not roll_chance(0.0, scripted_rng(uniforms=[0.0])).success

    def test_choose_empty(self):
        with pytest.raises(ValueError):
            choose([])


# --- Loot Tests ---


class TestLoot:
    """Tests for enemy drop rolls."""

    def test_certain_drop_always_drops(self, make_enemy):
        rng = random.Random(11)
        enemy = make_enemy(loot=[LootDrop(item=Item(name="Tooth"), drop_chance=1.0)])
        for _ in range(200):
            assert [item.name for item in roll_loot(enemy, rng).items] == ["Tooth"]

    def test_zero_chance_never_drops(self, make_enemy):
        rng = random.Random(11)
        enemy = make_enemy(loot=[LootDrop(item=Item(name="Tooth"), drop_chance=0.0)])
        for _ in range(200):
            assert roll_loot(enemy, rng).items == []

    def test_gold_in_range(self, make_enemy):
        rng = random.Random(3)
        enemy = make_enemy(min_gold=3, max_gold=9)
        golds = {roll_loot(enemy, rng).gold for _ in range(300)}
        assert min(golds) >= 3
        assert max(golds) <= 9

    def test_stackable_quantity_rolled(self, make_enemy, scripted_rng):
        silk = Item(name="Spider Silk", stackable=True)
        enemy = make_enemy(
            min_gold=0,
            max_gold=0,
            loot=[LootDrop(item=silk, drop_chance=1.0, min_quantity=1, max_quantity=3)],
        )
        loot = roll_loot(enemy, scripted_rng(ints=[3]))
        assert loot.items[0].quantity == 3

    def test_non_stackable_always_single(self, make_enemy):
        rng = random.Random(5)
        mask = Item(name="Bandit Mask")
        enemy = make_enemy(
            loot=[LootDrop(item=mask, drop_chance=1.0, min_quantity=2, max_quantity=4)]
        )
        for _ in range(50):
            assert roll_loot(enemy, rng).items[0].quantity == 1

    def test_drops_are_new_instances(self, make_enemy):
        ear = Item(name="Goblin Ear", stackable=True)
        enemy = make_enemy(loot=[LootDrop(item=ear, drop_chance=1.0)])
        dropped = roll_loot(enemy, random.Random(1)).items[0]
        assert dropped is not enemy.loot[0].item
        dropped.add_quantity(3)
        assert enemy.loot[0].item.quantity == 1


# --- Bestiary Tests ---


class TestBestiary:
    """Tests for enemy templates and spawning."""

    def test_goblin_stats(self):
        goblin = spawn_enemy(EnemyType.GOBLIN)
        assert goblin.name == "Goblin Scavenger"
        assert goblin.hp_max == 40
        assert goblin.hp_current == 40
        assert (goblin.min_damage, goblin.max_damage) == (2, 4)
        assert goblin.experience_reward == 10

    def test_every_type_has_template(self):
        for enemy_type in EnemyType:
            assert enemy_type in ENEMY_TEMPLATES

    def test_spawns_are_independent(self):
        first = spawn_enemy(EnemyType.WOLF)
        second = spawn_enemy(EnemyType.WOLF)
        first.take_damage(10)
        first.attributes.stamina = 1
        first.loot[0].drop_chance = 0.0
        assert second.hp_current == second.hp_max == 60
        assert ENEMY_TEMPLATES[EnemyType.WOLF].attributes.stamina == 6
        assert ENEMY_TEMPLATES[EnemyType.WOLF].loot[0].drop_chance == 0.7

    def test_unknown_type_falls_back(self, caplog):
        assert template_for("dragon") is UNKNOWN_CREATURE
        assert "dragon" in caplog.text

    def test_template_gold_range_normalized(self):
        template = EnemyTemplate(
            name="Rat",
            attributes=Attributes(stamina=1),
            min_damage=1,
            max_damage=0,
            experience_reward=1,
            min_gold=5,
            max_gold=2,
        )
        assert template.max_gold == 5
        assert template.max_damage == 1


# --- Encounter Tests ---


def _location(chance, enemies=(EnemyType.GOBLIN,), max_enemies=1):
    return Location(
        location_id="test_site",
        name="Test Site",
        possible_enemies=list(enemies),
        encounter_chance=chance,
        max_enemies=max_enemies,
    )


class TestEncounters:
    """Tests for encounter rolls."""

    def test_roll_equal_to_chance_fires(self, scripted_rng):
        result = roll_encounter(_location(0.4), spawn_enemy, scripted_rng(uniforms=[0.4]))
        assert result.triggered
        assert len(result.enemies) == 1

    def test_roll_above_chance_does_not_fire(self, scripted_rng):
        result = roll_encounter(_location(0.4), spawn_enemy, scripted_rng(uniforms=[0.41]))
        assert not result.triggered
        assert result.enemies == []

    def test_no_enemies_no_roll(self):
        with patch("wayfarer.skills.dice.roll_unit") as mock_roll:
            result = roll_encounter(_location(1.0, enemies=()), spawn_enemy)
        assert result.roll is None
        mock_roll.assert_not_called()

    def test_zero_chance_no_roll(self):
        with patch("wayfarer.skills.dice.roll_unit") as mock_roll:
            result = roll_encounter(_location(0.0), spawn_enemy)
        assert not result.triggered
        mock_roll.assert_not_called()

    def test_count_within_max(self):
        rng = random.Random(21)
        location = _location(1.0, enemies=(EnemyType.WOLF, EnemyType.BANDIT), max_enemies=3)
        counts = set()
        for _ in range(200):
            result = roll_encounter(location, spawn_enemy, rng)
            counts.add(len(result.enemies))
            for enemy in result.enemies:
                assert enemy.enemy_type in (EnemyType.WOLF, EnemyType.BANDIT)
        assert counts == {1, 2, 3}

    def test_each_enemy_is_fresh(self, scripted_rng):
        result = roll_encounter(
            _location(1.0, max_enemies=2), spawn_enemy, scripted_rng(uniforms=[0.0], ints=[2])
        )
        first, second = result.enemies
        assert first is not second
        assert first.attributes is not second.attributes


class TestEncounterGenerator:
    """Tests for the EncounterGenerator service."""

    def test_roll_encounter_returns_roster(self, scripted_rng):
        generator = EncounterGenerator(rng=scripted_rng(uniforms=[0.1]))
        enemies = generator.roll_encounter(_location(0.5, enemies=(EnemyType.BANDIT,)))
        assert [enemy.name for enemy in enemies] == ["Road Bandit"]

    def test_empty_when_no_encounter(self, scripted_rng):
        generator = EncounterGenerator(rng=scripted_rng(uniforms=[0.9]))
        assert generator.roll_encounter(_location(0.5)) == []

    def test_custom_spawn(self, make_enemy):
        generator = EncounterGenerator(
            rng=random.Random(2), spawn=lambda _: make_enemy(name="Scarecrow")
        )
        enemies = generator.roll_encounter(_location(1.0))
        assert enemies[0].name == "Scarecrow"

    def test_get_dropped_loot(self, make_enemy):
        generator = EncounterGenerator(rng=random.Random(4))
        enemy = make_enemy(
            min_gold=2, max_gold=2, loot=[LootDrop(item=Item(name="Tooth"), drop_chance=1.0)]
        )
        loot = generator.get_dropped_loot(enemy)
        assert loot.gold == 2
        assert loot.items[0].name == "Tooth"
