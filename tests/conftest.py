"""Shared fixtures for Wayfarer tests."""

from __future__ import annotations

import random

import pytest

from wayfarer.models import (
    Attributes,
    Character,
    CharacterClass,
    Enemy,
    Origin,
    Race,
    create_character,
)


class ScriptedRandom(random.Random):
    """
    Seeded random source that replays scripted values first.

    `uniforms` feed `uniform` (probability checks); `ints` feed `randint`
    and `randrange` (damage, gold and counts), clamped into the requested
    range. Once a script runs out the seeded generator takes over.
    """

    def __init__(self, uniforms=(), ints=(), seed=0):
        super().__init__(seed)
        self._uniforms = list(uniforms)
        self._ints = list(ints)

    def uniform(self, a, b):
        if self._uniforms:
            return self._uniforms.pop(0)
        return super().uniform(a, b)

    def randint(self, a, b):
        if self._ints:
            return min(max(self._ints.pop(0), a), b)
        return super().randint(a, b)

    def randrange(self, start, stop=None, step=1):
        if self._ints and stop is not None:
            return min(max(self._ints.pop(0), start), stop - 1)
        return super().randrange(start, stop, step)


@pytest.fixture
def scripted_rng():
    """Factory for ScriptedRandom instances."""
    return ScriptedRandom


@pytest.fixture
def fighter() -> Character:
    return create_character(
        "Brom", Race.DWARF, CharacterClass.FIGHTER, Origin.CLAN_HOLD_OF_IRONPEAK
    )


@pytest.fixture
def wizard() -> Character:
    return create_character(
        "Ilya", Race.ELF, CharacterClass.WIZARD, Origin.LOREMASTER_OF_SILVERSPIRE
    )


@pytest.fixture
def cleric() -> Character:
    return create_character(
        "Maren", Race.HUMAN, CharacterClass.CLERIC, Origin.ACOLYTE_OF_THE_SUN_TEMPLE
    )


@pytest.fixture
def make_enemy():
    """Factory for enemies with a given stamina and damage range."""

    def _make(
        name="Training Dummy",
        stamina=4,
        min_damage=2,
        max_damage=4,
        experience_reward=10,
        min_gold=1,
        max_gold=5,
        loot=None,
    ) -> Enemy:
        return Enemy(
            name=name,
            attributes=Attributes(stamina=stamina),
            min_damage=min_damage,
            max_damage=max_damage,
            experience_reward=experience_reward,
            min_gold=min_gold,
            max_gold=max_gold,
            loot=loot or [],
        )

    return _make
