"""
Random Roll Skill.

Uniform integer ranges and probability checks used by combat, loot
and encounter rules. Every roll takes an optional random source so
callers can inject a seeded generator; the default is cryptographically
random.
"""

from __future__ import annotations

import random
import secrets
from collections.abc import Sequence
from typing import TypeVar

from pydantic import BaseModel, Field

T = TypeVar("T")

_system_rng = secrets.SystemRandom()


class ChanceResult(BaseModel):
    """Result of a probability check."""

    roll: float = Field(description="Uniform value drawn from [0, 1]")
    chance: float = Field(description="Probability of success")
    success: bool = Field(description="True when roll <= chance")


def get_rng(rng: random.Random | None = None) -> random.Random:
    """The given random source, or the shared system source."""
    return rng if rng is not None else _system_rng


def roll_range(low: int, high: int, rng: random.Random | None = None) -> int:
    """Uniform integer in [low, high], both inclusive. high < low yields low."""
    if high <= low:
        return low
    return get_rng(rng).randint(low, high)


def roll_half_open(low: int, high: int, rng: random.Random | None = None) -> int:
    """Uniform integer in [low, high), high exclusive. high <= low yields low."""
    if high <= low:
        return low
    return get_rng(rng).randrange(low, high)


def roll_unit(rng: random.Random | None = None) -> float:
    """Uniform value in [0, 1]."""
    return get_rng(rng).uniform(0.0, 1.0)


def roll_chance(chance: float, rng: random.Random | None = None) -> ChanceResult:
    """
    Check a probability.

    A roll exactly equal to the chance counts as a success. A chance of
    0 or less never succeeds, whatever the roll.

    Args:
        chance: Probability in [0, 1]
        rng: Optional random source

    Returns:
        ChanceResult with the drawn value and the outcome
    """
    roll = roll_unit(rng)
    return ChanceResult(roll=roll, chance=chance, success=chance > 0 and roll <= chance)


def choose(options: Sequence[T], rng: random.Random | None = None) -> T:
    """Uniform pick from a non-empty sequence."""
    if not options:
        raise ValueError("Cannot choose from an empty sequence")
    return get_rng(rng).choice(options)
