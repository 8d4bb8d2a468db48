"""
Enemy Models for Wayfarer.

Static per-type templates and the fresh combatants instantiated
from them for each encounter.
"""

from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field, ValidationInfo, field_validator, model_validator

from wayfarer.models.attributes import Attributes
from wayfarer.models.item import LootDrop


class EnemyType(str, Enum):
    """Enemy kinds a location can spawn."""

    GOBLIN = "goblin"
    WOLF = "wolf"
    FOREST_SPIDER = "forest_spider"
    BANDIT = "bandit"


class Enemy(BaseModel):
    """
    A combatant created for a single encounter.

    Max health follows the same formula as characters (Stamina * 10).
    """

    name: str
    enemy_type: EnemyType | None = None
    attributes: Attributes
    level: int = Field(default=1, ge=1)
    hp_max: int = Field(default=0, ge=0)
    hp_current: int | None = Field(default=None, description="Defaults to hp_max")
    min_damage: int = Field(ge=0)
    max_damage: int = Field(ge=0)
    experience_reward: int = Field(default=0, ge=0)
    min_gold: int = Field(default=0, ge=0)
    max_gold: int = Field(default=0, ge=0)
    loot: list[LootDrop] = Field(default_factory=list)

    @model_validator(mode="after")
    def derive_health(self) -> Enemy:
        self.hp_max = self.attributes.derive_pools().max_health
        if self.hp_current is None or self.hp_current > self.hp_max:
            self.hp_current = self.hp_max
        self.max_damage = max(self.min_damage, self.max_damage)
        self.max_gold = max(self.min_gold, self.max_gold)
        return self

    def take_damage(self, amount: int) -> int:
        """Reduce health (floored at 0). Returns the health actually lost."""
        if amount <= 0:
            return 0
        old = self.hp_current
        self.hp_current = max(0, self.hp_current - amount)
        return old - self.hp_current

    def is_defeated(self) -> bool:
        return self.hp_current <= 0

    def status_line(self) -> str:
        return f"{self.name} ({self.hp_current}/{self.hp_max}HP)"


class EnemyTemplate(BaseModel):
    """Immutable stat, reward and loot blueprint for an enemy type."""

    model_config = ConfigDict(frozen=True)

    name: str
    enemy_type: EnemyType | None = None
    attributes: Attributes
    min_damage: int = Field(ge=0)
    max_damage: int = Field(ge=0)
    experience_reward: int = Field(ge=0)
    min_gold: int = Field(default=0, ge=0)
    max_gold: int = Field(default=0, ge=0)
    level: int = Field(default=1, ge=1)
    loot: tuple[LootDrop, ...] = ()

    @field_validator("max_damage")
    @classmethod
    def max_damage_not_below_min(cls, value: int, info: ValidationInfo) -> int:
        return max(value, info.data.get("min_damage", 0))

    @field_validator("max_gold")
    @classmethod
    def max_gold_not_below_min(cls, value: int, info: ValidationInfo) -> int:
        return max(value, info.data.get("min_gold", 0))

    def instantiate(self) -> Enemy:
        """Create a fresh enemy; attributes and loot are deep-copied."""
        return Enemy(
            name=self.name,
            enemy_type=self.enemy_type,
            attributes=self.attributes.model_copy(),
            level=self.level,
            min_damage=self.min_damage,
            max_damage=self.max_damage,
            experience_reward=self.experience_reward,
            min_gold=self.min_gold,
            max_gold=self.max_gold,
            loot=[drop.model_copy(deep=True) for drop in self.loot],
        )
