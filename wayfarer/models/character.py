"""
Character Model for Wayfarer.

The player-controlled entity: identity, attributes, resource pools,
inventory, gold and level progression.
"""

from __future__ import annotations

import logging

from pydantic import BaseModel, Field

from wayfarer.models.ability import AbilityId
from wayfarer.models.attributes import (
    Attributes,
    CharacterClass,
    Origin,
    Race,
    ResourceType,
    apply_class_specialization,
    display_name,
    origins_for_race,
    primary_resource as class_resource,
)
from wayfarer.models.errors import ActionResult, GameErrorKind
from wayfarer.models.item import Item

logger = logging.getLogger(__name__)

STARTING_LEVEL = 1
FIRST_LEVEL_THRESHOLD = 100
LEVEL_THRESHOLD_GROWTH = 1.5
# Replaces a non-positive threshold so the level-up loop always terminates
THRESHOLD_SENTINEL = 10**9

NOT_AVAILABLE = "Character data not available yet."


class LevelUp(BaseModel):
    """A single level gained."""

    level: int
    health_gained: int = Field(ge=0)
    next_threshold: int


class ExperienceResult(BaseModel):
    """Result of granting experience."""

    amount: int
    experience: int = Field(description="Experience toward the next level afterwards")
    level: int
    level_ups: list[LevelUp] = Field(default_factory=list)
    messages: list[str] = Field(default_factory=list)
    error: GameErrorKind | None = None

    @property
    def levels_gained(self) -> int:
        return len(self.level_ups)


class Character(BaseModel):
    """
    A player character.

    Created uninitialized; `initialize` consumes the creation choices
    exactly once. Use `create_character` to get a ready-to-play instance.
    """

    name: str = ""
    race: Race | None = None
    character_class: CharacterClass | None = None
    origin: Origin | None = None
    attributes: Attributes = Field(default_factory=Attributes)

    hp_current: int = Field(default=0, ge=0)
    hp_max: int = Field(default=0, ge=0)
    mana_current: int = Field(default=0, ge=0)
    mana_max: int = Field(default=0, ge=0)
    rage_current: int = Field(default=0, ge=0)
    rage_max: int = Field(default=0, ge=0)
    energy_current: int = Field(default=0, ge=0)
    energy_max: int = Field(default=0, ge=0)

    inventory: list[Item] = Field(default_factory=list)
    gold: int = Field(default=0, ge=0)

    level: int = Field(default=STARTING_LEVEL, ge=1)
    experience: int = Field(default=0, ge=0)
    experience_to_next: int = FIRST_LEVEL_THRESHOLD

    active_stance: AbilityId | None = Field(
        default=None, description="Transient per-combat stance, e.g. Counterattack"
    )
    initialized: bool = False

    # -------------------------------------------------------------------------
    # Lifecycle
    # -------------------------------------------------------------------------

    def initialize(
        self,
        name: str,
        race: Race,
        character_class: CharacterClass,
        origin: Origin,
        base_attributes: Attributes | None = None,
        starting_gold: int = 0,
    ) -> ActionResult:
        """
        Apply creation choices.

        Re-initialization is rejected (logged, not raised). An empty name or
        an origin that does not belong to the race raises ValueError.
        """
        if self.initialized:
            logger.warning("Character %r already initialized; ignoring", self.name)
            return ActionResult.fail(
                GameErrorKind.ALREADY_INITIALIZED, f"{self.name} is already initialized."
            )
        if not name or not name.strip():
            raise ValueError("Character name cannot be empty")
        if origin not in origins_for_race(race):
            raise ValueError(
                f"Origin {display_name(origin)} is not available to race {display_name(race)}"
            )

        self.name = name.strip()
        self.race = race
        self.character_class = character_class
        self.origin = origin
        self.attributes = (base_attributes or Attributes()).model_copy()
        apply_class_specialization(self.attributes, character_class)

        self.recalculate_pools()
        self.restore_to_max()

        self.inventory = []
        self.gold = max(0, starting_gold)
        self.level = STARTING_LEVEL
        self.experience = 0
        self.experience_to_next = FIRST_LEVEL_THRESHOLD
        self.active_stance = None
        self.initialized = True

        logger.info(
            "Character %r initialized: %s, HP %d/%d",
            self.name,
            character_class.value,
            self.hp_current,
            self.hp_max,
        )
        return ActionResult.ok()

    @property
    def primary_resource(self) -> ResourceType | None:
        if self.character_class is None:
            return None
        return class_resource(self.character_class)

    # -------------------------------------------------------------------------
    # Pools
    # -------------------------------------------------------------------------

    def recalculate_pools(self) -> None:
        """Recompute max pools from attributes; current values are capped."""
        pools = self.attributes.derive_pools()
        self.hp_max = pools.max_health
        self.mana_max = pools.max_mana
        self.rage_max = pools.max_rage
        self.energy_max = pools.max_energy

        self.hp_current = min(self.hp_current, self.hp_max)
        self.mana_current = min(self.mana_current, self.mana_max)
        self.rage_current = min(self.rage_current, self.rage_max)
        self.energy_current = min(self.energy_current, self.energy_max)

    def restore_to_max(self) -> None:
        """Full rest: health, mana and energy refill; rage drains to 0."""
        self.hp_current = self.hp_max
        self.mana_current = self.mana_max
        self.energy_current = self.energy_max
        self.rage_current = 0

    def is_defeated(self) -> bool:
        return self.hp_current <= 0

    def take_damage(self, amount: int) -> int:
        """Reduce health (floored at 0). Returns the health actually lost."""
        if not self.initialized or amount <= 0:
            return 0
        old = self.hp_current
        self.hp_current = max(0, self.hp_current - amount)
        return old - self.hp_current

    def heal(self, amount: int) -> int:
        """Restore health up to max. Returns the health actually restored."""
        if not self.initialized or amount <= 0:
            return 0
        old = self.hp_current
        self.hp_current = min(self.hp_max, self.hp_current + amount)
        return self.hp_current - old

    def resource(self, kind: ResourceType) -> tuple[int, int]:
        """Current and max of a resource pool."""
        match kind:
            case ResourceType.MANA:
                return self.mana_current, self.mana_max
            case ResourceType.RAGE:
                return self.rage_current, self.rage_max
            case ResourceType.ENERGY:
                return self.energy_current, self.energy_max
            case _:
                raise ValueError(f"Unknown resource: {kind}")

    def _set_resource(self, kind: ResourceType, value: int) -> None:
        match kind:
            case ResourceType.MANA:
                self.mana_current = value
            case ResourceType.RAGE:
                self.rage_current = value
            case ResourceType.ENERGY:
                self.energy_current = value
            case _:
                raise ValueError(f"Unknown resource: {kind}")

    def spend_resource(self, kind: ResourceType, amount: int) -> ActionResult:
        """
        Deduct from a resource pool.

        Nothing is deducted unless the whole amount is available.
        """
        if not self.initialized:
            return ActionResult.fail(GameErrorKind.NOT_INITIALIZED, NOT_AVAILABLE)
        if amount <= 0:
            return ActionResult.fail(
                GameErrorKind.INSUFFICIENT_RESOURCE, f"Invalid {kind.value} cost: {amount}."
            )
        current, maximum = self.resource(kind)
        if maximum == 0:
            return ActionResult.fail(
                GameErrorKind.INSUFFICIENT_RESOURCE, f"You do not use {kind.value}."
            )
        if current < amount:
            return ActionResult.fail(
                GameErrorKind.INSUFFICIENT_RESOURCE, f"Not enough {kind.value}!"
            )
        self._set_resource(kind, current - amount)
        return ActionResult.ok()

    def gain_resource(self, kind: ResourceType, amount: int) -> int:
        """Add to a resource pool up to its max. Returns the amount gained."""
        if not self.initialized or amount <= 0:
            return 0
        current, maximum = self.resource(kind)
        new_value = min(maximum, current + amount)
        self._set_resource(kind, new_value)
        return new_value - current

    # -------------------------------------------------------------------------
    # Progression
    # -------------------------------------------------------------------------

    def gain_experience(self, amount: int) -> ExperienceResult:
        """
        Grant experience and apply every level-up it pays for.

        Each level raises all attributes by 1, grants the max health increase
        as current health, refills mana and energy, and leaves rage alone.
        """
        if not self.initialized:
            return ExperienceResult(
                amount=amount,
                experience=self.experience,
                level=self.level,
                error=GameErrorKind.NOT_INITIALIZED,
            )
        if amount <= 0:
            return ExperienceResult(amount=amount, experience=self.experience, level=self.level)

        self.experience += amount
        messages = [f"{self.name} gained {amount} experience."]
        level_ups: list[LevelUp] = []

        while self.experience >= self.experience_to_next:
            if self.experience_to_next <= 0:
                logger.warning(
                    "Invalid experience threshold %d for %r; clamping",
                    self.experience_to_next,
                    self.name,
                )
                self.experience_to_next = THRESHOLD_SENTINEL
                break

            self.level += 1
            self.experience -= self.experience_to_next
            self.experience_to_next = round(self.experience_to_next * LEVEL_THRESHOLD_GROWTH)

            old_hp_max = self.hp_max
            self.attributes.increment_all(1)
            self.recalculate_pools()
            health_gained = max(0, self.hp_max - old_hp_max)
            self.hp_current = min(self.hp_max, self.hp_current + health_gained)
            self.mana_current = self.mana_max
            self.energy_current = self.energy_max

            level_ups.append(
                LevelUp(
                    level=self.level,
                    health_gained=health_gained,
                    next_threshold=self.experience_to_next,
                )
            )
            messages.append(f"{self.name} reached Level {self.level}! Stats increased.")

        return ExperienceResult(
            amount=amount,
            experience=self.experience,
            level=self.level,
            level_ups=level_ups,
            messages=messages,
        )

    # -------------------------------------------------------------------------
    # Gold & Inventory
    # -------------------------------------------------------------------------

    def add_gold(self, amount: int) -> bool:
        if not self.initialized or amount <= 0:
            return False
        self.gold += amount
        return True

    def spend_gold(self, amount: int) -> bool:
        if not self.initialized or amount <= 0 or self.gold < amount:
            return False
        self.gold -= amount
        return True

    def find_item(self, name: str) -> Item | None:
        """First inventory entry with the given name (case-insensitive)."""
        wanted = name.lower()
        return next((item for item in self.inventory if item.name.lower() == wanted), None)

    def add_item(self, item: Item) -> bool:
        """
        Add an independent copy of an item.

        Stackable items merge into an existing stack of the same name.
        """
        if not self.initialized:
            return False
        if item.stackable:
            existing = next(
                (i for i in self.inventory if i.name == item.name and i.stackable), None
            )
            if existing is not None:
                return existing.add_quantity(item.quantity)
            self.inventory.append(item.new_instance(item.quantity))
        else:
            self.inventory.append(item.new_instance(1))
        return True

    def remove_item(self, name: str, quantity: int = 1) -> bool:
        """
        Remove items by name.

        A stack must hold at least `quantity`; non-stackable items are
        removed one entry at a time.
        """
        if not self.initialized or quantity <= 0:
            return False
        item = self.find_item(name)
        if item is None:
            return False
        if item.stackable:
            if item.quantity < quantity:
                return False
            item.quantity -= quantity
            if item.quantity <= 0:
                self.inventory.remove(item)
            return True
        if quantity != 1:
            return False
        self.inventory.remove(item)
        return True

    def first_usable_item(self) -> Item | None:
        return next((item for item in self.inventory if item.usable), None)

    # -------------------------------------------------------------------------
    # Display
    # -------------------------------------------------------------------------

    def stats_summary(self) -> str:
        """Human-readable stat block."""
        if not self.initialized:
            return NOT_AVAILABLE
        a = self.attributes
        lines = [
            "--- Player Stats ---",
            f"Name: {self.name} ({display_name(self.race)} "
            f"{display_name(self.character_class)} from {display_name(self.origin)})",
            f"Level: {self.level} (XP: {self.experience}/{self.experience_to_next})",
            "--------------------",
            f"Health: {self.hp_current} / {self.hp_max}",
        ]
        if self.mana_max > 0:
            lines.append(f"Mana:   {self.mana_current} / {self.mana_max} (WIS: {a.wisdom})")
        if self.rage_max > 0:
            lines.append(f"Rage:   {self.rage_current} / {self.rage_max} (FUR: {a.fury})")
        if self.energy_max > 0:
            lines.append(
                f"Energy: {self.energy_current} / {self.energy_max} (END: {a.endurance})"
            )
        lines += [
            f"Gold: {self.gold}g",
            "--------------------",
            "Attributes:",
            f"  Strength: {a.strength}  |  Agility: {a.agility}  |  "
            f"Intelligence: {a.intelligence}",
            f"  Stamina: {a.stamina} |  Wisdom: {a.wisdom} |  Fury: {a.fury}",
            f"  Endurance: {a.endurance} |  Faith: {a.faith}",
            "--------------------",
        ]
        return "\n".join(lines)

    def inventory_summary(self) -> str:
        """Human-readable inventory listing."""
        if not self.initialized:
            return NOT_AVAILABLE
        lines = ["--- Inventory ---"]
        if not self.inventory:
            lines.append("Your inventory is empty.")
        else:
            lines.extend(f"- {item}" for item in self.inventory)
        lines += ["", f"Gold: {self.gold}g", "--------------------"]
        return "\n".join(lines)


def create_character(
    name: str,
    race: Race,
    character_class: CharacterClass,
    origin: Origin,
    base_attributes: Attributes | None = None,
    starting_gold: int = 0,
) -> Character:
    """Factory function returning an initialized character."""
    character = Character()
    character.initialize(
        name=name,
        race=race,
        character_class=character_class,
        origin=origin,
        base_attributes=base_attributes,
        starting_gold=starting_gold,
    )
    return character
