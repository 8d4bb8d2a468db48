"""
Item Models for Wayfarer.

Items carried in inventories and the loot table entries
enemies roll on defeat.
"""

from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, Field, field_validator, model_validator


class ItemType(str, Enum):
    """Broad item categories."""

    GENERIC = "generic"
    WEAPON = "weapon"
    ARMOR = "armor"
    POTION = "potion"
    QUEST_ITEM = "quest_item"


class Item(BaseModel):
    """
    An item instance.

    Non-stackable items always have quantity 1. Stackable items of the
    same name merge into a single inventory entry.
    """

    name: str = Field(min_length=1)
    description: str = ""
    item_type: ItemType = ItemType.GENERIC
    gold_value: int = Field(default=0, ge=0, description="Sell value in gold")
    stackable: bool = False
    quantity: int = Field(default=1, ge=1)
    heal_amount: int = Field(default=0, ge=0, description="Health restored when used")

    @model_validator(mode="after")
    def single_unless_stackable(self) -> Item:
        if not self.stackable:
            self.quantity = 1
        return self

    @property
    def usable(self) -> bool:
        """Whether the item can be consumed for an effect."""
        return self.heal_amount > 0

    def add_quantity(self, amount: int) -> bool:
        """
        Grow the stack.

        Returns:
            False if the item does not stack or amount is not positive.
        """
        if not self.stackable or amount <= 0:
            return False
        self.quantity += amount
        return True

    def new_instance(self, quantity: int = 1) -> Item:
        """Create an independent copy with the given quantity."""
        return Item(
            name=self.name,
            description=self.description,
            item_type=self.item_type,
            gold_value=self.gold_value,
            stackable=self.stackable,
            quantity=max(1, quantity),
            heal_amount=self.heal_amount,
        )

    def label(self) -> str:
        """Name with stack count, e.g. 'Goblin Ear (x2)'."""
        if self.stackable and self.quantity > 1:
            return f"{self.name} (x{self.quantity})"
        return self.name

    def __str__(self) -> str:
        return f"{self.label()} - Value: {self.gold_value}g"


class LootDrop(BaseModel):
    """One loot table entry: an item template and how often it drops."""

    item: Item
    drop_chance: float = Field(description="Probability in [0, 1]")
    min_quantity: int = 1
    max_quantity: int = 1

    @field_validator("drop_chance")
    @classmethod
    def clamp_chance(cls, value: float) -> float:
        return min(max(value, 0.0), 1.0)

    @model_validator(mode="after")
    def normalize_quantities(self) -> LootDrop:
        self.min_quantity = max(1, self.min_quantity)
        self.max_quantity = max(self.min_quantity, self.max_quantity)
        return self
