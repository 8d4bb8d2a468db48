"""
Item Catalogue for Wayfarer.

Template items. Callers receive fresh instances so the catalogue
entries are never mutated.
"""

from __future__ import annotations

from wayfarer.models.item import Item, ItemType

GOBLIN_EAR = "Goblin Ear"
WOLF_PELT = "Wolf Pelt"
SPIDER_SILK = "Spider Silk"
BANDIT_MASK = "Bandit Mask"
MINOR_HEALING_POTION = "Minor Healing Potion"
CRUSTY_BREAD = "Crusty Bread"

_CATALOGUE: dict[str, Item] = {
    item.name.lower(): item
    for item in (
        Item(
            name=GOBLIN_EAR,
            description="A grimy goblin ear. Proof of a kill, or perhaps an ingredient?",
            gold_value=2,
            stackable=True,
        ),
        Item(
            name=WOLF_PELT,
            description="A rough wolf pelt. Could be useful for crafting or trade.",
            gold_value=5,
            stackable=True,
        ),
        Item(
            name=SPIDER_SILK,
            description="A sticky strand of potent spider silk.",
            gold_value=3,
            stackable=True,
        ),
        Item(
            name=BANDIT_MASK,
            description="A tattered mask, often worn by highwaymen.",
            gold_value=10,
            stackable=False,
        ),
        Item(
            name=MINOR_HEALING_POTION,
            description="A common potion that restores a small amount of health.",
            item_type=ItemType.POTION,
            gold_value=25,
            stackable=True,
            heal_amount=25,
        ),
        Item(
            name=CRUSTY_BREAD,
            description="A somewhat stale loaf of bread. Better than nothing.",
            gold_value=1,
            stackable=True,
            heal_amount=5,
        ),
    )
}


def get_item(name: str, quantity: int = 1) -> Item:
    """
    Create a new instance of a catalogue item.

    Raises:
        ValueError: If no item has that name
    """
    template = _CATALOGUE.get(name.lower())
    if template is None:
        raise ValueError(f"Unknown item: {name}")
    return template.new_instance(quantity)


def item_names() -> list[str]:
    return [item.name for item in _CATALOGUE.values()]
