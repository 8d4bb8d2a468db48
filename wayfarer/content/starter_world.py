"""
Starter World for Wayfarer.

A small town on the edge of a forest: safe streets to the south,
increasingly dangerous woods to the north.
"""

from __future__ import annotations

from wayfarer.models.enemy import EnemyType
from wayfarer.models.location import Location, World

TOWN_SQUARE = "town_square"
GENERAL_STORE = "general_store"
NORTH_ROAD = "north_road"
FOREST_ENTRANCE = "forest_entrance"
DEEP_WOODS = "deep_woods"
ANCIENT_GROVE = "ancient_grove"
FOREST_CLEARING = "forest_clearing"


def create_starter_world() -> World:
    """
    Build the starter location graph.

    Returns a world with:
    - Town Square as the starting and respawn location
    - A General Store and the North Road, both safe
    - Four forest locations with rising encounter rates
    """
    world = World()

    # =========================================================================
    # Town
    # =========================================================================
    world.add(
        Location(
            location_id=TOWN_SQUARE,
            name="Town Square",
            description=(
                "You are in the bustling town square. Cobblestone paths lead in several "
                "directions. A fountain gurgles peacefully in the center."
            ),
            exits={"north": NORTH_ROAD, "east": GENERAL_STORE},
        )
    )
    world.add(
        Location(
            location_id=GENERAL_STORE,
            name="General Store",
            description=(
                "A cozy shop filled with various goods. A counter stands at the back. "
                "A sign reads 'Open'."
            ),
            exits={"west": TOWN_SQUARE},
        )
    )
    world.add(
        Location(
            location_id=NORTH_ROAD,
            name="North Road",
            description=(
                "A dusty road leading north out of town. Fields stretch to the east and "
                "west. The air grows cooler to the north."
            ),
            exits={"south": TOWN_SQUARE, "north": FOREST_ENTRANCE},
        )
    )

    # =========================================================================
    # Forest
    # =========================================================================
    world.add(
        Location(
            location_id=FOREST_ENTRANCE,
            name="Forest Entrance",
            description=(
                "The road gives way to a dark and ancient forest. A narrow, overgrown "
                "path winds north into the gloomy woods. You hear the distant caw of a crow."
            ),
            exits={"south": NORTH_ROAD, "north": DEEP_WOODS},
            possible_enemies=[EnemyType.WOLF, EnemyType.GOBLIN],
            encounter_chance=0.3,
            max_enemies=2,
        )
    )
    world.add(
        Location(
            location_id=DEEP_WOODS,
            name="Deep Woods",
            description=(
                "You are deep within the woods. Sunlight barely penetrates the thick "
                "canopy above. Strange sounds echo around you. Paths lead east and west, "
                "and the way back south."
            ),
            exits={"south": FOREST_ENTRANCE, "east": FOREST_CLEARING, "west": ANCIENT_GROVE},
            possible_enemies=[EnemyType.FOREST_SPIDER, EnemyType.WOLF, EnemyType.BANDIT],
            encounter_chance=0.5,
            max_enemies=3,
        )
    )
    world.add(
        Location(
            location_id=ANCIENT_GROVE,
            name="Ancient Grove",
            description=(
                "You've stumbled into a serene grove. A circle of moss-covered stones "
                "stands silently in the center. The air feels strangely calm here. "
                "A path leads west out of the grove."
            ),
            exits={"east": DEEP_WOODS},
            possible_enemies=[EnemyType.GOBLIN],
            encounter_chance=0.1,
            max_enemies=1,
        )
    )
    world.add(
        Location(
            location_id=FOREST_CLEARING,
            name="Forest Clearing",
            description=(
                "A small, sun-dappled clearing. Wildflowers grow in patches. A narrow path "
                "continues east, and another leads south back into the deeper woods."
            ),
            exits={"west": DEEP_WOODS},
            possible_enemies=[EnemyType.GOBLIN, EnemyType.FOREST_SPIDER],
            encounter_chance=0.2,
            max_enemies=2,
        )
    )

    return world
