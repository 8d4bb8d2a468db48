"""
Game Engine for Wayfarer.

The exploration layer: character creation, movement through the world
graph, searching and resting, and hand-off to and from combat.
"""

from __future__ import annotations

import logging
import random
from dataclasses import dataclass, field

from wayfarer.content.starter_world import create_starter_world
from wayfarer.engine.models import EngineConfig, ExplorationResult, GameState
from wayfarer.models.attributes import Attributes, CharacterClass, Origin, Race
from wayfarer.models.character import Character
from wayfarer.models.combat import (
    ActionType,
    CombatPhase,
    CombatResult,
    PlayerAction,
    TurnOutcome,
)
from wayfarer.models.enemy import Enemy
from wayfarer.models.errors import GameErrorKind
from wayfarer.models.location import Location, World
from wayfarer.services.combat import CombatSession
from wayfarer.services.encounters import EncounterGenerator
from wayfarer.skills.rest import take_full_rest

logger = logging.getLogger(__name__)


@dataclass
class GameEngine:
    """
    Main game engine orchestrating exploration and combat.

    Coordinates:
    - Character creation (the engine starts without a character)
    - Movement and searching, each of which may roll an encounter
    - The active CombatSession and the relocation after it ends
    """

    world: World = field(default_factory=create_starter_world)
    config: EngineConfig = field(default_factory=EngineConfig)
    rng: random.Random | None = None
    character: Character | None = None

    encounters: EncounterGenerator = field(init=False)
    state: GameState = field(init=False, default=GameState.CHARACTER_CREATION)
    current_location_id: str = field(init=False)
    combat: CombatSession | None = field(init=False, default=None)
    _pre_combat_location_id: str | None = field(init=False, default=None)

    def __post_init__(self) -> None:
        """Validate entry points and adopt a supplied character."""
        self.world.require(self.config.start_location_id)
        self.world.require(self.config.respawn_location_id)
        self.current_location_id = self.config.start_location_id.lower()
        self.encounters = EncounterGenerator(rng=self.rng)

        if self.character is not None:
            if not self.character.initialized:
                raise ValueError("GameEngine requires an initialized character")
            self._set_state(GameState.EXPLORING)

    @property
    def location(self) -> Location:
        return self.world.require(self.current_location_id)

    # =========================================================================
    # Character Creation
    # =========================================================================

    def create_character(
        self,
        name: str,
        race: Race,
        character_class: CharacterClass,
        origin: Origin,
        base_attributes: Attributes | None = None,
    ) -> ExplorationResult:
        """
        Build the player character and enter the world.

        Raises:
            ValueError: If the name is empty or the origin does not belong to the race
        """
        if self.state != GameState.CHARACTER_CREATION:
            logger.warning("Character creation requested in state %s", self.state.value)
            return self._fail(
                GameErrorKind.ALREADY_INITIALIZED, "A character has already been created."
            )

        character = Character()
        character.initialize(
            name=name,
            race=race,
            character_class=character_class,
            origin=origin,
            base_attributes=base_attributes,
            starting_gold=self.config.starting_gold,
        )
        self.character = character
        self._set_state(GameState.EXPLORING)

        return self._ok([f"Welcome, {character.name}.", self.location.look_description()])

    # =========================================================================
    # Exploration
    # =========================================================================

    def look(self) -> ExplorationResult:
        blocked = self._require_state(GameState.EXPLORING)
        if blocked:
            return blocked
        return self._ok([self.location.look_description()])

    def move(self, direction: str) -> ExplorationResult:
        """Follow an exit; arriving somewhere new may trigger an ambush."""
        blocked = self._require_state(GameState.EXPLORING)
        if blocked:
            return blocked

        direction = direction.strip().lower()
        if not direction:
            return self._fail(GameErrorKind.INVALID_TARGET, "Go where?")
        target_id = self.location.exit_to(direction)
        if target_id is None:
            return self._fail(GameErrorKind.INVALID_TARGET, f"You can't go {direction}.")
        target = self.world.get(target_id)
        if target is None:
            logger.warning(
                "Exit %r of %s leads to unknown location %r",
                direction,
                self.current_location_id,
                target_id,
            )
            return self._fail(GameErrorKind.INVALID_TARGET, f"You can't go {direction}.")

        self._relocate(target)
        lines = [target.look_description()]
        opening = self._roll_encounter(target, lines)
        return self._ok(lines, combat=opening)

    def search(self) -> ExplorationResult:
        """Explicitly roll for an encounter at the current location."""
        blocked = self._require_state(GameState.EXPLORING)
        if blocked:
            return blocked

        location = self.location
        lines: list[str] = []
        opening = self._roll_encounter(location, lines)
        if opening is None:
            lines.append(f"You search the {location.name} but find nothing.")
        return self._ok(lines, combat=opening)

    def rest(self) -> ExplorationResult:
        blocked = self._require_state(GameState.EXPLORING)
        if blocked:
            return blocked
        result = take_full_rest(self.character)
        return self._ok([result.message])

    def stats(self) -> ExplorationResult:
        if self.character is None:
            return self._not_created()
        return self._ok(self.character.stats_summary().splitlines())

    def inventory(self) -> ExplorationResult:
        if self.character is None:
            return self._not_created()
        return self._ok(self.character.inventory_summary().splitlines())

    # =========================================================================
    # Combat Hand-off
    # =========================================================================

    def start_combat(self, enemies: list[Enemy]) -> TurnOutcome:
        """
        Begin a fight against a given roster at the current location.

        Raises:
            ValueError: If no character exists or the roster is empty
        """
        if self.character is None:
            raise ValueError("Cannot start combat without a character")
        if self.state == GameState.COMBAT:
            raise ValueError("Combat is already in progress")

        self.combat, opening = CombatSession.start(
            self.character, enemies, config=self.config.combat, rng=self.rng
        )
        self._pre_combat_location_id = self.current_location_id
        self._set_state(GameState.COMBAT)
        return opening

    def submit_combat_action(self, action: PlayerAction | ActionType) -> TurnOutcome:
        """Forward an action to the active fight, then settle it if it ended."""
        if self.state != GameState.COMBAT or self.combat is None:
            reason = "You are not in combat."
            return TurnOutcome(
                lines=[reason],
                phase=CombatPhase.ENDED,
                transitions=[CombatPhase.ENDED],
                error=GameErrorKind.INVALID_TRANSITION,
                reason=reason,
            )

        outcome = self.combat.submit_action(action)
        if outcome.ended:
            outcome.lines.extend(self._finish_combat(outcome))
        return outcome

    def _roll_encounter(self, location: Location, lines: list[str]) -> TurnOutcome | None:
        enemies = self.encounters.roll_encounter(location)
        if not enemies:
            return None
        lines.append(f"You are ambushed in {location.name}!")
        opening = self.start_combat(enemies)
        lines.extend(opening.lines)
        return opening

    def _finish_combat(self, outcome: TurnOutcome) -> list[str]:
        """Relocate after a fight and produce the post-combat report."""
        respawn = self.world.require(self.config.respawn_location_id)
        if outcome.result == CombatResult.DEFEAT:
            destination = respawn
        else:
            destination = self.world.get(self._pre_combat_location_id or "") or respawn

        self.combat = None
        self._pre_combat_location_id = None
        self._relocate(destination)
        self._set_state(GameState.EXPLORING)

        lines = outcome.summary.summary_lines() if outcome.summary else []
        if outcome.result == CombatResult.DEFEAT:
            lines.append(f"You wake up in {destination.name}.")
        return lines

    # =========================================================================
    # Helpers
    # =========================================================================

    def _relocate(self, location: Location) -> None:
        logger.debug("Relocating %s -> %s", self.current_location_id, location.location_id)
        self.current_location_id = location.location_id.lower()

    def _set_state(self, state: GameState) -> None:
        logger.info("Engine state %s -> %s", self.state.value, state.value)
        self.state = state

    def _require_state(self, state: GameState) -> ExplorationResult | None:
        if self.character is None or self.state == GameState.CHARACTER_CREATION:
            return self._not_created()
        if self.state != state:
            return self._fail(
                GameErrorKind.INVALID_TRANSITION, "You cannot do that during combat."
            )
        return None

    def _not_created(self) -> ExplorationResult:
        return self._fail(GameErrorKind.NOT_INITIALIZED, "Create a character first.")

    def _ok(self, lines: list[str], combat: TurnOutcome | None = None) -> ExplorationResult:
        return ExplorationResult(
            lines=lines,
            state=self.state,
            location_id=self.current_location_id,
            combat=combat,
        )

    def _fail(self, error: GameErrorKind, reason: str) -> ExplorationResult:
        return ExplorationResult(
            success=False,
            lines=[reason],
            error=error,
            reason=reason,
            state=self.state,
            location_id=self.current_location_id,
        )
