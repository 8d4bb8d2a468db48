"""
Combat Session Service.

Owns the turn state machine for one fight. Every public call is a single
synchronous transition: the player's action resolves fully, then each
living enemy acts in roster order, and the session is left consistent
before the call returns.
"""

from __future__ import annotations

import logging
import random
from dataclasses import dataclass, field

from wayfarer.models.ability import AbilityId, SpellEffect, abilities_for_class, spell_for_class
from wayfarer.models.attributes import ResourceType
from wayfarer.models.character import Character
from wayfarer.models.combat import (
    ActionType,
    CombatConfig,
    CombatPhase,
    CombatResult,
    CombatSummary,
    PlayerAction,
    TurnOutcome,
)
from wayfarer.models.enemy import Enemy
from wayfarer.models.errors import GameErrorKind
from wayfarer.models.item import Item
from wayfarer.skills.abilities import (
    activate_ability,
    available_skills,
    clear_stance,
    consume_stance,
)
from wayfarer.skills.combat import (
    counter_hit_damage,
    first_living,
    rage_from_damage,
    roll_attack_damage,
    roll_enemy_damage,
    roll_flee,
)
from wayfarer.skills.loot import roll_loot

logger = logging.getLogger(__name__)

MAIN_ACTIONS = (
    ActionType.ATTACK,
    ActionType.CAST,
    ActionType.ITEM,
    ActionType.FLEE,
    ActionType.OPEN_SKILLS,
)
SKILL_ACTIONS = (ActionType.SELECT_SKILL, ActionType.BACK)

FULL_HEALTH = "You are already at full health."


@dataclass
class CombatSession:
    """
    One fight between the character and an enemy roster.

    Construct with `CombatSession.start(...)`, which also runs the opening
    announcement, then drive it with `submit_action` until `ended`.
    """

    character: Character
    enemies: list[Enemy]
    config: CombatConfig = field(default_factory=CombatConfig)
    rng: random.Random | None = None

    phase: CombatPhase = field(init=False, default=CombatPhase.START)
    result: CombatResult | None = field(init=False, default=None)
    summary: CombatSummary | None = field(init=False, default=None)

    # Per-call buffers
    _lines: list[str] = field(init=False, default_factory=list)
    _trail: list[CombatPhase] = field(init=False, default_factory=list)

    def __post_init__(self) -> None:
        if self.character is None:
            raise ValueError("CombatSession requires a character")
        if not self.character.initialized:
            raise ValueError("CombatSession requires an initialized character")
        if not self.enemies:
            raise ValueError("CombatSession requires at least one enemy")
        # Enemies already down when the fight starts earn no rewards
        self.enemies = [enemy for enemy in self.enemies if not enemy.is_defeated()]
        if not self.enemies:
            raise ValueError("CombatSession requires at least one living enemy")

    @classmethod
    def start(
        cls,
        character: Character,
        enemies: list[Enemy],
        config: CombatConfig | None = None,
        rng: random.Random | None = None,
    ) -> tuple[CombatSession, TurnOutcome]:
        """Create a session and run its opening phase."""
        session = cls(
            character=character,
            enemies=enemies,
            config=config or CombatConfig(),
            rng=rng,
        )
        return session, session.begin()

    # =========================================================================
    # Queries
    # =========================================================================

    @property
    def ended(self) -> bool:
        return self.phase == CombatPhase.ENDED

    @property
    def living_enemies(self) -> list[Enemy]:
        return [enemy for enemy in self.enemies if not enemy.is_defeated()]

    def available_actions(self) -> list[ActionType]:
        """Actions accepted in the current phase."""
        match self.phase:
            case CombatPhase.PLAYER_MAIN:
                return list(MAIN_ACTIONS)
            case CombatPhase.PLAYER_SKILLS:
                return list(SKILL_ACTIONS)
            case _:
                return []

    # =========================================================================
    # Transitions
    # =========================================================================

    def begin(self) -> TurnOutcome:
        """Announce the fight and hand the first turn to the player."""
        self._reset_buffers()
        if self.phase != CombatPhase.START:
            return self._reject(GameErrorKind.INVALID_TRANSITION, "Combat has already started.")

        clear_stance(self.character)
        self._lines.append("--- COMBAT STARTED ---")
        for enemy in self.living_enemies:
            self._lines.append(f"You face {enemy.status_line()}!")
        logger.info(
            "Combat started: %s vs %s",
            self.character.name,
            ", ".join(enemy.name for enemy in self.enemies),
        )
        self._player_turn()
        return self._outcome(turn_consumed=False)

    def submit_action(self, action: PlayerAction | ActionType) -> TurnOutcome:
        """
        Resolve one player request.

        Rejected requests return an outcome with `error` set and leave
        the session unchanged.
        """
        if isinstance(action, ActionType):
            action = PlayerAction(action_type=action)
        self._reset_buffers()

        if self.phase == CombatPhase.START:
            return self._reject(GameErrorKind.INVALID_TRANSITION, "Combat has not started.")
        if self.phase == CombatPhase.ENDED:
            return self._reject(GameErrorKind.INVALID_TRANSITION, "Combat has already ended.")
        if action.action_type not in self.available_actions():
            return self._reject(
                GameErrorKind.INVALID_TRANSITION,
                f"You cannot {action.action_type.value.replace('_', ' ')} right now.",
            )

        match action.action_type:
            case ActionType.ATTACK:
                return self._attack()
            case ActionType.CAST:
                return self._cast()
            case ActionType.ITEM:
                return self._use_item(action.item_name)
            case ActionType.FLEE:
                return self._flee()
            case ActionType.OPEN_SKILLS:
                return self._open_skills()
            case ActionType.SELECT_SKILL:
                return self._select_skill(action.skill_id)
            case ActionType.BACK:
                return self._back()
            case _:
                return self._reject(GameErrorKind.INVALID_TRANSITION, "Unknown action.")

    # =========================================================================
    # Player Actions
    # =========================================================================

    def _attack(self) -> TurnOutcome:
        target = first_living(self.enemies)
        if target is None:
            return self._reject(GameErrorKind.INVALID_TARGET, "No enemies!")

        self._set_phase(CombatPhase.RESOLVING_ACTION)
        damage = roll_attack_damage(self.character.attributes.strength, self.config, self.rng)
        self._lines.append(f"{self.character.name} attacks {target.name} for {damage} damage!")
        self._hit_enemy(target, damage)
        return self._after_player_action()

    def _cast(self) -> TurnOutcome:
        spell = spell_for_class(self.character.character_class)
        if spell is None:
            return self._reject(GameErrorKind.INVALID_TRANSITION, "You cannot cast spells.")

        target = None
        if spell.effect == SpellEffect.DAMAGE:
            target = first_living(self.enemies)
            if target is None:
                return self._reject(GameErrorKind.INVALID_TARGET, "No enemies!")
        elif self.character.hp_current >= self.character.hp_max:
            return self._reject(GameErrorKind.INSUFFICIENT_RESOURCE, FULL_HEALTH)

        paid = self.character.spend_resource(ResourceType.MANA, spell.mana_cost)
        if not paid.success:
            return self._reject(paid.error, paid.reason)

        self._set_phase(CombatPhase.RESOLVING_ACTION)
        stat = self.character.attributes.get(spell.stat)
        if target is not None:
            damage = roll_attack_damage(stat, self.config, self.rng)
            self._lines.append(
                f"{self.character.name} casts {spell.name} at {target.name} "
                f"for {damage} damage!"
            )
            self._hit_enemy(target, damage)
        else:
            healed = self.character.heal(stat * spell.heal_multiplier)
            self._lines.append(
                f"{self.character.name} casts {spell.name} and recovers {healed} HP! "
                f"HP: {self.character.hp_current}/{self.character.hp_max}"
            )
        return self._after_player_action()

    def _use_item(self, item_name: str | None) -> TurnOutcome:
        item: Item | None
        if item_name:
            item = self.character.find_item(item_name)
            if item is None or not item.usable:
                return self._reject(
                    GameErrorKind.INSUFFICIENT_RESOURCE, f"You have no usable {item_name}."
                )
        else:
            item = self.character.first_usable_item()
            if item is None:
                return self._reject(
                    GameErrorKind.INSUFFICIENT_RESOURCE, "You have no usable items."
                )

        if self.character.hp_current >= self.character.hp_max:
            return self._reject(GameErrorKind.INSUFFICIENT_RESOURCE, FULL_HEALTH)

        self._set_phase(CombatPhase.RESOLVING_ACTION)
        name = item.name
        healed = self.character.heal(item.heal_amount)
        self.character.remove_item(name, 1)
        self._lines.append(
            f"{self.character.name} uses {name} and recovers {healed} HP! "
            f"HP: {self.character.hp_current}/{self.character.hp_max}"
        )
        return self._after_player_action()

    def _flee(self) -> TurnOutcome:
        self._set_phase(CombatPhase.RESOLVING_ACTION)
        self._lines.append("You attempt to flee...")
        check = roll_flee(self.config, self.rng)
        if check.success:
            self._lines.append("...successfully escaped!")
            self._end(CombatResult.FLED)
            return self._outcome(turn_consumed=True)

        self._lines.append("...but fail!")
        return self._after_player_action()

    def _open_skills(self) -> TurnOutcome:
        options = available_skills(self.character)
        if not options:
            return self._reject(GameErrorKind.INVALID_TRANSITION, "You have no skills.")

        self._set_phase(CombatPhase.PLAYER_SKILLS)
        self._lines.append("--- Skills ---")
        for option in options:
            suffix = "" if option.usable else f" - {option.reason}"
            self._lines.append(f"{option.name} ({option.cost_label}){suffix}")
        self._lines.append("Back")
        return self._outcome(turn_consumed=False)

    def _back(self) -> TurnOutcome:
        self._player_turn()
        return self._outcome(turn_consumed=False)

    def _select_skill(self, skill_id: AbilityId | None) -> TurnOutcome:
        abilities = abilities_for_class(self.character.character_class)
        known = {ability.ability_id for ability in abilities}
        if skill_id is None or skill_id not in known:
            return self._reject(GameErrorKind.INVALID_TRANSITION, "You do not know that skill.")

        activation = activate_ability(self.character, skill_id)
        if not activation.success:
            return self._reject(activation.error, activation.reason)

        self._set_phase(CombatPhase.RESOLVING_ACTION)
        self._lines.append(activation.reason)
        return self._after_player_action()

    # =========================================================================
    # Resolution
    # =========================================================================

    def _hit_enemy(self, enemy: Enemy, damage: int) -> None:
        dealt = enemy.take_damage(damage)
        if enemy.is_defeated():
            self._lines.append(f"{enemy.name} defeated!")
            logger.debug("%s defeated", enemy.name)
        else:
            self._lines.append(f"{enemy.name} HP: {enemy.hp_current}/{enemy.hp_max}")
        self._gain_rage(dealt)

    def _gain_rage(self, amount: int) -> None:
        if self.character.primary_resource != ResourceType.RAGE:
            return
        gained = self.character.gain_resource(
            ResourceType.RAGE, rage_from_damage(amount, self.config)
        )
        if gained > 0:
            logger.debug("%s gains %d rage", self.character.name, gained)

    def _after_player_action(self) -> TurnOutcome:
        if not self._check_end():
            self._enemy_turn()
            if not self._check_end():
                self._player_turn()
        return self._outcome(turn_consumed=True)

    def _enemy_turn(self) -> None:
        self._set_phase(CombatPhase.ENEMY_TURN)
        self._lines.append("--- Enemy Turn ---")

        for enemy in self.enemies:
            if enemy.is_defeated():
                continue
            self._lines.append(f"{enemy.name} prepares...")
            damage = roll_enemy_damage(enemy, self.rng)

            if consume_stance(self.character, AbilityId.COUNTERATTACK):
                basic = roll_attack_damage(
                    self.character.attributes.strength, self.config, self.rng
                )
                counter = counter_hit_damage(basic, self.config)
                self._lines.append(
                    f"{self.character.name} parries {enemy.name}'s attack and "
                    f"counterattacks for {counter} damage!"
                )
                self._hit_enemy(enemy, counter)
            else:
                taken = self.character.take_damage(damage)
                self._lines.append(
                    f"{enemy.name} attacks! You take {damage} from {enemy.name}! "
                    f"HP: {self.character.hp_current}/{self.character.hp_max}"
                )
                self._gain_rage(taken)

            if self.character.is_defeated():
                self._lines.append("You are defeated!")
                break
            if first_living(self.enemies) is None:
                break

    def _player_turn(self) -> None:
        self._set_phase(CombatPhase.PLAYER_MAIN)
        self._lines.append("--- Your Turn ---")

    def _check_end(self) -> bool:
        """Defeat takes priority over victory."""
        if self.character.is_defeated():
            self._end(CombatResult.DEFEAT)
            return True
        if first_living(self.enemies) is None:
            self._end(CombatResult.VICTORY)
            return True
        return False

    def _end(self, result: CombatResult) -> None:
        self.result = result
        self._set_phase(CombatPhase.ENDED)

        match result:
            case CombatResult.VICTORY:
                self._lines.append("You are victorious!")
                slain = [enemy.name for enemy in self.enemies if enemy.is_defeated()]
                self.summary = self._award_rewards(slain)
            case CombatResult.DEFEAT:
                self._lines.append("You have been defeated...")
                self.character.restore_to_max()
                self.summary = CombatSummary(result=result)
            case CombatResult.FLED:
                self._lines.append("Combat ended.")
                self.summary = CombatSummary(result=result)

        clear_stance(self.character)
        self._lines.append("--- COMBAT ENDED ---")
        logger.info("Combat ended: %s (%s)", result.value, self.character.name)

    def _award_rewards(self, slain: list[str]) -> CombatSummary:
        gold = 0
        experience = 0
        items: list[Item] = []
        for enemy in self.enemies:
            if not enemy.is_defeated():
                continue
            experience += enemy.experience_reward
            loot = roll_loot(enemy, self.rng)
            gold += loot.gold
            items.extend(loot.items)

        self.character.add_gold(gold)
        for item in items:
            self.character.add_item(item)
        progress = self.character.gain_experience(experience)
        # The first message repeats the experience total shown in the summary
        self._lines.extend(progress.messages[1:])

        return CombatSummary(
            result=CombatResult.VICTORY,
            slain=slain,
            gold=gold,
            items=items,
            experience=experience,
            levels_gained=progress.levels_gained,
        )

    # =========================================================================
    # Outcome Plumbing
    # =========================================================================

    def _reset_buffers(self) -> None:
        self._lines = []
        self._trail = [self.phase]

    def _set_phase(self, phase: CombatPhase) -> None:
        logger.debug("Combat phase %s -> %s", self.phase.value, phase.value)
        self.phase = phase
        self._trail.append(phase)

    def _reject(self, error: GameErrorKind | None, reason: str) -> TurnOutcome:
        logger.debug("Rejected in %s: %s", self.phase.value, reason)
        return TurnOutcome(
            lines=[reason],
            phase=self.phase,
            transitions=[self.phase],
            error=error or GameErrorKind.INVALID_TRANSITION,
            reason=reason,
        )

    def _outcome(self, turn_consumed: bool) -> TurnOutcome:
        return TurnOutcome(
            lines=list(self._lines),
            phase=self.phase,
            transitions=list(self._trail),
            turn_consumed=turn_consumed,
            result=self.result,
            summary=self.summary,
        )
