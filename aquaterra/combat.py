"""Combat resolution: one player turn against one enemy.

resolve() is pure apart from the dice. resolve_combat() adds the storage
round trip: load both combatants, resolve, then write the player's health
(always) and experience (only on a kill). Enemy health is returned to the
caller and never written back, so every call starts from the enemy's stored
health.

Roll order per turn: primary magnitude, counter-attack (if any), experience
(if the enemy was defeated).
"""

from __future__ import annotations

import logging
from typing import Protocol

from aquaterra.dice import Dice
from aquaterra.models import CombatAction, CombatOutcome, Enemy, Player
from aquaterra.narration import Narrator, join_sentences

logger = logging.getLogger(__name__)

# Inclusive magnitude ranges per action type.
ACTION_RANGES: dict[str, tuple[int, int]] = {
    "attack": (20, 49),
    "heal": (15, 34),
    "purify": (30, 69),
}
DAMAGE_ACTIONS = frozenset({"attack", "purify"})
COUNTER_MIN = 5
COUNTER_SPREAD = 4  # counter roll upper bound is attack_power + 4
EXPERIENCE_RANGE = (10, 29)


class CombatStore(Protocol):
    """The slice of storage the resolver needs."""

    def get_player(self, player_id: int) -> Player | None: ...

    def get_enemy(self, enemy_id: int) -> Enemy | None: ...

    def update_player_health(self, player_id: int, health: int) -> None: ...

    def increment_player_experience(self, player_id: int, delta: int) -> None: ...


class NotFoundError(LookupError):
    """Raised when a combatant id does not resolve to a stored row."""


def resolve(
    player: Player,
    enemy: Enemy,
    action: CombatAction,
    dice: Dice,
    narrator: Narrator | None = None,
) -> CombatOutcome:
    """Resolve a single combat turn without touching storage."""
    narrator = narrator or Narrator()
    action_type = action.type
    player_health = player.health
    enemy_health = enemy.health
    sentences: list[str] = []

    span = ACTION_RANGES.get(action_type)
    if span is None:
        logger.warning("unknown combat action %r treated as a no-op turn", action_type)
        magnitude = 0
    else:
        magnitude = dice.roll(*span)

    if action_type == "heal":
        player_health = min(player.max_health, player.health + magnitude)
        sentences.append(narrator.sentence("heal", healing=magnitude))
    elif action_type in DAMAGE_ACTIONS:
        enemy_health = max(0, enemy.health - magnitude)
        sentences.append(narrator.sentence(action_type, enemy=enemy.name, damage=magnitude))

    counter = 0
    if enemy_health > 0 and action_type != "heal":
        counter = dice.roll(COUNTER_MIN, enemy.attack_power + COUNTER_SPREAD)
        player_health = max(0, player_health - counter)
        sentences.append(narrator.sentence("counter", enemy=enemy.name, counter=counter))

    defeated = enemy_health <= 0
    experience = 0
    if defeated:
        experience = dice.roll(*EXPERIENCE_RANGE)
        sentences.append(narrator.sentence("victory", enemy=enemy.name, experience=experience))

    logger.debug(
        "combat player=%s enemy=%s action=%s magnitude=%d counter=%d hp=%d->%d enemy_hp=%d->%d",
        player.id, enemy.id, action_type, magnitude, counter,
        player.health, player_health, enemy.health, enemy_health,
    )
    return CombatOutcome(
        result=join_sentences(sentences),
        player_health=player_health,
        enemy_health=enemy_health,
        enemy_defeated=defeated,
        experience_gained=experience,
        counter_damage=counter,
    )


def resolve_combat(
    store: CombatStore,
    player_id: int,
    enemy_id: int,
    action: CombatAction,
    dice: Dice,
    narrator: Narrator | None = None,
) -> CombatOutcome:
    """Load both combatants, resolve the turn, and persist the player's side.

    Raises NotFoundError before any write if either id is unknown.
    """
    player = store.get_player(player_id)
    enemy = store.get_enemy(enemy_id)
    if player is None or enemy is None:
        raise NotFoundError("Player or enemy not found")

    outcome = resolve(player, enemy, action, dice, narrator)

    store.update_player_health(player_id, outcome.player_health)
    if outcome.enemy_defeated:
        store.increment_player_experience(player_id, outcome.experience_gained)
    return outcome
