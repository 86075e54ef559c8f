"""Adapter exposing the JSON tables through the resolver's CombatStore protocol."""

from aquaterra.models import Enemy, Player

from .players import get_player, increment_player_experience, update_player_health
from .world import get_enemy


class JsonCombatStore:
    """Reads combatants as domain models; writes only the player's health and experience."""

    def get_player(self, player_id: int) -> Player | None:
        row = get_player(player_id)
        return Player.model_validate(row) if row is not None else None

    def get_enemy(self, enemy_id: int) -> Enemy | None:
        row = get_enemy(enemy_id)
        return Enemy.model_validate(row) if row is not None else None

    def update_player_health(self, player_id: int, health: int) -> None:
        update_player_health(player_id, health)

    def increment_player_experience(self, player_id: int, delta: int) -> None:
        increment_player_experience(player_id, delta)
