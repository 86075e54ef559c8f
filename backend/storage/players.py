"""Player rows: creation, lookup, position, health and experience."""

from typing import Any

from .config import get_config
from .core import find_row, insert_row, now, read_rows, update_row, write_rows


def create_player(name: str) -> dict[str, Any]:
    """Insert a new player with starting stats from config."""
    config = get_config()
    health = config["starting_health"]
    return insert_row("players", {
        "name": name,
        "level": 1,
        "health": health,
        "max_health": health,
        "experience": 0,
        "current_area": config["starting_area"],
        "x_position": 50,
        "y_position": 50,
    })


def get_player(player_id: int) -> dict[str, Any] | None:
    return find_row("players", player_id)


def update_player_position(
    player_id: int, x_position: float, y_position: float, current_area: str | None = None
) -> dict[str, Any] | None:
    """Move a player. current_area is only changed when given and non-empty."""
    fields: dict[str, Any] = {"x_position": x_position, "y_position": y_position}
    if current_area:
        fields["current_area"] = current_area
    return update_row("players", player_id, fields)


def update_player_health(player_id: int, health: int) -> dict[str, Any] | None:
    return update_row("players", player_id, {"health": health})


def increment_player_experience(player_id: int, delta: int) -> dict[str, Any] | None:
    """Add delta to the stored experience (read-modify-write on the current row)."""
    rows = read_rows("players")
    for row in rows:
        if row["id"] == player_id:
            row["experience"] = row.get("experience", 0) + delta
            row["updated_at"] = now()
            write_rows("players", rows)
            return row
    return None
