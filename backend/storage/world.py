"""Areas, enemies and quests. Seeded by the demo loader, read by the API."""

from typing import Any

from .core import find_row, insert_row, read_rows


def list_areas() -> list[dict[str, Any]]:
    return sorted(read_rows("areas"), key=lambda a: a["id"])


def get_area(area_id: int) -> dict[str, Any] | None:
    return find_row("areas", area_id)


def create_area(
    name: str,
    type: str,
    description: str | None = None,
    pollution_level: int = 0,
    is_restored: bool = False,
    background_image: str | None = None,
) -> dict[str, Any]:
    return insert_row("areas", {
        "name": name,
        "type": type,
        "description": description,
        "pollution_level": pollution_level,
        "is_restored": is_restored,
        "background_image": background_image,
    })


def list_enemies(area_id: int) -> list[dict[str, Any]]:
    """Enemies seeded into one area."""
    return [e for e in read_rows("enemies") if e.get("area_id") == area_id]


def get_enemy(enemy_id: int) -> dict[str, Any] | None:
    return find_row("enemies", enemy_id)


def create_enemy(
    name: str,
    type: str,
    health: int,
    attack_power: int,
    description: str | None = None,
    area_id: int | None = None,
) -> dict[str, Any]:
    return insert_row("enemies", {
        "name": name,
        "type": type,
        "health": health,
        "attack_power": attack_power,
        "description": description,
        "area_id": area_id,
    })


def list_open_quests() -> list[dict[str, Any]]:
    """Quests not yet completed, ordered by id."""
    quests = [q for q in read_rows("quests") if not q.get("is_completed")]
    return sorted(quests, key=lambda q: q["id"])


def create_quest(
    title: str,
    description: str,
    type: str,
    target_area_id: int | None = None,
    reward_experience: int = 0,
    is_completed: bool = False,
) -> dict[str, Any]:
    return insert_row("quests", {
        "title": title,
        "description": description,
        "type": type,
        "target_area_id": target_area_id,
        "reward_experience": reward_experience,
        "is_completed": is_completed,
    })
