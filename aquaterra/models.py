"""Core domain models.

The combat resolver, storage functions and API routes all exchange these
types. Pydantic is used for validation and serialisation at every data
boundary.
"""

from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, Field

ActionType = Literal["attack", "heal", "purify"]
ActionTarget = Literal["enemy", "self"]


class Player(BaseModel):
    """A player row. Combat only ever touches health and experience."""

    id: int
    name: str
    level: int = 1  # display only
    health: int = 100
    max_health: int = 100
    experience: int = 0
    current_area: str = "Vila Costeira"
    x_position: float = 50
    y_position: float = 50
    created_at: str = ""
    updated_at: str = ""


class Enemy(BaseModel):
    """An enemy seeded into an area."""

    id: int
    name: str
    type: str  # cosmetic: "pollution" | "climate" | "human" | ...
    health: int = Field(ge=0)
    attack_power: int = Field(gt=0)
    description: str | None = None
    area_id: int | None = None
    created_at: str = ""
    updated_at: str = ""


class Area(BaseModel):
    id: int
    name: str
    type: str
    description: str | None = None
    pollution_level: int = 0  # 0–100
    is_restored: bool = False
    background_image: str | None = None
    created_at: str = ""
    updated_at: str = ""


class Quest(BaseModel):
    id: int
    title: str
    description: str
    type: str
    target_area_id: int | None = None
    reward_experience: int = 0
    is_completed: bool = False
    created_at: str = ""
    updated_at: str = ""


class CombatAction(BaseModel):
    """A single combat turn requested by the player.

    `target` is accepted for client compatibility but never consulted; the
    action type alone decides which side is affected.
    """

    type: ActionType
    target: ActionTarget


class CombatOutcome(BaseModel):
    """Result of one resolved combat turn."""

    result: str
    player_health: int
    enemy_health: int
    enemy_defeated: bool
    experience_gained: int = 0
    counter_damage: int = 0  # 0 when the enemy did not strike back
