"""Pydantic request/response models for API endpoints."""

from pydantic import BaseModel, Field


class CreatePlayer(BaseModel):
    name: str = Field(min_length=1, max_length=50)


class UpdatePosition(BaseModel):
    x_position: float
    y_position: float
    current_area: str | None = None


class UpdateSettings(BaseModel):
    narrative_language: str | None = None
    cors_origins: list[str] | None = None
    starting_area: str | None = None
    starting_health: int | None = Field(default=None, gt=0)
