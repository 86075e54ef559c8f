"""Player creation, lookup and movement endpoints."""

from fastapi import APIRouter, HTTPException

from backend import storage

from .models import CreatePlayer, UpdatePosition

router = APIRouter()


@router.post("/players")
async def create_player(body: CreatePlayer):
    """Create a new player with starting stats."""
    return storage.create_player(body.name)


@router.get("/players/{player_id}")
async def get_player(player_id: int):
    """Get a single player by id."""
    player = storage.get_player(player_id)
    if not player:
        raise HTTPException(404, "Player not found")
    return player


@router.put("/players/{player_id}/position")
async def update_position(player_id: int, body: UpdatePosition):
    """Move a player on the map, optionally into another area."""
    updated = storage.update_player_position(
        player_id, body.x_position, body.y_position, body.current_area
    )
    if not updated:
        raise HTTPException(404, "Player not found")
    return updated
