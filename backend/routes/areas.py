"""Area and per-area enemy endpoints."""

from fastapi import APIRouter, HTTPException

from backend import storage

router = APIRouter()


@router.get("/areas")
async def list_areas():
    """List all areas ordered by id."""
    return storage.list_areas()


@router.get("/areas/{area_id}")
async def get_area(area_id: int):
    """Get a single area by id."""
    area = storage.get_area(area_id)
    if not area:
        raise HTTPException(404, "Area not found")
    return area


@router.get("/areas/{area_id}/enemies")
async def list_area_enemies(area_id: int):
    """List enemies seeded into an area."""
    return storage.list_enemies(area_id)
