"""Quest listing endpoint."""

from fastapi import APIRouter

from backend import storage

router = APIRouter()


@router.get("/quests")
async def list_quests():
    """List quests that are not completed yet."""
    return storage.list_open_quests()
