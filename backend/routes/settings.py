"""Health check and settings endpoints."""

from fastapi import APIRouter, HTTPException

from aquaterra.narration import SUPPORTED_LANGUAGES
from backend import storage

from .models import UpdateSettings

router = APIRouter()


@router.get("/health")
async def health():
    """Health check."""
    return {"status": "ok"}


@router.get("/settings")
async def get_settings():
    """Get global app settings."""
    return storage.get_config()


@router.patch("/settings")
async def update_settings(body: UpdateSettings):
    """Update global app settings (partial merge)."""
    fields = body.model_dump(exclude_none=True)
    language = fields.get("narrative_language")
    if language is not None and language not in SUPPORTED_LANGUAGES:
        raise HTTPException(400, f"Unsupported narrative language: {language}")
    return storage.update_config(fields)
