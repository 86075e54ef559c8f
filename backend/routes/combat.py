"""Combat turn endpoint."""

import os

from fastapi import APIRouter, Depends, HTTPException

from aquaterra.combat import NotFoundError, resolve_combat
from aquaterra.dice import Dice, RandomDice
from aquaterra.models import CombatAction, CombatOutcome
from aquaterra.narration import Narrator
from backend import storage

router = APIRouter()

_dice: Dice | None = None


def get_dice() -> Dice:
    """Process-wide dice, seeded from AQUATERRA_SEED when set."""
    global _dice
    if _dice is None:
        seed = os.getenv("AQUATERRA_SEED")
        _dice = RandomDice(int(seed) if seed else None)
    return _dice


def get_narrator() -> Narrator:
    return Narrator(storage.get_config()["narrative_language"])


@router.post("/combat/{player_id}/{enemy_id}", response_model=CombatOutcome)
async def combat_action(
    player_id: int,
    enemy_id: int,
    body: CombatAction,
    dice: Dice = Depends(get_dice),
    narrator: Narrator = Depends(get_narrator),
):
    """Resolve one combat turn and persist the player's health and experience."""
    try:
        return resolve_combat(
            storage.JsonCombatStore(), player_id, enemy_id, body, dice, narrator
        )
    except NotFoundError:
        raise HTTPException(404, "Player or enemy not found")
