"""Rolls API — create, inspect and push Year Zero rolls, apply modifiers."""

from __future__ import annotations

import logging
from typing import Annotated

from fastapi import APIRouter, Depends, HTTPException, Request

from yzcore.infra.cache import RollCache
from yzcore.models.result import (
    CreateRollRequest,
    ModifyRequest,
    ModifyResult,
    RollView,
)
from yzcore.modules.dice.errors import DiceError
from yzcore.modules.dice.modifier import modify
from yzcore.modules.dice.roll import create_roll
from yzcore.modules.dice.types import DIE_TYPES_MAP

logger = logging.getLogger("yz-core.api")

router = APIRouter(prefix="/api", tags=["rolls"])


def get_roll_cache(request: Request) -> RollCache:
    return request.app.state.roll_cache


# --- Games ---


@router.get("/games")
async def list_games() -> dict[str, list[str]]:
    return {game: list(types) for game, types in DIE_TYPES_MAP.items()}


# --- Rolls ---


@router.post("/rolls")
async def create(
    body: CreateRollRequest,
    cache: Annotated[RollCache, Depends(get_roll_cache)],
) -> RollView:
    """Roll a new dice pool; pushable rolls are kept for later pushes."""
    try:
        dice = body.dice
        if body.modifier:
            dice = modify(body.game, body.modifier, dice)
        roll = create_roll(body.game, dice, max_push=body.max_push)
    except DiceError as e:
        raise HTTPException(status_code=400, detail=str(e))

    cache.set(roll)
    logger.info(
        "Roll %s (%s): size=%d total=%d pushable=%s",
        roll.id, roll.game, roll.size, roll.total, roll.pushable,
    )
    return RollView.from_roll(roll)


@router.get("/rolls/{roll_id}")
async def get_roll(
    roll_id: str,
    cache: Annotated[RollCache, Depends(get_roll_cache)],
) -> RollView:
    roll = cache.get(roll_id)
    if roll is None:
        raise HTTPException(status_code=404, detail="Roll not found or no longer pushable")
    return RollView.from_roll(roll)


@router.post("/rolls/{roll_id}/push")
async def push_roll(
    roll_id: str,
    cache: Annotated[RollCache, Depends(get_roll_cache)],
) -> RollView:
    roll = cache.get(roll_id)
    if roll is None:
        raise HTTPException(status_code=404, detail="Roll not found or no longer pushable")

    roll.push()
    if not roll.pushable:
        cache.delete(roll.id)
    return RollView.from_roll(roll)


# --- Modifiers ---


@router.post("/modify")
async def apply_modifier(body: ModifyRequest) -> ModifyResult:
    try:
        dice = modify(body.game, body.modifier, body.dice)
    except DiceError as e:
        raise HTTPException(status_code=400, detail=str(e))
    return ModifyResult(game=body.game, modifier=body.modifier, dice=dice)
