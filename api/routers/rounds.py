"""Round API endpoints: hole entry, navigation and new round."""

from fastapi import APIRouter, Depends, HTTPException
from storage.confirmation import StaticConfirmation
from storage.exceptions import InvalidUpdateError
from storage.round_store import RoundStore
from api.dependencies import get_store
from api.schemas import (
    CurrentHoleRequest,
    HoleUpdateRequest,
    ResetRequest,
    ResetResponse,
    RoundResponse,
)

router = APIRouter()


@router.get("", response_model=RoundResponse)
async def get_round(store: RoundStore = Depends(get_store)):
    return RoundResponse.from_round(store.round)


@router.patch("/holes/{hole_number}", response_model=RoundResponse)
async def update_hole(
    hole_number: int,
    req: HoleUpdateRequest,
    store: RoundStore = Depends(get_store),
):
    try:
        updated = await store.update_hole(hole_number, req.field, req.value)
    except InvalidUpdateError as e:
        raise HTTPException(422, str(e))
    return RoundResponse.from_round(updated)


@router.put("/current-hole", response_model=RoundResponse)
async def set_current_hole(req: CurrentHoleRequest, store: RoundStore = Depends(get_store)):
    try:
        updated = await store.set_current_hole(req.hole)
    except InvalidUpdateError as e:
        raise HTTPException(422, str(e))
    return RoundResponse.from_round(updated)


@router.post("/next", response_model=RoundResponse)
async def next_hole(store: RoundStore = Depends(get_store)):
    return RoundResponse.from_round(await store.next_hole())


@router.post("/previous", response_model=RoundResponse)
async def previous_hole(store: RoundStore = Depends(get_store)):
    return RoundResponse.from_round(await store.previous_hole())


@router.post("/reset", response_model=ResetResponse)
async def reset_round(req: ResetRequest, store: RoundStore = Depends(get_store)):
    """Start a new round. The client must send confirm=true after asking the player."""
    was_reset = await store.reset(StaticConfirmation(req.confirm))
    return ResetResponse(reset=was_reset, round=RoundResponse.from_round(store.round))
