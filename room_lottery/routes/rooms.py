from typing import List, Optional

from fastapi import APIRouter, Depends, HTTPException, Response

from room_lottery.config import DEFAULT_ROOM_COUNT
from room_lottery.models.lottery_models import Room, RoomItem, RoomItemWithDetails
from room_lottery.rng import get_rng
from room_lottery.schemas import RoomCreate, RoomUpdate, AssignItemRequest
from room_lottery.services.draw_service import (
    RoomNotFoundError,
    ItemNotFoundError,
    draw_rooms,
    draw_room_items,
    require_room,
    require_item,
)
from room_lottery.storage import LotteryStorage, get_storage

router = APIRouter(prefix="/rooms", tags=["Rooms"])


@router.get("", response_model=List[Room], summary="List every room")
def list_rooms(storage: LotteryStorage = Depends(get_storage)):
    return storage.list_rooms()


# Declared before /{room_id} so "random" is never parsed as an id.
@router.get(
    "/random",
    response_model=List[Room],
    tags=["Draws"],
    summary="Draw distinct rooms weighted by probability",
    description="A room with probability 50 is ten times likelier than one with probability 5. "
                "Same seed always produces the same rooms.",
)
def random_rooms(
    count: int = DEFAULT_ROOM_COUNT,
    seed: Optional[int] = None,
    storage: LotteryStorage = Depends(get_storage),
):
    return draw_rooms(storage, count, get_rng(seed))


@router.get("/{room_id}", response_model=Room, summary="Fetch a room")
def get_room(room_id: int, storage: LotteryStorage = Depends(get_storage)):
    try:
        return require_room(storage, room_id)
    except RoomNotFoundError:
        raise HTTPException(404, "Room not found")


@router.post("", response_model=Room, status_code=201, summary="Create a room")
def create_room(payload: RoomCreate, storage: LotteryStorage = Depends(get_storage)):
    return storage.create_room(payload.model_dump())


@router.patch("/{room_id}", response_model=Room, summary="Update a room")
def update_room(room_id: int, payload: RoomUpdate, storage: LotteryStorage = Depends(get_storage)):
    room = storage.update_room(room_id, payload.model_dump(exclude_unset=True))
    if room is None:
        raise HTTPException(404, "Room not found")
    return room


@router.delete("/{room_id}", status_code=204, summary="Delete a room and its item assignments")
def delete_room(room_id: int, storage: LotteryStorage = Depends(get_storage)):
    if not storage.delete_room(room_id):
        raise HTTPException(404, "Room not found")
    return Response(status_code=204)


# ============================================================
# ROOM ITEMS
# ============================================================

@router.get(
    "/{room_id}/items",
    response_model=List[RoomItemWithDetails],
    summary="List the item pool of a room",
)
def list_room_items(room_id: int, storage: LotteryStorage = Depends(get_storage)):
    try:
        require_room(storage, room_id)
    except RoomNotFoundError:
        raise HTTPException(404, "Room not found")
    return storage.list_assignments_for_room(room_id)


@router.get(
    "/{room_id}/random-items",
    response_model=List[RoomItemWithDetails],
    tags=["Draws"],
    summary="Reveal a room's items",
    description="Guaranteed items first, then weighted picks honouring repeat caps. "
                "Returns an empty list when the room shows 0 items.",
)
def random_room_items(
    room_id: int,
    seed: Optional[int] = None,
    storage: LotteryStorage = Depends(get_storage),
):
    try:
        return draw_room_items(storage, room_id, get_rng(seed))
    except RoomNotFoundError:
        raise HTTPException(404, "Room not found")


@router.post(
    "/{room_id}/items",
    response_model=RoomItem,
    status_code=201,
    summary="Assign an item to a room",
    description="Assigning an item that is already in the room updates the existing assignment.",
)
def assign_item(room_id: int, payload: AssignItemRequest, storage: LotteryStorage = Depends(get_storage)):
    try:
        require_room(storage, room_id)
        require_item(storage, payload.item_id)
    except RoomNotFoundError:
        raise HTTPException(404, "Room not found")
    except ItemNotFoundError:
        raise HTTPException(404, "Item not found")

    properties = payload.model_dump(exclude={"item_id"}, exclude_none=True)
    return storage.assign_item_to_room(room_id, payload.item_id, properties)
