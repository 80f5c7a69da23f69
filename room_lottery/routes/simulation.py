from fastapi import APIRouter, Depends, HTTPException

from room_lottery.rng import get_rng
from room_lottery.schemas import RoomSimulationRequest, ItemSimulationRequest
from room_lottery.services.draw_service import RoomNotFoundError, simulate_rooms, simulate_room_items
from room_lottery.storage import LotteryStorage, get_storage

router = APIRouter(prefix="/simulate", tags=["Simulation"])


@router.post(
    "/rooms",
    summary="Run room draw simulation",
    description="Repeats the room draw and reports how often each room was offered.",
    response_model=dict,
)
def simulate_room_endpoint(req: RoomSimulationRequest, storage: LotteryStorage = Depends(get_storage)):
    return simulate_rooms(storage, req.count, req.simulations, get_rng(req.seed))


@router.post(
    "/rooms/{room_id}/items",
    summary="Run item draw simulation for one room",
    description="Shows how often each assignment appears under the room's current configuration.",
    response_model=dict,
)
def simulate_items_endpoint(
    room_id: int,
    req: ItemSimulationRequest,
    storage: LotteryStorage = Depends(get_storage),
):
    try:
        return simulate_room_items(storage, room_id, req.simulations, get_rng(req.seed))
    except RoomNotFoundError:
        raise HTTPException(404, "Room not found")
