import logging

from fastapi import APIRouter, Depends, HTTPException, Response

from room_lottery.models.lottery_models import RoomItemWithDetails
from room_lottery.schemas import AssignmentUpdate
from room_lottery.storage import LotteryStorage, get_storage

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/room-items", tags=["Room Items"])

ITEM_DETAIL_FIELDS = {"name", "description", "image_url", "rarity"}


@router.patch(
    "/{assignment_id}",
    response_model=RoomItemWithDetails,
    summary="Update an item assignment",
    description="Assignment fields (probability, repeats, guaranteed) change the assignment; "
                "name / description / image_url / rarity are applied to the referenced item.",
)
def update_assignment(
    assignment_id: int,
    payload: AssignmentUpdate,
    storage: LotteryStorage = Depends(get_storage),
):
    changes = payload.model_dump(exclude_unset=True)
    assignment_changes = {k: v for k, v in changes.items() if k not in ITEM_DETAIL_FIELDS}
    item_changes = {k: v for k, v in changes.items() if k in ITEM_DETAIL_FIELDS}

    assignment = storage.update_assignment(assignment_id, assignment_changes)
    if assignment is None:
        raise HTTPException(404, "Room item assignment not found")

    if item_changes:
        logger.info("Updating item %s details: %s", assignment.item_id, sorted(item_changes))
        storage.update_item(assignment.item_id, item_changes)

    item = storage.get_item(assignment.item_id)
    if item is None:
        raise HTTPException(404, "Item not found")

    return RoomItemWithDetails(**assignment.model_dump(), item=item)


@router.delete("/{assignment_id}", status_code=204, summary="Remove an item from its room")
def remove_assignment(assignment_id: int, storage: LotteryStorage = Depends(get_storage)):
    if not storage.remove_assignment(assignment_id):
        raise HTTPException(404, "Room item assignment not found")
    return Response(status_code=204)
