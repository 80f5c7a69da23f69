from typing import List

from fastapi import APIRouter, Depends, HTTPException, Response

from room_lottery.models.lottery_models import Item
from room_lottery.schemas import ItemCreate, ItemUpdate
from room_lottery.storage import LotteryStorage, get_storage

router = APIRouter(prefix="/items", tags=["Items"])


@router.get("", response_model=List[Item], summary="List every item")
def list_items(storage: LotteryStorage = Depends(get_storage)):
    return storage.list_items()


@router.get("/{item_id}", response_model=Item)
def get_item(item_id: int, storage: LotteryStorage = Depends(get_storage)):
    item = storage.get_item(item_id)
    if item is None:
        raise HTTPException(404, "Item not found")
    return item


@router.post("", response_model=Item, status_code=201)
def create_item(payload: ItemCreate, storage: LotteryStorage = Depends(get_storage)):
    return storage.create_item(payload.model_dump())


@router.patch("/{item_id}", response_model=Item)
def update_item(item_id: int, payload: ItemUpdate, storage: LotteryStorage = Depends(get_storage)):
    item = storage.update_item(item_id, payload.model_dump(exclude_unset=True))
    if item is None:
        raise HTTPException(404, "Item not found")
    return item


@router.delete("/{item_id}", status_code=204, summary="Delete an item and remove it from every room")
def delete_item(item_id: int, storage: LotteryStorage = Depends(get_storage)):
    if not storage.delete_item(item_id):
        raise HTTPException(404, "Item not found")
    return Response(status_code=204)
