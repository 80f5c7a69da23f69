from pydantic import BaseModel, Field
from typing import Optional

from room_lottery.config import DEFAULT_ITEMS_TO_SHOW


class Room(BaseModel):
    id: int
    name: str
    description: str
    probability: int = Field(..., description="Relative draw weight (1-100)")
    rarity: str
    image_url: str
    interior_image_url: Optional[str] = None
    color: str
    icon: str
    items_to_show: int = Field(DEFAULT_ITEMS_TO_SHOW, description="Items revealed per draw, 0 disables the draw")
    randomize_repeats: bool = Field(True, description="Re-queue repeatable items after they are drawn")


class Item(BaseModel):
    id: int
    name: str
    description: Optional[str] = None
    image_url: str
    rarity: str


class RoomItem(BaseModel):
    id: int
    room_id: int
    item_id: int
    probability: int = 100
    can_repeat: bool = True
    max_repeats: int = 1
    is_guaranteed: bool = Field(False, description="Always shown, bypasses weighting")


class RoomItemWithDetails(RoomItem):
    item: Item
