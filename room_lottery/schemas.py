from pydantic import BaseModel, Field, field_validator
from typing import Optional, Dict, Any

from room_lottery.config import DEFAULT_ITEMS_TO_SHOW, DEFAULT_ROOM_COUNT, MAX_SIMULATIONS


def reject_null(value):
    if value is None:
        raise ValueError("field may be omitted but not set to null")
    return value


# -----------------------------
# ROOM PAYLOADS
# -----------------------------

class RoomCreate(BaseModel):
    name: str = Field(min_length=1)
    description: str
    probability: int = Field(
        ge=1,
        le=100,
        description="Relative weight when rooms are drawn. 50 is ten times likelier than 5."
    )
    rarity: str
    image_url: str
    interior_image_url: Optional[str] = None
    color: str
    icon: str
    items_to_show: int = Field(
        default=DEFAULT_ITEMS_TO_SHOW,
        ge=0,
        description="How many items a draw reveals. 0 skips the item draw."
    )
    randomize_repeats: bool = Field(
        default=True,
        description="Repeatable items go back into the pool after being drawn"
    )


class RoomUpdate(BaseModel):
    name: Optional[str] = Field(default=None, min_length=1)
    description: Optional[str] = None
    probability: Optional[int] = Field(default=None, ge=1, le=100)
    rarity: Optional[str] = None
    image_url: Optional[str] = None
    interior_image_url: Optional[str] = None
    color: Optional[str] = None
    icon: Optional[str] = None
    items_to_show: Optional[int] = Field(default=None, ge=0)
    randomize_repeats: Optional[bool] = None

    @field_validator(
        "name", "description", "probability", "rarity", "image_url",
        "color", "icon", "items_to_show", "randomize_repeats",
        mode="before",
    )
    @classmethod
    def not_null(cls, v):
        return reject_null(v)


# -----------------------------
# ITEM PAYLOADS
# -----------------------------

class ItemCreate(BaseModel):
    name: str = Field(min_length=1)
    description: Optional[str] = None
    image_url: str
    rarity: str


class ItemUpdate(BaseModel):
    name: Optional[str] = Field(default=None, min_length=1)
    description: Optional[str] = None
    image_url: Optional[str] = None
    rarity: Optional[str] = None

    @field_validator("name", "image_url", "rarity", mode="before")
    @classmethod
    def not_null(cls, v):
        return reject_null(v)


# -----------------------------
# ROOM ITEM ASSIGNMENTS
# -----------------------------

class AssignmentProperties(BaseModel):
    probability: Optional[int] = Field(
        default=None,
        ge=1,
        le=100,
        description="Weight inside the room. Bucketed in steps of 10 when drawn."
    )
    can_repeat: Optional[bool] = None
    max_repeats: Optional[int] = Field(
        default=None,
        ge=1,
        description="Cap on how often the item may appear in one draw"
    )
    is_guaranteed: Optional[bool] = None

    @field_validator("probability", "can_repeat", "max_repeats", "is_guaranteed", mode="before")
    @classmethod
    def not_null(cls, v):
        return reject_null(v)


class AssignItemRequest(AssignmentProperties):
    item_id: int


class AssignmentUpdate(AssignmentProperties):
    # Item detail fields are forwarded to the referenced item.
    name: Optional[str] = Field(default=None, min_length=1)
    description: Optional[str] = None
    image_url: Optional[str] = None
    rarity: Optional[str] = None

    @field_validator("name", "image_url", "rarity", mode="before")
    @classmethod
    def item_fields_not_null(cls, v):
        return reject_null(v)


# -----------------------------
# SIMULATION REQUESTS
# -----------------------------

class RoomSimulationRequest(BaseModel):
    count: int = Field(
        default=DEFAULT_ROOM_COUNT,
        ge=0,
        description="Rooms drawn per simulated run"
    )
    simulations: int = Field(
        default=1000,
        ge=1,
        le=MAX_SIMULATIONS,
        description="Number of simulated draws. Max: 100,000"
    )
    seed: Optional[int] = Field(
        default=None,
        description="Optional RNG seed lock"
    )


class ItemSimulationRequest(BaseModel):
    simulations: int = Field(
        default=1000,
        ge=1,
        le=MAX_SIMULATIONS,
        description="Number of simulated item draws. Max: 100,000"
    )
    seed: Optional[int] = Field(
        default=None,
        description="Optional RNG seed lock"
    )


# -----------------------------
# CATALOG VALIDATION
# -----------------------------

class CatalogValidateRequest(BaseModel):
    catalog: Dict[str, Any] = Field(
        description="Catalog document with top-level 'items' and 'rooms' lists"
    )

    model_config = {
        "json_schema_extra": {
            "example": {
                "catalog": {
                    "items": [
                        {
                            "name": "Golden Chalice",
                            "image_url": "/uploads/chalice.png",
                            "rarity": "Legendary"
                        }
                    ],
                    "rooms": [
                        {
                            "name": "Luxury Suite",
                            "description": "Exclusive items",
                            "probability": 20,
                            "rarity": "High Rarity",
                            "image_url": "/uploads/suite.png",
                            "color": "amber",
                            "icon": "coins",
                            "items": [
                                {"item": "Golden Chalice", "probability": 80}
                            ]
                        }
                    ]
                }
            }
        }
    }
