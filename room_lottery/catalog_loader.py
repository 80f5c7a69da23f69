import json
import logging
from pathlib import Path
from typing import Any, Dict

from room_lottery.config import CATALOG_PATH, SEED_CATALOG
from room_lottery.catalog_validator import validate_catalog
from room_lottery.storage import LotteryStorage, MemoryStorage

logger = logging.getLogger(__name__)


def load_catalog(path: Path = CATALOG_PATH) -> Dict[str, Any]:
    with open(path, "r", encoding="utf-8") as f:
        return json.load(f)


def seed_storage(storage: LotteryStorage, catalog: Dict[str, Any]) -> LotteryStorage:
    """Writes every item, room and assignment of a catalog into `storage`."""
    report = validate_catalog(catalog)
    if not report["valid"]:
        first = report["errors"][0]
        raise ValueError(f"Invalid catalog at {first['path']}: {first['message']}")

    item_ids = {}
    for item_data in catalog.get("items", []):
        item = storage.create_item(item_data)
        item_ids[item.name] = item.id

    for room_data in catalog.get("rooms", []):
        fields = {k: v for k, v in room_data.items() if k != "items"}
        room = storage.create_room(fields)

        for assignment in room_data.get("items", []):
            properties = {k: v for k, v in assignment.items() if k != "item"}
            storage.assign_item_to_room(room.id, item_ids[assignment["item"]], properties)

    logger.info(
        "Seeded catalog: %d rooms, %d items, %d assignments",
        report["summary"]["total_rooms"],
        report["summary"]["total_items"],
        report["summary"]["total_assignments"],
    )
    return storage


def build_seeded_storage(path: Path = CATALOG_PATH, seed: bool = SEED_CATALOG) -> MemoryStorage:
    storage = MemoryStorage()
    if not seed:
        return storage

    try:
        catalog = load_catalog(path)
    except (OSError, json.JSONDecodeError):
        logger.error("Could not read seed catalog %s", path)
        raise

    seed_storage(storage, catalog)
    return storage
