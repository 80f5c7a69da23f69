import logging
from collections import Counter
from typing import List

from room_lottery.draw_engine import (
    select_random_rooms,
    select_random_items,
    simulate_room_draws,
    simulate_item_draws,
)
from room_lottery.models.lottery_models import Item, Room, RoomItemWithDetails
from room_lottery.storage import LotteryStorage

logger = logging.getLogger(__name__)


class RoomNotFoundError(LookupError):
    def __init__(self, room_id: int):
        super().__init__(f"Room {room_id} not found")
        self.room_id = room_id


class ItemNotFoundError(LookupError):
    def __init__(self, item_id: int):
        super().__init__(f"Item {item_id} not found")
        self.item_id = item_id


def require_room(storage: LotteryStorage, room_id: int) -> Room:
    room = storage.get_room(room_id)
    if room is None:
        raise RoomNotFoundError(room_id)
    return room


def require_item(storage: LotteryStorage, item_id: int) -> Item:
    item = storage.get_item(item_id)
    if item is None:
        raise ItemNotFoundError(item_id)
    return item


def draw_rooms(storage: LotteryStorage, count: int, rng) -> List[Room]:
    """Draws `count` distinct rooms from the full catalog."""
    rooms = select_random_rooms(storage.list_rooms(), count, rng)
    logger.debug("Drew rooms %s (requested %d)", [r.id for r in rooms], count)
    return rooms


def draw_room_items(storage: LotteryStorage, room_id: int, rng) -> List[RoomItemWithDetails]:
    """Reveals the items of one room, `room.items_to_show` at a time."""
    room = require_room(storage, room_id)

    if room.items_to_show <= 0:
        return []

    pool = storage.list_assignments_for_room(room_id)
    items = select_random_items(room, pool, room.items_to_show, rng)
    logger.debug("Drew assignments %s from room %s", [a.id for a in items], room_id)
    return items


def _appearance_stats(draws, key, label, simulations: int):
    counts = Counter()
    labels = {}

    for draw in draws:
        for entry in draw:
            counts[key(entry)] += 1
            labels[key(entry)] = label(entry)

    return [
        {
            "id": entry_id,
            "name": labels[entry_id],
            "appearances": n,
            "rate": round(n / simulations, 4),
        }
        for entry_id, n in counts.most_common()
    ]


def _rarity_distribution(draws, rarity) -> dict:
    counts = Counter(rarity(entry) for draw in draws for entry in draw)
    total = sum(counts.values())
    if not total:
        return {}
    return {r: round((n / total) * 100, 2) for r, n in counts.most_common()}


def simulate_rooms(storage: LotteryStorage, count: int, simulations: int, rng) -> dict:
    draws = simulate_room_draws(storage.list_rooms(), count, rng, simulations)

    return {
        "simulations": simulations,
        "count": count,
        "rooms": _appearance_stats(draws, lambda r: r.id, lambda r: r.name, simulations),
        "rarity_distribution": _rarity_distribution(draws, lambda r: r.rarity),
    }


def simulate_room_items(storage: LotteryStorage, room_id: int, simulations: int, rng) -> dict:
    room = require_room(storage, room_id)
    pool = storage.list_assignments_for_room(room_id)

    draws = simulate_item_draws(room, pool, max(0, room.items_to_show), rng, simulations)

    warnings = []
    guaranteed = sum(1 for a in pool if a.is_guaranteed)
    if guaranteed > room.items_to_show:
        warnings.append(
            f"{guaranteed - room.items_to_show} guaranteed item(s) never appear: "
            f"only {room.items_to_show} slot(s) per draw."
        )

    return {
        "room_id": room_id,
        "simulations": simulations,
        "items_to_show": room.items_to_show,
        "assignments": _appearance_stats(draws, lambda a: a.id, lambda a: a.item.name, simulations),
        "rarity_distribution": _rarity_distribution(draws, lambda a: a.item.rarity),
        "warnings": warnings,
    }
