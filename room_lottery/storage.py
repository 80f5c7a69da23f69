import logging
import threading
from abc import ABC, abstractmethod
from typing import Any, Dict, List, Optional

from room_lottery.models.lottery_models import Item, Room, RoomItem, RoomItemWithDetails

logger = logging.getLogger(__name__)

ASSIGNMENT_DEFAULTS = {
    "probability": 100,
    "can_repeat": True,
    "max_repeats": 1,
    "is_guaranteed": False,
}


class LotteryStorage(ABC):
    """Query and CRUD contract the services and routes depend on."""

    # Rooms
    @abstractmethod
    def list_rooms(self) -> List[Room]: ...

    @abstractmethod
    def get_room(self, room_id: int) -> Optional[Room]: ...

    @abstractmethod
    def create_room(self, data: Dict[str, Any]) -> Room: ...

    @abstractmethod
    def update_room(self, room_id: int, changes: Dict[str, Any]) -> Optional[Room]: ...

    @abstractmethod
    def delete_room(self, room_id: int) -> bool: ...

    # Items
    @abstractmethod
    def list_items(self) -> List[Item]: ...

    @abstractmethod
    def get_item(self, item_id: int) -> Optional[Item]: ...

    @abstractmethod
    def create_item(self, data: Dict[str, Any]) -> Item: ...

    @abstractmethod
    def update_item(self, item_id: int, changes: Dict[str, Any]) -> Optional[Item]: ...

    @abstractmethod
    def delete_item(self, item_id: int) -> bool: ...

    # Assignments
    @abstractmethod
    def list_assignments_for_room(self, room_id: int) -> List[RoomItemWithDetails]: ...

    @abstractmethod
    def get_assignment(self, assignment_id: int) -> Optional[RoomItem]: ...

    @abstractmethod
    def assign_item_to_room(self, room_id: int, item_id: int, properties: Dict[str, Any]) -> RoomItem: ...

    @abstractmethod
    def update_assignment(self, assignment_id: int, properties: Dict[str, Any]) -> Optional[RoomItem]: ...

    @abstractmethod
    def remove_assignment(self, assignment_id: int) -> bool: ...


class MemoryStorage(LotteryStorage):
    """In-process backend. Ids are handed out per entity starting at 1."""

    def __init__(self):
        self._lock = threading.RLock()
        self._rooms: Dict[int, Room] = {}
        self._items: Dict[int, Item] = {}
        self._assignments: Dict[int, RoomItem] = {}
        self._next_id = {"room": 1, "item": 1, "assignment": 1}

    def _allocate(self, kind: str) -> int:
        new_id = self._next_id[kind]
        self._next_id[kind] += 1
        return new_id

    # ============================================================
    # ROOMS
    # ============================================================

    def list_rooms(self) -> List[Room]:
        with self._lock:
            return list(self._rooms.values())

    def get_room(self, room_id: int) -> Optional[Room]:
        return self._rooms.get(room_id)

    def create_room(self, data: Dict[str, Any]) -> Room:
        with self._lock:
            room = Room(id=self._allocate("room"), **data)
            self._rooms[room.id] = room
        logger.info("Created room %s (%s)", room.id, room.name)
        return room

    def update_room(self, room_id: int, changes: Dict[str, Any]) -> Optional[Room]:
        with self._lock:
            room = self._rooms.get(room_id)
            if room is None:
                return None
            updated = Room.model_validate({**room.model_dump(), **changes})
            self._rooms[room_id] = updated
        return updated

    def delete_room(self, room_id: int) -> bool:
        with self._lock:
            if self._rooms.pop(room_id, None) is None:
                return False
            self._drop_assignments(lambda a: a.room_id == room_id)
        logger.info("Deleted room %s", room_id)
        return True

    # ============================================================
    # ITEMS
    # ============================================================

    def list_items(self) -> List[Item]:
        with self._lock:
            return list(self._items.values())

    def get_item(self, item_id: int) -> Optional[Item]:
        return self._items.get(item_id)

    def create_item(self, data: Dict[str, Any]) -> Item:
        with self._lock:
            item = Item(id=self._allocate("item"), **data)
            self._items[item.id] = item
        logger.info("Created item %s (%s)", item.id, item.name)
        return item

    def update_item(self, item_id: int, changes: Dict[str, Any]) -> Optional[Item]:
        with self._lock:
            item = self._items.get(item_id)
            if item is None:
                return None
            updated = Item.model_validate({**item.model_dump(), **changes})
            self._items[item_id] = updated
        return updated

    def delete_item(self, item_id: int) -> bool:
        with self._lock:
            if self._items.pop(item_id, None) is None:
                return False
            self._drop_assignments(lambda a: a.item_id == item_id)
        logger.info("Deleted item %s", item_id)
        return True

    # ============================================================
    # ROOM ITEM ASSIGNMENTS
    # ============================================================

    def list_assignments_for_room(self, room_id: int) -> List[RoomItemWithDetails]:
        with self._lock:
            return [
                RoomItemWithDetails(**a.model_dump(), item=self._items[a.item_id])
                for a in sorted(self._assignments.values(), key=lambda a: a.id)
                if a.room_id == room_id and a.item_id in self._items
            ]

    def get_assignment(self, assignment_id: int) -> Optional[RoomItem]:
        return self._assignments.get(assignment_id)

    def assign_item_to_room(self, room_id: int, item_id: int, properties: Dict[str, Any]) -> RoomItem:
        with self._lock:
            if room_id not in self._rooms or item_id not in self._items:
                raise LookupError("Room or item not found")

            # One assignment per (room, item) pair; re-assigning updates it.
            for existing in self._assignments.values():
                if existing.room_id == room_id and existing.item_id == item_id:
                    return self.update_assignment(existing.id, properties)

            values = {**ASSIGNMENT_DEFAULTS, **properties}
            assignment = RoomItem(
                id=self._allocate("assignment"),
                room_id=room_id,
                item_id=item_id,
                **values,
            )
            self._assignments[assignment.id] = assignment
        logger.info("Assigned item %s to room %s", item_id, room_id)
        return assignment

    def update_assignment(self, assignment_id: int, properties: Dict[str, Any]) -> Optional[RoomItem]:
        with self._lock:
            assignment = self._assignments.get(assignment_id)
            if assignment is None:
                return None
            updated = RoomItem.model_validate({**assignment.model_dump(), **properties})
            self._assignments[assignment_id] = updated
        return updated

    def remove_assignment(self, assignment_id: int) -> bool:
        with self._lock:
            return self._assignments.pop(assignment_id, None) is not None

    def _drop_assignments(self, predicate) -> None:
        for assignment_id in [a.id for a in self._assignments.values() if predicate(a)]:
            del self._assignments[assignment_id]


_storage: Optional[LotteryStorage] = None
_storage_lock = threading.Lock()


def get_storage() -> LotteryStorage:
    """FastAPI dependency: the process-wide store, seeded on first use."""
    global _storage

    with _storage_lock:
        if _storage is None:
            # Imported here to keep the loader free to import this module.
            from room_lottery.catalog_loader import build_seeded_storage
            _storage = build_seeded_storage()
    return _storage
