import pytest
from fastapi.testclient import TestClient

from room_lottery.catalog_loader import build_seeded_storage
from room_lottery.main import app
from room_lottery.models.lottery_models import Item, Room, RoomItemWithDetails
from room_lottery.storage import MemoryStorage, get_storage


class IdentityRng:
    """Leaves the pool in build order."""

    def shuffle(self, pool):
        pass


class ReversingRng:
    def shuffle(self, pool):
        pool.reverse()


def make_room(room_id, probability=10, randomize_repeats=True, items_to_show=3, **overrides):
    fields = dict(
        id=room_id,
        name=f"Room {room_id}",
        description="test room",
        probability=probability,
        rarity="Common Rarity",
        image_url=f"/uploads/room-{room_id}.png",
        color="blue",
        icon="play",
        items_to_show=items_to_show,
        randomize_repeats=randomize_repeats,
    )
    fields.update(overrides)
    return Room(**fields)


def make_assignment(
    assignment_id,
    probability=100,
    can_repeat=True,
    max_repeats=1,
    is_guaranteed=False,
    room_id=1,
):
    item = Item(
        id=assignment_id,
        name=f"Item {assignment_id}",
        image_url=f"/uploads/item-{assignment_id}.png",
        rarity="Common",
    )
    return RoomItemWithDetails(
        id=assignment_id,
        room_id=room_id,
        item_id=item.id,
        probability=probability,
        can_repeat=can_repeat,
        max_repeats=max_repeats,
        is_guaranteed=is_guaranteed,
        item=item,
    )


@pytest.fixture
def identity_rng():
    return IdentityRng()


@pytest.fixture
def reversing_rng():
    return ReversingRng()


@pytest.fixture
def storage():
    return MemoryStorage()


@pytest.fixture
def seeded_storage():
    return build_seeded_storage(seed=True)


@pytest.fixture
def client(seeded_storage):
    app.dependency_overrides[get_storage] = lambda: seeded_storage
    with TestClient(app) as c:
        yield c
    app.dependency_overrides.clear()
