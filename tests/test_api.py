NEW_ROOM = {
    "name": "Crystal Cave",
    "description": "Glittering walls",
    "probability": 40,
    "rarity": "Medium Rarity",
    "image_url": "/uploads/cave.png",
    "color": "cyan",
    "icon": "gem",
    "items_to_show": 2,
}


def test_health(client):
    assert client.get("/health").json() == {"status": "ok"}


def test_info_counts_seeded_catalog(client):
    body = client.get("/info").json()
    assert body["room_count"] == 7
    assert body["item_count"] == 28


# -----------------------------
# ROOM DRAWS
# -----------------------------

def test_random_rooms_default_count(client):
    resp = client.get("/rooms/random")

    assert resp.status_code == 200
    rooms = resp.json()
    assert len(rooms) == 3
    assert len({r["id"] for r in rooms}) == 3


def test_random_rooms_seed_is_reproducible(client):
    first = client.get("/rooms/random", params={"count": 4, "seed": 17}).json()
    second = client.get("/rooms/random", params={"count": 4, "seed": 17}).json()
    assert first == second


def test_random_rooms_count_bounds(client):
    assert client.get("/rooms/random", params={"count": 0}).json() == []
    assert client.get("/rooms/random", params={"count": -2}).json() == []
    assert len(client.get("/rooms/random", params={"count": 50}).json()) == 7


def test_random_rooms_rejects_non_integer_count(client):
    assert client.get("/rooms/random", params={"count": "many"}).status_code == 422


# -----------------------------
# ITEM DRAWS
# -----------------------------

def test_random_items_unknown_room(client):
    resp = client.get("/rooms/999/random-items")
    assert resp.status_code == 404
    assert resp.json()["detail"] == "Room not found"


def test_random_items_guaranteed_first_with_item_details(client):
    drawn = client.get("/rooms/4/random-items", params={"seed": 3}).json()

    assert len(drawn) == 3
    assert drawn[0]["item"]["name"] == "Arcane Tome"
    assert drawn[0]["is_guaranteed"] is True
    assert all("rarity" in entry["item"] for entry in drawn)


def test_random_items_zero_slots(client):
    client.patch("/rooms/2", json={"items_to_show": 0})
    assert client.get("/rooms/2/random-items").json() == []


# -----------------------------
# CRUD
# -----------------------------

def test_room_item_lifecycle(client):
    room = client.post("/rooms", json=NEW_ROOM).json()
    item = client.post("/items", json={
        "name": "Geode",
        "image_url": "/uploads/geode.png",
        "rarity": "Rare",
    }).json()

    resp = client.post(f"/rooms/{room['id']}/items", json={
        "item_id": item["id"],
        "can_repeat": True,
        "max_repeats": 2,
    })
    assert resp.status_code == 201
    assignment = resp.json()
    assert assignment["probability"] == 100

    drawn = client.get(f"/rooms/{room['id']}/random-items").json()
    assert [d["item"]["name"] for d in drawn] == ["Geode", "Geode"]

    assert client.delete(f"/rooms/{room['id']}").status_code == 204
    assert client.get(f"/rooms/{room['id']}").status_code == 404
    assert client.delete(f"/room-items/{assignment['id']}").status_code == 404


def test_create_room_validates_probability(client):
    assert client.post("/rooms", json={**NEW_ROOM, "probability": 0}).status_code == 422
    assert client.post("/rooms", json={**NEW_ROOM, "probability": 101}).status_code == 422


def test_assign_missing_item(client):
    resp = client.post("/rooms/1/items", json={"item_id": 999})
    assert resp.status_code == 404
    assert resp.json()["detail"] == "Item not found"


def test_update_assignment_forwards_item_fields(client):
    [first, *_] = client.get("/rooms/1/items").json()

    resp = client.patch(f"/room-items/{first['id']}", json={
        "probability": 15,
        "name": "Polished Chalice",
    })
    body = resp.json()
    assert resp.status_code == 200
    assert body["probability"] == 15
    assert body["item"]["name"] == "Polished Chalice"
    assert client.get(f"/items/{first['item_id']}").json()["name"] == "Polished Chalice"


def test_delete_item_removes_assignment(client):
    pool = client.get("/rooms/3/items").json()
    target = pool[0]["item_id"]

    assert client.delete(f"/items/{target}").status_code == 204
    remaining = client.get("/rooms/3/items").json()
    assert target not in [a["item_id"] for a in remaining]


# -----------------------------
# SIMULATION & CATALOG
# -----------------------------

def test_simulate_rooms_endpoint(client):
    resp = client.post("/simulate/rooms", json={"count": 2, "simulations": 100, "seed": 1})
    body = resp.json()

    assert resp.status_code == 200
    assert sum(entry["appearances"] for entry in body["rooms"]) == 200


def test_simulate_rejects_too_many_runs(client):
    resp = client.post("/simulate/rooms", json={"simulations": 100_001})
    assert resp.status_code == 422


def test_simulate_items_unknown_room(client):
    assert client.post("/simulate/rooms/999/items", json={}).status_code == 404


def test_catalog_validate_endpoint(client):
    resp = client.post("/catalog/validate", json={"catalog": {"items": [{"name": "x"}], "rooms": []}})
    body = resp.json()

    assert resp.status_code == 200
    assert body["valid"] is False
    assert body["errors"][0]["path"] == "$.items[0]"


# -----------------------------
# NULLS IN PATCH BODIES
# -----------------------------

def test_patch_room_rejects_null_probability(client):
    resp = client.patch("/rooms/1", json={"probability": None})

    assert resp.status_code == 422
    assert client.get("/rooms/1").json()["probability"] == 20
    assert len(client.get("/rooms/random").json()) == 3


def test_patch_room_allows_clearing_interior_image(client):
    client.patch("/rooms/1", json={"interior_image_url": "/uploads/inside.png"})
    resp = client.patch("/rooms/1", json={"interior_image_url": None})

    assert resp.status_code == 200
    assert resp.json()["interior_image_url"] is None


def test_patch_assignment_rejects_null_probability(client):
    [first, *_] = client.get("/rooms/1/items").json()

    resp = client.patch(f"/room-items/{first['id']}", json={"probability": None})
    assert resp.status_code == 422
    assert client.get("/rooms/1/items").json()[0]["probability"] == first["probability"]
    assert client.get("/rooms/1/random-items").status_code == 200


def test_patch_assignment_rejects_null_item_name(client):
    [first, *_] = client.get("/rooms/1/items").json()

    resp = client.patch(f"/room-items/{first['id']}", json={"name": None})
    assert resp.status_code == 422


def test_patch_item_rejects_null_image_but_clears_description(client):
    assert client.patch("/items/1", json={"image_url": None}).status_code == 422

    resp = client.patch("/items/1", json={"description": None})
    assert resp.status_code == 200
    assert resp.json()["description"] is None


def test_catalog_validate_rejects_non_string_item_reference(client):
    catalog = {
        "items": [{"name": "a", "image_url": "/a.png", "rarity": "Common"}],
        "rooms": [{
            "name": "Den", "description": "", "probability": 10, "rarity": "Common Rarity",
            "image_url": "/den.png", "color": "red", "icon": "home",
            "items": [{"item": ["a"]}],
        }],
    }
    resp = client.post("/catalog/validate", json={"catalog": catalog})

    assert resp.status_code == 200
    assert resp.json()["errors"][0]["path"] == "$.rooms[0].items[0].item"
