from typing import Any, Dict, List

from room_lottery.config import DEFAULT_ITEMS_TO_SHOW
from room_lottery.catalog_rules import (
    ITEM_RARITY_KEYS,
    ROOM_RARITY_KEYS,
    FATAL_MISSING_ITEM_FIELDS,
    FATAL_MISSING_ROOM_FIELDS,
    FATAL_MISSING_ASSIGNMENT_FIELDS,
    PROBABILITY_RANGE,
    ITEM_STRING_FIELDS,
    ITEM_NULLABLE_STRING_FIELDS,
    ROOM_STRING_FIELDS,
    ROOM_NULLABLE_STRING_FIELDS,
    ROOM_BOOL_FIELDS,
    ASSIGNMENT_BOOL_FIELDS,
)


def _is_int(value: Any) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


def _check_probability(value: Any, path: str, errors: List[Dict[str, str]]) -> bool:
    low, high = PROBABILITY_RANGE
    if not _is_int(value) or not low <= value <= high:
        errors.append({
            "path": path,
            "message": f"probability must be an integer between {low} and {high}."
        })
        return False
    return True


def _check_field_types(
    obj: Dict[str, Any],
    path: str,
    errors: List[Dict[str, str]],
    strings=(),
    nullable_strings=(),
    bools=(),
) -> bool:
    for field in strings:
        if field in obj and not isinstance(obj[field], str):
            errors.append({"path": f"{path}.{field}", "message": f"{field} must be a string."})
            return False

    for field in nullable_strings:
        if obj.get(field) is not None and not isinstance(obj[field], str):
            errors.append({"path": f"{path}.{field}", "message": f"{field} must be a string or null."})
            return False

    for field in bools:
        if field in obj and not isinstance(obj[field], bool):
            errors.append({"path": f"{path}.{field}", "message": f"{field} must be true or false."})
            return False

    return True


def validate_catalog(catalog: Any) -> Dict[str, Any]:
    errors: List[Dict[str, str]] = []
    warnings: List[Dict[str, str]] = []

    summary = {
        "total_items": 0,
        "total_rooms": 0,
        "total_assignments": 0,
        "guaranteed_assignments": 0,
        "item_rarity_counts": {r: 0 for r in ITEM_RARITY_KEYS},
    }

    # ---- top-level must be dict ----
    if not isinstance(catalog, dict):
        errors.append({
            "path": "$",
            "message": "Top-level catalog must be an object with 'items' and 'rooms' lists."
        })
        return {
            "valid": False,
            "errors": errors,
            "warnings": warnings,
            "summary": summary,
        }

    items = catalog.get("items", [])
    rooms = catalog.get("rooms", [])

    if not isinstance(items, list):
        errors.append({"path": "$.items", "message": "items must be a list of item objects."})
        items = []
    if not isinstance(rooms, list):
        errors.append({"path": "$.rooms", "message": "rooms must be a list of room objects."})
        rooms = []

    # Walk items
    item_names = set()
    for i, item in enumerate(items):
        path = f"$.items[{i}]"

        if not isinstance(item, dict):
            errors.append({"path": path, "message": "Item must be an object/dict."})
            continue

        missing = [f for f in FATAL_MISSING_ITEM_FIELDS if f not in item]
        if missing:
            errors.append({
                "path": path,
                "message": f"Missing required fields: {', '.join(missing)}"
            })
            continue

        if not isinstance(item["name"], str) or not item["name"].strip():
            errors.append({
                "path": f"{path}.name",
                "message": "Item name must be a non-empty string."
            })
            continue

        if not _check_field_types(
            item, path, errors,
            strings=ITEM_STRING_FIELDS,
            nullable_strings=ITEM_NULLABLE_STRING_FIELDS,
        ):
            continue

        if item["name"] in item_names:
            errors.append({
                "path": f"{path}.name",
                "message": f"Duplicate item name '{item['name']}'."
            })
            continue

        if item["rarity"] not in ITEM_RARITY_KEYS:
            warnings.append({
                "path": f"{path}.rarity",
                "message": f"Unknown item rarity '{item['rarity']}'. Expected one of {ITEM_RARITY_KEYS}"
            })
        else:
            summary["item_rarity_counts"][item["rarity"]] += 1

        item_names.add(item["name"])
        summary["total_items"] += 1

    # Walk rooms
    for r, room in enumerate(rooms):
        path = f"$.rooms[{r}]"

        if not isinstance(room, dict):
            errors.append({"path": path, "message": "Room must be an object/dict."})
            continue

        missing = [f for f in FATAL_MISSING_ROOM_FIELDS if f not in room]
        if missing:
            errors.append({
                "path": path,
                "message": f"Missing required fields: {', '.join(missing)}"
            })
            continue

        if not isinstance(room["name"], str) or not room["name"].strip():
            errors.append({
                "path": f"{path}.name",
                "message": "Room name must be a non-empty string."
            })
            continue

        if not _check_field_types(
            room, path, errors,
            strings=ROOM_STRING_FIELDS,
            nullable_strings=ROOM_NULLABLE_STRING_FIELDS,
            bools=ROOM_BOOL_FIELDS,
        ):
            continue

        if not _check_probability(room["probability"], f"{path}.probability", errors):
            continue

        items_to_show = room.get("items_to_show", DEFAULT_ITEMS_TO_SHOW)
        if not _is_int(items_to_show) or items_to_show < 0:
            errors.append({
                "path": f"{path}.items_to_show",
                "message": "items_to_show must be an integer >= 0."
            })
            continue

        if room["rarity"] not in ROOM_RARITY_KEYS:
            warnings.append({
                "path": f"{path}.rarity",
                "message": f"Unknown room rarity '{room['rarity']}'. Expected one of {ROOM_RARITY_KEYS}"
            })

        summary["total_rooms"] += 1

        assignments = room.get("items", [])
        if not isinstance(assignments, list):
            errors.append({
                "path": f"{path}.items",
                "message": "Room items must be a list of assignment objects."
            })
            continue

        if not assignments and items_to_show > 0:
            warnings.append({
                "path": f"{path}.items",
                "message": "Room has no items; its item draw will always be empty."
            })

        guaranteed = 0
        assigned = set()

        # Walk assignments
        for a, assignment in enumerate(assignments):
            a_path = f"{path}.items[{a}]"

            if not isinstance(assignment, dict):
                errors.append({"path": a_path, "message": "Assignment must be an object/dict."})
                continue

            missing = [f for f in FATAL_MISSING_ASSIGNMENT_FIELDS if f not in assignment]
            if missing:
                errors.append({
                    "path": a_path,
                    "message": f"Missing required fields: {', '.join(missing)}"
                })
                continue

            if not isinstance(assignment["item"], str):
                errors.append({
                    "path": f"{a_path}.item",
                    "message": "Assignment item must be an item name string."
                })
                continue

            if not _check_field_types(assignment, a_path, errors, bools=ASSIGNMENT_BOOL_FIELDS):
                continue

            if assignment["item"] not in item_names:
                errors.append({
                    "path": f"{a_path}.item",
                    "message": f"Unknown item '{assignment['item']}'."
                })
                continue

            if assignment["item"] in assigned:
                warnings.append({
                    "path": f"{a_path}.item",
                    "message": f"Item '{assignment['item']}' assigned twice; the later entry wins."
                })
            assigned.add(assignment["item"])

            if "probability" in assignment:
                if not _check_probability(assignment["probability"], f"{a_path}.probability", errors):
                    continue

            max_repeats = assignment.get("max_repeats", 1)
            if not _is_int(max_repeats) or max_repeats < 1:
                errors.append({
                    "path": f"{a_path}.max_repeats",
                    "message": "max_repeats must be an integer >= 1."
                })
                continue

            if max_repeats > 1 and assignment.get("can_repeat") is False:
                warnings.append({
                    "path": f"{a_path}.max_repeats",
                    "message": "max_repeats is ignored when can_repeat is false."
                })

            if assignment.get("is_guaranteed"):
                guaranteed += 1
                summary["guaranteed_assignments"] += 1

            summary["total_assignments"] += 1

        if guaranteed > items_to_show:
            warnings.append({
                "path": path,
                "message": (
                    f"{guaranteed} guaranteed items but items_to_show is {items_to_show}; "
                    "extra guaranteed items will be dropped from draws."
                )
            })

    return {
        "valid": len(errors) == 0,
        "errors": errors,
        "warnings": warnings,
        "summary": summary,
    }
