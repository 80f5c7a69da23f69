from collections import deque

# Item probabilities are bucketed into weight classes of this size.
ITEM_WEIGHT_DIVISOR = 10


def room_copies(room) -> int:
    return max(0, room.probability)


def item_copies(assignment) -> int:
    return max(1, assignment.probability // ITEM_WEIGHT_DIVISOR)


def repeat_cap(assignment) -> int:
    if not assignment.can_repeat:
        return 1
    return assignment.max_repeats or 1


def build_pool(entries, copies):
    pool = []
    for entry in entries:
        pool.extend([entry] * copies(entry))
    return pool


def shuffled_pool(entries, copies, rng):
    pool = build_pool(entries, copies)
    rng.shuffle(pool)
    return pool


def _take_distinct(candidates, count, selected, seen_ids):
    for entry in candidates:
        if len(selected) >= count:
            break
        if entry.id in seen_ids:
            continue
        selected.append(entry)
        seen_ids.add(entry.id)


def select_random_rooms(catalog, count: int, rng):
    """
    Picks up to `count` distinct rooms, weighted by room.probability.

    Rooms are replicated into a pool once per probability point, shuffled,
    and taken first-seen. If the pool runs dry before `count` rooms are
    held, the catalog is walked in order to top the selection up.
    """
    if count <= 0 or not catalog:
        return []

    selected = []
    seen_ids = set()

    _take_distinct(shuffled_pool(catalog, room_copies, rng), count, selected, seen_ids)

    if len(selected) < count:
        _take_distinct(catalog, count, selected, seen_ids)

    return selected


def select_random_items(room, pool, count: int, rng):
    """
    Drafts `count` assignments from a room's item pool.

    Guaranteed assignments come first (truncated in pool order when they
    outnumber the slots). Remaining slots are filled from a shuffled
    replication pool, honouring can_repeat / max_repeats. When the room
    has randomize_repeats set, an accepted assignment that may still
    repeat is pushed back onto the end of the pool.
    """
    if count <= 0:
        return []

    guaranteed = [a for a in pool if a.is_guaranteed]
    weighted = [a for a in pool if not a.is_guaranteed]

    if len(guaranteed) >= count:
        return guaranteed[:count]

    result = list(guaranteed)
    remaining = count - len(guaranteed)

    if not weighted:
        return result

    # Nothing can be drawn twice, so every weighted entry fits as-is.
    if len(weighted) <= remaining and all(repeat_cap(a) <= 1 for a in weighted):
        return result + weighted

    return result + _draft_weighted(weighted, remaining, room.randomize_repeats, rng)


def _draft_weighted(weighted, remaining: int, randomize_repeats: bool, rng):
    queue = deque(shuffled_pool(weighted, item_copies, rng))
    repeat_counts = {}
    drafted = []

    while len(drafted) < remaining and queue:
        assignment = queue.popleft()
        drawn = repeat_counts.get(assignment.id, 0)
        cap = repeat_cap(assignment)

        if drawn >= cap:
            continue

        drafted.append(assignment)
        repeat_counts[assignment.id] = drawn + 1

        if (
            randomize_repeats
            and assignment.can_repeat
            and drawn + 1 < cap
            and len(drafted) < remaining
        ):
            queue.append(assignment)

    return drafted


def simulate_room_draws(catalog, count: int, rng, simulations: int):
    results = []

    for _ in range(simulations):
        results.append(select_random_rooms(catalog, count, rng))

    return results


def simulate_item_draws(room, pool, count: int, rng, simulations: int):
    results = []

    for _ in range(simulations):
        results.append(select_random_items(room, pool, count, rng))

    return results
