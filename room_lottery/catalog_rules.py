ITEM_RARITY_KEYS = ["Common", "Uncommon", "Rare", "Epic", "Legendary"]
ROOM_RARITY_KEYS = [
    "Common Rarity",
    "Medium Rarity",
    "High Rarity",
    "Very High Rarity",
    "Legendary Rarity",
]

# Fatal errors = catalog not safe to seed or draw from
FATAL_MISSING_ITEM_FIELDS = ["name", "image_url", "rarity"]
FATAL_MISSING_ROOM_FIELDS = ["name", "description", "probability", "rarity", "image_url", "color", "icon"]
FATAL_MISSING_ASSIGNMENT_FIELDS = ["item"]

PROBABILITY_RANGE = (1, 100)

# Field types checked before a catalog is considered safe to seed
ITEM_STRING_FIELDS = ["image_url", "rarity"]
ITEM_NULLABLE_STRING_FIELDS = ["description"]
ROOM_STRING_FIELDS = ["description", "rarity", "image_url", "color", "icon"]
ROOM_NULLABLE_STRING_FIELDS = ["interior_image_url"]
ROOM_BOOL_FIELDS = ["randomize_repeats"]
ASSIGNMENT_BOOL_FIELDS = ["can_repeat", "is_guaranteed"]
