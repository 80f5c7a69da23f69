import os
from pathlib import Path

CATALOG_PATH = Path(
    os.environ.get("ROOM_LOTTERY_CATALOG", Path(__file__).parent / "catalog.json")
)
SEED_CATALOG = os.environ.get("ROOM_LOTTERY_SEED", "1").lower() not in ("0", "false", "no")
LOG_LEVEL = os.environ.get("ROOM_LOTTERY_LOG_LEVEL", "INFO").upper()

DEFAULT_ROOM_COUNT = 3
DEFAULT_ITEMS_TO_SHOW = 3
MAX_SIMULATIONS = 100_000

API_VERSION = "1.0.0"

HOST = os.environ.get("ROOM_LOTTERY_HOST", "127.0.0.1")
PORT = int(os.environ.get("ROOM_LOTTERY_PORT", "8000"))
