import logging

from fastapi import Depends, FastAPI

from room_lottery.catalog_validator import validate_catalog
from room_lottery.config import API_VERSION
from room_lottery.logging_setup import setup_logging
from room_lottery.routes import items, room_items, rooms, simulation
from room_lottery.schemas import CatalogValidateRequest
from room_lottery.storage import LotteryStorage, get_storage

setup_logging()
logger = logging.getLogger(__name__)

app = FastAPI(
    title="Room Lottery API",
    description="Weighted room draws and loot reveals: pick a room, see what it holds.",
    version=API_VERSION,
)

app.include_router(rooms.router)
app.include_router(items.router)
app.include_router(room_items.router)
app.include_router(simulation.router)

# ============================================================
# HEALTH CHECK
# ============================================================

@app.get("/health", tags=["Health"], response_model=dict)
def health_check():
    return {"status": "ok"}


# ============================================================
# METADATA ENDPOINTS
# ============================================================

@app.get(
    "/info",
    tags=["Metadata"],
    summary="API info + catalog size",
    response_model=dict,
)
def info(storage: LotteryStorage = Depends(get_storage)):
    return {
        "name": "Room Lottery API",
        "version": API_VERSION,
        "room_count": len(storage.list_rooms()),
        "item_count": len(storage.list_items()),
    }


# ============================================================
# CATALOG VALIDATION
# ============================================================

@app.post(
    "/catalog/validate",
    tags=["Catalog"],
    summary="Validate a catalog document",
    description="Checks structure, probabilities and item references before a catalog is seeded. "
                "Warns when guaranteed items outnumber a room's slots.",
    response_model=dict,
)
def catalog_validate(req: CatalogValidateRequest):
    report = validate_catalog(req.catalog)
    if not report["valid"]:
        logger.info("Rejected catalog with %d error(s)", len(report["errors"]))
    return report
