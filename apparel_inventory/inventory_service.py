# inventory_service.py
# To run: uvicorn apparel_inventory.inventory_service:app --port 8000
import logging
from contextlib import asynccontextmanager
from typing import List

from fastapi import APIRouter, Depends, FastAPI, HTTPException, Request
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from apparel_inventory.config import build_store, configure_logging, load_settings
from apparel_inventory.engine import InventoryEngine
from apparel_inventory.errors import InventoryStoreError
from apparel_inventory.models import Apparel, FulfillmentResult, Order, StockUpdate

LOG = logging.getLogger("inventory")


@asynccontextmanager
async def lifespan(app: FastAPI):
    settings = load_settings()
    configure_logging(settings)
    app.state.engine = InventoryEngine(build_store(settings))
    LOG.info("Inventory Service: %s backend ready", settings.backend)
    yield


app = FastAPI(title="Apparel Inventory Service", lifespan=lifespan)
router = APIRouter(prefix="/api/inventory")


def get_engine(request: Request) -> InventoryEngine:
    return request.app.state.engine


@app.exception_handler(RequestValidationError)
async def validation_exception_handler(request: Request, exc: RequestValidationError):
    return JSONResponse(
        status_code=400,
        content={"detail": "Invalid request body", "errors": jsonable_encoder(exc.errors())},
    )


def _store_failure(message: str, exc: InventoryStoreError) -> HTTPException:
    LOG.error("%s: %s", message, exc, exc_info=exc)
    return HTTPException(status_code=500, detail=message)


# --- Vendor endpoints ---

@router.put("/update", response_model=Apparel)
def update_stock(update: StockUpdate, engine: InventoryEngine = Depends(get_engine)):
    """Set quantity and price of one apparel size, creating either if missing."""
    try:
        return engine.update_stock(update)
    except InventoryStoreError as exc:
        raise _store_failure("Failed to update stock", exc) from exc


@router.put("/update-multiple", response_model=List[Apparel])
def update_multiple_stock(updates: List[StockUpdate], engine: InventoryEngine = Depends(get_engine)):
    if not updates:
        raise HTTPException(status_code=400, detail="Request body must be a non-empty array of inventory updates")
    try:
        return engine.update_stock_batch(updates)
    except InventoryStoreError as exc:
        raise _store_failure("Failed to update stock items", exc) from exc


# --- Customer endpoints ---

@router.post("/check-fulfillment", response_model=FulfillmentResult, response_model_exclude_none=True)
def check_fulfillment(order: Order, engine: InventoryEngine = Depends(get_engine)):
    try:
        return engine.check_fulfillment(order)
    except InventoryStoreError as exc:
        raise _store_failure("Failed to check order fulfillment", exc) from exc


@router.post("/calculate-cost", response_model=FulfillmentResult, response_model_exclude_none=True)
def calculate_cost(order: Order, engine: InventoryEngine = Depends(get_engine)):
    """Total cost of the order, or the shortfalls when it cannot be fulfilled."""
    try:
        return engine.calculate_cost(order)
    except InventoryStoreError as exc:
        raise _store_failure("Failed to calculate order cost", exc) from exc


# --- Lookup endpoints ---

@router.get("", response_model=List[Apparel])
def get_all_inventory(engine: InventoryEngine = Depends(get_engine)):
    try:
        return engine.get_all()
    except InventoryStoreError as exc:
        raise _store_failure("Failed to retrieve inventory", exc) from exc


@router.get("/{code}", response_model=Apparel)
def get_apparel_by_code(code: str, engine: InventoryEngine = Depends(get_engine)):
    try:
        apparel = engine.get_by_code(code)
    except InventoryStoreError as exc:
        raise _store_failure("Failed to retrieve apparel", exc) from exc
    if apparel is None:
        raise HTTPException(status_code=404, detail=f"Apparel with code {code} not found")
    return apparel


app.include_router(router)


@app.get("/")
def root():
    return {
        "message": "Apparel Inventory API",
        "endpoints": {
            "updateSingleStock": "PUT /api/inventory/update",
            "updateMultipleStock": "PUT /api/inventory/update-multiple",
            "checkOrderFulfillment": "POST /api/inventory/check-fulfillment",
            "calculateOrderCost": "POST /api/inventory/calculate-cost",
            "getAllInventory": "GET /api/inventory",
            "getApparelByCode": "GET /api/inventory/{code}",
        },
    }


@app.get("/health")
def health():
    return {"ok": True}
