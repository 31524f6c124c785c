# config.py
import logging
import os
from dataclasses import dataclass

from apparel_inventory.store import (
    InMemoryInventoryStore,
    InventoryStore,
    JsonFileInventoryStore,
    MongoInventoryStore,
)

BACKENDS = ("file", "mongo", "memory")


@dataclass(frozen=True)
class Settings:
    backend: str = "file"
    inventory_file: str = "data/apparel.json"
    mongo_url: str = "mongodb://localhost:27017"
    db_name: str = "apparel_inventory"
    inventory_coll: str = "inventory"
    log_level: str = "INFO"
    host: str = "0.0.0.0"
    port: int = 8000


def load_settings() -> Settings:
    return Settings(
        backend=os.environ.get("INVENTORY_BACKEND", "file").strip().lower(),
        inventory_file=os.environ.get("INVENTORY_FILE", "data/apparel.json"),
        mongo_url=os.environ.get("MONGO_URL", "mongodb://localhost:27017"),
        db_name=os.environ.get("DB_NAME", "apparel_inventory"),
        inventory_coll=os.environ.get("INVENTORY_COLL", "inventory"),
        log_level=os.environ.get("LOG_LEVEL", "INFO").upper(),
        host=os.environ.get("HOST", "0.0.0.0"),
        port=int(os.environ.get("PORT", "8000")),
    )


def configure_logging(settings: Settings) -> None:
    logging.basicConfig(
        level=settings.log_level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )


def build_store(settings: Settings) -> InventoryStore:
    if settings.backend == "file":
        return JsonFileInventoryStore(settings.inventory_file)
    if settings.backend == "mongo":
        return MongoInventoryStore.from_url(settings.mongo_url, settings.db_name, settings.inventory_coll)
    if settings.backend == "memory":
        return InMemoryInventoryStore()
    raise ValueError(f"Unknown INVENTORY_BACKEND {settings.backend!r}, expected one of {', '.join(BACKENDS)}")
