"""Apparel inventory service: stock updates, lookups and order fulfillment checks."""
from apparel_inventory.engine import InventoryEngine
from apparel_inventory.errors import InventoryStoreError
from apparel_inventory.models import (
    Apparel,
    FulfillmentResult,
    MissingItem,
    Order,
    OrderLine,
    SizeVariant,
    StockUpdate,
)
from apparel_inventory.store import (
    InMemoryInventoryStore,
    InventoryStore,
    JsonFileInventoryStore,
    MongoInventoryStore,
)

__all__ = [
    "Apparel",
    "FulfillmentResult",
    "InMemoryInventoryStore",
    "InventoryEngine",
    "InventoryStore",
    "InventoryStoreError",
    "JsonFileInventoryStore",
    "MissingItem",
    "MongoInventoryStore",
    "Order",
    "OrderLine",
    "SizeVariant",
    "StockUpdate",
]

__version__ = "0.1.0"
