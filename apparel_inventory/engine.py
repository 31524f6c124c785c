# engine.py
"""
Inventory engine: stock merging, lookups, fulfillment checks and order cost.

Every operation loads the whole catalog from the store and, when it mutates
anything, saves the whole catalog back. Nothing is cached between calls and
nothing is locked, so two concurrent writers race and the later save wins.
"""
import logging
from decimal import Decimal
from typing import Dict, Iterable, List, Optional

from apparel_inventory.models import (
    Apparel,
    FulfillmentResult,
    MissingItem,
    Order,
    SizeVariant,
    StockUpdate,
)
from apparel_inventory.store import InventoryStore

LOG = logging.getLogger("inventory")


def find_apparel(catalog: List[Apparel], code: str) -> Optional[Apparel]:
    for apparel in catalog:
        if apparel.code == code:
            return apparel
    return None


def find_size(apparel: Apparel, size: str) -> Optional[SizeVariant]:
    for variant in apparel.sizes:
        if variant.size == size:
            return variant
    return None


def apply_stock_update(catalog: List[Apparel], update: StockUpdate) -> Apparel:
    """Upsert the apparel and its size in place; quantity and price are overwritten."""
    apparel = find_apparel(catalog, update.code)
    if apparel is None:
        apparel = Apparel(code=update.code, sizes=[])
        catalog.append(apparel)

    variant = find_size(apparel, update.size)
    if variant is not None:
        variant.quantity = update.quantity
        variant.price = update.price
    else:
        apparel.sizes.append(SizeVariant(size=update.size, quantity=update.quantity, price=update.price))
    return apparel


def collect_shortfalls(catalog: List[Apparel], order: Order) -> List[MissingItem]:
    missing = []
    for line in order.items:
        apparel = find_apparel(catalog, line.code)
        variant = find_size(apparel, line.size) if apparel is not None else None
        available = variant.quantity if variant is not None else 0
        if variant is None or available < line.quantity:
            missing.append(MissingItem(
                code=line.code,
                size=line.size,
                requested_quantity=line.quantity,
                available_quantity=available,
            ))
    return missing


def price_order(catalog: List[Apparel], order: Order) -> Optional[Decimal]:
    """Sum price * quantity over the order, or None if a line has no variant to price."""
    total = Decimal("0")
    for line in order.items:
        apparel = find_apparel(catalog, line.code)
        variant = find_size(apparel, line.size) if apparel is not None else None
        if variant is None:
            return None
        # str() keeps the decimal digits the price was written with
        total += Decimal(str(variant.price)) * line.quantity
    return total


class InventoryEngine:

    def __init__(self, store: InventoryStore):
        self.store = store

    def update_stock(self, update: StockUpdate) -> Apparel:
        catalog = self.store.load()
        apparel = apply_stock_update(catalog, update)
        self.store.save(catalog)
        LOG.info("Stock set: code=%s size=%s quantity=%d price=%s",
                 update.code, update.size, update.quantity, update.price)
        return apparel

    def update_stock_batch(self, updates: Iterable[StockUpdate]) -> List[Apparel]:
        """
        Apply updates in order against one snapshot and save once.
        Returns one apparel per distinct code, in the order codes were first touched.
        """
        updates = list(updates)
        if not updates:
            return []

        catalog = self.store.load()
        touched: Dict[str, Apparel] = {}
        for update in updates:
            apparel = apply_stock_update(catalog, update)
            touched.setdefault(apparel.code, apparel)
        self.store.save(catalog)
        LOG.info("Batch stock update: %d updates across %d codes", len(updates), len(touched))
        return list(touched.values())

    def get_all(self) -> List[Apparel]:
        return self.store.load()

    def get_by_code(self, code: str) -> Optional[Apparel]:
        apparel = find_apparel(self.store.load(), code)
        if apparel is None:
            LOG.debug("Apparel %s not found", code)
        return apparel

    def check_fulfillment(self, order: Order) -> FulfillmentResult:
        missing = collect_shortfalls(self.store.load(), order)
        LOG.debug("Order %s: %d lines, %d short", order.id, len(order.items), len(missing))
        return FulfillmentResult(can_fulfill=not missing, missing_items=missing)

    def calculate_cost(self, order: Order) -> FulfillmentResult:
        check = self.check_fulfillment(order)
        if not check.can_fulfill:
            return check

        # Priced against a second snapshot; stock may have moved since the check.
        catalog = self.store.load()
        total = price_order(catalog, order)
        if total is None:
            LOG.warning("Order %s: stock changed between check and pricing, re-checking", order.id)
            missing = collect_shortfalls(catalog, order)
            return FulfillmentResult(can_fulfill=False, missing_items=missing)

        LOG.info("Order %s: total cost %s", order.id, total)
        return FulfillmentResult(can_fulfill=True, total_cost=total)
