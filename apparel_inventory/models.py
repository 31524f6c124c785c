# models.py
from decimal import Decimal
from typing import Any, List

from pydantic import BaseModel, ConfigDict, Field, field_serializer


# --- Catalog records ---
class SizeVariant(BaseModel):
    size: str
    quantity: int = Field(ge=0)
    price: float = Field(ge=0)


class Apparel(BaseModel):
    code: str
    sizes: List[SizeVariant] = Field(default_factory=list)


# --- Request schemas ---
class StockUpdate(BaseModel):
    """Absolute quantity and price for one (code, size) pair, not a delta."""
    code: str = Field(min_length=1)
    size: str = Field(min_length=1)
    quantity: int = Field(ge=0)
    price: float = Field(ge=0)


class OrderLine(BaseModel):
    code: str = Field(min_length=1)
    size: str = Field(min_length=1)
    quantity: int = Field(gt=0)


class Order(BaseModel):
    id: Any = None
    items: List[OrderLine] = Field(min_length=1)


# --- Response schemas ---
class MissingItem(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    code: str
    size: str
    requested_quantity: int = Field(alias="requestedQuantity")
    available_quantity: int = Field(alias="availableQuantity")


class FulfillmentResult(BaseModel):
    """
    Outcome of checking an order against stock.
    missing_items is set whenever fulfillment was checked, total_cost only
    when a cost was calculated for a fulfillable order.
    """
    model_config = ConfigDict(populate_by_name=True)

    can_fulfill: bool = Field(alias="canFulfill")
    missing_items: List[MissingItem] | None = Field(default=None, alias="missingItems")
    total_cost: Decimal | None = Field(default=None, alias="totalCost")

    @field_serializer("total_cost", when_used="json")
    def _total_cost_as_number(self, value: Decimal | None):
        if value is None:
            return None
        return float(value)
