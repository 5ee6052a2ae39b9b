"""Domain entities describing sellable products and their stock."""

from dataclasses import dataclass
from datetime import datetime
from decimal import Decimal


@dataclass
class Stock:
    """Units available for a single product."""

    id: int | None
    product_id: int | None
    quantity: int
    created_at: datetime | None = None
    updated_at: datetime | None = None


@dataclass
class Product:
    """A product offered in the catalog."""

    id: int | None
    name: str
    description: str
    price: Decimal
    stock: Stock | None = None
    created_at: datetime | None = None
    updated_at: datetime | None = None

    @property
    def quantity(self) -> int:
        return self.stock.quantity if self.stock is not None else 0


__all__ = ["Product", "Stock"]
