from dataclasses import dataclass
from datetime import datetime
from decimal import Decimal
from typing import Optional


@dataclass(frozen=True)
class Product:
    """
    Product record representing an item in the inventory.

    Attributes:
        id: Unique identifier assigned by the store
        name: Product name
        description: Optional free-text description
        price: Product price (must be non-negative)
        stock_quantity: Available quantity (must be non-negative)
        created_at: Timestamp when product was created
        updated_at: Timestamp of the last update, None until first update
    """
    id: int
    name: str
    price: Decimal
    stock_quantity: int
    created_at: datetime
    description: Optional[str] = None
    updated_at: Optional[datetime] = None

    def __repr__(self):
        return f"<Product(id={self.id}, name='{self.name}', stock_quantity={self.stock_quantity})>"
