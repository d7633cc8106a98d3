import dataclasses
import threading
from datetime import datetime, timedelta, timezone
from decimal import Decimal
from typing import Callable, Optional

from fastapi import Request

from response_examples.models.product import Product


def utcnow() -> datetime:
    return datetime.now(timezone.utc)


class ProductStore:
    """
    In-memory product storage owned by the application.

    All access goes through a single re-entrant lock so concurrent
    requests (sync handlers run in a thread pool) never observe a
    half-applied mutation. Ids come from a counter that only grows.
    """

    def __init__(self, seed: bool = True, clock: Callable[[], datetime] = utcnow):
        self.lock = threading.RLock()
        self.clock = clock
        self._products: list[Product] = []
        self._next_id = 1
        if seed:
            self._seed()

    def _seed(self) -> None:
        """Load the three sample products with backdated creation times."""
        now = self.clock()
        samples = [
            ("Laptop", "High-performance laptop", Decimal("999.99"), 50, 30),
            ("Mouse", "Wireless ergonomic mouse", Decimal("29.99"), 200, 15),
            ("Keyboard", "Mechanical keyboard with RGB lighting", Decimal("149.99"), 75, 20),
        ]
        for name, description, price, stock, days_ago in samples:
            self.add(
                name=name,
                description=description,
                price=price,
                stock_quantity=stock,
                created_at=now - timedelta(days=days_ago),
            )

    def all(self) -> list[Product]:
        with self.lock:
            return list(self._products)

    def find(self, product_id: int) -> Optional[Product]:
        with self.lock:
            return next((p for p in self._products if p.id == product_id), None)

    def add(self, **fields) -> Product:
        """Assign the next id and append a new product."""
        with self.lock:
            product = Product(id=self._next_id, **fields)
            self._next_id += 1
            self._products.append(product)
            return product

    def replace(self, product_id: int, **changes) -> Optional[Product]:
        """Swap the product with ``product_id`` for a copy with ``changes`` applied."""
        with self.lock:
            for index, existing in enumerate(self._products):
                if existing.id == product_id:
                    updated = dataclasses.replace(existing, **changes)
                    self._products[index] = updated
                    return updated
            return None

    def remove(self, product_id: int) -> bool:
        with self.lock:
            for index, existing in enumerate(self._products):
                if existing.id == product_id:
                    del self._products[index]
                    return True
            return False

    def __len__(self) -> int:
        with self.lock:
            return len(self._products)


def get_store(request: Request) -> ProductStore:
    """
    Dependency returning the application's product store.
    The store is created in the application lifespan.
    """
    return request.app.state.product_store
