from dataclasses import replace
from threading import Lock
from typing import Iterable, List, Optional

from .models import Product


class ProductStore:
    """Insertion-ordered products shared by every request of one app.

    Flask serves requests on several threads, so each operation holds the
    lock for its whole duration. Products are immutable, which makes the
    list returned by ``list()`` a snapshot.
    """

    def __init__(self, products: Iterable[Product] = ()) -> None:
        self._lock = Lock()
        self._products: List[Product] = list(products)

    def __len__(self) -> int:
        with self._lock:
            return len(self._products)

    def list(self) -> List[Product]:
        with self._lock:
            return list(self._products)

    def find(self, product_id: str) -> Optional[Product]:
        with self._lock:
            return next((p for p in self._products if p.id == product_id), None)

    def append(self, product: Product) -> Product:
        with self._lock:
            if any(p.id == product.id for p in self._products):
                raise ValueError(f"duplicate product id: {product.id}")
            self._products.append(product)
            return product

    def replace(self, product_id: str, updated: Product) -> Optional[Product]:
        if updated.id != product_id:
            raise ValueError("product id cannot change")
        with self._lock:
            for index, current in enumerate(self._products):
                if current.id == product_id:
                    self._products[index] = updated
                    return updated
        return None

    def remove(self, product_id: str) -> Optional[Product]:
        with self._lock:
            for index, current in enumerate(self._products):
                if current.id == product_id:
                    return self._products.pop(index)
        return None

    def update(self, product_id: str, **changes) -> Optional[Product]:
        """Apply ``changes`` to the stored product in a single locked step."""
        if "id" in changes:
            raise ValueError("product id cannot change")
        with self._lock:
            for index, current in enumerate(self._products):
                if current.id == product_id:
                    self._products[index] = replace(current, **changes)
                    return self._products[index]
        return None
