"""In-memory implementation of ProductRepository.

The shop has no storage layer; the catalog lives for one process run.
"""

from __future__ import annotations

from shop.domain.model.product import Product
from shop.domain.repository.product_repository import ProductRepository


class InMemoryProductRepository(ProductRepository):

    def __init__(self, products: list[Product] | None = None) -> None:
        self._store: dict[str, Product] = {}
        for p in products or []:
            self.save(p)

    def get_by_name(self, name: str) -> Product | None:
        return self._store.get(name.strip().lower())

    def list_all(self) -> list[Product]:
        return list(self._store.values())

    def save(self, product: Product) -> None:
        self._store[product.name.lower()] = product
