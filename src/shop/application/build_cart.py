"""Application service: Build Cart use case.

Resolves product names against the catalog and adds them to a fresh
cart. Low stock at this point only produces a warning; the rejected
names are handed back so the caller can show them.
"""

from __future__ import annotations

from shop.application.dto import BuiltCart, CartItemSpec
from shop.domain.exceptions import EntityNotFoundError
from shop.domain.model.cart import Cart
from shop.domain.repository.product_repository import ProductRepository


class BuildCartHandler:

    def __init__(self, product_repo: ProductRepository) -> None:
        self._product_repo = product_repo

    def handle(self, item_specs: list[CartItemSpec]) -> BuiltCart:
        cart = Cart()
        rejected: list[str] = []

        for spec in item_specs:
            product = self._product_repo.get_by_name(spec.product_name)
            if product is None:
                raise EntityNotFoundError(
                    f"Product not found: '{spec.product_name}'"
                )
            if not cart.add(product, spec.quantity):
                rejected.append(product.name)

        return BuiltCart(cart=cart, rejected=rejected)
