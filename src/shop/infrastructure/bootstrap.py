"""Composition root: builds the catalog, customer and handlers the CLI runs.

Nothing outside this module picks concrete classes.
"""

from __future__ import annotations

from datetime import date, timedelta

from shop.application.build_cart import BuildCartHandler
from shop.application.checkout import CheckoutHandler
from shop.domain.model.customer import Customer
from shop.domain.model.product import biscuits, cheese, mobile_scratch_card, tv
from shop.domain.model.value_objects import Money
from shop.domain.service.checkout_service import SHIPPING_RATE_PER_KG, CheckoutService
from shop.infrastructure.catalog import InMemoryProductRepository

DEMO_CUSTOMER_NAME = "John"
DEMO_CUSTOMER_BALANCE = 1000


def product_repository(today: date) -> InMemoryProductRepository:
    """The demo catalog; expiry dates are relative to *today*."""
    return InMemoryProductRepository([
        cheese("Cheese", 100, 10, today + timedelta(days=2), "0.2"),
        biscuits("Biscuits", 150, 5, today + timedelta(days=5), "0.7"),
        tv("TV", 1000, 3, "5.0"),
        mobile_scratch_card("Scratch Card", 50, 100),
    ])


def demo_customer() -> Customer:
    return Customer(name=DEMO_CUSTOMER_NAME, balance=Money.of(DEMO_CUSTOMER_BALANCE))


def checkout_handler() -> CheckoutHandler:
    return CheckoutHandler(CheckoutService(rate_per_kg=SHIPPING_RATE_PER_KG))


def build_cart_handler(products: InMemoryProductRepository) -> BuildCartHandler:
    return BuildCartHandler(product_repo=products)
