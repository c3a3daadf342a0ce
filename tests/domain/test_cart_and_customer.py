"""Unit tests for Cart and Customer."""

import logging

import pytest

from shop.domain.exceptions import ValidationError
from shop.domain.model.cart import Cart
from shop.domain.model.value_objects import Money
from tests.builders import make_cheese, make_customer, make_tv


class TestCartAdd:

    def test_new_cart_is_empty(self):
        assert Cart().is_empty()

    def test_add_within_stock(self):
        cart = Cart()
        assert cart.add(make_cheese(quantity=10), 2) is True
        assert not cart.is_empty()
        assert cart.items[0].quantity.value == 2

    def test_add_exactly_all_stock(self):
        cart = Cart()
        assert cart.add(make_tv(quantity=3), 3)

    def test_add_over_stock_is_skipped(self, caplog):
        cart = Cart()
        with caplog.at_level(logging.DEBUG, logger="shop.domain.model.cart"):
            added = cart.add(make_cheese(quantity=10), 11)
        assert added is False
        assert cart.is_empty()
        assert "Not enough stock for product: Cheese" in caplog.text

    def test_over_stock_rejection_stays_below_warning_level(self, caplog):
        with caplog.at_level(logging.DEBUG, logger="shop.domain.model.cart"):
            Cart().add(make_tv(quantity=3), 4)
        assert caplog.records
        assert all(r.levelno < logging.WARNING for r in caplog.records)

    def test_same_product_twice_gives_two_lines(self):
        cheese = make_cheese()
        cart = Cart()
        cart.add(cheese, 1)
        cart.add(cheese, 2)
        assert [item.quantity.value for item in cart.items] == [1, 2]
        assert cart.items[0].product is cart.items[1].product is cheese

    def test_zero_quantity_rejected(self):
        with pytest.raises(ValidationError, match="must be positive"):
            Cart().add(make_cheese(), 0)

    def test_line_total(self):
        cart = Cart()
        cart.add(make_cheese(), 2)
        assert cart.items[0].line_total == Money.of(200)

    def test_cart_does_not_copy_product(self):
        cheese = make_cheese(quantity=10)
        cart = Cart()
        cart.add(cheese, 1)
        cheese.reduce_quantity(4)
        assert cart.items[0].product.quantity == 6


class TestCustomer:

    def test_sufficient_balance_is_inclusive(self):
        customer = make_customer(433)
        assert customer.has_sufficient_balance(Money.of(433))
        assert not customer.has_sufficient_balance(Money.of("433.01"))

    def test_pay_debits_balance(self):
        customer = make_customer(1000)
        customer.pay(Money.of(433))
        assert customer.balance == Money.of(567)
