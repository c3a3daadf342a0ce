"""Unit tests for the Product entity and its facets."""

from datetime import timedelta

import pytest

from shop.domain.exceptions import ValidationError
from shop.domain.model.product import NonPerishable, Perishable, Product
from shop.domain.model.value_objects import Money, Weight
from tests.builders import (
    TODAY,
    make_biscuits,
    make_cheese,
    make_scratch_card,
    make_tv,
)


class TestExpiry:

    def test_perishable_expires_after_its_date(self):
        assert make_cheese(expires_in_days=-1).is_expired(TODAY)

    def test_expiry_day_itself_is_not_expired(self):
        assert not make_cheese(expires_in_days=0).is_expired(TODAY)

    def test_non_perishable_never_expires(self):
        tv = make_tv()
        assert isinstance(tv.perishability, NonPerishable)
        assert not tv.is_expired(TODAY + timedelta(days=10_000))

    def test_expiry_date_exposed_only_for_perishables(self):
        assert make_biscuits().expiry_date == TODAY + timedelta(days=5)
        assert make_scratch_card().expiry_date is None


class TestShippable:

    @pytest.mark.parametrize(
        "product, shippable",
        [
            (make_cheese(), True),
            (make_biscuits(), True),
            (make_tv(), True),
            (make_scratch_card(), False),
        ],
    )
    def test_product_kinds(self, product, shippable):
        assert product.is_shippable is shippable

    def test_facet_carries_name_and_weight(self):
        facet = make_cheese().shipping
        assert facet.name == "Cheese"
        assert facet.weight == Weight.of("0.2")

    def test_expirable_without_weight_is_not_shippable(self):
        p = Product.expirable("Milk", Money.of(20), 4, TODAY)
        assert isinstance(p.perishability, Perishable)
        assert not p.is_shippable


class TestStock:

    def test_reduce_quantity(self):
        p = make_cheese(quantity=10)
        p.reduce_quantity(3)
        assert p.quantity == 7

    def test_reduce_to_zero(self):
        p = make_cheese(quantity=2)
        p.reduce_quantity(2)
        assert p.quantity == 0

    def test_reduce_below_zero_rejected(self):
        p = make_cheese(quantity=2)
        with pytest.raises(ValidationError, match="only 2 in stock"):
            p.reduce_quantity(3)
        assert p.quantity == 2

    def test_negative_initial_stock_rejected(self):
        with pytest.raises(ValidationError, match="cannot be negative"):
            Product(name="TV", price=Money.of(1), quantity=-1)

    def test_products_compare_by_identity(self):
        assert make_tv() != make_tv()
