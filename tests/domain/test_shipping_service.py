"""Unit tests for the ShippingService domain service."""

from decimal import Decimal

import pytest

from shop.domain.exceptions import ValidationError
from shop.domain.model.value_objects import Money, Weight
from shop.domain.service.shipping_service import ShippingService
from tests.builders import make_biscuits, make_cheese, make_tv


class TestShipItems:

    def test_groups_units_by_name(self):
        cheese, biscuits = make_cheese().shipping, make_biscuits().shipping
        notice = ShippingService.ship_items([cheese, cheese, biscuits])

        assert [(l.count, l.name, l.weight.grams()) for l in notice.lines] == [
            (2, "Cheese", "400"),
            (1, "Biscuits", "700"),
        ]

    def test_first_seen_order(self):
        cheese, tv = make_cheese().shipping, make_tv().shipping
        notice = ShippingService.ship_items([tv, cheese, tv])
        assert [l.name for l in notice.lines] == ["TV", "Cheese"]

    def test_total_weight_sums_every_unit(self):
        cheese, biscuits = make_cheese().shipping, make_biscuits().shipping
        notice = ShippingService.ship_items([cheese, cheese, biscuits])
        assert notice.total_weight == Weight(Decimal("1.1"))
        assert notice.total_weight.kilograms() == "1.10"

    def test_nothing_to_ship_rejected(self):
        with pytest.raises(ValidationError, match="Nothing to ship"):
            ShippingService.ship_items([])


class TestShippingCost:

    def test_flat_per_unit_cost(self):
        cheese, biscuits = make_cheese().shipping, make_biscuits().shipping
        cost = ShippingService.shipping_cost([cheese, cheese, biscuits], Money.of(30))
        assert cost == Money.of(33)

    def test_no_units_cost_nothing(self):
        assert ShippingService.shipping_cost([], Money.of(30)) == Money.zero()
