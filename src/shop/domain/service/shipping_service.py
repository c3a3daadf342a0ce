"""Domain service: Shipping.

Works on a flat list of shippable units, one entry per physical item.
The same list feeds two different calculations:

- the shipment notice groups units by product name;
- the shipping fee is a flat per-unit ``weight * rate`` sum and does
  not care about names at all.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from decimal import Decimal

from shop.domain.exceptions import ValidationError
from shop.domain.model.product import ShippingFacet
from shop.domain.model.value_objects import Money, Weight

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ShipmentLine:
    count: int
    name: str
    weight: Weight  # unit weight * count


@dataclass(frozen=True)
class ShipmentNotice:
    lines: list[ShipmentLine]
    total_weight: Weight


class ShippingService:

    @staticmethod
    def ship_items(units: list[ShippingFacet]) -> ShipmentNotice:
        """Group *units* by name, keeping first-seen order.

        The per-name weight is taken from the last unit seen with that
        name; units sharing a name are expected to share a weight.
        """
        if not units:
            raise ValidationError("Nothing to ship")

        counts: dict[str, int] = {}
        unit_weights: dict[str, Weight] = {}
        total = Decimal("0")

        for unit in units:
            counts[unit.name] = counts.get(unit.name, 0) + 1
            unit_weights[unit.name] = unit.weight
            total += unit.weight.kg

        lines = [
            ShipmentLine(count=count, name=name, weight=unit_weights[name] * count)
            for name, count in counts.items()
        ]
        logger.debug("Shipping %d unit(s) in %d group(s)", len(units), len(lines))
        return ShipmentNotice(lines=lines, total_weight=Weight(total))

    @staticmethod
    def shipping_cost(units: list[ShippingFacet], rate_per_kg: Money) -> Money:
        cost = Money.zero()
        for unit in units:
            cost = cost + rate_per_kg * unit.weight.kg
        return cost
