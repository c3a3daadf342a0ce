"""Application service: Checkout use case.

Runs the checkout domain service and turns its outcome into a result
value. The four checkout gate errors are caught here and nowhere else;
callers inspect ``CheckoutResult.error`` instead of catching.
"""

from __future__ import annotations

import logging
from datetime import date

from shop.application.dto import (
    CheckoutFailure,
    CheckoutResult,
    ReceiptDTO,
    ReceiptLineDTO,
    ShipmentLineDTO,
    ShipmentNoticeDTO,
)
from shop.domain.exceptions import CheckoutError
from shop.domain.model.cart import Cart
from shop.domain.model.customer import Customer
from shop.domain.service.checkout_service import CheckoutService, Quote
from shop.domain.service.shipping_service import ShipmentNotice, ShippingService

logger = logging.getLogger(__name__)


class CheckoutHandler:

    def __init__(self, checkout_service: CheckoutService | None = None) -> None:
        self._checkout = checkout_service or CheckoutService()

    def handle(self, customer: Customer, cart: Cart, today: date) -> CheckoutResult:
        """Check out *cart* for *customer* as of *today*.

        Steps:
        1. Validate and price the cart (empty / expired / stock gates).
        2. Check the balance, then decrement stock and debit the customer.
        3. Build the shipment notice if anything physical was bought.
        4. Return the receipt.
        """
        try:
            quote = self._checkout.process(customer, cart, today)
        except CheckoutError as exc:
            logger.info("Checkout for %s aborted: %s", customer.name, exc)
            return CheckoutResult(error=CheckoutFailure(kind=exc.kind, message=str(exc)))

        notice = None
        if quote.shipping_units:
            notice = ShippingService.ship_items(quote.shipping_units)

        return CheckoutResult(receipt=self._to_dto(customer, cart, quote, notice))

    # --- Mapping --------------------------------------------------------------

    @staticmethod
    def _to_dto(
        customer: Customer,
        cart: Cart,
        quote: Quote,
        notice: ShipmentNotice | None,
    ) -> ReceiptDTO:
        shipment = None
        if notice is not None:
            shipment = ShipmentNoticeDTO(
                lines=[
                    ShipmentLineDTO(count=line.count, name=line.name, grams=line.weight.grams())
                    for line in notice.lines
                ],
                total_kg=notice.total_weight.kilograms(),
            )

        return ReceiptDTO(
            customer_name=customer.name,
            lines=[
                ReceiptLineDTO(
                    quantity=item.quantity.value,
                    name=item.product.name,
                    line_total=item.line_total.whole(),
                )
                for item in cart.items
            ],
            subtotal=quote.subtotal.whole(),
            shipping=quote.shipping.whole(),
            total=quote.total.whole(),
            balance_left=customer.balance.whole(),
            shipment=shipment,
        )
