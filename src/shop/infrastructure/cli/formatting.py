"""Plain-text rendering of checkout output.

These strings are the program's external interface; keep them byte for
byte stable.
"""

from __future__ import annotations

from shop.application.dto import ReceiptDTO, ShipmentNoticeDTO
from shop.domain.exceptions import InsufficientStockError

SHIPMENT_HEADER = "** Shipment notice **"
RECEIPT_HEADER = "** Checkout receipt **"
SEPARATOR = "-" * 22


def render_shipment_notice(notice: ShipmentNoticeDTO) -> list[str]:
    lines = [SHIPMENT_HEADER]
    for line in notice.lines:
        lines.append(f"{line.count}x {line.name} {line.grams}g")
    lines.append(f"Total package weight {notice.total_kg}kg")
    return lines


def render_receipt(receipt: ReceiptDTO) -> list[str]:
    """Shipment notice (if any) followed by the receipt proper."""
    lines: list[str] = []
    if receipt.shipment is not None:
        lines.extend(render_shipment_notice(receipt.shipment))

    lines.append(RECEIPT_HEADER)
    for item in receipt.lines:
        lines.append(f"{item.quantity}x {item.name} {item.line_total}")
    lines.append(SEPARATOR)
    lines.append(f"Subtotal {receipt.subtotal}")
    lines.append(f"Shipping {receipt.shipping}")
    lines.append(f"Amount {receipt.total}")
    lines.append(f"Balance left {receipt.balance_left}")
    return lines


def render_error(message: str) -> str:
    return f"ERROR: {message}"


def render_stock_warning(product_name: str) -> str:
    return InsufficientStockError.message_for(product_name)
