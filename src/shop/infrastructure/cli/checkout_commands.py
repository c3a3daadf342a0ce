"""CLI commands for checking out a cart."""

from __future__ import annotations

from datetime import date, datetime

import click

from shop.application.dto import CartItemSpec, CheckoutResult
from shop.domain.exceptions import DomainException
from shop.domain.model.customer import Customer
from shop.domain.model.value_objects import Money
from shop.infrastructure.bootstrap import (
    build_cart_handler,
    checkout_handler,
    demo_customer,
    product_repository,
)
from shop.infrastructure.cli.formatting import (
    render_error,
    render_receipt,
    render_stock_warning,
)

DEMO_ITEMS = [
    CartItemSpec("Cheese", 2),
    CartItemSpec("Biscuits", 1),
    CartItemSpec("Scratch Card", 1),
]

today_option = click.option(
    "--today",
    type=click.DateTime(formats=["%Y-%m-%d"]),
    default=None,
    help="Date used for expiry checks (YYYY-MM-DD). Defaults to the current date.",
)


def _resolve_today(value: datetime | None) -> date:
    return value.date() if value is not None else date.today()


def _parse_items(raw: str) -> list[CartItemSpec]:
    """Parse 'Cheese:2,TV:1' into CartItemSpec list."""
    specs: list[CartItemSpec] = []
    for pair in raw.split(","):
        pair = pair.strip()
        if ":" not in pair:
            raise click.BadParameter(
                f"Invalid item format '{pair}'. Expected 'ProductName:Quantity'."
            )
        name, qty_str = pair.rsplit(":", 1)
        try:
            qty = int(qty_str)
        except ValueError:
            raise click.BadParameter(
                f"Invalid quantity '{qty_str}' for product '{name}'."
            )
        specs.append(CartItemSpec(product_name=name.strip(), quantity=qty))
    return specs


def _run(customer: Customer, specs: list[CartItemSpec], today: date) -> None:
    """Build the cart, check out, print the outcome. Checkout errors exit 0."""
    products = product_repository(today)

    try:
        built = build_cart_handler(products).handle(specs)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    for name in built.rejected:
        click.echo(render_stock_warning(name))

    result: CheckoutResult = checkout_handler().handle(customer, built.cart, today)
    if not result.ok:
        click.echo(render_error(result.error.message))
        return

    for line in render_receipt(result.receipt):
        click.echo(line)


@click.command("demo")
@today_option
def checkout_demo(today: datetime | None) -> None:
    """Check out the sample cart (2 Cheese, 1 Biscuits, 1 Scratch Card)."""
    _run(demo_customer(), DEMO_ITEMS, _resolve_today(today))


@click.command("checkout")
@click.option("--customer", required=True, help="Customer name.")
@click.option("--balance", required=True, type=str, help="Customer balance.")
@click.option("--items", required=True, help="Items as 'Product:Qty,Product:Qty'.")
@today_option
def checkout_run(customer: str, balance: str, items: str, today: datetime | None) -> None:
    """Check out a cart built from the demo catalog."""
    specs = _parse_items(items)
    try:
        buyer = Customer(name=customer, balance=Money.of(balance))
    except DomainException as exc:
        raise click.BadParameter(str(exc), param_hint="--balance")

    _run(buyer, specs, _resolve_today(today))
