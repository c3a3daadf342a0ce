"""CLI commands for the product catalog."""

from __future__ import annotations

from datetime import date, datetime

import click

from shop.infrastructure.bootstrap import product_repository
from shop.infrastructure.cli.checkout_commands import today_option


@click.command("catalog")
@today_option
def catalog_list(today: datetime | None) -> None:
    """List all products in the demo catalog."""
    on = today.date() if today is not None else date.today()
    products = product_repository(on).list_all()

    click.echo(f"{'Product':<15} {'Price':>12} {'Stock':>6} {'Expires':>11} {'Weight':>8}")
    click.echo("-" * 56)
    for p in products:
        expires = p.expiry_date.isoformat() if p.expiry_date else "-"
        weight = str(p.shipping.weight) if p.shipping else "-"
        click.echo(
            f"{p.name:<15} {str(p.price):>12} {p.quantity:>6} {expires:>11} {weight:>8}"
        )
