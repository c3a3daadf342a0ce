import logging

import click

from shop.infrastructure.cli.catalog_commands import catalog_list
from shop.infrastructure.cli.checkout_commands import checkout_demo, checkout_run


@click.group()
@click.option("-v", "--verbose", is_flag=True, default=False, help="Enable debug logging.")
def cli(verbose: bool) -> None:
    """Shop: retail checkout."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )


# Register subcommands
cli.add_command(catalog_list)
cli.add_command(checkout_demo)
cli.add_command(checkout_run)
