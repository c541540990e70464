import click

from stockview.infrastructure.bootstrap import log_format, log_level
from stockview.infrastructure.cli.inventory_commands import (
    inventory_ids,
    inventory_list,
    inventory_price_rows,
    inventory_show,
    inventory_token,
)
from stockview.infrastructure.logging_config import configure_logging


@click.group()
def cli() -> None:
    """stockview: inventory availability read models"""
    configure_logging(level=log_level(), fmt=log_format())


@cli.group()
def inventory() -> None:
    """Inspect inventories."""


# Register subcommands
inventory.add_command(inventory_ids)
inventory.add_command(inventory_list)
inventory.add_command(inventory_price_rows)
inventory.add_command(inventory_show)
inventory.add_command(inventory_token)
