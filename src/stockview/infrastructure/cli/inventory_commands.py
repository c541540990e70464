"""CLI commands for inspecting inventory read models."""

from __future__ import annotations

import dataclasses
import json

import click

from stockview.application.dto import RequestContext
from stockview.domain.exceptions import DomainException
from stockview.infrastructure.bootstrap import (
    build_price_rows_handler,
    list_company_inventory_handler,
    list_inventory_ids_handler,
    show_inventory_detail_handler,
    show_token_blueprint_handler,
)

json_option = click.option(
    "--json", "as_json", is_flag=True, default=False, help="Print the raw payload as JSON."
)


def _echo_json(payload) -> None:
    click.echo(json.dumps(dataclasses.asdict(payload), indent=2, ensure_ascii=False))


@click.command("list")
@click.option("--tenant", "tenant_id", required=True, help="Tenant (company) ID.")
@json_option
def inventory_list(tenant_id: str, as_json: bool) -> None:
    """Show the company-wide inventory management list."""
    handler = list_company_inventory_handler()

    try:
        rows = handler.handle(RequestContext(tenant_id=tenant_id))
    except DomainException as exc:
        raise click.ClickException(str(exc))

    if as_json:
        click.echo(json.dumps([dataclasses.asdict(r) for r in rows], indent=2, ensure_ascii=False))
        return
    if not rows:
        click.echo("No inventory records found.")
        return

    click.echo(
        f"{'Product':<20} {'Token':<16} {'Model':<12} {'Available':>10} {'Reserved':>10}"
    )
    click.echo("-" * 72)
    for row in rows:
        click.echo(
            f"{row.product_name:<20} {row.token_name:<16} {row.model_number:<12} "
            f"{row.available_stock:>10} {row.reserved_count:>10}"
        )


@click.command("show")
@click.option("--id", "inventory_id", required=True, help="Inventory ID to display.")
@json_option
def inventory_show(inventory_id: str, as_json: bool) -> None:
    """Show the per-model breakdown of one inventory."""
    handler = show_inventory_detail_handler()

    try:
        dto = handler.handle(inventory_id)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    if as_json:
        _echo_json(dto)
        return

    click.echo(f"Inventory {dto.inventory_id}")
    click.echo(f"Product line: {dto.product_line_id}")
    click.echo(f"Token line:   {dto.token_line_id}")
    click.echo(f"Updated:      {dto.updated_at or '-'}")
    click.echo()
    click.echo(f"  {'Model':<12} {'Size':<8} {'Color':<12} {'Stock':>8}")
    click.echo(f"  {'-'*43}")
    for row in dto.rows:
        click.echo(f"  {row.model_number:<12} {row.size:<8} {row.color:<12} {row.stock:>8}")
    click.echo(f"  {'-'*43}")
    click.echo(f"  {'Total':<34} {dto.total_stock:>8}")


@click.command("price-rows")
@click.option("--id", "inventory_id", default=None, help="Inventory ID.")
@click.option("--product-line", "product_line_id", default=None, help="Product line ID.")
@click.option("--token-line", "token_line_id", default=None, help="Token line ID.")
@json_option
def inventory_price_rows(
    inventory_id: str | None,
    product_line_id: str | None,
    token_line_id: str | None,
    as_json: bool,
) -> None:
    """Show the rows used to price an inventory before listing.

    Identify the inventory either with --id or with --product-line and
    --token-line.
    """
    if not inventory_id and not (product_line_id and token_line_id):
        raise click.ClickException("either --id or --product-line and --token-line is required")

    handler = build_price_rows_handler()

    try:
        if inventory_id:
            dto = handler.handle_by_inventory_id(inventory_id)
        else:
            dto = handler.handle_by_ids(product_line_id, token_line_id)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    if as_json:
        _echo_json(dto)
        return

    click.echo(f"Inventory {dto.inventory_id}")
    click.echo(f"Product: {dto.product_name or '-'} ({dto.product_brand_name or '-'})")
    click.echo(f"Token:   {dto.token_name or '-'} ({dto.token_brand_name or '-'})")
    click.echo()
    if not dto.price_rows:
        click.echo("No models to price.")
        return
    click.echo(f"  {'Model ID':<16} {'Size':<8} {'Color':<12} {'Stock':>8}")
    click.echo(f"  {'-'*47}")
    for row in dto.price_rows:
        click.echo(f"  {row.model_id:<16} {row.size:<8} {row.color:<12} {row.stock:>8}")
    click.echo(f"  {'-'*47}")
    click.echo(f"  {'Total':<38} {dto.total_stock:>8}")


@click.command("ids")
@click.option("--product-line", "product_line_id", required=True, help="Product line ID.")
@click.option("--token-line", "token_line_id", required=True, help="Token line ID.")
def inventory_ids(product_line_id: str, token_line_id: str) -> None:
    """List inventory IDs for a product line and token line."""
    handler = list_inventory_ids_handler()

    try:
        ids = handler.handle(product_line_id, token_line_id)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    if not ids:
        click.echo("No inventory records found.")
        return
    for inventory_id in ids:
        click.echo(inventory_id)


@click.command("token")
@click.option("--token-line", "token_line_id", required=True, help="Token line ID.")
@json_option
def inventory_token(token_line_id: str, as_json: bool) -> None:
    """Show a token blueprint with its brand name."""
    handler = show_token_blueprint_handler()

    try:
        patch = handler.handle(token_line_id)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    if as_json:
        _echo_json(patch)
        return
    click.echo(f"Token line: {patch.token_line_id}")
    click.echo(f"Name:       {patch.token_name or '-'}")
    click.echo(f"Symbol:     {patch.symbol or '-'}")
    click.echo(f"Brand:      {patch.brand_name or '-'}")
