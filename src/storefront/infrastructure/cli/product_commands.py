"""CLI commands for products."""

from __future__ import annotations

import click

from storefront.application.list_products import ListProductsHandler
from storefront.infrastructure.bootstrap import document_store


@click.command("list")
def product_list() -> None:
    """List all products in the catalog."""
    products = ListProductsHandler(document_store()).handle()

    if not products:
        click.echo("No products found.")
        return

    click.echo(f"{'ID':<6} {'Name':<30} {'Price':>10}")
    click.echo("-" * 48)
    for p in products:
        click.echo(f"{p.get('id')!s:<6} {p.get('name')!s:<30} {p.get('price')!s:>10}")
