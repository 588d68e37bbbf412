"""CLI commands for orders."""

from __future__ import annotations

import click

from storefront.application.list_orders import ListOrdersHandler
from storefront.application.show_order import ShowOrderHandler
from storefront.application.update_order_status import UpdateOrderStatusHandler
from storefront.domain.exceptions import DomainException
from storefront.domain.model.order import OrderStatus
from storefront.infrastructure.bootstrap import document_store


@click.command("list")
def order_list() -> None:
    """List orders, newest first."""
    orders = ListOrdersHandler(document_store()).handle()

    if not orders:
        click.echo("No orders found.")
        return

    click.echo(f"{'ID':<6} {'Customer':<24} {'Status':<10} {'Total':>10}  Created")
    click.echo("-" * 72)
    for o in orders:
        click.echo(
            f"{o.get('id')!s:<6} {o.get('customerName')!s:<24} "
            f"{o.get('status')!s:<10} {o.get('total')!s:>10}  {o.get('createdAtIso', '')}"
        )


def _display_order(order: dict) -> None:
    """Shared formatting for displaying an order."""
    click.echo(f"Order #{order.get('id')}  (status={order.get('status')})")
    click.echo(f"Customer: {order.get('customerName')}")
    for label, key in (("Email", "email"), ("Phone", "phone"), ("Notes", "notes")):
        if order.get(key):
            click.echo(f"{label + ':':<9} {order[key]}")
    click.echo(f"Created:  {order.get('createdDate')} {order.get('createdTime')}")
    if order.get("updatedAtIso"):
        click.echo(f"Updated:  {order['updatedAtIso']}")
    click.echo()
    for item in order.get("items") or []:
        click.echo(f"  - {item}")
    click.echo(f"  Order Total: {order.get('total')}")


@click.command("show")
@click.option("--id", "order_id", required=True, type=int, help="Order ID to display.")
def order_show(order_id: int) -> None:
    """Show details of an existing order."""
    try:
        order = ShowOrderHandler(document_store()).handle(order_id)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    _display_order(order)


@click.command("status")
@click.option("--id", "order_id", required=True, type=int, help="Order ID to update.")
@click.option(
    "--status",
    "new_status",
    required=True,
    type=click.Choice([s.value for s in OrderStatus]),
    help="New status.",
)
def order_status(order_id: int, new_status: str) -> None:
    """Move an order to another status."""
    try:
        UpdateOrderStatusHandler(document_store()).handle(order_id, new_status)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Order #{order_id} is now {new_status}.")
