"""CLI commands for the independent order collection."""

from __future__ import annotations

from uuid import UUID

import click

from shopfront.domain.exceptions import DomainException
from shopfront.infrastructure.bootstrap import build_services


@click.command("list")
def order_list() -> None:
    """List every order."""
    orders = build_services().orders.list_orders()

    if not orders:
        click.echo("No orders found.")
        return

    click.echo(f"{'ID':<36}  {'User':<36}  {'Total':>10}")
    click.echo("-" * 86)
    for o in orders:
        click.echo(f"{str(o.id):<36}  {str(o.user_id):<36}  {o.total_price:>10.2f}")


@click.command("show")
@click.option("--id", "order_id", required=True, type=click.UUID, help="Order ID to display.")
def order_show(order_id: UUID) -> None:
    """Show details of an existing order."""
    order = build_services().orders.get_order(order_id)
    if order is None:
        raise click.ClickException("Order not found")

    click.echo(f"Order {order.id}")
    click.echo(f"User:  {order.user_id}")
    click.echo()
    click.echo(f"  {'Product':<20} {'Price':>10}")
    click.echo(f"  {'-'*31}")
    for p in order.products:
        click.echo(f"  {p.name:<20} {p.price:>10.2f}")
    click.echo(f"  {'-'*31}")
    click.echo(f"  {'Order Total':<20} {order.total_price:>10.2f}")


@click.command("delete")
@click.option("--id", "order_id", required=True, type=click.UUID, help="Order ID to delete.")
def order_delete(order_id: UUID) -> None:
    """Delete an order from the order collection."""
    try:
        build_services().orders.delete_order(order_id)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Order {order_id} deleted")
