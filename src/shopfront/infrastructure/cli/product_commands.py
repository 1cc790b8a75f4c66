"""CLI commands for the product catalog."""

from __future__ import annotations

from uuid import UUID

import click

from shopfront.domain.exceptions import DomainException
from shopfront.domain.model.product import Product
from shopfront.infrastructure.bootstrap import build_services


@click.command("add")
@click.option("--name", required=True, help="Product name.")
@click.option("--price", required=True, type=float, help="Price (e.g. 15.00).")
def product_add(name: str, price: float) -> None:
    """Add a new product to the catalog."""
    service = build_services().products

    try:
        product = service.add_product(Product.create(name=name, price=price))
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Product {product.id} '{product.name}' added at {product.price:.2f}")


@click.command("list")
def product_list() -> None:
    """List all products in the catalog."""
    products = build_services().products.list_products()

    if not products:
        click.echo("No products found.")
        return

    click.echo(f"{'ID':<36}  {'Name':<20} {'Price':>10}")
    click.echo("-" * 68)
    for p in products:
        click.echo(f"{str(p.id):<36}  {p.name:<20} {p.price:>10.2f}")


@click.command("show")
@click.option("--id", "product_id", required=True, type=click.UUID, help="Product ID.")
def product_show(product_id: UUID) -> None:
    """Show a single product."""
    try:
        product = build_services().products.get_product(product_id)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"{product.id}  {product.name}  {product.price:.2f}")


@click.command("update")
@click.option("--id", "product_id", required=True, type=click.UUID, help="Product ID.")
@click.option("--name", default=None, help="New name (unchanged if omitted).")
@click.option("--price", default=None, type=float, help="New price (unchanged if omitted).")
def product_update(product_id: UUID, name: str | None, price: float | None) -> None:
    """Update a product's name and/or price."""
    service = build_services().products

    try:
        product = service.update_product(product_id, name=name, price=price)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Product {product.id} is now '{product.name}' at {product.price:.2f}")


@click.command("discount")
@click.option("--percent", required=True, type=float, help="Discount percentage.")
@click.option(
    "--id", "product_ids", required=True, multiple=True, type=click.UUID,
    help="Product ID to discount (repeatable).",
)
def product_discount(percent: float, product_ids: tuple[UUID, ...]) -> None:
    """Apply a percentage discount to the given products."""
    changed = build_services().products.apply_discount(percent, product_ids)
    click.echo(f"Applied {percent:g}% discount to {changed} product(s)")


@click.command("delete")
@click.option("--id", "product_id", required=True, type=click.UUID, help="Product ID.")
def product_delete(product_id: UUID) -> None:
    """Delete a product (no-op if it does not exist)."""
    build_services().products.delete_product(product_id)
    click.echo(f"Product {product_id} deleted")
