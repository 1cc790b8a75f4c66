"""CLI commands for users, checkout and carts."""

from __future__ import annotations

from uuid import UUID

import click

from shopfront.domain.exceptions import DomainException
from shopfront.domain.model.user import User
from shopfront.infrastructure.bootstrap import build_services


@click.command("add")
@click.option("--name", required=True, help="User name.")
def user_add(name: str) -> None:
    """Create a new user."""
    user = build_services().users.add_user(User.create(name=name))
    click.echo(f"User {user.id} '{user.name}' created")


@click.command("list")
def user_list() -> None:
    """List all users."""
    users = build_services().users.list_users()

    if not users:
        click.echo("No users found.")
        return

    click.echo(f"{'ID':<36}  {'Name':<20} {'Orders':>6}")
    click.echo("-" * 64)
    for u in users:
        click.echo(f"{str(u.id):<36}  {u.name:<20} {len(u.orders):>6}")


@click.command("orders")
@click.option("--id", "user_id", required=True, type=click.UUID, help="User ID.")
def user_orders(user_id: UUID) -> None:
    """List a user's embedded orders."""
    orders = build_services().users.get_orders(user_id)

    if not orders:
        click.echo("No orders found.")
        return

    for o in orders:
        click.echo(f"{o.id}  total={o.total_price:.2f}  products={len(o.products)}")


@click.command("checkout")
@click.option("--id", "user_id", required=True, type=click.UUID, help="User ID.")
def user_checkout(user_id: UUID) -> None:
    """Check out: create an order for the user."""
    order = build_services().users.checkout(user_id)
    if order is None:
        click.echo(f"No user {user_id}; nothing checked out")
        return
    click.echo(f"Order {order.id} added to user {user_id}")


@click.command("remove-order")
@click.option("--id", "user_id", required=True, type=click.UUID, help="User ID.")
@click.option("--order", "order_id", required=True, type=click.UUID, help="Order ID.")
def user_remove_order(user_id: UUID, order_id: UUID) -> None:
    """Remove an order from the user's list (the order itself is kept)."""
    build_services().users.remove_order(user_id, order_id)
    click.echo(f"Order {order_id} removed from user {user_id}")


@click.command("delete")
@click.option("--id", "user_id", required=True, type=click.UUID, help="User ID.")
def user_delete(user_id: UUID) -> None:
    """Delete a user."""
    try:
        build_services().users.delete_user(user_id)
    except DomainException as exc:
        raise click.ClickException(str(exc))
    click.echo(f"User {user_id} deleted")


@click.command("add-product")
@click.option("--user", "user_id", required=True, type=click.UUID, help="User ID.")
@click.option("--product", "product_id", required=True, type=click.UUID, help="Product ID.")
def cart_add_product(user_id: UUID, product_id: UUID) -> None:
    """Add a product to the user's cart, creating the cart if needed."""
    try:
        cart = build_services().users.add_product_to_cart(user_id, product_id)
    except DomainException as exc:
        raise click.ClickException(str(exc))
    click.echo(f"Product {product_id} added to cart {cart.id}")


@click.command("remove-product")
@click.option("--user", "user_id", required=True, type=click.UUID, help="User ID.")
@click.option("--product", "product_id", required=True, type=click.UUID, help="Product ID.")
def cart_remove_product(user_id: UUID, product_id: UUID) -> None:
    """Remove a product from the user's cart."""
    try:
        build_services().users.delete_product_from_cart(user_id, product_id)
    except DomainException as exc:
        raise click.ClickException(str(exc))
    click.echo(f"Product {product_id} removed from cart")


@click.command("show")
@click.option("--user", "user_id", required=True, type=click.UUID, help="User ID.")
def cart_show(user_id: UUID) -> None:
    """Show the user's cart."""
    cart = build_services().carts.get_cart_by_user_id(user_id)
    if cart is None:
        click.echo("Cart is empty")
        return

    click.echo(f"Cart {cart.id}")
    click.echo(f"  {'Product':<20} {'Price':>10}")
    click.echo(f"  {'-'*31}")
    for p in cart.products:
        click.echo(f"  {p.name:<20} {p.price:>10.2f}")
