import click
import uvicorn

from shopfront.infrastructure.cli.order_commands import order_delete, order_list, order_show
from shopfront.infrastructure.cli.product_commands import (
    product_add,
    product_delete,
    product_discount,
    product_list,
    product_show,
    product_update,
)
from shopfront.infrastructure.cli.user_commands import (
    cart_add_product,
    cart_remove_product,
    cart_show,
    user_add,
    user_checkout,
    user_delete,
    user_list,
    user_orders,
    user_remove_order,
)
from shopfront.infrastructure.config import get_settings
from shopfront.infrastructure.http.app import create_app
from shopfront.infrastructure.logging_setup import configure_logging


@click.group()
def cli() -> None:
    """shopfront: JSON-file e-commerce backend"""
    configure_logging(get_settings().log_level)


@cli.group()
def product() -> None:
    """Manage the product catalog."""


@cli.group()
def user() -> None:
    """Manage users and checkout."""


@cli.group()
def cart() -> None:
    """Manage users' carts."""


@cli.group()
def order() -> None:
    """Manage orders."""


@cli.command()
@click.option("--host", default=None, help="Bind address (default from settings).")
@click.option("--port", default=None, type=int, help="Port (default from settings).")
def serve(host: str | None, port: int | None) -> None:
    """Serve the HTTP API."""
    settings = get_settings()
    uvicorn.run(
        create_app(settings),
        host=host or settings.host,
        port=port or settings.port,
    )


# Register subcommands
product.add_command(product_add)
product.add_command(product_delete)
product.add_command(product_discount)
product.add_command(product_list)
product.add_command(product_show)
product.add_command(product_update)
user.add_command(user_add)
user.add_command(user_checkout)
user.add_command(user_delete)
user.add_command(user_list)
user.add_command(user_orders)
user.add_command(user_remove_order)
cart.add_command(cart_add_product)
cart.add_command(cart_remove_product)
cart.add_command(cart_show)
order.add_command(order_delete)
order.add_command(order_list)
order.add_command(order_show)
