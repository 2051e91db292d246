import click

from storefront.infrastructure.bootstrap import settings
from storefront.infrastructure.cli.cart_commands import cart_add, cart_set, cart_show
from storefront.infrastructure.cli.product_commands import product_list, product_search
from storefront.infrastructure.cli.session_commands import (
    session_login,
    session_logout,
    session_show,
)
from storefront.infrastructure.logging_config import configure_logging


@click.group()
def cli() -> None:
    """Storefront: browse the catalog and manage your cart"""
    configure_logging(settings().log_level)


@cli.group()
def products() -> None:
    """Browse products."""


@cli.group()
def cart() -> None:
    """Manage your cart."""


@cli.group()
def session() -> None:
    """Manage the login session."""


# Register subcommands
products.add_command(product_list)
products.add_command(product_search)
cart.add_command(cart_add)
cart.add_command(cart_set)
cart.add_command(cart_show)
session.add_command(session_login)
session.add_command(session_logout)
session.add_command(session_show)
