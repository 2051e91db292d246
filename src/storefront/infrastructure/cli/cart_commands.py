"""CLI commands for the shopping cart.

Each command loads the storefront page (catalog and cart together),
performs the action and prints the reconciled cart.  Failures have
already been reported by the notifier; the command then exits with
status 1.
"""

from __future__ import annotations

import asyncio
import logging

import click

from storefront.application.dto import StorefrontView
from storefront.application.storefront_page import StorefrontPage
from storefront.infrastructure import bootstrap
from storefront.infrastructure.cli.display import ClickNotifier, display_cart

logger = logging.getLogger(__name__)


def _log_render(view: StorefrontView) -> None:
    logger.debug(
        "render: loading=%s products=%d cart_items=%d",
        view.loading, len(view.products), len(view.cart_items),
    )


async def _with_page(action) -> tuple[bool, StorefrontView]:
    """Load a page, run ``action(page)`` and return its outcome and final view."""
    async with bootstrap.http_client() as client:
        page = bootstrap.storefront_page(client, ClickNotifier(), _log_render)
        try:
            await page.load()
            ok = await action(page)
        finally:
            page.close()
        return ok, page.view


def _finish(ok: bool, view: StorefrontView) -> None:
    display_cart(view.cart_items, view.cart_total)
    if not ok:
        raise click.exceptions.Exit(1)


@click.command("show")
def cart_show() -> None:
    """Show the items in your cart."""
    if not bootstrap.session_repository().load().is_authenticated:
        raise click.ClickException("Not logged in. Run 'storefront session login' first.")

    async def _noop(page: StorefrontPage) -> bool:
        return True

    _finish(*asyncio.run(_with_page(_noop)))


@click.command("add")
@click.argument("product_id")
def cart_add(product_id: str) -> None:
    """Add one unit of a product to your cart."""

    async def _add(page: StorefrontPage) -> bool:
        return await page.on_add_to_cart(product_id)

    _finish(*asyncio.run(_with_page(_add)))


@click.command("set")
@click.argument("product_id")
@click.argument("quantity", type=int)
def cart_set(product_id: str, quantity: int) -> None:
    """Set the quantity of a product already in your cart."""

    async def _set(page: StorefrontPage) -> bool:
        return await page.on_quantity_change(product_id, quantity)

    _finish(*asyncio.run(_with_page(_set)))
