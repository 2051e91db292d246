"""Terminal rendering shared by the CLI commands."""

from __future__ import annotations

import click

from storefront.application.dto import CartLineItemDTO, ProductDTO
from storefront.application.notifications import Notification, Notifier, Severity

_COLORS = {
    Severity.WARNING: "yellow",
    Severity.ERROR: "red",
}


class ClickNotifier(Notifier):
    """Prints notifications to stderr, colored by severity."""

    def __init__(self) -> None:
        self.notifications: list[Notification] = []

    def notify(self, notification: Notification) -> None:
        self.notifications.append(notification)
        click.secho(notification.message, fg=_COLORS[notification.severity], err=True)


def display_products(products: list[ProductDTO]) -> None:
    if not products:
        click.echo("No products found.")
        return

    click.echo(f"{'ID':<18} {'Name':<24} {'Category':<14} {'Cost':>10} {'Rating':>7}")
    click.echo("-" * 77)
    for p in products:
        click.echo(
            f"{p.id:<18} {p.name:<24} {p.category:<14} {p.cost:>10} {p.rating:>7.1f}"
        )


def display_cart(items: list[CartLineItemDTO], total: str) -> None:
    if not items:
        click.echo("Cart is empty.")
        return

    click.echo(f"  {'Product':<24} {'Qty':>5} {'Cost':>10} {'Total':>10}")
    click.echo(f"  {'-'*52}")
    for item in items:
        click.echo(
            f"  {item.name:<24} {item.quantity:>5} {item.unit_cost:>10} {item.line_total:>10}"
        )
    click.echo(f"  {'-'*52}")
    click.echo(f"  {'Cart Total':<29} {total:>23}")
