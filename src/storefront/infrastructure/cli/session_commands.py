"""CLI commands for the local session.

``login`` stores a token issued by the backend's auth endpoint; it does
not exchange credentials itself.
"""

from __future__ import annotations

import click

from storefront.domain.model.session import Session
from storefront.infrastructure.bootstrap import session_repository


@click.command("login")
@click.option("--username", required=True, help="Display name.")
@click.option("--token", required=True, help="Bearer token returned on login.")
def session_login(username: str, token: str) -> None:
    """Remember the session token for cart commands."""
    if not token.strip():
        raise click.BadParameter("Token must not be empty.", param_hint="--token")
    session_repository().save(Session(token=token.strip(), username=username))
    click.echo(f"Logged in as {username}")


@click.command("logout")
def session_logout() -> None:
    """Forget the stored session."""
    session_repository().clear()
    click.echo("Logged out")


@click.command("show")
def session_show() -> None:
    """Show who is logged in."""
    session = session_repository().load()
    if not session.is_authenticated:
        click.echo("Not logged in.")
        return
    click.echo(f"Logged in as {session.username}")
