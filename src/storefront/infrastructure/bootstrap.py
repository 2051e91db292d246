"""Composition root: wires concrete implementations to domain interfaces.

This is the only place in the codebase that knows about *all* layers.
Every other module depends only on abstractions.
"""

from __future__ import annotations

import httpx

from storefront.application.notifications import Notifier
from storefront.application.storefront_page import RenderCallback, StorefrontPage
from storefront.infrastructure.config import Settings
from storefront.infrastructure.http.http_cart_repository import HttpCartRepository
from storefront.infrastructure.http.http_catalog_repository import HttpCatalogRepository
from storefront.infrastructure.persistence.json_session_repository import (
    JsonSessionRepository,
)


def settings() -> Settings:
    return Settings.from_env()


def session_repository(config: Settings | None = None) -> JsonSessionRepository:
    config = config or settings()
    return JsonSessionRepository(config.session_file)


def http_client(config: Settings | None = None) -> httpx.AsyncClient:
    config = config or settings()
    return httpx.AsyncClient(base_url=config.api_url, timeout=config.timeout)


def storefront_page(
    client: httpx.AsyncClient,
    notifier: Notifier,
    render: RenderCallback,
    config: Settings | None = None,
) -> StorefrontPage:
    """Build a page for the stored session, talking through *client*."""
    config = config or settings()
    return StorefrontPage(
        catalog_repo=HttpCatalogRepository(client),
        cart_repo=HttpCartRepository(client),
        session=session_repository(config).load(),
        notifier=notifier,
        render=render,
        debounce_delay=config.debounce_seconds,
    )
