"""CLI commands for browsing the catalog."""

from __future__ import annotations

import asyncio

import click

from storefront.application.dto import product_to_dto
from storefront.application.fetch_catalog import FetchCatalogHandler, SearchCatalogHandler
from storefront.domain.model.product import Product
from storefront.infrastructure import bootstrap
from storefront.infrastructure.cli.display import display_products
from storefront.infrastructure.http.http_catalog_repository import HttpCatalogRepository


async def _list_products() -> list[Product]:
    async with bootstrap.http_client() as client:
        return await FetchCatalogHandler(HttpCatalogRepository(client)).handle()


async def _search_products(text: str) -> list[Product]:
    async with bootstrap.http_client() as client:
        return await SearchCatalogHandler(HttpCatalogRepository(client)).handle(text)


@click.command("list")
def product_list() -> None:
    """List all products in the catalog."""
    products = asyncio.run(_list_products())
    display_products([product_to_dto(p) for p in products])


@click.command("search")
@click.argument("text")
def product_search(text: str) -> None:
    """Search products by name or category."""
    products = asyncio.run(_search_products(text))
    display_products([product_to_dto(p) for p in products])
