"""Application services: Fetch Catalog and Search Catalog use cases (queries).

A catalog that cannot be read is shown as an empty one; the page
renders its "no products found" state instead of failing.
"""

from __future__ import annotations

import logging

from storefront.domain.exceptions import FetchError
from storefront.domain.model.product import Product
from storefront.domain.repository.catalog_repository import CatalogRepository

logger = logging.getLogger(__name__)


class FetchCatalogHandler:

    def __init__(self, catalog_repo: CatalogRepository) -> None:
        self._catalog_repo = catalog_repo

    async def handle(self) -> list[Product]:
        try:
            return await self._catalog_repo.list_all()
        except FetchError as exc:
            logger.warning("Catalog fetch failed: %s", exc)
            return []


class SearchCatalogHandler:

    def __init__(self, catalog_repo: CatalogRepository) -> None:
        self._catalog_repo = catalog_repo

    async def handle(self, text: str) -> list[Product]:
        """Return products matching *text*; a failed search finds nothing."""
        try:
            return await self._catalog_repo.search(text)
        except FetchError as exc:
            logger.warning("Search for %r failed: %s", text, exc)
            return []
