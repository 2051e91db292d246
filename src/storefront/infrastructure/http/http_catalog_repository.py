"""httpx-backed implementation of CatalogRepository."""

from __future__ import annotations

import logging
from typing import Any

import httpx

from storefront.domain.exceptions import FetchError
from storefront.domain.model.product import Product
from storefront.domain.repository.catalog_repository import CatalogRepository
from storefront.infrastructure.http.wire import error_message, parse_products

logger = logging.getLogger(__name__)


class HttpCatalogRepository(CatalogRepository):

    def __init__(self, client: httpx.AsyncClient) -> None:
        self._client = client

    # --- CatalogRepository interface ------------------------------------------

    async def list_all(self) -> list[Product]:
        return await self._get_products("/products")

    async def search(self, text: str) -> list[Product]:
        return await self._get_products("/products/search", params={"value": text})

    # --- Internal helpers -----------------------------------------------------

    async def _get_products(
        self, path: str, params: dict[str, Any] | None = None
    ) -> list[Product]:
        try:
            response = await self._client.get(path, params=params)
            response.raise_for_status()
            return parse_products(response.json())
        except httpx.HTTPStatusError as exc:
            status = exc.response.status_code
            logger.warning("GET %s -> HTTP %s", path, status)
            raise FetchError(
                f"GET {path} failed with HTTP {status}",
                status_code=status,
                server_message=error_message(exc.response),
            ) from exc
        except httpx.RequestError as exc:
            logger.error("GET %s request failed: %s", path, exc)
            raise FetchError(f"GET {path} failed: {exc}") from exc
        except ValueError as exc:
            raise FetchError(f"GET {path} returned an unexpected body: {exc}") from exc
