"""Abstract repository for the product catalog.

Defined in the domain layer so the domain never depends on
infrastructure.  The concrete implementation talks HTTP to the
catalog backend; tests use an in-memory fake.
"""

from __future__ import annotations

from abc import ABC, abstractmethod

from storefront.domain.model.product import Product


class CatalogRepository(ABC):

    @abstractmethod
    async def list_all(self) -> list[Product]:
        """Return every product in the catalog.

        Raises FetchError when the backend cannot be read.
        """

    @abstractmethod
    async def search(self, text: str) -> list[Product]:
        """Return products matching *text* (name or category).

        Raises FetchError when the backend cannot be read.
        """
