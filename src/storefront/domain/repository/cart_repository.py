"""Abstract repository for the server-held cart."""

from __future__ import annotations

from abc import ABC, abstractmethod

from storefront.domain.model.cart import RawCartEntry
from storefront.domain.model.value_objects import Quantity


class CartRepository(ABC):

    @abstractmethod
    async def fetch(self, token: str) -> list[RawCartEntry]:
        """Return the user's cart in backend order.

        Raises FetchError on any failure, including a malformed body.
        """

    @abstractmethod
    async def upsert(
        self, token: str, product_id: str, quantity: Quantity
    ) -> list[RawCartEntry]:
        """Set *product_id* to *quantity* and return the full updated cart.

        Raises ProductNotFoundError if the backend does not know the
        product, CartUpdateError on any other failure.
        """
