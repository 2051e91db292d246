"""Cart entities.

``RawCartEntry`` is what the backend persists: a product reference and
a quantity, nothing else.  ``CartLineItem`` is the render-ready join of
an entry with its Product.  Line items are derived data; they are
rebuilt from scratch on every change and never edited in place.
"""

from __future__ import annotations

from dataclasses import dataclass

from storefront.domain.model.product import Product
from storefront.domain.model.value_objects import Money, Quantity


@dataclass(frozen=True)
class RawCartEntry:

    product_id: str
    quantity: Quantity


@dataclass(frozen=True)
class CartLineItem:

    product: Product
    quantity: Quantity

    @property
    def product_id(self) -> str:
        return self.product.id

    @property
    def line_total(self) -> Money:
        return self.product.cost * self.quantity.value
