"""Domain service: Cart Reconciliation.

Joins the backend's raw cart against the catalog to produce the
render-ready line items.  The join is a pure projection: it never
touches the network, never mutates its inputs and always yields the
same result for the same two inputs.

Entries whose product is missing from the catalog are stale data
(the product was removed after it was added to the cart).  They are
dropped from the view rather than reported.
"""

from __future__ import annotations

from collections.abc import Iterable, Sequence

from storefront.domain.model.cart import CartLineItem, RawCartEntry
from storefront.domain.model.product import Product
from storefront.domain.model.value_objects import Money


def reconcile(
    raw_entries: Sequence[RawCartEntry] | None,
    catalog: Iterable[Product],
) -> list[CartLineItem]:
    """Build line items in the order the backend returned the entries."""
    if not raw_entries:
        return []

    by_id = {product.id: product for product in catalog}

    items: list[CartLineItem] = []
    for entry in raw_entries:
        product = by_id.get(entry.product_id)
        if product is None:
            continue
        items.append(CartLineItem(product=product, quantity=entry.quantity))
    return items


def is_item_in_cart(items: Iterable[CartLineItem], product_id: str) -> bool:
    return any(item.product_id == product_id for item in items)


def cart_total(items: Iterable[CartLineItem]) -> Money:
    total = Money.zero()
    for item in items:
        total = total + item.line_total
    return total
