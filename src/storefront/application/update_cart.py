"""Application service: Add or Update Cart use case.

Orchestrates the guards, the single backend upsert and the
re-reconciliation of the backend's answer.  The backend response is
the new source of truth: the caller's line items are never patched
locally, so client and server cannot drift apart.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Sequence
from dataclasses import dataclass

from storefront.domain.exceptions import DuplicateItemError, UnauthenticatedError
from storefront.domain.model.cart import CartLineItem, RawCartEntry
from storefront.domain.model.product import Product
from storefront.domain.model.session import Session
from storefront.domain.model.value_objects import Quantity
from storefront.domain.repository.cart_repository import CartRepository
from storefront.domain.service.cart_reconciler import is_item_in_cart, reconcile

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class CartUpdateResult:
    """The backend's updated cart and its reconciled view."""

    entries: list[RawCartEntry]
    items: list[CartLineItem]


class AddOrUpdateCartHandler:

    def __init__(self, cart_repo: CartRepository) -> None:
        self._cart_repo = cart_repo

    async def handle(
        self,
        session: Session,
        current_items: Iterable[CartLineItem],
        catalog: Sequence[Product],
        product_id: str,
        quantity: int,
        prevent_duplicate: bool = False,
    ) -> CartUpdateResult:
        """Set *product_id* to *quantity* in the user's cart.

        Steps:
        1. Reject anonymous sessions (UnauthenticatedError).
        2. With ``prevent_duplicate``, reject products already in the
           cart (DuplicateItemError).  The "Add to Cart" button sets
           this; quantity steppers do not.
        3. Validate the quantity (ValidationError below 1).
        4. Send exactly one upsert and reconcile the returned cart.

        Guards 1-3 fail before any request is made.  A failed upsert
        raises CartUpdateError (or ProductNotFoundError) and nothing
        is applied.
        """
        if not session.is_authenticated:
            raise UnauthenticatedError("Login to add an item to the Cart")

        if prevent_duplicate and is_item_in_cart(current_items, product_id):
            raise DuplicateItemError(f"Product '{product_id}' is already in the cart")

        qty = Quantity(quantity)

        entries = await self._cart_repo.upsert(session.token, product_id, qty)  # type: ignore[arg-type]
        logger.info("Cart updated: %s -> %s (%d entries)", product_id, qty, len(entries))

        return CartUpdateResult(entries=entries, items=reconcile(entries, catalog))
