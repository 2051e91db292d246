"""Application service: the storefront page.

Holds the page state (loading flag, displayed products, cart line
items) and routes user actions to the use-case handlers:

- ``load()``               catalog and cart fetched concurrently, then joined
- ``on_search_input()``    debounced catalog search
- ``on_add_to_cart()``     guarded add of one unit
- ``on_quantity_change()`` explicit quantity update from the cart stepper
- ``close()``              teardown; cancels a pending search

The render callback receives a fresh StorefrontView after every state
transition.  Failures are reported through the Notifier and leave the
last good state on screen.
"""

from __future__ import annotations

import asyncio
import logging
from collections.abc import Callable

from storefront.application.dto import StorefrontView, build_view
from storefront.application.fetch_cart import FetchCartHandler
from storefront.application.fetch_catalog import FetchCatalogHandler, SearchCatalogHandler
from storefront.application.notifications import (
    ALREADY_IN_CART,
    CART_UPDATE_FAILED,
    LOGIN_REQUIRED,
    Notifier,
)
from storefront.application.search_debouncer import DEFAULT_QUIET_PERIOD, SearchDebouncer
from storefront.application.update_cart import AddOrUpdateCartHandler
from storefront.domain.exceptions import (
    CartUpdateError,
    DuplicateItemError,
    ProductNotFoundError,
    UnauthenticatedError,
    ValidationError,
)
from storefront.domain.model.cart import CartLineItem
from storefront.domain.model.product import Product
from storefront.domain.model.session import Session
from storefront.domain.repository.cart_repository import CartRepository
from storefront.domain.repository.catalog_repository import CatalogRepository
from storefront.domain.service.cart_reconciler import reconcile

logger = logging.getLogger(__name__)

RenderCallback = Callable[[StorefrontView], None]


class StorefrontPage:

    def __init__(
        self,
        catalog_repo: CatalogRepository,
        cart_repo: CartRepository,
        session: Session,
        notifier: Notifier,
        render: RenderCallback,
        debounce_delay: float = DEFAULT_QUIET_PERIOD,
    ) -> None:
        self._session = session
        self._notifier = notifier
        self._render = render

        self._fetch_catalog = FetchCatalogHandler(catalog_repo)
        self._search_catalog = SearchCatalogHandler(catalog_repo)
        self._fetch_cart = FetchCartHandler(cart_repo, notifier)
        self._update_cart = AddOrUpdateCartHandler(cart_repo)
        self._debouncer = SearchDebouncer(self._run_search, debounce_delay)

        self.loading = True
        # The full catalog is what the cart is reconciled against; the
        # displayed products may be a search subset of it.
        self._catalog: list[Product] = []
        self.products: list[Product] = []
        self.cart_items: list[CartLineItem] = []

    @property
    def session(self) -> Session:
        return self._session

    @property
    def debouncer(self) -> SearchDebouncer:
        return self._debouncer

    @property
    def view(self) -> StorefrontView:
        return build_view(self.loading, self.products, self.cart_items)

    # --- Lifecycle ------------------------------------------------------------

    async def load(self) -> StorefrontView:
        """Fetch catalog and cart together; reconcile once both are in."""
        self.loading = True
        self._emit()

        catalog, raw_cart = await asyncio.gather(
            self._fetch_catalog.handle(),
            self._fetch_cart.handle(self._session),
        )

        self._catalog = catalog
        self.products = list(catalog)
        self.cart_items = reconcile(raw_cart, catalog)
        self.loading = False
        logger.info(
            "Loaded %d products, %d cart items", len(self.products), len(self.cart_items)
        )
        return self._emit()

    def close(self) -> None:
        self._debouncer.cancel()

    # --- User actions ---------------------------------------------------------

    def on_search_input(self, text: str) -> None:
        self._debouncer.schedule(text)

    async def on_add_to_cart(self, product_id: str) -> bool:
        return await self._change_cart(product_id, 1, prevent_duplicate=True)

    async def on_quantity_change(self, product_id: str, quantity: int) -> bool:
        return await self._change_cart(product_id, quantity, prevent_duplicate=False)

    # --- Internal helpers -----------------------------------------------------

    async def _run_search(self, text: str) -> None:
        self.products = await self._search_catalog.handle(text)
        self._emit()

    async def _change_cart(
        self, product_id: str, quantity: int, prevent_duplicate: bool
    ) -> bool:
        """Run the cart mutation; report failures. True if the cart changed."""
        try:
            result = await self._update_cart.handle(
                session=self._session,
                current_items=self.cart_items,
                catalog=self._catalog,
                product_id=product_id,
                quantity=quantity,
                prevent_duplicate=prevent_duplicate,
            )
        except UnauthenticatedError:
            self._notifier.warning(LOGIN_REQUIRED)
            return False
        except DuplicateItemError:
            self._notifier.warning(ALREADY_IN_CART)
            return False
        except ValidationError as exc:
            self._notifier.warning(str(exc))
            return False
        except ProductNotFoundError as exc:
            logger.warning("Cart update rejected: %s", exc)
            self._notifier.error(exc.server_message or str(exc))
            return False
        except CartUpdateError as exc:
            logger.warning("Cart update failed: %s", exc)
            self._notifier.error(CART_UPDATE_FAILED)
            return False

        self.cart_items = result.items
        self._emit()
        return True

    def _emit(self) -> StorefrontView:
        view = self.view
        self._render(view)
        return view
