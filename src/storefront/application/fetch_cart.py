"""Application service: Fetch Cart use case (query)."""

from __future__ import annotations

import logging

from storefront.application.notifications import CART_FETCH_FAILED, Notifier
from storefront.domain.exceptions import FetchError
from storefront.domain.model.cart import RawCartEntry
from storefront.domain.model.session import Session
from storefront.domain.repository.cart_repository import CartRepository

logger = logging.getLogger(__name__)


class FetchCartHandler:

    def __init__(self, cart_repo: CartRepository, notifier: Notifier) -> None:
        self._cart_repo = cart_repo
        self._notifier = notifier

    async def handle(self, session: Session) -> list[RawCartEntry] | None:
        """Return the user's raw cart, or None when there is no cart to show.

        Anonymous visitors have no cart, so no request is made.  Failures
        are reported to the user and never retried:
        - a 400 with a backend message shows that message
        - anything else, 401 included, shows a generic connectivity message
        """
        if not session.is_authenticated:
            return None

        try:
            return await self._cart_repo.fetch(session.token)  # type: ignore[arg-type]
        except FetchError as exc:
            logger.warning("Cart fetch failed: %s", exc)
            if exc.status_code == 400 and exc.server_message:
                self._notifier.error(exc.server_message)
            else:
                self._notifier.error(CART_FETCH_FAILED)
            return None
