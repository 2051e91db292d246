"""httpx-backed implementation of CartRepository.

Both endpoints are protected; the session token travels as an OAuth2
bearer token.
"""

from __future__ import annotations

import logging

import httpx

from storefront.domain.exceptions import CartUpdateError, FetchError, ProductNotFoundError
from storefront.domain.model.cart import RawCartEntry
from storefront.domain.model.value_objects import Quantity
from storefront.domain.repository.cart_repository import CartRepository
from storefront.infrastructure.http.wire import error_message, parse_cart

logger = logging.getLogger(__name__)

CART_PATH = "/cart"


def _auth_headers(token: str) -> dict[str, str]:
    return {"Authorization": f"Bearer {token}"}


class HttpCartRepository(CartRepository):

    def __init__(self, client: httpx.AsyncClient) -> None:
        self._client = client

    # --- CartRepository interface ---------------------------------------------

    async def fetch(self, token: str) -> list[RawCartEntry]:
        try:
            response = await self._client.get(CART_PATH, headers=_auth_headers(token))
            response.raise_for_status()
            return parse_cart(response.json())
        except httpx.HTTPStatusError as exc:
            status = exc.response.status_code
            logger.warning("GET %s -> HTTP %s", CART_PATH, status)
            raise FetchError(
                f"GET {CART_PATH} failed with HTTP {status}",
                status_code=status,
                server_message=error_message(exc.response),
            ) from exc
        except httpx.RequestError as exc:
            logger.error("GET %s request failed: %s", CART_PATH, exc)
            raise FetchError(f"GET {CART_PATH} failed: {exc}") from exc
        except ValueError as exc:
            raise FetchError(f"GET {CART_PATH} returned an unexpected body: {exc}") from exc

    async def upsert(
        self, token: str, product_id: str, quantity: Quantity
    ) -> list[RawCartEntry]:
        payload = {"productId": product_id, "qty": quantity.value}
        try:
            response = await self._client.post(
                CART_PATH, json=payload, headers=_auth_headers(token)
            )
            response.raise_for_status()
            return parse_cart(response.json())
        except httpx.HTTPStatusError as exc:
            status = exc.response.status_code
            message = error_message(exc.response)
            logger.warning("POST %s -> HTTP %s (%s)", CART_PATH, status, message)
            if status == httpx.codes.NOT_FOUND:
                raise ProductNotFoundError(
                    message or f"Product '{product_id}' doesn't exist",
                    status_code=status,
                    server_message=message,
                ) from exc
            raise CartUpdateError(
                f"POST {CART_PATH} failed with HTTP {status}",
                status_code=status,
                server_message=message,
            ) from exc
        except httpx.RequestError as exc:
            logger.error("POST %s request failed: %s", CART_PATH, exc)
            raise CartUpdateError(f"POST {CART_PATH} failed: {exc}") from exc
        except ValueError as exc:
            raise CartUpdateError(
                f"POST {CART_PATH} returned an unexpected body: {exc}"
            ) from exc
