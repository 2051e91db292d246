"""JSON wire format of the catalog/cart backend.

Products are keyed by ``_id`` and cart entries carry ``productId`` and
``qty``.  Parsing is strict: anything that is not the documented shape
raises ValueError, which the repositories turn into FetchError or
CartUpdateError.
"""

from __future__ import annotations

from typing import Any

import httpx

from storefront.domain.exceptions import ValidationError
from storefront.domain.model.cart import RawCartEntry
from storefront.domain.model.product import Product
from storefront.domain.model.value_objects import Money, Quantity


def parse_products(payload: Any) -> list[Product]:
    return [parse_product(item) for item in _require_list(payload)]


def parse_product(item: Any) -> Product:
    if not isinstance(item, dict):
        raise ValueError(f"Expected a product object, got {type(item).__name__}")
    product_id = item.get("_id", item.get("id"))
    if product_id is None:
        raise ValueError(f"Product without an id: {item!r}")
    try:
        name = item["name"]
        if not isinstance(name, str):
            raise TypeError(f"name must be a string, got {type(name).__name__}")
        return Product(
            id=str(product_id),
            name=name,
            category=_optional_str(item, "category"),
            cost=Money.of(item["cost"]),
            rating=float(item.get("rating") or 0),
            image=_optional_str(item, "image"),
        )
    except (KeyError, TypeError, ValidationError) as exc:
        raise ValueError(f"Malformed product {item!r}: {exc}") from exc


def parse_cart(payload: Any) -> list[RawCartEntry]:
    return [parse_cart_entry(item) for item in _require_list(payload)]


def parse_cart_entry(item: Any) -> RawCartEntry:
    if not isinstance(item, dict):
        raise ValueError(f"Expected a cart entry object, got {type(item).__name__}")
    try:
        qty = item["qty"] if "qty" in item else item["quantity"]
        return RawCartEntry(product_id=str(item["productId"]), quantity=Quantity(qty))
    except (KeyError, ValidationError) as exc:
        raise ValueError(f"Malformed cart entry {item!r}: {exc}") from exc


def error_message(response: httpx.Response) -> str | None:
    """The ``message`` field of a ``{success: false, message}`` body, if any."""
    try:
        body = response.json()
    except ValueError:
        return None
    if isinstance(body, dict) and isinstance(body.get("message"), str):
        return body["message"]
    return None


def _optional_str(item: dict[str, Any], key: str) -> str:
    """Missing and null both read as ``""``; any other non-string is rejected."""
    value = item.get(key)
    if value is None:
        return ""
    if not isinstance(value, str):
        raise TypeError(f"{key} must be a string, got {type(value).__name__}")
    return value


def _require_list(payload: Any) -> list[Any]:
    if not isinstance(payload, list):
        raise ValueError(f"Expected a JSON array, got {type(payload).__name__}")
    return payload
