"""Data Transfer Objects: plain containers that cross layer boundaries.

DTOs carry data from the application layer to whatever renders it
(the CLI, a test, a UI callback) without exposing domain internals.
"""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass

from storefront.domain.model.cart import CartLineItem
from storefront.domain.model.product import Product
from storefront.domain.service.cart_reconciler import cart_total


@dataclass(frozen=True)
class ProductDTO:

    id: str
    name: str
    category: str
    cost: str  # formatted, e.g. "$15.00"
    rating: float
    image: str


@dataclass(frozen=True)
class CartLineItemDTO:

    product_id: str
    name: str
    quantity: int
    unit_cost: str
    line_total: str


@dataclass(frozen=True)
class StorefrontView:
    """Everything the render callback needs, after every state change."""

    loading: bool
    products: list[ProductDTO]
    cart_items: list[CartLineItemDTO]
    cart_total: str


# --- Mapping ------------------------------------------------------------------


def product_to_dto(product: Product) -> ProductDTO:
    return ProductDTO(
        id=product.id,
        name=product.name,
        category=product.category,
        cost=str(product.cost),
        rating=product.rating,
        image=product.image,
    )


def line_item_to_dto(item: CartLineItem) -> CartLineItemDTO:
    return CartLineItemDTO(
        product_id=item.product_id,
        name=item.product.name,
        quantity=item.quantity.value,
        unit_cost=str(item.product.cost),
        line_total=str(item.line_total),
    )


def build_view(
    loading: bool,
    products: Sequence[Product],
    cart_items: Sequence[CartLineItem],
) -> StorefrontView:
    return StorefrontView(
        loading=loading,
        products=[product_to_dto(p) for p in products],
        cart_items=[line_item_to_dto(item) for item in cart_items],
        cart_total=str(cart_total(cart_items)),
    )
