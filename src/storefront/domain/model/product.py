"""Product: an immutable catalog snapshot.

The backend is the authority on products; the client only ever holds
the copy it fetched last and replaces it wholesale on the next fetch.
"""

from __future__ import annotations

from dataclasses import dataclass

from storefront.domain.exceptions import ValidationError
from storefront.domain.model.value_objects import Money

MAX_RATING = 5


@dataclass(frozen=True)
class Product:

    id: str
    name: str
    category: str
    cost: Money
    rating: float
    image: str

    def __post_init__(self) -> None:
        if not self.id:
            raise ValidationError("Product id is required")
        if not 0 <= self.rating <= MAX_RATING:
            raise ValidationError(
                f"Rating for '{self.name}' must be between 0 and {MAX_RATING}, "
                f"got {self.rating}"
            )
