"""Domain-level exceptions.

All storefront failures are expressed as subclasses of DomainException.
The application layer catches them and turns them into user-facing
notifications.
"""

from __future__ import annotations


class DomainException(Exception):
    """Base class for all domain errors."""


class ValidationError(DomainException):
    """A business rule or invariant was violated."""


class UnauthenticatedError(DomainException):
    """The operation needs a session token and none is present."""


class DuplicateItemError(DomainException):
    """The product is already in the cart and re-adding was guarded."""


class BackendError(DomainException):
    """A call to the catalog/cart backend did not succeed.

    ``status_code`` is None for transport failures (connection refused,
    timeout, malformed body).  ``server_message`` carries the backend's
    ``message`` field when the error response had one.
    """

    def __init__(
        self,
        message: str,
        status_code: int | None = None,
        server_message: str | None = None,
    ) -> None:
        super().__init__(message)
        self.status_code = status_code
        self.server_message = server_message


class FetchError(BackendError):
    """Reading the catalog or the cart failed."""


class CartUpdateError(BackendError):
    """Adding or updating a cart entry failed."""


class ProductNotFoundError(CartUpdateError):
    """The backend no longer knows the product being added."""
