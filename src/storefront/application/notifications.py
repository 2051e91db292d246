"""Transient user notifications.

Read and write failures never surface as exceptions to the user; the
application layer reports them through a Notifier and carries on.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from enum import Enum


class Severity(Enum):
    WARNING = "warning"
    ERROR = "error"


@dataclass(frozen=True)
class Notification:

    message: str
    severity: Severity


class Notifier(ABC):

    @abstractmethod
    def notify(self, notification: Notification) -> None:
        """Show *notification* to the user."""

    def warning(self, message: str) -> None:
        self.notify(Notification(message, Severity.WARNING))

    def error(self, message: str) -> None:
        self.notify(Notification(message, Severity.ERROR))


# --- User-facing messages -----------------------------------------------------

LOGIN_REQUIRED = "Login to add an item to the Cart"
ALREADY_IN_CART = (
    "Item already in cart. Use the cart sidebar to update quantity or remove item."
)
CART_FETCH_FAILED = (
    "Could not fetch cart details. Check that the backend is running, "
    "reachable and returns valid JSON."
)
CART_UPDATE_FAILED = (
    "Could not Add/Update cart items. Check that the backend is running, "
    "reachable and returns valid JSON."
)
