"""Abstract repository for the locally stored session."""

from __future__ import annotations

from abc import ABC, abstractmethod

from storefront.domain.model.session import Session


class SessionRepository(ABC):

    @abstractmethod
    def load(self) -> Session:
        """Return the stored session, or an anonymous one."""

    @abstractmethod
    def save(self, session: Session) -> None:
        """Persist the session."""

    @abstractmethod
    def clear(self) -> None:
        """Forget the stored session (logout)."""
