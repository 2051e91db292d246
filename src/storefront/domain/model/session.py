"""Session context passed explicitly into cart operations."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Session:
    """Who is shopping.

    An anonymous visitor is a Session with no token.  Operations that
    need authentication check ``is_authenticated`` instead of reading
    any ambient state.
    """

    token: str | None = None
    username: str | None = None

    @property
    def is_authenticated(self) -> bool:
        return bool(self.token)

    @staticmethod
    def anonymous() -> Session:
        return Session()
