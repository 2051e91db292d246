"""JSON-file-backed implementation of SessionRepository."""

from __future__ import annotations

import json
from pathlib import Path

from storefront.domain.model.session import Session
from storefront.domain.repository.session_repository import SessionRepository


class JsonSessionRepository(SessionRepository):

    def __init__(self, file_path: Path) -> None:
        self._file_path = file_path
        self._ensure_file()

    # --- SessionRepository interface ------------------------------------------

    def load(self) -> Session:
        raw = json.loads(self._file_path.read_text(encoding="utf-8"))
        return Session(token=raw.get("token"), username=raw.get("username"))

    def save(self, session: Session) -> None:
        self._persist({"token": session.token, "username": session.username})

    def clear(self) -> None:
        self._persist({})

    # --- Serialization helpers ------------------------------------------------

    def _persist(self, raw: dict[str, str | None]) -> None:
        self._file_path.write_text(
            json.dumps(raw, indent=2) + "\n", encoding="utf-8"
        )

    def _ensure_file(self) -> None:
        if not self._file_path.exists():
            self._file_path.parent.mkdir(parents=True, exist_ok=True)
            self._file_path.write_text("{}", encoding="utf-8")
