"""Tests for the JSON-file session store."""

import json

from storefront.domain.model.session import Session
from storefront.infrastructure.persistence.json_session_repository import (
    JsonSessionRepository,
)


class TestJsonSessionRepository:

    def test_creates_file_on_first_use(self, tmp_path):
        path = tmp_path / "nested" / "session.json"
        repo = JsonSessionRepository(path)
        assert path.exists()
        assert repo.load() == Session.anonymous()

    def test_save_and_load(self, tmp_path):
        path = tmp_path / "session.json"
        JsonSessionRepository(path).save(Session(token="abc", username="crio.do"))

        loaded = JsonSessionRepository(path).load()
        assert loaded.token == "abc"
        assert loaded.username == "crio.do"
        assert loaded.is_authenticated

    def test_clear(self, tmp_path):
        path = tmp_path / "session.json"
        repo = JsonSessionRepository(path)
        repo.save(Session(token="abc", username="crio.do"))
        repo.clear()
        assert not repo.load().is_authenticated
        assert json.loads(path.read_text(encoding="utf-8")) == {}
