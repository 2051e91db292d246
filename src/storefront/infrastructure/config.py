"""Runtime settings, read from the environment.

| Variable               | Default                          |
|------------------------|----------------------------------|
| STOREFRONT_API_URL     | http://localhost:8082/api/v1     |
| STOREFRONT_TIMEOUT     | 30.0 (seconds)                   |
| STOREFRONT_DEBOUNCE_MS | 500                              |
| STOREFRONT_DATA_DIR    | <project root>/data              |
| LOG_LEVEL              | INFO                             |
"""

from __future__ import annotations

import os
from collections.abc import Mapping
from dataclasses import dataclass
from pathlib import Path

# When installed in editable mode the project root is the repo root.
_DEFAULT_DATA_DIR = Path(__file__).resolve().parents[3] / "data"


@dataclass(frozen=True)
class Settings:

    api_url: str = "http://localhost:8082/api/v1"
    timeout: float = 30.0
    debounce_ms: int = 500
    data_dir: Path = _DEFAULT_DATA_DIR
    log_level: str = "INFO"

    @property
    def debounce_seconds(self) -> float:
        return self.debounce_ms / 1000

    @property
    def session_file(self) -> Path:
        return self.data_dir / "session.json"

    @staticmethod
    def from_env(environ: Mapping[str, str] | None = None) -> Settings:
        env = os.environ if environ is None else environ
        return Settings(
            api_url=env.get("STOREFRONT_API_URL", Settings.api_url).rstrip("/"),
            timeout=float(env.get("STOREFRONT_TIMEOUT", Settings.timeout)),
            debounce_ms=int(env.get("STOREFRONT_DEBOUNCE_MS", Settings.debounce_ms)),
            data_dir=Path(env.get("STOREFRONT_DATA_DIR", _DEFAULT_DATA_DIR)),
            log_level=env.get("LOG_LEVEL", Settings.log_level).upper(),
        )
