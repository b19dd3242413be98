from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Mapping

from .errors import ConfigError

DEFAULT_REPO_URL = "https://repo.hex.pm"
DEFAULT_API_URL = "https://hex.pm/api"
DEFAULT_HTTP_TIMEOUT_S = 45


@dataclass(frozen=True)
class Settings:
    home: Path
    repo_url: str = DEFAULT_REPO_URL
    api_url: str = DEFAULT_API_URL
    api_key: str | None = None
    http_timeout_s: int = DEFAULT_HTTP_TIMEOUT_S

    @property
    def docs_root(self) -> Path:
        return self.home / "docs"

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> Settings:
        env = os.environ if environ is None else environ

        home_raw = (env.get("HEX_HOME") or "").strip()
        home = Path(home_raw).expanduser() if home_raw else Path.home() / ".hex"

        timeout_raw = (env.get("HEX_HTTP_TIMEOUT") or "").strip()
        timeout_s = DEFAULT_HTTP_TIMEOUT_S
        if timeout_raw:
            try:
                timeout_s = int(timeout_raw)
            except ValueError:
                raise ConfigError(
                    f"HEX_HTTP_TIMEOUT must be an integer, got: {timeout_raw!r}"
                ) from None
            if timeout_s <= 0:
                raise ConfigError(
                    f"HEX_HTTP_TIMEOUT must be positive, got: {timeout_s}"
                )

        return cls(
            home=home,
            repo_url=(env.get("HEX_REPO_URL") or DEFAULT_REPO_URL).rstrip("/"),
            api_url=(env.get("HEX_API_URL") or DEFAULT_API_URL).rstrip("/"),
            api_key=(env.get("HEX_API_KEY") or "").strip() or None,
            http_timeout_s=timeout_s,
        )


def docs_directory(settings: Settings, name: str, version: str) -> Path:
    return settings.docs_root / name / version
