"""Runtime configuration read from the environment.

A ``.env`` file in the working directory is loaded first, so local
overrides do not need to be exported by hand.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Mapping

from dotenv import load_dotenv

from catalog.domain.exceptions import ConfigurationError

DEFAULT_STORE_URL = "mongodb://localhost:27017/ecommerce"


@dataclass(frozen=True)
class Settings:
    host: str = "127.0.0.1"
    port: int = 5000
    store_url: str = DEFAULT_STORE_URL
    upload_dir: Path = Path("uploads")
    api_url: str = "http://localhost:5000/api"
    max_upload_mb: int = 16
    log_level: str = "INFO"

    @staticmethod
    def from_env(environ: Mapping[str, str] | None = None) -> Settings:
        if environ is None:
            load_dotenv()
            environ = os.environ
        return Settings(
            host=environ.get("CATALOG_HOST", "127.0.0.1"),
            port=_int_setting(environ, "PORT", 5000),
            store_url=environ.get("CATALOG_STORE_URL", DEFAULT_STORE_URL),
            upload_dir=Path(environ.get("CATALOG_UPLOAD_DIR", "uploads")),
            api_url=environ.get("CATALOG_API_URL", "http://localhost:5000/api").rstrip("/"),
            max_upload_mb=_int_setting(environ, "CATALOG_MAX_UPLOAD_MB", 16),
            log_level=environ.get("CATALOG_LOG_LEVEL", "INFO").upper(),
        )

    @property
    def json_store_path(self) -> Path | None:
        """Path of the JSON-file store, or None when MongoDB is configured."""
        if self.store_url.startswith(("mongodb://", "mongodb+srv://")):
            return None
        if self.store_url.startswith("file://"):
            return Path(self.store_url[len("file://"):])
        raise ConfigurationError(f"Unsupported store URL: {self.store_url!r}")


def _int_setting(environ: Mapping[str, str], key: str, default: int) -> int:
    raw = environ.get(key)
    if raw is None or not raw.strip():
        return default
    try:
        return int(raw)
    except ValueError as exc:
        raise ConfigurationError(f"{key} must be an integer, got {raw!r}") from exc
