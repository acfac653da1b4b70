from __future__ import annotations

"""Application-level configuration (env → immutable settings object).

Values are read once when the process starts and handed to
:func:`form_ingest.main.create_app`.  Nothing in the request path reads the
environment directly.
"""

# Standard library
import os
from dataclasses import dataclass

from form_ingest import APP_ENV
from form_ingest.utils.utils import get_env_bool, get_env_int

__all__ = ["Settings", "load_settings", "DEFAULT_PORT"]

DEFAULT_PORT = 3000
DEFAULT_MONGO_TIMEOUT_MS = 5000


@dataclass(frozen=True)
class Settings:
    """Process-wide configuration.

    ``api_key`` may be empty; the auth gate then rejects every request
    instead of falling back to allow-all.
    """

    mongo_uri: str
    api_key: str = ""
    port: int = DEFAULT_PORT
    host: str = "0.0.0.0"
    mongo_connect_per_request: bool = False
    mongo_timeout_ms: int = DEFAULT_MONGO_TIMEOUT_MS
    app_env: str = "production"
    log_level: str = "INFO"

    @property
    def docs_enabled(self) -> bool:
        return self.app_env != "production"


def load_settings() -> Settings:
    """Build :class:`Settings` from the environment (``.env`` already loaded)."""
    mongo_uri = os.environ.get("MONGO_URI")
    if not mongo_uri:
        raise RuntimeError("MONGO_URI not configured")

    return Settings(
        mongo_uri=mongo_uri,
        api_key=os.environ.get("API_KEY", ""),
        port=get_env_int("PORT", DEFAULT_PORT),
        host=os.environ.get("HOST", "0.0.0.0"),
        mongo_connect_per_request=get_env_bool("MONGO_CONNECT_PER_REQUEST"),
        mongo_timeout_ms=get_env_int("MONGO_TIMEOUT_MS", DEFAULT_MONGO_TIMEOUT_MS),
        app_env=os.getenv("APP_ENV", APP_ENV),
        log_level=os.getenv("LOG_LEVEL", "INFO").upper(),
    )
