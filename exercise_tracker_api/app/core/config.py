"""
Simple configuration management.

The ``Settings`` dataclass reads configuration directly from
environment variables.  Defaults are provided for all fields, so the
service starts without any configuration and stores its data in a
SQLite file next to the project root.  Tests and embedders construct
their own ``Settings`` instance and pass it to ``create_app``.
"""

import os
from dataclasses import dataclass


def _env_flag(name: str, default: str = "false") -> bool:
    return os.getenv(name, default).lower() in {"1", "true", "yes"}


@dataclass
class Settings:
    """Application settings loaded from environment variables."""

    project_name: str = os.getenv("PROJECT_NAME", "Exercise Tracker API")
    api_version: str = os.getenv("API_VERSION", "1.0.0")
    debug: bool = _env_flag("DEBUG")
    log_level: str = os.getenv("LOG_LEVEL", "INFO")
    log_file: str = os.getenv("LOG_FILE", "")

    # Path to the SQLite database.  Relative paths are resolved against
    # the project root by ``core.db``; ``:memory:`` keeps everything in
    # the process and is discarded on shutdown.
    database_url: str = os.getenv("DATABASE_URL", "exercise_tracker.db")

    host: str = os.getenv("HOST", "0.0.0.0")
    port: int = int(os.getenv("PORT", "3000"))

    # Comma or whitespace separated list of allowed origins.  Empty means
    # any origin, without credentials.
    cors_origins: str = os.getenv("CORS_ORIGINS", "")

    # When enabled, an unparseable duration or exercise date is rejected
    # with a validation error instead of being coerced to null/today.
    strict_input: bool = _env_flag("STRICT_INPUT")

    def allowed_origins(self) -> list[str]:
        """Return the configured CORS origins, normalised and de-duplicated."""
        raw = [p.strip() for chunk in self.cors_origins.split(",") for p in chunk.split()]
        origins: list[str] = []
        for origin in raw:
            origin = origin.rstrip("/")
            if origin and origin not in origins:
                origins.append(origin)
        return origins


# Instantiate settings once so the server entry point can import it.
# Environment variables must be set before importing this module.
settings = Settings()
