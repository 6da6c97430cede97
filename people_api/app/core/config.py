"""
Simple configuration management.

The ``Settings`` dataclass reads configuration directly from
environment variables, with defaults for every field, so the API can
start with no configuration at all against a local MongoDB.  Set
``PEOPLE_BACKEND=memory`` to run without any database.
"""

import os
from dataclasses import dataclass


@dataclass
class Settings:
    """Application settings loaded from environment variables."""

    project_name: str = os.getenv("PROJECT_NAME", "People API")
    api_version: str = os.getenv("API_VERSION", "1.0.0")
    debug: bool = os.getenv("DEBUG", "false").lower() in {"1", "true", "yes"}
    log_level: str = os.getenv("LOG_LEVEL", "INFO")
    log_file: str = os.getenv("LOG_FILE", "")

    # Storage used by the people service: ``mongodb`` or ``memory``.  The
    # in‑memory store is seeded from ``app/data/people.py`` and is lost on
    # restart.
    people_backend: str = os.getenv("PEOPLE_BACKEND", "mongodb")

    # MongoDB connection.  Only read when ``people_backend`` is
    # ``mongodb``.
    mongodb_uri: str = os.getenv("MONGODB_URI", "mongodb://localhost:27017")
    mongodb_database: str = os.getenv("MONGODB_DATABASE", "people")
    mongodb_collection: str = os.getenv("MONGODB_COLLECTION", "people")

    # Bind address used by ``run.py``.
    api_host: str = os.getenv("API_HOST", "0.0.0.0")
    api_port: int = int(os.getenv("API_PORT", "8000"))


# Instantiate settings once so other modules can import it without
# repeatedly reading environment variables.  Environment variables
# should be set before importing this module.
settings = Settings()
