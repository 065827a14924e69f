"""
Simple configuration management.

The ``Settings`` dataclass reads configuration directly from
environment variables.  Defaults are provided for all fields so the
service starts with no configuration at all: it listens on port 3000
and keeps its collection in ``books.json`` next to the package.
"""

import os
from dataclasses import dataclass


def _as_bool(value: str) -> bool:
    return value.lower() in {"1", "true", "yes", "on"}


@dataclass
class Settings:
    """Application settings loaded from environment variables."""

    project_name: str = os.getenv("PROJECT_NAME", "Book Directory API")
    api_version: str = os.getenv("API_VERSION", "1.0.0")
    host: str = os.getenv("HOST", "0.0.0.0")
    port: int = int(os.getenv("PORT", "3000"))
    log_level: str = os.getenv("LOG_LEVEL", "INFO")
    log_file: str = os.getenv("LOG_FILE", "")

    # Path to the JSON file holding the book collection.  A relative
    # path is resolved against the project root by ``core.storage``.
    data_file: str = os.getenv("BOOKS_DATA_FILE", "books.json")

    # Serialize the read-modify-write cycle of mutating requests with a
    # process-wide lock.  Set BOOKS_STORE_LOCK=false to get plain
    # last-write-wins behaviour.
    use_lock: bool = _as_bool(os.getenv("BOOKS_STORE_LOCK", "true"))


# Instantiate settings once so other modules can import it without
# repeatedly reading environment variables.  Environment variables
# must be set before importing this module.
settings = Settings()
