"""
Simple configuration management.

The ``Settings`` dataclass reads configuration directly from
environment variables.  Defaults are provided for all fields so the
service starts without any environment at all.  Tests and embedding
applications may construct their own ``Settings`` and pass it to
``create_app``.
"""

import os
from dataclasses import dataclass, field
from typing import Dict, Optional


def parse_seed_users(raw: str) -> Dict[str, str]:
    """Parse ``SEED_USERS`` text into a mapping.

    The format is a comma‑separated list of ``id=name`` pairs, for
    example ``admin=Administrator,ops=Operations``.  Whitespace around
    ids is ignored; names are kept verbatim apart from surrounding
    spaces.  Entries without ``=`` are skipped.
    """
    seed: Dict[str, str] = {}
    for item in raw.split(","):
        if "=" not in item:
            continue
        user_id, name = item.split("=", 1)
        seed[user_id.strip()] = name.strip()
    return seed


@dataclass
class Settings:
    """Application settings loaded from environment variables."""

    project_name: str = os.getenv("PROJECT_NAME", "User Directory API")
    api_version: str = os.getenv("API_VERSION", "1.0.0")
    log_level: str = os.getenv("LOG_LEVEL", "INFO")
    log_file: Optional[str] = os.getenv("LOG_FILE") or None

    # Address uvicorn binds to when started through ``run.py``.
    host: str = os.getenv("HOST", "0.0.0.0")
    port: int = int(os.getenv("PORT", "8080"))

    # Connection string handed to ``UserService``.  The service keeps
    # users in memory only; the value is stored but never dialled.
    database_url: str = os.getenv("DATABASE_URL", "postgres://localhost/demo")

    # Directory scanned by ``TempFileCleaner``.
    temp_dir: str = os.getenv("TEMP_DIR", "/tmp")

    # Users placed in the store when the application is created.
    seed_users: Dict[str, str] = field(
        default_factory=lambda: parse_seed_users(os.getenv("SEED_USERS", "admin=Administrator"))
    )


# Instantiate settings once so other modules can import it without
# repeatedly reading environment variables.  Environment variables
# should be set before importing this module.
settings = Settings()
