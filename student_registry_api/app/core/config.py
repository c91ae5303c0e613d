"""
Simple configuration management.

The ``Settings`` dataclass reads configuration directly from
environment variables.  Defaults are provided for all fields so the
application starts without any configuration; override them via
environment variables in a real deployment.
"""

import os
from dataclasses import dataclass
from pathlib import Path


@dataclass
class Settings:
    """Application settings loaded from environment variables."""

    project_name: str = os.getenv("PROJECT_NAME", "Student Registry API")
    api_version: str = os.getenv("API_VERSION", "1.0.0")
    debug: bool = os.getenv("DEBUG", "false").lower() in {"1", "true", "yes"}
    log_level: str = os.getenv("LOG_LEVEL", "INFO")

    # Optional path to a log file.  When empty, logs go to the console only.
    log_file: str = os.getenv("LOG_FILE", "")

    # Path to the SQLite database file.  Relative paths are resolved
    # against the package root by the ``db`` module; ``:memory:`` keeps
    # the data for the lifetime of the process only.
    database_url: str = os.getenv("DATABASE_URL", "students.db")

    host: str = os.getenv("HOST", "127.0.0.1")
    port: int = int(os.getenv("PORT", "8000"))


# Instantiate settings once so other modules can import it without
# repeatedly reading environment variables.  Environment variables
# should be set before importing this module.
settings = Settings()


def resolve_project_path(path: str) -> str:
    """Return ``path`` unchanged when absolute, else resolved against the package root."""
    if os.path.isabs(path):
        return path
    base_dir = Path(__file__).resolve().parent.parent.parent  # student_registry_api/
    return str((base_dir / path).resolve())
