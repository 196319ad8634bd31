"""Environment-driven settings for the toolkit's host-facing helpers."""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional

STORAGE_BACKENDS = ("memory", "file", "postgres")


@dataclass(frozen=True)
class Settings:
    """Where stored values and exported files go, and how loud logging is."""

    storage_backend: str = "memory"     # "memory", "file" or "postgres"
    storage_path: Path = field(default_factory=lambda: Path.home() / ".intercept" / "storage.json")
    database_url: Optional[str] = None
    download_dir: Path = Path(".")
    log_level: str = "WARNING"


def load_settings(environ: Optional[dict[str, str]] = None) -> Settings:
    """Build Settings from environment variables.

    Raises ValueError for an unknown storage backend so a typo fails at startup
    instead of silently falling back to memory.
    """
    env = os.environ if environ is None else environ

    backend = env.get("INTERCEPT_STORAGE_BACKEND", "memory").strip().lower()
    if backend not in STORAGE_BACKENDS:
        raise ValueError(
            f"INTERCEPT_STORAGE_BACKEND '{backend}' not in ({', '.join(STORAGE_BACKENDS)})"
        )

    paths: dict[str, Path] = {}
    # Unset paths keep their defaults; the home directory is only resolved then.
    if env.get("INTERCEPT_STORAGE_PATH"):
        paths["storage_path"] = Path(env["INTERCEPT_STORAGE_PATH"]).expanduser()
    if env.get("INTERCEPT_DOWNLOAD_DIR"):
        paths["download_dir"] = Path(env["INTERCEPT_DOWNLOAD_DIR"]).expanduser()

    return Settings(
        storage_backend=backend,
        database_url=env.get("DATABASE_URL") or None,
        log_level=env.get("INTERCEPT_LOG_LEVEL", "WARNING").upper(),
        **paths,
    )
