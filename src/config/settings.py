# src/config/settings.py

"""Central configuration for the catalog_cart engine."""

import os
from pathlib import Path

from dotenv import load_dotenv

load_dotenv()


def _env_path(name: str, default: Path | None) -> Path | None:
    """Read an optional path override from the environment."""
    raw = os.getenv(name, "").strip()
    return Path(raw).expanduser() if raw else default


class Settings:
    """Central configuration for the catalog_cart engine."""

    # --- Cart ---
    CART_STORAGE_KEY: str = "cart"      # Well-known key in the KV store

    # --- Filtering ---
    ALL_CATEGORIES: str = "All"         # Sentinel that disables category filter

    # --- Display ---
    MAX_STARS: int = 5

    # --- Logging ---
    CONSOLE_LOG_LEVEL: str = (
        os.getenv("CATALOG_CART_LOG_LEVEL", "WARNING").strip().upper()
    )

    # --- Paths ---
    BASE_DIR: Path = Path(__file__).resolve().parent.parent.parent
    DATA_DIR: Path = BASE_DIR / "data"
    LOGS_DIR: Path = BASE_DIR / "logs"
    STORE_PATH: Path = (
        _env_path("CATALOG_CART_STORE_PATH", None)
        or DATA_DIR / "store.json"
    )
    # None means the built-in catalog is used
    CATALOG_PATH: Path | None = _env_path(
        "CATALOG_CART_CATALOG_PATH", None
    )
