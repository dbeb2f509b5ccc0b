# src/storage/kv_store.py

"""Key-value stores the cart persists into."""

import json
import logging
from pathlib import Path
from typing import Protocol

from src.config.settings import Settings

logger = logging.getLogger("catalog_cart.storage")


class KeyValueStore(Protocol):
    """String-to-string store with browser ``localStorage`` semantics."""

    def get(self, key: str) -> str | None: ...

    def set(self, key: str, value: str) -> None: ...


class MemoryStore:
    """Process-local store, mainly for tests and scripting."""

    def __init__(self, initial: dict[str, str] | None = None) -> None:
        self._data: dict[str, str] = dict(initial or {})

    def get(self, key: str) -> str | None:
        return self._data.get(key)

    def set(self, key: str, value: str) -> None:
        self._data[key] = value


class JsonFileStore:
    """Store backed by a single JSON object on disk.

    Every ``set`` rewrites the whole file.  There is no locking, so two
    processes sharing a file follow last-write-wins.
    """

    def __init__(self, path: Path | None = None) -> None:
        self.path: Path = path or Settings.STORE_PATH
        logger.debug("JsonFileStore initialised, path=%s", self.path)

    def _read_all(self) -> dict[str, str]:
        """Load the backing file; a missing file is an empty store."""
        if not self.path.exists():
            return {}
        with open(self.path, encoding="utf-8") as f:
            data = json.load(f)
        if not isinstance(data, dict):
            msg = f"Store file {self.path} does not hold a JSON object"
            raise ValueError(msg)
        return {str(k): str(v) for k, v in data.items()}

    def get(self, key: str) -> str | None:
        return self._read_all().get(key)

    def set(self, key: str, value: str) -> None:
        try:
            data = self._read_all()
        except (json.JSONDecodeError, ValueError):
            logger.warning(
                "Store file %s is unreadable, starting it afresh",
                self.path,
            )
            data = {}
        data[key] = value

        self.path.parent.mkdir(parents=True, exist_ok=True)
        tmp_path = self.path.with_suffix(self.path.suffix + ".tmp")
        with open(tmp_path, "w", encoding="utf-8") as f:
            json.dump(data, f, ensure_ascii=False, indent=2)
        tmp_path.replace(self.path)

        logger.debug("Wrote key '%s' (%d chars) to %s", key, len(value), self.path)
