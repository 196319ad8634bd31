"""Typed get/set over a string key-value store with transparent JSON coding.

The dashboard keeps UI preferences (filters, column layouts, last-used
frequencies) in a key-value store. Values come back decoded from JSON when they
can be, and as the raw stored string when they cannot.
"""

from __future__ import annotations

import json
import logging
import threading
from pathlib import Path
from typing import Any, Optional, Protocol

from intercept_toolkit.config import Settings, load_settings

logger = logging.getLogger(__name__)


class KeyValueStore(Protocol):
    """Backend with string keys and string values."""

    def get_item(self, key: str) -> Optional[str]:
        ...

    def set_item(self, key: str, value: str) -> None:
        ...

    def remove_item(self, key: str) -> None:
        ...


class MemoryStore:
    """Process-local store, the default when nothing is configured."""

    def __init__(self, initial: Optional[dict[str, str]] = None):
        self._items: dict[str, str] = dict(initial or {})

    def get_item(self, key: str) -> Optional[str]:
        return self._items.get(key)

    def set_item(self, key: str, value: str) -> None:
        self._items[key] = value

    def remove_item(self, key: str) -> None:
        self._items.pop(key, None)


class FileStore:
    """Store persisted as a single JSON object on disk.

    The whole file is rewritten on every change; writes go to a sibling temp
    file first and are moved into place.
    """

    def __init__(self, path: Path):
        self.path = Path(path)
        self._lock = threading.Lock()

    def _load(self) -> dict[str, str]:
        if not self.path.exists():
            return {}
        return json.loads(self.path.read_text(encoding="utf-8"))

    def _dump(self, items: dict[str, str]) -> None:
        self.path.parent.mkdir(parents=True, exist_ok=True)
        tmp = self.path.with_suffix(self.path.suffix + ".tmp")
        tmp.write_text(json.dumps(items, indent=2, sort_keys=True), encoding="utf-8")
        tmp.replace(self.path)

    def get_item(self, key: str) -> Optional[str]:
        with self._lock:
            return self._load().get(key)

    def set_item(self, key: str, value: str) -> None:
        with self._lock:
            items = self._load()
            items[key] = value
            self._dump(items)

    def remove_item(self, key: str) -> None:
        with self._lock:
            items = self._load()
            if items.pop(key, None) is not None:
                self._dump(items)


_default_store: Optional[KeyValueStore] = None
_default_lock = threading.Lock()


def build_store(settings: Settings) -> KeyValueStore:
    """Create the backend selected by ``settings.storage_backend``."""
    if settings.storage_backend == "file":
        return FileStore(settings.storage_path)
    if settings.storage_backend == "postgres":
        from intercept_toolkit.db import PostgresStore
        return PostgresStore(settings.database_url)
    return MemoryStore()


def get_default_store() -> KeyValueStore:
    """Store used when callers do not pass one; built once from the environment."""
    global _default_store
    with _default_lock:
        if _default_store is None:
            settings = load_settings()
            _default_store = build_store(settings)
            logger.debug("Using %s storage backend", settings.storage_backend)
        return _default_store


def set_default_store(store: Optional[KeyValueStore]) -> None:
    """Replace the default store (None resets it to the configured backend)."""
    global _default_store
    with _default_lock:
        _default_store = store


def _reject_constant(name: str) -> Any:
    raise ValueError(f"non-standard JSON constant {name}")


def _encode(value: Any) -> str:
    if isinstance(value, str):
        return value
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, (int, float)):
        return str(value)
    return json.dumps(value)


def get_stored(key: str, default: Any = None, store: Optional[KeyValueStore] = None) -> Any:
    """Read ``key``, JSON-decoded when possible.

    Missing keys give ``default``. A stored string that is not valid JSON is
    returned unchanged.
    """
    saved = (store or get_default_store()).get_item(key)
    if saved is None:
        return default
    try:
        return json.loads(saved, parse_constant=_reject_constant)
    except ValueError:
        logger.debug("Stored value for %r is not JSON, returning raw string", key)
        return saved


def set_stored(key: str, value: Any, store: Optional[KeyValueStore] = None) -> None:
    """Write ``value`` under ``key``; containers and None are stored as JSON."""
    (store or get_default_store()).set_item(key, _encode(value))
