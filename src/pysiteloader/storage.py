"""Local persistence for the content cache.

Two layers:

* :class:`KeyValueStorage` is the synchronous string key/value surface
  (the browser's ``localStorage``). :class:`MemoryStorage` and
  :class:`JsonFileStorage` implement it.
* :class:`SnapshotRepository` stores a typed :class:`CachedSnapshot` in that
  surface under two fixed keys: one for the JSON blob and one for the
  capture timestamp in epoch milliseconds.
"""

from __future__ import annotations

import json
import logging
import os
from pathlib import Path
from typing import Protocol

from pydantic import ValidationError

from pysiteloader._constants import CACHE_KEY, TIMESTAMP_KEY
from pysiteloader.exceptions import SiteCacheError
from pysiteloader.models.snapshot import CachedSnapshot

_logger = logging.getLogger(__name__)


class KeyValueStorage(Protocol):
    """Structural string key/value storage interface."""

    def get_item(self, key: str) -> str | None:
        ...

    def set_item(self, key: str, value: str) -> None:
        ...

    def remove_item(self, key: str) -> None:
        ...


class MemoryStorage:
    """Process-local storage, lost on exit."""

    def __init__(self, initial: dict[str, str] | None = None) -> None:
        self._items: dict[str, str] = dict(initial or {})

    def get_item(self, key: str) -> str | None:
        return self._items.get(key)

    def set_item(self, key: str, value: str) -> None:
        self._items[key] = value

    def remove_item(self, key: str) -> None:
        self._items.pop(key, None)

    def __len__(self) -> int:
        return len(self._items)


class JsonFileStorage:
    """Storage persisted as a single JSON object on disk.

    Every write rewrites the file through a temporary sibling and
    ``os.replace``. Concurrent writers are not coordinated; the last write
    wins.
    """

    def __init__(self, path: str | os.PathLike[str]) -> None:
        self._path = Path(path)

    @property
    def path(self) -> Path:
        return self._path

    def _read_all(self) -> dict[str, str]:
        try:
            text = self._path.read_text(encoding="utf-8")
        except FileNotFoundError:
            return {}
        try:
            data = json.loads(text)
        except json.JSONDecodeError:
            _logger.warning("Ignoring unreadable storage file %s", self._path)
            return {}
        if not isinstance(data, dict):
            _logger.warning("Ignoring storage file %s: top level is not an object", self._path)
            return {}
        return {str(k): v for k, v in data.items() if isinstance(v, str)}

    def _write_all(self, items: dict[str, str]) -> None:
        self._path.parent.mkdir(parents=True, exist_ok=True)
        tmp = self._path.with_name(self._path.name + ".tmp")
        tmp.write_text(json.dumps(items), encoding="utf-8")
        os.replace(tmp, self._path)

    def get_item(self, key: str) -> str | None:
        return self._read_all().get(key)

    def set_item(self, key: str, value: str) -> None:
        items = self._read_all()
        items[key] = value
        self._write_all(items)

    def remove_item(self, key: str) -> None:
        items = self._read_all()
        if key in items:
            del items[key]
            self._write_all(items)


class SnapshotRepository:
    """Typed get/set/clear of the cached content snapshot."""

    def __init__(
        self,
        storage: KeyValueStorage,
        *,
        data_key: str = CACHE_KEY,
        timestamp_key: str = TIMESTAMP_KEY,
    ) -> None:
        self._storage = storage
        self._data_key = data_key
        self._timestamp_key = timestamp_key

    @property
    def storage(self) -> KeyValueStorage:
        return self._storage

    def get(self) -> CachedSnapshot | None:
        """Return the stored snapshot, or ``None`` if either key is absent.

        Raises :class:`SiteCacheError` when the entries exist but do not
        form a valid snapshot.
        """
        blob = self._storage.get_item(self._data_key)
        stamp = self._storage.get_item(self._timestamp_key)
        if not blob or not stamp:
            return None

        try:
            captured_at_ms = int(stamp.strip())
        except ValueError as exc:
            raise SiteCacheError(f"Invalid cache timestamp: {stamp[:64]!r}") from exc

        try:
            body = json.loads(blob)
        except json.JSONDecodeError as exc:
            raise SiteCacheError(f"Cache blob is not JSON: {exc}") from exc
        if not isinstance(body, dict):
            raise SiteCacheError("Cache blob is not a JSON object")

        try:
            return CachedSnapshot.model_validate({**body, "captured_at_ms": captured_at_ms})
        except ValidationError as exc:
            raise SiteCacheError(f"Cache blob failed validation: {exc.error_count()} error(s)") from exc

    def set(self, snapshot: CachedSnapshot) -> None:
        """Overwrite the stored snapshot."""
        blob = snapshot.model_dump_json(exclude={"captured_at_ms"})
        self._storage.set_item(self._data_key, blob)
        self._storage.set_item(self._timestamp_key, str(snapshot.captured_at_ms))

    def clear(self) -> None:
        self._storage.remove_item(self._data_key)
        self._storage.remove_item(self._timestamp_key)
