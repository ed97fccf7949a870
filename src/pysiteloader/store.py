"""In-memory content store.

The store is filled exactly once per page lifetime, either from the cache or
from a fresh fetch, and is read-only afterwards. Readers always receive deep
copies, so nothing downstream can change what was loaded.
"""

from __future__ import annotations

import asyncio
import copy
from collections.abc import Iterator, Mapping
from typing import Any

from pysiteloader.exceptions import ContentStoreError


class ContentStore(Mapping[str, Any]):
    """Section name -> parsed JSON document."""

    def __init__(self) -> None:
        self._sections: dict[str, Any] = {}
        self._populated = False
        self._ready: asyncio.Event | None = None

    def _event(self) -> asyncio.Event:
        # Created lazily so the store can be built outside a running loop.
        if self._ready is None:
            self._ready = asyncio.Event()
            if self._populated:
                self._ready.set()
        return self._ready

    @property
    def is_populated(self) -> bool:
        return self._populated

    def populate(self, sections: Mapping[str, Any]) -> None:
        """Fill the store. Allowed once."""
        if self._populated:
            raise ContentStoreError("content store is already populated")
        self._sections = copy.deepcopy(dict(sections))
        self._populated = True
        if self._ready is not None:
            self._ready.set()

    async def wait_ready(self) -> None:
        """Suspend until :meth:`populate` has run."""
        await self._event().wait()

    def _require_populated(self) -> None:
        if not self._populated:
            raise ContentStoreError("content store read before it was populated")

    def section(self, name: str, default: Any = None) -> Any:
        """Copy of one section, or *default* when the section was not loaded."""
        self._require_populated()
        if name not in self._sections:
            return default
        return copy.deepcopy(self._sections[name])

    def snapshot(self) -> dict[str, Any]:
        """Deep copy of every section."""
        return copy.deepcopy(self._sections)

    def __getitem__(self, name: str) -> Any:
        self._require_populated()
        return copy.deepcopy(self._sections[name])

    def __contains__(self, name: object) -> bool:
        return name in self._sections

    def __iter__(self) -> Iterator[str]:
        return iter(self._sections)

    def __len__(self) -> int:
        return len(self._sections)

    def __repr__(self) -> str:
        return f"ContentStore(populated={self._populated}, sections={sorted(self._sections)})"
