"""Content loader: cache-aware, all-or-nothing section fetching."""

from __future__ import annotations

import asyncio
import logging
from collections.abc import Callable, Iterable
from typing import Any

import aiohttp

from pysiteloader._transport import FileTransport, HttpTransport, Transport, is_http_base
from pysiteloader.cache import CacheGate, now_ms
from pysiteloader.config import SiteConfig
from pysiteloader.models.snapshot import CachedSnapshot
from pysiteloader.storage import JsonFileStorage, KeyValueStorage, MemoryStorage, SnapshotRepository
from pysiteloader.store import ContentStore

_logger = logging.getLogger(__name__)


def default_storage(config: SiteConfig) -> KeyValueStorage:
    if config.cache_path:
        return JsonFileStorage(config.cache_path)
    return MemoryStorage()


class SiteLoader:
    """Fill a :class:`ContentStore` from the cache or from the data files.

    Usage::

        loader = SiteLoader(SiteConfig(base_path="./assets/data/"))
        store = await loader.load()
    """

    def __init__(
        self,
        config: SiteConfig | None = None,
        *,
        storage: KeyValueStorage | None = None,
        transport: Transport | None = None,
        session: aiohttp.ClientSession | None = None,
        clock: Callable[[], int] = now_ms,
    ) -> None:
        self._config = config or SiteConfig()
        self._storage = storage if storage is not None else default_storage(self._config)
        self._repository = SnapshotRepository(self._storage)
        self._transport = transport
        self._http_session = session
        self._clock = clock
        self._gate = CacheGate(
            self._repository,
            clock=clock,
            default_expiration_seconds=self._config.default_expiration_seconds,
        )
        self._store = ContentStore()

    @property
    def config(self) -> SiteConfig:
        return self._config

    @property
    def store(self) -> ContentStore:
        return self._store

    @property
    def repository(self) -> SnapshotRepository:
        return self._repository

    async def load(
        self,
        section_names: Iterable[str] | None = None,
        base_path: str | None = None,
    ) -> ContentStore:
        """Populate and return the store.

        A fresh cache is adopted verbatim without touching the transport.
        Otherwise every section is fetched concurrently; one failure fails
        the load with :class:`~pysiteloader.exceptions.SiteFetchError`, the
        store stays empty and nothing is cached.
        """
        names = tuple(dict.fromkeys(section_names if section_names is not None else self._config.sections))
        base = base_path if base_path is not None else self._config.base_path

        decision = self._gate.decide(names)
        if decision.use_cache and decision.sections is not None:
            _logger.info("Loading data from %ss cache", decision.expiration_seconds)
            self._store.populate(decision.sections)
            return self._store

        _logger.info("Cache %s. Starting fresh data loading from %s", decision.reason, base)
        fetched_at = self._clock()
        sections = await self._fetch_all(names, base)

        self._repository.set(CachedSnapshot(captured_at_ms=fetched_at, sections=sections))
        self._store.populate(sections)
        _logger.info("All %d sections loaded and cached", len(sections))
        return self._store

    async def _fetch_all(self, names: tuple[str, ...], base: str) -> dict[str, Any]:
        if self._transport is not None:
            return await self._gather(self._transport, names)

        if not is_http_base(base):
            return await self._gather(FileTransport(base), names)

        if self._http_session is not None:
            return await self._gather(HttpTransport(base, self._http_session), names)

        # Section fetches are never cut short by a client-side deadline.
        async with aiohttp.ClientSession(timeout=aiohttp.ClientTimeout(total=None)) as http_session:
            return await self._gather(HttpTransport(base, http_session), names)

    @staticmethod
    async def _gather(transport: Transport, names: tuple[str, ...]) -> dict[str, Any]:
        results = await asyncio.gather(
            *(transport.fetch_section(name) for name in names),
            return_exceptions=True,
        )
        # Every fetch has settled; one failure discards all results.
        for name, result in zip(names, results, strict=True):
            if isinstance(result, BaseException):
                _logger.debug("Section %s failed: %s", name, result)
                raise result
        return dict(zip(names, results, strict=True))
