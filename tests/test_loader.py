from __future__ import annotations

import asyncio
import json
from pathlib import Path
from typing import Any

import aiohttp
import pytest
from aiohttp import test_utils, web
from conftest import SECTIONS, FakeTransport, FrozenClock

from pysiteloader.config import SiteConfig
from pysiteloader.exceptions import ContentStoreError, SiteFetchError
from pysiteloader.loader import SiteLoader
from pysiteloader.models.snapshot import CachedSnapshot
from pysiteloader.storage import JsonFileStorage, MemoryStorage, SnapshotRepository

NOW = 1_700_000_000_000
NAMES = tuple(SECTIONS)


def _loader(transport: Any, storage: MemoryStorage, now: int = NOW) -> SiteLoader:
    config = SiteConfig(sections=NAMES)
    return SiteLoader(config, storage=storage, transport=transport, clock=FrozenClock(now))


@pytest.mark.asyncio
async def test_fresh_load_populates_every_section_and_caches() -> None:
    storage = MemoryStorage()
    transport = FakeTransport(SECTIONS)
    loader = _loader(transport, storage)

    store = await loader.load()

    assert sorted(store) == sorted(NAMES)
    assert store["site"] == SECTIONS["site"]
    assert sorted(transport.calls) == sorted(NAMES)

    snapshot = SnapshotRepository(storage).get()
    assert snapshot is not None
    assert snapshot.captured_at_ms == NOW
    assert snapshot.sections == SECTIONS


@pytest.mark.asyncio
async def test_one_failed_section_fails_the_whole_load() -> None:
    storage = MemoryStorage()
    loader = _loader(FakeTransport(SECTIONS, failures={"skills": 404}), storage)

    with pytest.raises(SiteFetchError) as excinfo:
        await loader.load()

    assert excinfo.value.section == "skills"
    assert excinfo.value.status_code == 404
    assert len(loader.store) == 0
    assert loader.store.is_populated is False
    assert len(storage) == 0


@pytest.mark.asyncio
async def test_fresh_cache_is_adopted_without_fetching() -> None:
    storage = MemoryStorage()
    SnapshotRepository(storage).set(CachedSnapshot(captured_at_ms=NOW - 10 * 60 * 1000, sections=SECTIONS))
    transport = FakeTransport({})

    store = await _loader(transport, storage).load()

    assert transport.calls == []
    assert store.snapshot() == SECTIONS


@pytest.mark.asyncio
async def test_cache_hit_does_not_refresh_snapshot() -> None:
    storage = MemoryStorage()
    stored_at = NOW - 1000
    SnapshotRepository(storage).set(CachedSnapshot(captured_at_ms=stored_at, sections=SECTIONS))

    await _loader(FakeTransport({}), storage).load()

    snapshot = SnapshotRepository(storage).get()
    assert snapshot is not None
    assert snapshot.captured_at_ms == stored_at


@pytest.mark.asyncio
async def test_expired_cache_is_refetched_and_overwritten() -> None:
    storage = MemoryStorage()
    stale = {**SECTIONS, "personal_info": {"name": "Old Name"}}
    SnapshotRepository(storage).set(CachedSnapshot(captured_at_ms=NOW - 3600 * 1000, sections=stale))
    transport = FakeTransport(SECTIONS)

    store = await _loader(transport, storage).load()

    assert store["personal_info"]["name"] == "Jane Doe"
    assert len(transport.calls) == len(NAMES)
    snapshot = SnapshotRepository(storage).get()
    assert snapshot is not None
    assert snapshot.captured_at_ms == NOW
    assert snapshot.sections["personal_info"]["name"] == "Jane Doe"


@pytest.mark.asyncio
async def test_fresh_cache_missing_sections_is_refetched() -> None:
    storage = MemoryStorage()
    SnapshotRepository(storage).set(CachedSnapshot(captured_at_ms=NOW - 1000, sections={"site": SECTIONS["site"]}))
    transport = FakeTransport(SECTIONS)

    store = await _loader(transport, storage).load()

    assert set(store) == set(SECTIONS)
    assert sorted(transport.calls) == sorted(NAMES)
    snapshot = SnapshotRepository(storage).get()
    assert snapshot is not None
    assert snapshot.sections == SECTIONS


@pytest.mark.asyncio
async def test_corrupt_cache_falls_back_to_fetch() -> None:
    storage = MemoryStorage({"site_data_cache": "{oops", "site_data_timestamp": str(NOW)})
    transport = FakeTransport(SECTIONS)

    store = await _loader(transport, storage).load()

    assert len(transport.calls) == len(NAMES)
    assert store.is_populated


@pytest.mark.asyncio
async def test_fetches_are_started_concurrently() -> None:
    started: list[str] = []
    release = asyncio.Event()

    class GatedTransport:
        async def fetch_section(self, section: str) -> dict[str, Any]:
            started.append(section)
            await release.wait()
            return {"name": section}

    loader = _loader(GatedTransport(), MemoryStorage())
    task = asyncio.create_task(loader.load())
    for _ in range(5):
        await asyncio.sleep(0)

    assert sorted(started) == sorted(NAMES)
    assert not loader.store.is_populated

    release.set()
    store = await task
    assert store["skills"] == {"name": "skills"}


@pytest.mark.asyncio
async def test_duplicate_section_names_are_fetched_once() -> None:
    transport = FakeTransport(SECTIONS)
    await _loader(transport, MemoryStorage()).load(["site", "site", "skills"])
    assert sorted(transport.calls) == ["site", "skills"]


@pytest.mark.asyncio
async def test_store_is_filled_only_once() -> None:
    loader = _loader(FakeTransport(SECTIONS), MemoryStorage())
    await loader.load()
    with pytest.raises(ContentStoreError):
        await loader.load()


# ------------------------------------------------------------------
# File transport
# ------------------------------------------------------------------


def _write_sections(base: Path, sections: dict[str, Any]) -> None:
    base.mkdir(parents=True, exist_ok=True)
    for name, body in sections.items():
        (base / f"{name}.json").write_text(json.dumps(body), encoding="utf-8")


@pytest.mark.asyncio
async def test_missing_file_fails_load_with_404(tmp_path: Path) -> None:
    base = tmp_path / "assets" / "data"
    _write_sections(base, {"site": SECTIONS["site"], "personal_info": SECTIONS["personal_info"]})
    storage = JsonFileStorage(tmp_path / "cache.json")
    loader = SiteLoader(SiteConfig(base_path=f"{base}/"), storage=storage)

    with pytest.raises(SiteFetchError) as excinfo:
        await loader.load(["site", "personal_info", "skills"])

    assert excinfo.value.section == "skills"
    assert excinfo.value.status_code == 404
    assert len(loader.store) == 0
    assert not (tmp_path / "cache.json").exists()


@pytest.mark.asyncio
async def test_file_transport_loads_directory(tmp_path: Path) -> None:
    base = tmp_path / "data"
    _write_sections(base, SECTIONS)
    loader = SiteLoader(SiteConfig(base_path=str(base), sections=NAMES), storage=MemoryStorage())

    store = await loader.load()
    assert store.snapshot() == SECTIONS


@pytest.mark.asyncio
async def test_invalid_json_fails_load(tmp_path: Path) -> None:
    base = tmp_path / "data"
    _write_sections(base, {"site": SECTIONS["site"]})
    (base / "skills.json").write_text("{broken", encoding="utf-8")
    loader = SiteLoader(SiteConfig(base_path=str(base)), storage=MemoryStorage())

    with pytest.raises(SiteFetchError, match="Invalid JSON"):
        await loader.load(["site", "skills"])


@pytest.mark.asyncio
async def test_non_object_json_fails_load(tmp_path: Path) -> None:
    base = tmp_path / "data"
    base.mkdir()
    (base / "skills.json").write_text("[1, 2, 3]", encoding="utf-8")
    loader = SiteLoader(SiteConfig(base_path=str(base)), storage=MemoryStorage())

    with pytest.raises(SiteFetchError, match="Expected a JSON object"):
        await loader.load(["skills"])


@pytest.mark.asyncio
async def test_undecodable_file_fails_load(tmp_path: Path) -> None:
    base = tmp_path / "data"
    base.mkdir()
    (base / "site.json").write_bytes(b'{"a": "\xff\xfe"}')
    loader = SiteLoader(SiteConfig(base_path=str(base)), storage=MemoryStorage())

    with pytest.raises(SiteFetchError) as excinfo:
        await loader.load(["site"])

    assert excinfo.value.section == "site"
    assert isinstance(excinfo.value.__cause__, UnicodeDecodeError)
    assert len(loader.store) == 0


# ------------------------------------------------------------------
# HTTP transport
# ------------------------------------------------------------------


def _data_app(sections: dict[str, Any]) -> web.Application:
    async def handler(request: web.Request) -> web.Response:
        name = request.match_info["name"]
        if name not in sections:
            return web.Response(status=404, text="not found")
        return web.json_response(sections[name])

    app = web.Application()
    app.router.add_get("/assets/data/{name}.json", handler)
    return app


@pytest.mark.asyncio
async def test_http_load_fetches_every_section() -> None:
    async with test_utils.TestServer(_data_app(SECTIONS)) as server:
        base = str(server.make_url("/assets/data/"))
        loader = SiteLoader(SiteConfig(base_path=base, sections=NAMES), storage=MemoryStorage())
        store = await loader.load()

    assert store.snapshot() == SECTIONS


@pytest.mark.asyncio
async def test_http_404_fails_load_without_caching() -> None:
    storage = MemoryStorage()
    available = {"site": SECTIONS["site"], "personal_info": SECTIONS["personal_info"]}
    async with test_utils.TestServer(_data_app(available)) as server:
        base = str(server.make_url("/assets/data/"))
        loader = SiteLoader(SiteConfig(base_path=base), storage=storage)
        with pytest.raises(SiteFetchError) as excinfo:
            await loader.load(["site", "personal_info", "skills"])

    assert excinfo.value.status_code == 404
    assert excinfo.value.url.endswith("/assets/data/skills.json")
    assert len(loader.store) == 0
    assert len(storage) == 0


@pytest.mark.asyncio
async def test_http_undecodable_body_fails_load() -> None:
    async def handler(request: web.Request) -> web.Response:
        return web.Response(body=b'{"a": "\xff"}', content_type="application/json", charset="utf-8")

    app = web.Application()
    app.router.add_get("/assets/data/{name}.json", handler)
    async with test_utils.TestServer(app) as server:
        base = str(server.make_url("/assets/data/"))
        loader = SiteLoader(SiteConfig(base_path=base), storage=MemoryStorage())
        with pytest.raises(SiteFetchError) as excinfo:
            await loader.load(["site"])

    assert excinfo.value.section == "site"


@pytest.mark.asyncio
async def test_http_timeout_fails_load() -> None:
    async def handler(request: web.Request) -> web.Response:
        await asyncio.sleep(1)
        return web.json_response({})

    app = web.Application()
    app.router.add_get("/assets/data/{name}.json", handler)
    async with test_utils.TestServer(app) as server:
        base = str(server.make_url("/assets/data/"))
        timeout = aiohttp.ClientTimeout(total=0.05)
        async with aiohttp.ClientSession(timeout=timeout) as http_session:
            loader = SiteLoader(SiteConfig(base_path=base), storage=MemoryStorage(), session=http_session)
            with pytest.raises(SiteFetchError) as excinfo:
                await loader.load(["site"])

    assert excinfo.value.section == "site"
