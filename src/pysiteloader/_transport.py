"""Section transports: HTTP via aiohttp, or a local directory."""

from __future__ import annotations

import asyncio
import json
import logging
from pathlib import Path
from typing import Any, Protocol

import aiohttp

from pysiteloader.exceptions import SiteFetchError

_logger = logging.getLogger(__name__)


def section_file_name(section: str) -> str:
    return f"{section}.json"


def is_http_base(base_path: str) -> bool:
    return base_path.startswith(("http://", "https://"))


def _decode_section(section: str, location: str, text: str) -> dict[str, Any]:
    try:
        data = json.loads(text)
    except json.JSONDecodeError as exc:
        raise SiteFetchError(
            f"Invalid JSON in {location}: {text[:200]}",
            section=section,
            url=location,
        ) from exc
    if not isinstance(data, dict):
        raise SiteFetchError(
            f"Expected a JSON object in {location}, got {type(data).__name__}",
            section=section,
            url=location,
        )
    return data


class Transport(Protocol):
    """Structural transport interface used by the loader.

    Having a protocol here makes it easy to pass test doubles while keeping
    the production implementations concrete.
    """

    async def fetch_section(self, section: str) -> dict[str, Any]:
        ...


class HttpTransport:
    """Fetch ``<base_url><section>.json`` over HTTP."""

    def __init__(self, base_url: str, http_session: aiohttp.ClientSession) -> None:
        self._base_url = base_url if base_url.endswith("/") else base_url + "/"
        self._http = http_session

    async def fetch_section(self, section: str) -> dict[str, Any]:
        url = f"{self._base_url}{section_file_name(section)}"
        _logger.debug("GET %s", url)

        try:
            async with self._http.get(url, headers={"accept": "application/json"}) as resp:
                text = await resp.text()
                if not 200 <= resp.status < 300:
                    raise SiteFetchError(
                        f"Failed to load {section_file_name(section)}: HTTP {resp.status}",
                        section=section,
                        status_code=resp.status,
                        url=url,
                    )
        except SiteFetchError:
            raise
        except (aiohttp.ClientError, TimeoutError, UnicodeDecodeError) as exc:
            raise SiteFetchError(
                f"Request for {section_file_name(section)} failed: {exc}",
                section=section,
                url=url,
            ) from exc

        return _decode_section(section, url, text)


class FileTransport:
    """Read ``<base_dir>/<section>.json`` from the local filesystem."""

    def __init__(self, base_dir: str | Path) -> None:
        self._base_dir = Path(base_dir)

    async def fetch_section(self, section: str) -> dict[str, Any]:
        path = self._base_dir / section_file_name(section)
        _logger.debug("READ %s", path)

        try:
            text = await asyncio.to_thread(path.read_text, encoding="utf-8")
        except FileNotFoundError as exc:
            raise SiteFetchError(
                f"Failed to load {section_file_name(section)}: not found",
                section=section,
                status_code=404,
                url=str(path),
            ) from exc
        except (OSError, UnicodeDecodeError) as exc:
            raise SiteFetchError(
                f"Failed to load {section_file_name(section)}: {exc}",
                section=section,
                url=str(path),
            ) from exc

        return _decode_section(section, str(path), text)
