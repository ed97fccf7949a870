"""Loader configuration for pysiteloader."""

from __future__ import annotations

import dataclasses
import os
from typing import Any

from pysiteloader._constants import (
    DEFAULT_BASE_PATH,
    DEFAULT_EXPIRATION_SECONDS,
    MAIN_MENU_PAGES,
    PRINT_VIEW_HOME_URL,
    PRINT_VIEW_PAGE,
    SECTION_NAMES,
)
from pysiteloader.exceptions import SiteConfigError


def _env_int(name: str, value: str) -> int:
    try:
        return int(value.strip())
    except ValueError as exc:
        raise SiteConfigError(f"{name} must be an integer, got {value!r}") from exc


@dataclasses.dataclass(frozen=True)
class SiteConfig:
    """Loader configuration.

    Parameters
    ----------
    base_path : str
        Directory or ``http(s)://`` URL holding the ``<section>.json`` files.
        Defaults to ``./assets/data/``.
    sections : tuple of str
        Section names to load. Each maps to ``<name>.json``.
    cache_path : str or None
        JSON file backing the local cache. ``None`` keeps the cache in memory
        for the lifetime of the process.
    default_expiration_seconds : int
        Cache lifetime used when ``site.cache_settings.expiration_seconds``
        is missing from the cached data.
    main_menu_pages : frozenset of str
        Page file names that render the main menu. Every other page renders
        the details menu.
    print_view_page : str
        Page file name whose ``Home`` menu entry points back to the index.
    print_view_home_url : str
        Target URL for that ``Home`` entry.
    """

    base_path: str = DEFAULT_BASE_PATH
    sections: tuple[str, ...] = SECTION_NAMES
    cache_path: str | None = None
    default_expiration_seconds: int = DEFAULT_EXPIRATION_SECONDS
    main_menu_pages: frozenset[str] = MAIN_MENU_PAGES
    print_view_page: str = PRINT_VIEW_PAGE
    print_view_home_url: str = PRINT_VIEW_HOME_URL

    def __post_init__(self) -> None:
        if not self.sections:
            raise SiteConfigError("at least one section is required")
        if self.default_expiration_seconds <= 0:
            raise SiteConfigError(
                f"default_expiration_seconds must be positive, got {self.default_expiration_seconds}"
            )

    @classmethod
    def from_env(cls, **overrides: Any) -> SiteConfig:
        """Create configuration from environment variables.

        Reads ``SITE_BASE_PATH``, ``SITE_CACHE_PATH`` and
        ``SITE_CACHE_EXPIRATION``. Explicit keyword arguments override
        environment values.
        """
        env = os.environ
        config_kwargs: dict[str, Any] = {}

        base_path = env.get("SITE_BASE_PATH")
        if base_path:
            config_kwargs["base_path"] = base_path

        cache_path = env.get("SITE_CACHE_PATH")
        if cache_path:
            config_kwargs["cache_path"] = cache_path

        expiration = env.get("SITE_CACHE_EXPIRATION")
        if expiration is not None and "default_expiration_seconds" not in overrides:
            config_kwargs["default_expiration_seconds"] = _env_int("SITE_CACHE_EXPIRATION", expiration)

        sections = overrides.get("sections")
        if sections is not None and not isinstance(sections, tuple):
            overrides["sections"] = tuple(sections)

        config_kwargs.update(overrides)
        return cls(**config_kwargs)
