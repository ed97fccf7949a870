"""Page bootstrap and CV mode switching."""

from __future__ import annotations

import logging
from typing import Any

from pysiteloader._constants import MODE_QUERY_PARAM, MODE_SELECTOR_ID, ONE_PAGE_SECTION_ID, STANDARD_SECTION_ID
from pysiteloader.config import SiteConfig
from pysiteloader.coordinator import ReinitCoordinator, UiBehaviors
from pysiteloader.exceptions import SiteFetchError
from pysiteloader.loader import SiteLoader
from pysiteloader.mode import DisplayMode, mode_from_page
from pysiteloader.page import Page, add_class, remove_class, set_style
from pysiteloader.render import (
    render_header,
    render_menu_footer,
    render_metadata,
    render_navigation,
    render_page_footer,
)
from pysiteloader.store import ContentStore

_logger = logging.getLogger(__name__)


def _dig(data: Any, *path: str) -> Any:
    for key in path:
        if not isinstance(data, dict):
            return None
        data = data.get(key)
    return data


def select_menu(store: ContentStore, page_name: str, config: SiteConfig) -> list[Any] | None:
    """Pick the menu for a page.

    Main pages get ``site.navigation.main_menu``; every other page gets
    ``details_menu``. On the print view the first ``Home`` entry links back
    to the index. The store itself is never modified: the override is
    applied to the copy handed out.
    """
    site = store.section("site")
    if page_name in config.main_menu_pages:
        menu = _dig(site, "navigation", "main_menu")
        if page_name == config.print_view_page and isinstance(menu, list):
            for item in menu:
                if isinstance(item, dict) and str(item.get("label", "")).startswith("Home"):
                    item["url"] = config.print_view_home_url
                    break
    else:
        menu = _dig(site, "navigation", "details_menu")
    return menu if isinstance(menu, list) else None


def render_site(page: Page, store: ContentStore, config: SiteConfig) -> None:
    """Run every renderer once against a populated store."""
    site = store.section("site")
    render_metadata(page, _dig(site, "site_info"))
    render_header(page, store.section("personal_info"), site)
    render_menu_footer(page, _dig(site, "footer_meta"), _dig(site, "assets"))
    render_page_footer(page, _dig(site, "footer_meta"))
    render_navigation(page, select_menu(store, page.file_name, config))


async def initialize_site(
    page: Page,
    loader: SiteLoader,
    behaviors: UiBehaviors | None = None,
) -> bool:
    """Load content, render it and re-bind behaviors.

    Returns ``False`` and leaves the page in its static state when the load
    fails.
    """
    try:
        store = await loader.load()
    except SiteFetchError:
        _logger.exception("Site content could not be loaded, keeping static page")
        return False

    _logger.info("Rendering site with loaded data")
    render_site(page, store, loader.config)
    ReinitCoordinator(page, behaviors).reinitialize()
    _logger.info("Dynamic rendering complete")
    return True


class SiteController:
    """Owns one page, its loader and the current display mode.

    Usage::

        controller = SiteController(page, SiteLoader(config))
        await controller.start()
        await controller.switch_mode("one-page")
    """

    def __init__(
        self,
        page: Page,
        loader: SiteLoader,
        behaviors: UiBehaviors | None = None,
    ) -> None:
        self._page = page
        self._loader = loader
        self._behaviors = behaviors
        self._coordinator = ReinitCoordinator(page, behaviors)
        self._mode = mode_from_page(page)

        selector = page.by_id(MODE_SELECTOR_ID)
        if selector is not None:
            page.set_control_value(selector, self._mode.value)

    @property
    def page(self) -> Page:
        return self._page

    @property
    def store(self) -> ContentStore:
        return self._loader.store

    @property
    def mode(self) -> DisplayMode:
        return self._mode

    async def initialize(self) -> bool:
        return await initialize_site(self._page, self._loader, self._behaviors)

    async def start(self) -> bool:
        """Apply the initial layout, then load and render."""
        self._apply_layout(self._mode)
        return await self.initialize()

    def _apply_layout(self, mode: DisplayMode) -> bool:
        standard = self._page.by_id(STANDARD_SECTION_ID)
        one_page = self._page.by_id(ONE_PAGE_SECTION_ID)
        if standard is None or one_page is None:
            return False

        one_page_active = mode is DisplayMode.ONE_PAGE
        set_style(standard, "display", "none" if one_page_active else "block")
        set_style(one_page, "display", "block" if one_page_active else "none")

        body = self._page.body
        if body is not None:
            inactive = DisplayMode.STANDARD if one_page_active else DisplayMode.ONE_PAGE
            add_class(body, mode.body_class)
            remove_class(body, inactive.body_class)

        self._page.set_query_param(MODE_QUERY_PARAM, mode.value)
        selector = self._page.by_id(MODE_SELECTOR_ID)
        if selector is not None:
            self._page.set_control_value(selector, mode.value)
        self._mode = mode
        return True

    async def switch_mode(self, target: str | DisplayMode) -> bool:
        """Switch layouts and re-render the navigation.

        A no-op returning ``False`` unless both layout containers exist.
        Waits for the store to be populated, so it is safe to call while the
        initial load is still running. The menu variant follows the page
        identity, not the mode.
        """
        mode = DisplayMode(target)
        _logger.debug("Switching CV to %s", mode)
        if not self._apply_layout(mode):
            return False

        await self.store.wait_ready()
        render_navigation(self._page, select_menu(self.store, self._page.file_name, self._loader.config))
        self._coordinator.reinitialize()
        return True
