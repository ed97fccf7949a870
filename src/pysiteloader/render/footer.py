"""Sidebar footer and page footer renderers."""

from __future__ import annotations

import logging
from datetime import date
from typing import Any

from pysiteloader._constants import AUTO_YEAR, MENU_FOOTER_ID, PAGE_FOOTER_ID
from pysiteloader.models.site import Assets, FooterMeta
from pysiteloader.page import Page
from pysiteloader.render._common import validate_slice
from pysiteloader.render._templates import render_template

_logger = logging.getLogger(__name__)


def copyright_year(configured: str | None, today: date | None = None) -> str:
    """Resolve the copyright year.

    ``AUTO`` in any case (or no value) gives the current calendar year;
    anything else is used literally.
    """
    value = (configured or AUTO_YEAR).strip()
    if value.upper() == AUTO_YEAR:
        return str((today or date.today()).year)
    return value


def render_menu_footer(page: Page, footer_meta: Any, assets: Any, *, today: date | None = None) -> bool:
    """Fill ``#menu_footer`` from ``site.footer_meta.menu_footer``."""
    meta = validate_slice(FooterMeta, footer_meta)
    container = page.by_id(MENU_FOOTER_ID)
    if meta is None or meta.menu_footer is None or container is None:
        return False

    asset_model = validate_slice(Assets, assets) or Assets()
    footer = meta.menu_footer
    year = copyright_year(footer.copyright_year, today)
    html = render_template(
        "menu_footer.html",
        footer=footer,
        year=year,
        logo_path=asset_model.icons.logo_png or "",
    )
    page.set_inner_html(container, html)
    _logger.debug("Rendered sidebar footer for %s", year)
    return True


def render_page_footer(page: Page, footer_meta: Any) -> bool:
    """Fill ``#footer`` from ``site.footer_meta.main_page_footer``."""
    meta = validate_slice(FooterMeta, footer_meta)
    container = page.by_id(PAGE_FOOTER_ID)
    if meta is None or meta.main_page_footer is None or container is None:
        return False

    page.set_inner_html(container, render_template("page_footer.html", footer=meta.main_page_footer))
    return True
