"""Navigation menu renderer and dropdown binder."""

from __future__ import annotations

import logging
from typing import Any

from pydantic import TypeAdapter, ValidationError

from pysiteloader._constants import NAVMENU_ID
from pysiteloader.models.site import MenuItem
from pysiteloader.page import DomEvent, Page, toggle_class
from pysiteloader.render._templates import render_template

_logger = logging.getLogger(__name__)

_MENU_ADAPTER: TypeAdapter[list[MenuItem]] = TypeAdapter(list[MenuItem])

#: Items pointing here start out highlighted.
_HOME_TARGETS = frozenset({"#hero", "./"})

DROPDOWN_TOGGLE_SELECTOR = f"#{NAVMENU_ID} .dropdown > a"
DROPDOWN_LISTENER_KEY = "navmenu-dropdowns"


def link_class(item: MenuItem) -> str:
    return "active scrollto" if item.url in _HOME_TARGETS else "scrollto"


def parse_menu(menu: Any) -> list[MenuItem] | None:
    if not isinstance(menu, list):
        return None
    try:
        return _MENU_ADAPTER.validate_python(menu)
    except ValidationError as exc:
        _logger.debug("Skipping navigation render, menu is malformed: %s", exc)
        return None


def render_navigation(page: Page, menu: Any) -> bool:
    """Replace the contents of ``#navmenu`` with *menu*.

    *menu* is the ``main_menu`` or ``details_menu`` array. The whole inner
    content is replaced, so rendering the same menu twice gives the same
    document as rendering it once.
    """
    items = parse_menu(menu)
    container = page.by_id(NAVMENU_ID)
    if items is None or container is None:
        return False

    html = render_template("navigation.html", items=items, link_class=link_class)
    page.set_inner_html(container, html)
    _logger.debug("Rendered navigation with %d items", len(items))
    return True


def _toggle_dropdown(event: DomEvent) -> None:
    anchor = event.current_target
    if anchor is None:
        return
    event.prevent_default()
    event.stop_propagation()

    toggle_class(anchor, "active")
    submenu = anchor.find_next_sibling()
    if submenu is not None and submenu.name == "ul":
        toggle_class(submenu, "dropdown-active")


def bind_nav_dropdowns(page: Page) -> None:
    """Make every ``#navmenu`` dropdown toggle open and close its submenu.

    Bound once by delegation from the document under a fixed key, so it
    covers nodes rendered later and re-binding replaces the old handler.
    """
    page.on("click", DROPDOWN_TOGGLE_SELECTOR, _toggle_dropdown, key=DROPDOWN_LISTENER_KEY)
