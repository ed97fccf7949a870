"""Renderers: each writes one content slice into one mount point.

Every renderer returns ``True`` when it changed the page and ``False`` when
its mount point is missing or its input is absent or malformed.
"""

from pysiteloader.render.footer import copyright_year, render_menu_footer, render_page_footer
from pysiteloader.render.header import render_header, render_metadata
from pysiteloader.render.navigation import bind_nav_dropdowns, render_navigation

__all__ = [
    "bind_nav_dropdowns",
    "copyright_year",
    "render_header",
    "render_menu_footer",
    "render_metadata",
    "render_navigation",
    "render_page_footer",
]
