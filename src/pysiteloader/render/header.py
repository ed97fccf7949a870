"""Page metadata and sidebar header renderers."""

from __future__ import annotations

import logging
from typing import Any

from pysiteloader._constants import HEADER_ID, SOCIAL_LINK_DENYLIST
from pysiteloader.models.site import PersonalInfo, SiteInfo, SiteSection, SocialLink
from pysiteloader.page import Page
from pysiteloader.render._common import validate_slice
from pysiteloader.render._templates import render_template

_logger = logging.getLogger(__name__)


def render_metadata(page: Page, site_info: Any) -> bool:
    """Set the document title from ``site.site_info``."""
    info = validate_slice(SiteInfo, site_info)
    if info is None or not info.title:
        return False
    page.title = info.title
    return True


def visible_social_links(links: list[SocialLink]) -> list[SocialLink]:
    return [link for link in links if link.platform not in SOCIAL_LINK_DENYLIST]


def render_header(page: Page, personal_info: Any, site: Any) -> bool:
    """Fill ``#header``: site name, profile image, logo and social links.

    Each part is written only if its element exists inside the header.
    """
    person = validate_slice(PersonalInfo, personal_info)
    site_section = validate_slice(SiteSection, site)
    header = page.by_id(HEADER_ID)
    if person is None or site_section is None or header is None:
        return False

    name_el = header.select_one(".sitename")
    if name_el is not None:
        name_el.string = person.name

    assets = site_section.assets
    if assets is not None:
        profile_img = header.select_one(".profile-img img")
        if profile_img is not None and assets.images.profile_image_pp:
            profile_img["src"] = assets.images.profile_image_pp

        logo_img = header.select_one(".logo img")
        if logo_img is not None and assets.icons.logo_png:
            logo_img["src"] = assets.icons.logo_png

    social_el = header.select_one(".social-links")
    if social_el is not None and site_section.social_links is not None:
        links = visible_social_links(site_section.social_links.main)
        page.set_inner_html(social_el, render_template("social_links.html", links=links))

    _logger.debug("Rendered header for %s", person.name)
    return True
