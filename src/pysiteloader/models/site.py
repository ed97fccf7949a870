"""Typed views of the ``site`` and ``personal_info`` sections.

Renderers validate the slice they need through these models; a slice that
does not validate is treated as malformed and the renderer does nothing.
"""

from __future__ import annotations

from pydantic import Field

from pysiteloader._constants import AUTO_YEAR
from pysiteloader.models._base import SiteBaseModel, Text


class SiteInfo(SiteBaseModel):
    title: Text


class CacheSettings(SiteBaseModel):
    expiration_seconds: float | None = None


class ImageAssets(SiteBaseModel):
    profile_image_pp: Text | None = None


class IconAssets(SiteBaseModel):
    logo_png: Text | None = None


class Assets(SiteBaseModel):
    images: ImageAssets = Field(default_factory=ImageAssets)
    icons: IconAssets = Field(default_factory=IconAssets)


class SocialLink(SiteBaseModel):
    platform: Text
    url: Text
    icon_class: Text = ""


class SocialLinks(SiteBaseModel):
    main: list[SocialLink] = Field(default_factory=list)


class MenuItem(SiteBaseModel):
    """One navigation entry.

    ``submenu`` is only rendered when ``is_dropdown`` is set and the list is
    non-empty.
    """

    label: Text
    url: Text
    icon_class: Text = ""
    is_dropdown: bool = False
    submenu: list[MenuItem] = Field(default_factory=list)

    @property
    def has_submenu(self) -> bool:
        return self.is_dropdown and bool(self.submenu)


class Navigation(SiteBaseModel):
    main_menu: list[MenuItem] = Field(default_factory=list)
    details_menu: list[MenuItem] = Field(default_factory=list)


class FooterLink(SiteBaseModel):
    label: Text
    url: Text


class MenuFooter(SiteBaseModel):
    """Sidebar footer content.

    ``copyright_year`` is either a literal year or ``AUTO`` (any case),
    which renders the current calendar year.
    """

    copyright_year: Text = AUTO_YEAR
    copyright_owner: Text = ""
    copyright_logo_link: Text = ""
    copyright_text_link: Text = ""
    links: list[FooterLink] = Field(default_factory=list)


class PageFooter(SiteBaseModel):
    sitename: Text = ""
    design_credit: Text = ""
    design_link: Text = ""


class FooterMeta(SiteBaseModel):
    menu_footer: MenuFooter | None = None
    main_page_footer: PageFooter | None = None


class SiteSection(SiteBaseModel):
    """The ``site`` section: metadata, assets, navigation, footers."""

    site_info: SiteInfo | None = None
    cache_settings: CacheSettings | None = None
    assets: Assets | None = None
    social_links: SocialLinks | None = None
    navigation: Navigation | None = None
    footer_meta: FooterMeta | None = None


class PersonalInfo(SiteBaseModel):
    name: Text
