"""Data models for site content."""

from pysiteloader.models._base import SiteBaseModel
from pysiteloader.models.site import (
    Assets,
    CacheSettings,
    FooterLink,
    FooterMeta,
    IconAssets,
    ImageAssets,
    MenuFooter,
    MenuItem,
    Navigation,
    PageFooter,
    PersonalInfo,
    SiteInfo,
    SiteSection,
    SocialLink,
    SocialLinks,
)
from pysiteloader.models.snapshot import CachedSnapshot

__all__ = [
    "Assets",
    "CacheSettings",
    "CachedSnapshot",
    "FooterLink",
    "FooterMeta",
    "IconAssets",
    "ImageAssets",
    "MenuFooter",
    "MenuItem",
    "Navigation",
    "PageFooter",
    "PersonalInfo",
    "SiteBaseModel",
    "SiteInfo",
    "SiteSection",
    "SocialLink",
    "SocialLinks",
]
