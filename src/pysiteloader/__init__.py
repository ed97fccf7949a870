"""pysiteloader - Cache-aware content loader and renderer for a static portfolio site."""

from importlib.metadata import PackageNotFoundError, version

try:
    __version__ = version("pysiteloader")
except PackageNotFoundError:
    __version__ = "0+local"
from pysiteloader.cache import CacheDecision, CacheGate
from pysiteloader.config import SiteConfig
from pysiteloader.coordinator import ReinitCoordinator, UiBehaviors
from pysiteloader.exceptions import (
    ContentStoreError,
    SiteCacheError,
    SiteConfigError,
    SiteFetchError,
    SiteLoaderError,
)
from pysiteloader.loader import SiteLoader
from pysiteloader.mode import DisplayMode
from pysiteloader.models import CachedSnapshot
from pysiteloader.page import Page
from pysiteloader.site import SiteController, initialize_site, select_menu
from pysiteloader.storage import JsonFileStorage, MemoryStorage, SnapshotRepository
from pysiteloader.store import ContentStore

__all__ = [
    "__version__",
    "CacheDecision",
    "CacheGate",
    "CachedSnapshot",
    "ContentStore",
    "ContentStoreError",
    "DisplayMode",
    "JsonFileStorage",
    "MemoryStorage",
    "Page",
    "ReinitCoordinator",
    "SiteCacheError",
    "SiteConfig",
    "SiteConfigError",
    "SiteController",
    "SiteFetchError",
    "SiteLoader",
    "SiteLoaderError",
    "SnapshotRepository",
    "UiBehaviors",
    "initialize_site",
    "select_menu",
]
