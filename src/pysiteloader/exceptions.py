"""Custom exception hierarchy for pysiteloader."""

from __future__ import annotations


class SiteLoaderError(Exception):
    """Base exception for all pysiteloader errors."""


class SiteConfigError(SiteLoaderError):
    """Invalid or missing configuration."""


class SiteCacheError(SiteLoaderError):
    """Stored cache snapshot is missing fields or cannot be parsed.

    Only raised by the snapshot codec. :class:`~pysiteloader.cache.CacheGate`
    catches it and treats the cache as a miss.
    """


class SiteFetchError(SiteLoaderError):
    """A section fetch failed (network, non-2xx, missing file, invalid JSON).

    One failing section fails the whole load.
    """

    def __init__(
        self,
        message: str,
        *,
        section: str = "",
        status_code: int | None = None,
        url: str = "",
    ) -> None:
        self.section = section
        self.status_code = status_code
        self.url = url
        super().__init__(message)


class ContentStoreError(SiteLoaderError):
    """Content store used out of order (read before load, second load)."""
