"""Cache freshness decision.

The expiration policy travels inside the cached data itself
(``site.cache_settings.expiration_seconds``), so it is read from the
candidate snapshot before that snapshot is trusted.
"""

from __future__ import annotations

import logging
import time
from collections.abc import Callable, Iterable
from dataclasses import dataclass
from typing import Any

from pysiteloader._constants import DEFAULT_EXPIRATION_SECONDS
from pysiteloader.exceptions import SiteCacheError
from pysiteloader.storage import SnapshotRepository

_logger = logging.getLogger(__name__)


def now_ms() -> int:
    """Current epoch timestamp in milliseconds."""
    return int(time.time() * 1000)


def expiration_seconds_from(sections: dict[str, Any], default: float = DEFAULT_EXPIRATION_SECONDS) -> float:
    """Read ``site.cache_settings.expiration_seconds``.

    Missing, zero, negative or non-numeric values fall back to *default*.
    """
    site = sections.get("site")
    settings = site.get("cache_settings") if isinstance(site, dict) else None
    value = settings.get("expiration_seconds") if isinstance(settings, dict) else None
    if isinstance(value, bool) or not isinstance(value, (int, float)) or value <= 0:
        return default
    return float(value)


def is_fresh(elapsed_ms: float, expiration_seconds: float) -> bool:
    """Strict comparison: an entry exactly at its expiration is stale.

    A negative *elapsed_ms* (clock moved backwards) counts as fresh.
    """
    return elapsed_ms < expiration_seconds * 1000


@dataclass(frozen=True, slots=True)
class CacheDecision:
    """Outcome of :meth:`CacheGate.decide`.

    ``sections`` is only set when ``use_cache`` is true.
    """

    use_cache: bool
    reason: str
    sections: dict[str, Any] | None = None
    expiration_seconds: float | None = None
    elapsed_ms: int | None = None


class CacheGate:
    """Decide whether the stored snapshot can be used instead of fetching."""

    def __init__(
        self,
        repository: SnapshotRepository,
        *,
        clock: Callable[[], int] = now_ms,
        default_expiration_seconds: float = DEFAULT_EXPIRATION_SECONDS,
    ) -> None:
        self._repository = repository
        self._clock = clock
        self._default_expiration_seconds = default_expiration_seconds

    def decide(self, required: Iterable[str] = ()) -> CacheDecision:
        """Classify the stored snapshot.

        A snapshot lacking any of the *required* section names is reported
        as ``incomplete`` and never adopted.
        """
        try:
            snapshot = self._repository.get()
        except SiteCacheError as exc:
            _logger.warning("Cache parsing failed, performing fresh fetch: %s", exc)
            return CacheDecision(use_cache=False, reason="corrupt")

        if snapshot is None:
            return CacheDecision(use_cache=False, reason="missing")

        absent = [name for name in required if name not in snapshot.sections]
        if absent:
            _logger.debug("Cached snapshot lacks sections: %s", ", ".join(absent))
            return CacheDecision(use_cache=False, reason="incomplete")

        expiration = expiration_seconds_from(snapshot.sections, self._default_expiration_seconds)
        elapsed = self._clock() - snapshot.captured_at_ms
        if not is_fresh(elapsed, expiration):
            _logger.debug("Cache expired (%d ms old, limit %ss)", elapsed, expiration)
            return CacheDecision(
                use_cache=False,
                reason="expired",
                expiration_seconds=expiration,
                elapsed_ms=elapsed,
            )

        return CacheDecision(
            use_cache=True,
            reason="fresh",
            sections=snapshot.sections,
            expiration_seconds=expiration,
            elapsed_ms=elapsed,
        )
