"""Re-initialisation of UI behaviors after a render.

Rendering replaces DOM nodes, so anything bound to the old nodes has to be
bound again. The dropdown binder is ours; the remaining behaviors belong to
the surrounding page and are injected as optional callbacks.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass, fields

from pysiteloader.page import Page
from pysiteloader.render.navigation import bind_nav_dropdowns

_logger = logging.getLogger(__name__)

Behavior = Callable[[Page], None]


@dataclass(frozen=True, slots=True)
class UiBehaviors:
    """Optional page behaviors re-run after every render.

    ``None`` means the page does not provide the behavior.
    """

    scroll_spy: Behavior | None = None
    typed_animation: Behavior | None = None
    animate_on_scroll: Behavior | None = None
    pure_counter: Behavior | None = None


class ReinitCoordinator:
    """Re-bind dropdowns and re-run every provided behavior."""

    def __init__(self, page: Page, behaviors: UiBehaviors | None = None) -> None:
        self._page = page
        self._behaviors = behaviors or UiBehaviors()

    @property
    def behaviors(self) -> UiBehaviors:
        return self._behaviors

    def reinitialize(self) -> list[str]:
        """Run the behaviors; return the names that ran successfully."""
        bind_nav_dropdowns(self._page)
        ran = ["dropdowns"]

        for field in fields(self._behaviors):
            behavior: Behavior | None = getattr(self._behaviors, field.name)
            if behavior is None:
                _logger.warning("%s behavior not provided, skipping", field.name)
                continue
            try:
                behavior(self._page)
            except Exception:
                _logger.exception("%s behavior failed", field.name)
                continue
            ran.append(field.name)

        _logger.debug("Re-initialised behaviors: %s", ", ".join(ran))
        return ran
