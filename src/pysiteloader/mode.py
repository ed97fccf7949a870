"""Display mode of the resume page."""

from __future__ import annotations

from enum import StrEnum

from pysiteloader._constants import MODE_QUERY_PARAM
from pysiteloader.page import Page


class DisplayMode(StrEnum):
    """``standard`` multi-section layout or the condensed ``one-page`` layout.

    Unrecognised values resolve to ``STANDARD`` instead of raising.
    """

    STANDARD = "standard"
    ONE_PAGE = "one-page"

    @classmethod
    def _missing_(cls, value: object) -> DisplayMode:
        return cls.STANDARD

    @property
    def body_class(self) -> str:
        return f"mode-{self.value}"


def mode_from_page(page: Page) -> DisplayMode:
    """Read the initial mode from the ``mode`` query parameter."""
    return DisplayMode(page.query_param(MODE_QUERY_PARAM) or DisplayMode.STANDARD)
