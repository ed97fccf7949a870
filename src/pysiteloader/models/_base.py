"""Base model for site content sections.

Every content model inherits from :class:`SiteBaseModel`, which is frozen
and ignores unknown keys so content authors can add fields without breaking
rendering.
"""

from __future__ import annotations

from typing import Annotated, Any

from pydantic import BaseModel, BeforeValidator, ConfigDict


def coerce_text(value: Any) -> Any:
    """Accept numbers where text is expected (``2019`` -> ``"2019"``)."""
    if isinstance(value, bool):
        return value
    if isinstance(value, (int, float)):
        return str(value)
    return value


Text = Annotated[str, BeforeValidator(coerce_text)]
"""String field that also accepts JSON numbers."""


class SiteBaseModel(BaseModel):
    """Base for content section models."""

    model_config = ConfigDict(
        frozen=True,
        extra="ignore",
        populate_by_name=True,
    )
