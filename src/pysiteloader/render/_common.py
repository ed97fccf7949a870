"""Shared helpers for renderer modules."""

from __future__ import annotations

import logging
from typing import Any, TypeVar

from pydantic import BaseModel, ValidationError

_logger = logging.getLogger(__name__)

M = TypeVar("M", bound=BaseModel)


def validate_slice(model: type[M], data: Any) -> M | None:
    """Validate a content slice, returning ``None`` when it is absent or malformed."""
    if data is None:
        return None
    if isinstance(data, model):
        return data
    try:
        return model.model_validate(data)
    except ValidationError as exc:
        _logger.debug("Skipping render, %s slice is malformed: %s", model.__name__, exc)
        return None
