"""Persisted cache snapshot model."""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator

from pysiteloader._constants import SNAPSHOT_SCHEMA_VERSION


class CachedSnapshot(BaseModel):
    """A complete copy of the content store plus its capture time.

    Parameters
    ----------
    schema_version : int
        Layout version of the persisted record. Records written with a
        different version are rejected.
    captured_at_ms : int
        Epoch milliseconds when the content was fetched.
    sections : dict
        Section name -> parsed JSON document.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    schema_version: int = SNAPSHOT_SCHEMA_VERSION
    captured_at_ms: int
    sections: dict[str, Any] = Field(default_factory=dict)

    @field_validator("schema_version")
    @classmethod
    def _check_version(cls, value: int) -> int:
        if value != SNAPSHOT_SCHEMA_VERSION:
            raise ValueError(f"unsupported snapshot schema version {value}")
        return value
