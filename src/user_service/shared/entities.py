"""Immutable domain entities."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field

INT64_MIN = -(2**63)
INT64_MAX = 2**63 - 1


class User(BaseModel):
    """A single row of the ``users`` table, detached from any session."""

    model_config = ConfigDict(frozen=True)

    id: int = Field(ge=INT64_MIN, le=INT64_MAX)
    name: str | None = None
    email: str | None = None
