"""Core base class for built value objects."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict


class DomainModel(BaseModel):
    """Frozen value object with strict validation; no type coercion on input."""

    model_config = ConfigDict(frozen=True, extra="forbid", strict=True)
