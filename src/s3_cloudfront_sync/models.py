"""
Data models for sync results and invalidation plans.

ChangeRecord values come from parsing sync output; an InvalidationPlan is
the only thing the invalidation request needs.
"""
from __future__ import annotations

from enum import Enum
from typing import Tuple, Union

from pydantic import BaseModel, ConfigDict, Field

WILDCARD_PATH = "/*"


class ChangeKind(str, Enum):
    """What the sync did to an object."""
    ADDED = "added"
    UPDATED = "updated"
    DELETED = "deleted"


class ChangeRecord(BaseModel):
    """One object touched by a sync."""
    model_config = ConfigDict(frozen=True)

    path: str = Field(..., description="CDN path of the object, always starting with '/'")
    kind: ChangeKind = Field(..., description="Kind of change")


class Wildcard(BaseModel):
    """Invalidate the entire distribution."""
    model_config = ConfigDict(frozen=True)

    @property
    def paths(self) -> Tuple[str, ...]:
        return (WILDCARD_PATH,)

    def is_empty(self) -> bool:
        return False


class PathSet(BaseModel):
    """Invalidate exactly these paths. An empty set means no request at all."""
    model_config = ConfigDict(frozen=True)

    paths: Tuple[str, ...] = Field(default=(), description="Distinct paths in first-seen order")

    def is_empty(self) -> bool:
        return not self.paths


InvalidationPlan = Union[Wildcard, PathSet]


__all__ = [
    "WILDCARD_PATH",
    "ChangeKind",
    "ChangeRecord",
    "Wildcard",
    "PathSet",
    "InvalidationPlan",
]
