"""
Invalidation planning.

Decides from a list of changes which CDN paths to invalidate. Pure
computation, no I/O and no state between calls.
"""
from __future__ import annotations

import logging
from typing import Iterable, List, Sequence

from .models import ChangeRecord, InvalidationPlan, PathSet, Wildcard
from .schema import InvalidationStrategy

logger = logging.getLogger(__name__)

__all__ = ["distinct_paths", "plan_invalidation"]


def distinct_paths(changes: Iterable[ChangeRecord]) -> List[str]:
    """Changed paths with duplicates removed, first occurrence wins."""
    seen = set()
    paths = []
    for change in changes:
        if change.path not in seen:
            seen.add(change.path)
            paths.append(change.path)
    return paths


def plan_invalidation(
    changes: Sequence[ChangeRecord],
    strategy: InvalidationStrategy,
    balanced_limit: int,
) -> InvalidationPlan:
    """
    Compute the invalidation plan for a finished sync.

    Rules:
    - FRUGAL always invalidates everything with a single wildcard, even
      when nothing changed.
    - BALANCED with no changes returns an empty PathSet; callers skip the
      request entirely.
    - BALANCED invalidates the distinct changed paths individually while
      their count is at most ``balanced_limit``, otherwise a wildcard.

    Deleted objects are invalidated like added or updated ones so stale
    cached copies of removed files are dropped too.

    Args:
        changes: Change records from the sync
        strategy: Invalidation strategy
        balanced_limit: Positive threshold for BALANCED

    Returns:
        Wildcard or PathSet
    """
    if balanced_limit <= 0:
        raise ValueError(f"balanced_limit must be positive, got {balanced_limit}")

    if strategy == InvalidationStrategy.FRUGAL:
        logger.debug(f"Frugal strategy: wildcard for {len(changes)} change(s)")
        return Wildcard()

    paths = distinct_paths(changes)

    if len(paths) > balanced_limit:
        logger.info(
            f"{len(paths)} distinct paths changed, over limit {balanced_limit}; "
            "falling back to wildcard"
        )
        return Wildcard()

    return PathSet(paths=paths)
