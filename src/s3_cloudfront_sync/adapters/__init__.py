"""External command adapters (sync and CDN invalidation)."""
from .base import Invalidator, SyncResult, SyncRunner

__all__ = ["Invalidator", "SyncResult", "SyncRunner"]
