"""Sync a local directory to S3 and invalidate the CloudFront paths that changed."""
from .errors import InvalidationExecutionError, SyncExecutionError, ValidationError
from .models import ChangeKind, ChangeRecord, InvalidationPlan, PathSet, Wildcard
from .planner import plan_invalidation
from .schema import Configuration, InvalidationStrategy, env_name, parse_input
from .sync_output import parse_sync_output

__version__ = "0.1.0"

__all__ = [
    "ChangeKind",
    "ChangeRecord",
    "Configuration",
    "InvalidationExecutionError",
    "InvalidationPlan",
    "InvalidationStrategy",
    "PathSet",
    "SyncExecutionError",
    "ValidationError",
    "Wildcard",
    "env_name",
    "parse_input",
    "parse_sync_output",
    "plan_invalidation",
]
