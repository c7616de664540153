"""
Error classes for s3-cloudfront-sync.

Three failure kinds reach the process boundary: invalid configuration,
a failed sync, and a failed invalidation request. Each carries enough
diagnostic text to be printed as-is.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import List, Optional


@dataclass(frozen=True)
class FieldError:
    """A single configuration field that failed validation."""
    field: str
    message: str

    def __str__(self) -> str:
        return f"{self.field}: {self.message}"


class DeployError(Exception):
    """Base class for all deployment errors."""
    pass


class ValidationError(DeployError, ValueError):
    """
    One or more configuration fields failed validation.

    Raised before any external command runs. ``errors`` lists every
    violated field, not only the first one found.
    """

    def __init__(self, errors: List[FieldError]):
        self.errors = list(errors)
        lines = "\n".join(f"  - {e}" for e in self.errors)
        super().__init__(f"Invalid configuration ({len(self.errors)} error(s)):\n{lines}")

    @property
    def fields(self) -> List[str]:
        """Names of the fields that failed, in report order."""
        return [e.field for e in self.errors]


class _ExecutionError(DeployError):

    def __init__(self, message: str, exit_status: Optional[int] = None, output: str = ""):
        super().__init__(message)
        self.exit_status = exit_status
        self.output = output

    def __str__(self) -> str:
        base = super().__str__()
        if self.output:
            return f"{base}\n{self.output.rstrip()}"
        return base


class SyncExecutionError(_ExecutionError):
    """
    The external sync reported failure.

    No invalidation is planned or requested after this error.
    """
    pass


class InvalidationExecutionError(_ExecutionError):
    """
    The external invalidation request failed after a successful sync.

    The sync is not rolled back: object storage already holds the new
    content while the CDN may still serve stale copies.
    """
    pass


__all__ = [
    "FieldError",
    "DeployError",
    "ValidationError",
    "SyncExecutionError",
    "InvalidationExecutionError",
]
