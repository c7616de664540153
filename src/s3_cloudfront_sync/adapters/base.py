"""
Interfaces for the two external collaborators.

The core never runs commands itself: it asks a SyncRunner to perform the
sync and an Invalidator to submit the plan. Fakes implement these in tests.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Protocol, Sequence, runtime_checkable

from ..models import InvalidationPlan

__all__ = ["CommandResult", "SyncResult", "SyncRunner", "Invalidator"]


@dataclass(frozen=True)
class CommandResult:
    """
    Outcome of an external command.

    Invariants:
    - exit_status is None when the command could not be started or was
      cut off by a timeout; that counts as failure
    """
    stdout: str
    exit_status: Optional[int]
    stderr: str = ""

    @property
    def ok(self) -> bool:
        return self.exit_status == 0

    @property
    def diagnostics(self) -> str:
        """Everything the command printed, for error reports."""
        return "\n".join(part.rstrip() for part in (self.stdout, self.stderr) if part.strip())


SyncResult = CommandResult


@runtime_checkable
class SyncRunner(Protocol):
    """Performs the one-way sync of a local directory to object storage."""

    def run_sync(self, source: str, target: str, extra_args: Sequence[str]) -> SyncResult:
        """
        Sync ``source`` to ``target``.

        Args:
            source: Local directory
            target: s3://bucket/prefix URI
            extra_args: Additional arguments passed through to the tool

        Returns:
            Captured output and exit status. Failures are reported through
            the result, not raised.
        """
        ...


@runtime_checkable
class Invalidator(Protocol):
    """Submits an invalidation request to the CDN."""

    def request_invalidation(
        self,
        distribution: Optional[str],
        plan: InvalidationPlan,
        extra_args: Sequence[str],
    ) -> CommandResult:
        """
        Request invalidation of the paths in ``plan``.

        Args:
            distribution: Distribution id, or None to rely on ``extra_args``
            plan: Non-empty invalidation plan
            extra_args: Additional arguments passed through to the tool

        Returns:
            Captured output and exit status
        """
        ...
