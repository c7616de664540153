"""
Operations Facade - Application service layer.

Sequences a deployment: sync, parse its output, plan the invalidation and
submit it. Holds no policy of its own beyond ordering and error
propagation; every decision lives in ``planner`` and ``schema``.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import List

from ..adapters.base import Invalidator, SyncRunner
from ..errors import InvalidationExecutionError, SyncExecutionError
from ..models import ChangeRecord, InvalidationPlan
from ..planner import plan_invalidation
from ..schema import Configuration
from ..sync_output import parse_sync_output

logger = logging.getLogger(__name__)

DRYRUN_FLAG = "--dryrun"


@dataclass(frozen=True)
class DeployResult:
    """
    Outcome of a deployment run.

    invalidated is False when the plan was empty or the run was a preview.
    """
    changes: List[ChangeRecord]
    plan: InvalidationPlan
    invalidated: bool


class Operations:
    """
    Application service facade for CLI operations.

    The facade is stateless apart from the injected configuration and
    adapters, so tests swap in fakes for both external commands.
    Exceptions bubble up unchanged for central exit-code mapping.
    """

    def __init__(self, config: Configuration, sync: SyncRunner, invalidator: Invalidator):
        """
        Initialize Operations facade.

        Args:
            config: Validated run configuration
            sync: Adapter performing the sync
            invalidator: Adapter submitting invalidation requests
        """
        self.cfg = config
        self.sync = sync
        self.invalidator = invalidator

    def deploy(self) -> DeployResult:
        """
        Sync, then invalidate what changed.

        A sync run with --dryrun in s3args uploads nothing, so it is never
        followed by an invalidation request.

        Returns:
            DeployResult with the parsed changes and the plan that was applied

        Raises:
            SyncExecutionError: Sync failed; nothing was invalidated
            InvalidationExecutionError: Sync succeeded but the request failed
        """
        changes, plan = self._sync_and_plan(self.cfg.s3args)

        if plan.is_empty():
            logger.info("No changes to invalidate; skipping invalidation request")
            return DeployResult(changes=changes, plan=plan, invalidated=False)

        if DRYRUN_FLAG in self.cfg.s3args:
            logger.warning(f"{DRYRUN_FLAG} is set in s3args; nothing was uploaded, skipping invalidation")
            return DeployResult(changes=changes, plan=plan, invalidated=False)

        result = self.invalidator.request_invalidation(self.cfg.distribution, plan, self.cfg.cfargs)
        if not result.ok:
            logger.error(f"Invalidation request failed with status {result.exit_status}")
            raise InvalidationExecutionError(
                "Invalidation request failed after a successful sync",
                exit_status=result.exit_status,
                output=result.diagnostics,
            )

        logger.info(f"Invalidated {len(plan.paths)} path(s)")
        return DeployResult(changes=changes, plan=plan, invalidated=True)

    def preview(self) -> DeployResult:
        """
        Dry run: report what a deploy would change and invalidate.

        The sync runs with ``--dryrun``; no invalidation is ever requested.
        """
        s3args = self.cfg.s3args
        if DRYRUN_FLAG not in s3args:
            s3args = (*s3args, DRYRUN_FLAG)

        changes, plan = self._sync_and_plan(s3args)
        return DeployResult(changes=changes, plan=plan, invalidated=False)

    def _sync_and_plan(self, s3args):
        result = self.sync.run_sync(self.cfg.source, self.cfg.target, s3args)
        if not result.ok:
            logger.error(f"Sync failed with status {result.exit_status}")
            raise SyncExecutionError(
                f"Sync of {self.cfg.source} to {self.cfg.target} failed",
                exit_status=result.exit_status,
                output=result.diagnostics,
            )

        changes = parse_sync_output(result.stdout)
        plan = plan_invalidation(changes, self.cfg.invalidation_strategy, self.cfg.balanced_limit)
        logger.debug(f"Planned {type(plan).__name__} for {len(changes)} change(s)")
        return changes, plan
