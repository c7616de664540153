"""
SyncRunner and Invalidator backed by the AWS CLI.

Credentials, retries and API details are left to the CLI. Both adapters
report every failure, including an executable that cannot start or a timeout, as a
failed CommandResult.
"""
from __future__ import annotations

import logging
import subprocess
from typing import List, Optional, Sequence
from urllib.parse import quote

from ..models import InvalidationPlan, Wildcard
from ..settings import Settings
from .base import CommandResult, Invalidator, SyncRunner

logger = logging.getLogger(__name__)

__all__ = ["AwsCliSync", "AwsCliInvalidator", "cdn_paths", "run_command"]


def run_command(argv: List[str], timeout_s: Optional[float] = None) -> CommandResult:
    """
    Run a command and capture its output.

    Args:
        argv: Command and arguments
        timeout_s: Optional timeout in seconds

    Returns:
        CommandResult; exit_status is None if the command could not run
    """
    logger.debug(f"Running: {' '.join(argv)}")
    try:
        proc = subprocess.run(
            argv,
            capture_output=True,
            text=True,
            check=False,
            timeout=timeout_s,
        )
    except FileNotFoundError as e:
        return CommandResult(stdout="", exit_status=None, stderr=f"command not found: {e.filename or argv[0]}")
    except OSError as e:
        return CommandResult(stdout="", exit_status=None, stderr=f"cannot run {argv[0]}: {e}")
    except subprocess.TimeoutExpired as e:
        stdout = e.stdout.decode() if isinstance(e.stdout, bytes) else (e.stdout or "")
        return CommandResult(stdout=stdout, exit_status=None, stderr=f"timed out after {timeout_s}s")

    logger.debug(f"{argv[0]} exited with status {proc.returncode}")
    return CommandResult(stdout=proc.stdout or "", exit_status=proc.returncode, stderr=proc.stderr or "")


def cdn_paths(plan: InvalidationPlan) -> List[str]:
    """
    Paths as CloudFront expects them.

    Unsafe and non-ASCII characters are percent-encoded, and so is a literal
    '*' in a key, which CloudFront would otherwise read as a wildcard.
    """
    if isinstance(plan, Wildcard):
        return list(plan.paths)
    return [quote(path, safe="/") for path in plan.paths]


class AwsCliSync(SyncRunner):
    """Runs ``aws s3 sync``."""

    def __init__(self, settings: Settings) -> None:
        self._settings = settings

    def build_command(self, source: str, target: str, extra_args: Sequence[str]) -> List[str]:
        return [self._settings.aws_cli, "s3", "sync", source, target, *extra_args]

    def run_sync(self, source: str, target: str, extra_args: Sequence[str]) -> CommandResult:
        argv = self.build_command(source, target, extra_args)
        logger.info(f"Syncing {source} to {target}")
        return run_command(argv, timeout_s=self._settings.command_timeout_s)


class AwsCliInvalidator(Invalidator):
    """Runs ``aws cloudfront create-invalidation``."""

    def __init__(self, settings: Settings) -> None:
        self._settings = settings

    def build_command(
        self,
        distribution: Optional[str],
        plan: InvalidationPlan,
        extra_args: Sequence[str],
    ) -> List[str]:
        if plan.is_empty():
            raise ValueError("Refusing to build an invalidation request without paths")

        argv = [self._settings.aws_cli, "cloudfront", "create-invalidation"]
        if distribution:
            argv += ["--distribution-id", distribution]
        argv += ["--paths", *cdn_paths(plan)]
        argv += list(extra_args)
        return argv

    def request_invalidation(
        self,
        distribution: Optional[str],
        plan: InvalidationPlan,
        extra_args: Sequence[str],
    ) -> CommandResult:
        argv = self.build_command(distribution, plan, extra_args)
        logger.info(f"Requesting invalidation of {len(plan.paths)} path(s)")
        return run_command(argv, timeout_s=self._settings.command_timeout_s)
