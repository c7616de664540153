"""
Tool settings for s3-cloudfront-sync.

These govern how the external commands are run, not what gets deployed
(run inputs live in ``schema``). Loaded from environment variables at
context construction time with fail-fast validation.
"""
from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from typing import Mapping, Optional

__all__ = ["Settings", "create_settings_from_env"]

_LOG_LEVELS = ("CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG")


@dataclass(frozen=True)
class Settings:
    """
    Settings for the command adapters.

        aws_cli: AWS CLI executable name or path
        command_timeout_s: Timeout for each external command (None = no timeout)
        log_level: Name of the stdlib logging level for CLI output
    """
    aws_cli: str = "aws"
    command_timeout_s: Optional[float] = None
    log_level: str = "WARNING"

    def __post_init__(self):
        """Validate settings on construction."""
        if not self.aws_cli or not self.aws_cli.strip():
            raise ValueError("aws_cli is required")

        if self.command_timeout_s is not None and self.command_timeout_s <= 0:
            raise ValueError(f"command_timeout_s must be positive, got {self.command_timeout_s}")

        if self.log_level.upper() not in _LOG_LEVELS:
            raise ValueError(
                f"Invalid log_level: {self.log_level}. Use one of {', '.join(_LOG_LEVELS)}"
            )

    @property
    def log_level_value(self) -> int:
        return logging.getLevelName(self.log_level.upper())


def create_settings_from_env(env: Optional[Mapping[str, str]] = None) -> Settings:
    """
    Load settings from environment variables.

    Environment Variables:
        - S3CF_AWS_CLI (default: aws)
        - S3CF_COMMAND_TIMEOUT (optional, seconds)
        - S3CF_LOG_LEVEL (default: WARNING)

    Returns:
        Settings object with validated configuration

    Raises:
        ValueError: If a value is malformed

    Note:
        Creates a fresh Settings instance every time (no caching).
    """
    if env is None:
        env = os.environ

    timeout = env.get("S3CF_COMMAND_TIMEOUT", "").strip()
    try:
        command_timeout_s = float(timeout) if timeout else None
    except ValueError:
        raise ValueError(f"S3CF_COMMAND_TIMEOUT must be a number, got {timeout!r}") from None

    return Settings(
        aws_cli=env.get("S3CF_AWS_CLI", "").strip() or "aws",
        command_timeout_s=command_timeout_s,
        log_level=env.get("S3CF_LOG_LEVEL", "").strip() or "WARNING",
    )
