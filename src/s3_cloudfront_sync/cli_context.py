"""
CLI Context for managing application dependencies.

Builds the run configuration, tool settings and command adapters once per
CLI invocation, so commands receive everything by injection.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Mapping, Optional

from .adapters.aws_cli import AwsCliInvalidator, AwsCliSync
from .adapters.base import Invalidator, SyncRunner
from .operations import Operations
from .schema import Configuration, parse_input
from .settings import Settings, create_settings_from_env


@dataclass
class CLIContext:
    """
    Shared context for CLI commands.

    Adapters are created lazily from settings unless injected.
    """
    settings: Settings
    env: Optional[Mapping[str, str]] = None
    _sync: Optional[SyncRunner] = None
    _invalidator: Optional[Invalidator] = None

    @classmethod
    def from_env(cls) -> CLIContext:
        """Create CLI context from environment variables."""
        return cls(settings=create_settings_from_env())

    def configuration(self) -> Configuration:
        """Validate run inputs; raises ValidationError listing every bad field."""
        return parse_input(self.env)

    @property
    def sync(self) -> SyncRunner:
        if self._sync is None:
            self._sync = AwsCliSync(self.settings)
        return self._sync

    @property
    def invalidator(self) -> Invalidator:
        if self._invalidator is None:
            self._invalidator = AwsCliInvalidator(self.settings)
        return self._invalidator

    def operations(self) -> Operations:
        return Operations(config=self.configuration(), sync=self.sync, invalidator=self.invalidator)
