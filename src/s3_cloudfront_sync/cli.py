"""
s3-cloudfront-sync CLI

Verbs:
- deploy: Sync the source directory and invalidate what changed
- plan: Dry-run the sync and show the invalidation that would follow
- check-config: Validate inputs and print the resolved configuration

Inputs come from INPUT_* environment variables (see ``schema.env_name``).
"""
from __future__ import annotations

import logging

import typer
from rich.console import Console
from rich.logging import RichHandler

from .cli_context import CLIContext
from .operations import run_and_exit
from .operations.printers import print_configuration, print_deploy_summary

app = typer.Typer(name="s3-cloudfront-sync", help="Sync a directory to S3 and invalidate CloudFront")


def _configure_logging(level: int) -> None:
    root = logging.getLogger()
    for handler in list(root.handlers):
        if isinstance(handler, RichHandler):
            root.removeHandler(handler)
    root.addHandler(RichHandler(console=Console(stderr=True), show_path=False))
    root.setLevel(level)


def _context(verbose: bool) -> CLIContext:
    context = CLIContext.from_env()
    _configure_logging(logging.DEBUG if verbose else context.settings.log_level_value)
    return context


@app.command()
def deploy(
    verbose: bool = typer.Option(False, "--verbose", help="Show debug logging")
) -> None:
    """Sync the source directory and invalidate changed paths."""

    def _deploy() -> None:
        ops = _context(verbose).operations()
        result = ops.deploy()
        print_deploy_summary(result)

    run_and_exit(_deploy)


@app.command()
def plan(
    verbose: bool = typer.Option(False, "--verbose", help="Show debug logging")
) -> None:
    """Dry-run the sync and show what would be invalidated."""

    def _plan() -> None:
        ops = _context(verbose).operations()
        result = ops.preview()
        print_deploy_summary(result)

    run_and_exit(_plan)


@app.command("check-config")
def check_config() -> None:
    """Validate inputs and print the resolved configuration."""

    def _check() -> None:
        config = _context(False).configuration()
        print_configuration(config)

    run_and_exit(_check)


def main() -> None:
    """CLI entry point."""
    app()


if __name__ == "__main__":
    main()
