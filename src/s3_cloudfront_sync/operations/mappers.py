"""
Exit codes for deployment failures.

Each failure kind gets its own exit status so a pipeline can tell a
misconfigured job from a failed upload or a failed cache invalidation.
"""
from __future__ import annotations

import typer
from typing import Callable, TypeVar

T = TypeVar('T')

EXIT_CODES = {
    "ValidationError": 2,
    "ValueError": 2,
    "SyncExecutionError": 3,
    "InvalidationExecutionError": 4,
}

FALLBACK_EXIT_CODE = 1


def exit_code_for(exc: BaseException) -> int:
    """
    Map exception to standardized exit code.

    - 0: Success
    - 1: Unexpected error
    - 2: Invalid configuration (ValidationError, ValueError)
    - 3: Sync failed (SyncExecutionError)
    - 4: Invalidation failed after sync (InvalidationExecutionError)
    """
    return EXIT_CODES.get(type(exc).__name__, FALLBACK_EXIT_CODE)


def run_and_exit(func: Callable[[], T]) -> T:
    """
    Run a command body and turn a failure into its exit status.

    The error text goes to stderr: every invalid field for a configuration
    error, the tool's own output for a failed sync or invalidation. The
    resulting typer.Exit is chained to the exception that caused it.

    Raises:
        typer.Exit: With the code from ``exit_code_for``
    """
    try:
        return func()
    except Exception as e:
        from .printers import print_error
        print_error(e)
        raise typer.Exit(code=exit_code_for(e)) from e
