"""
Operations package - Application service layer between CLI and core.

This package provides the Operations facade that sequences a deployment
run, centralizes error-to-exit-code mapping, and handles output formatting
while keeping CLI commands thin and testable.
"""
from .facade import DeployResult, Operations
from .mappers import exit_code_for, run_and_exit

__all__ = ["DeployResult", "Operations", "exit_code_for", "run_and_exit"]
