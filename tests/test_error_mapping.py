"""
Test error mapping and CLI exit code functionality.

Validates that exceptions are correctly mapped to exit codes and that
the run_and_exit wrapper handles errors appropriately for CLI commands.
"""
from __future__ import annotations

import pytest
import typer

from s3_cloudfront_sync.errors import (
    FieldError,
    InvalidationExecutionError,
    SyncExecutionError,
    ValidationError,
)
from s3_cloudfront_sync.operations.mappers import EXIT_CODES, exit_code_for, run_and_exit


class TestExitCodeMapping:
    """Test exception to exit code mapping."""

    def test_known_exceptions_mapped_correctly(self):
        assert exit_code_for(ValidationError([FieldError("source", "must not be empty")])) == 2
        assert exit_code_for(SyncExecutionError("sync failed", exit_status=1)) == 3
        assert exit_code_for(InvalidationExecutionError("invalidation failed", exit_status=254)) == 4

    def test_value_error_is_a_configuration_error(self):
        assert exit_code_for(ValueError("bad setting")) == 2

    def test_unknown_exception_maps_to_fallback(self):
        assert exit_code_for(RuntimeError("test")) == 1
        assert exit_code_for(KeyError("test")) == 1

    def test_exit_codes_are_distinct_and_nonzero(self):
        codes = {EXIT_CODES[name] for name in ("ValidationError", "SyncExecutionError", "InvalidationExecutionError")}
        assert len(codes) == 3
        assert 0 not in EXIT_CODES.values()


class TestRunAndExit:
    """Test run_and_exit wrapper functionality."""

    def test_successful_function_returns_result(self):
        assert run_and_exit(lambda: "success result") == "success result"

    def test_exception_chaining_preserved(self):
        original_error = SyncExecutionError("sync failed", exit_status=1)

        def failing_func():
            raise original_error

        with pytest.raises(typer.Exit) as exc_info:
            run_and_exit(failing_func)

        assert exc_info.value.exit_code == 3
        assert exc_info.value.__cause__ is original_error

    def test_diagnostic_printed_to_stderr(self, capsys):
        def failing_func():
            raise ValidationError([
                FieldError("source", "must not be empty"),
                FieldError("target", "must not be empty"),
            ])

        with pytest.raises(typer.Exit):
            run_and_exit(failing_func)

        err = capsys.readouterr().err
        assert "source" in err
        assert "target" in err


class TestErrorMessages:
    """Test diagnostic text on the error classes."""

    def test_validation_error_lists_every_field(self):
        err = ValidationError([FieldError("source", "a"), FieldError("balancedLimit", "b")])

        assert err.fields == ["source", "balancedLimit"]
        assert "2 error(s)" in str(err)
        assert "balancedLimit: b" in str(err)

    def test_execution_error_includes_output(self):
        err = SyncExecutionError("Sync failed", exit_status=1, output="fatal error\n")

        assert str(err) == "Sync failed\nfatal error"

    def test_execution_error_without_output(self):
        assert str(InvalidationExecutionError("failed")) == "failed"
