"""Test doubles for the command adapters."""
from .fake_runners import FakeInvalidator, FakeSyncRunner

__all__ = ["FakeInvalidator", "FakeSyncRunner"]
