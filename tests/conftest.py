"""Root pytest configuration for s3-cloudfront-sync tests."""
import pytest

from s3_cloudfront_sync.schema import env_name
from s3_cloudfront_sync.settings import Settings

FIELDS = (
    "source",
    "target",
    "s3args",
    "cfargs",
    "invalidationStrategy",
    "balancedLimit",
    "distribution",
)


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    """Keep the host's INPUT_* and S3CF_* variables out of every test."""
    for field in FIELDS:
        monkeypatch.delenv(env_name(field), raising=False)
    for key in ("S3CF_AWS_CLI", "S3CF_COMMAND_TIMEOUT", "S3CF_LOG_LEVEL"):
        monkeypatch.delenv(key, raising=False)


@pytest.fixture
def valid_env(tmp_path):
    """A complete, valid input mapping."""
    return {
        env_name("source"): str(tmp_path),
        env_name("target"): "s3://dawd/",
        env_name("s3args"): "--one --two",
        env_name("cfargs"): "--one --two",
        env_name("invalidationStrategy"): "balanced",
        env_name("balancedLimit"): "6",
        env_name("distribution"): "test",
    }


@pytest.fixture
def settings():
    """Standard test settings."""
    return Settings(aws_cli="aws")
