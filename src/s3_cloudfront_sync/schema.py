"""
Input schema for a deployment run.

Turns the flat string mapping handed over by the CI runner into a frozen,
fully validated Configuration. Every field is checked independently so a
single failed run reports all of its problems at once.
"""
from __future__ import annotations

import os
import re
from enum import Enum
from pathlib import Path
from typing import Any, Dict, Mapping, Optional, Tuple

import pydantic
from pydantic import BaseModel, ConfigDict, Field, field_validator

from .errors import FieldError, ValidationError
from .storage.uri import S3_SCHEME, parse_s3_uri

__all__ = [
    "ENV_PREFIX",
    "DEFAULT_S3ARGS",
    "DEFAULT_BALANCED_LIMIT",
    "InvalidationStrategy",
    "Configuration",
    "env_name",
    "parse_input",
]

ENV_PREFIX = "INPUT_"

DEFAULT_S3ARGS: Tuple[str, ...] = ("--size-only",)
DEFAULT_BALANCED_LIMIT = 5

_INTEGER_PATTERN = re.compile(r"^[+-]?\d+$")


class InvalidationStrategy(str, Enum):
    """How aggressively to collapse changed paths into a wildcard."""
    FRUGAL = "frugal"
    BALANCED = "balanced"


def _split_args(value: str) -> Tuple[str, ...]:
    return tuple(value.split())


def _as_text(value: Any) -> str:
    if value is None:
        return ""
    return str(value).strip()


class Configuration(BaseModel):
    """
    Validated inputs for one deployment run.

    Instances are immutable and internally consistent; consumers never
    re-validate. Build them with ``parse_input`` (or ``model_validate`` on a
    mapping of raw strings keyed by field name).
    """
    model_config = ConfigDict(frozen=True, populate_by_name=True)

    source: str = Field(..., description="Local directory, or s3://<bucket>/[prefix], to sync from")
    target: str = Field(..., description="Destination, s3://<bucket>/[prefix]")
    s3args: Tuple[str, ...] = Field(default=DEFAULT_S3ARGS, description="Extra arguments for the sync")
    cfargs: Tuple[str, ...] = Field(default=(), description="Extra arguments for the invalidation request")
    invalidation_strategy: InvalidationStrategy = Field(
        default=InvalidationStrategy.BALANCED,
        alias="invalidationStrategy",
        description="Invalidation strategy",
    )
    balanced_limit: int = Field(
        default=DEFAULT_BALANCED_LIMIT,
        gt=0,
        alias="balancedLimit",
        description="Max distinct paths invalidated individually under BALANCED",
    )
    distribution: Optional[str] = Field(default=None, description="CDN distribution id override")

    @field_validator("source", mode="before")
    @classmethod
    def validate_source(cls, v):
        """Source is an existing local path, or an s3 URI for bucket-to-bucket syncs."""
        value = _as_text(v)
        if not value:
            raise ValueError("must not be empty")
        if value.startswith(S3_SCHEME):
            parse_s3_uri(value)
            return value
        if not Path(value).exists():
            raise ValueError(f"path does not exist: {value}")
        return value

    @field_validator("target", mode="before")
    @classmethod
    def validate_target(cls, v):
        """Target must be an s3 URI; only surrounding whitespace is removed."""
        value = _as_text(v)
        if not value:
            raise ValueError("must not be empty")
        parse_s3_uri(value)
        return value

    @field_validator("s3args", mode="before")
    @classmethod
    def validate_s3args(cls, v):
        if isinstance(v, (list, tuple)):
            return tuple(v) or DEFAULT_S3ARGS
        return _split_args(_as_text(v)) or DEFAULT_S3ARGS

    @field_validator("cfargs", mode="before")
    @classmethod
    def validate_cfargs(cls, v):
        if isinstance(v, (list, tuple)):
            return tuple(v)
        return _split_args(_as_text(v))

    @field_validator("invalidation_strategy", mode="before")
    @classmethod
    def validate_strategy(cls, v):
        if isinstance(v, InvalidationStrategy):
            return v
        value = _as_text(v).lower()
        if not value:
            return InvalidationStrategy.BALANCED
        try:
            return InvalidationStrategy(value)
        except ValueError:
            choices = ", ".join(s.value for s in InvalidationStrategy)
            raise ValueError(f"must be one of {choices}, got {_as_text(v)!r}") from None

    @field_validator("balanced_limit", mode="before")
    @classmethod
    def validate_balanced_limit(cls, v):
        """Whole base-10 number; the positivity check is the field's gt=0."""
        if isinstance(v, int) and not isinstance(v, bool):
            return v
        value = _as_text(v)
        if not value:
            return DEFAULT_BALANCED_LIMIT
        if not _INTEGER_PATTERN.match(value):
            raise ValueError(f"must be a whole number, got {value!r}")
        return int(value, 10)

    @field_validator("distribution", mode="before")
    @classmethod
    def validate_distribution(cls, v):
        return _as_text(v) or None


# Field name -> alias used in error locations
_FIELD_NAMES: Dict[str, str] = {
    name: (info.alias or name) for name, info in Configuration.model_fields.items()
}


def env_name(field: str) -> str:
    """
    Environment key for a configuration field.

    Accepts either the Python field name or its camelCase alias:

        >>> env_name("balanced_limit")
        'INPUT_BALANCEDLIMIT'
        >>> env_name("invalidationStrategy")
        'INPUT_INVALIDATIONSTRATEGY'
    """
    name = _FIELD_NAMES.get(field, field)
    if name not in _FIELD_NAMES.values():
        raise KeyError(f"Unknown configuration field: {field}")
    return f"{ENV_PREFIX}{name.upper()}"


def parse_input(env: Optional[Mapping[str, str]] = None) -> Configuration:
    """
    Build a Configuration from a flat string mapping.

    Args:
        env: Mapping of environment keys (see ``env_name``) to raw strings.
            Reads ``os.environ`` when omitted. Missing keys count as empty.

    Returns:
        Validated, immutable Configuration

    Raises:
        ValidationError: Listing every field that failed, never just the first
    """
    if env is None:
        env = os.environ

    raw = {alias: env.get(env_name(alias), "") for alias in _FIELD_NAMES.values()}

    try:
        return Configuration.model_validate(raw)
    except pydantic.ValidationError as e:
        raise ValidationError(_field_errors(e)) from e


def _field_errors(exc: pydantic.ValidationError) -> list[FieldError]:
    errors = []
    for err in exc.errors():
        loc = err.get("loc") or ("configuration",)
        message = err.get("msg", "invalid value")
        # pydantic prefixes messages raised from validators
        if message.startswith("Value error, "):
            message = message[len("Value error, "):]
        errors.append(FieldError(field=str(loc[0]), message=message))
    return errors
