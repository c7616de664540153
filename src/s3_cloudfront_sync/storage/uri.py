"""
S3 URI parsing.

Used both to validate the sync target and to turn object URIs printed by
the sync tool back into CDN paths.
"""
from __future__ import annotations

from dataclasses import dataclass
import re

__all__ = ["MIN_BUCKET_LENGTH", "ParsedS3URI", "parse_s3_uri"]

S3_SCHEME = "s3://"

# S3 bucket names are 3-63 characters
MIN_BUCKET_LENGTH = 3

_S3_URI_PATTERN = re.compile(r"^s3://([^/\s]*)/(.*)$")


@dataclass(frozen=True)
class ParsedS3URI:
    """
    Parsed components of an S3 URI.

    Attributes:
        bucket: Bucket name
        key: Object key or key prefix (may be empty)
        original: Original URI string for error messages
    """
    bucket: str
    key: str
    original: str

    @property
    def cdn_path(self) -> str:
        """Path of the object as served from the distribution root."""
        return "/" + self.key


def parse_s3_uri(uri: str) -> ParsedS3URI:
    """
    Parse and validate an ``s3://bucket/key`` URI.

    The slash after the bucket is required; the key may be empty, so
    ``s3://bucket/`` addresses the bucket root.

    Args:
        uri: S3 URI to parse

    Returns:
        ParsedS3URI with validated components

    Raises:
        ValueError: If the scheme, bucket or separator is missing or malformed

    Examples:
        >>> parse_s3_uri("s3://mybucket/site/index.html").key
        'site/index.html'

        >>> parse_s3_uri("s3://mybucket/").key
        ''
    """
    if not uri:
        raise ValueError("URI cannot be empty")

    if not uri.startswith(S3_SCHEME):
        raise ValueError(f"must start with '{S3_SCHEME}': {uri}")

    match = _S3_URI_PATTERN.match(uri)
    if not match:
        raise ValueError(f"expected {S3_SCHEME}<bucket>/[prefix]: {uri}")

    bucket, key = match.groups()
    if len(bucket) < MIN_BUCKET_LENGTH:
        raise ValueError(
            f"bucket name must be at least {MIN_BUCKET_LENGTH} characters: {uri}"
        )

    return ParsedS3URI(bucket=bucket, key=key, original=uri)
