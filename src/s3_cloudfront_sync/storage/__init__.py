"""Object-storage URI helpers."""
from .uri import MIN_BUCKET_LENGTH, ParsedS3URI, parse_s3_uri

__all__ = ["MIN_BUCKET_LENGTH", "ParsedS3URI", "parse_s3_uri"]
