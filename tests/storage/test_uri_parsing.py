"""
Tests for S3 URI parsing.
"""
from __future__ import annotations

import pytest

from s3_cloudfront_sync.storage.uri import ParsedS3URI, parse_s3_uri


class TestParseS3URI:
    """Test parse_s3_uri function."""

    def test_bucket_root(self):
        result = parse_s3_uri("s3://dawd/")

        assert result == ParsedS3URI(bucket="dawd", key="", original="s3://dawd/")
        assert result.cdn_path == "/"

    def test_nested_key(self):
        result = parse_s3_uri("s3://my-bucket/site/assets/app.js")

        assert result.bucket == "my-bucket"
        assert result.key == "site/assets/app.js"
        assert result.cdn_path == "/site/assets/app.js"

    def test_case_and_trailing_slash_preserved(self):
        assert parse_s3_uri("s3://Bucket/Prefix/").key == "Prefix/"

    def test_empty_uri_raises(self):
        with pytest.raises(ValueError, match="URI cannot be empty"):
            parse_s3_uri("")

    @pytest.mark.parametrize("uri", ["s4://bucket/", "S3://bucket/", "bucket/key", "https://bucket/"])
    def test_wrong_scheme_raises(self, uri):
        with pytest.raises(ValueError, match="must start with"):
            parse_s3_uri(uri)

    @pytest.mark.parametrize("uri", ["s3://foobar", "s3://", "s3://my bucket/"])
    def test_missing_separator_raises(self, uri):
        with pytest.raises(ValueError, match="expected s3://"):
            parse_s3_uri(uri)

    @pytest.mark.parametrize("uri", ["s3:///", "s3:///key", "s3://ab/"])
    def test_short_bucket_raises(self, uri):
        with pytest.raises(ValueError, match="at least 3 characters"):
            parse_s3_uri(uri)
