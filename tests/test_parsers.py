import pytest

from objstore_proxy.parsers import ParseError, parse_path, parse_token_from_header


def test_parse_token_from_header():
    header = (
        "AWS4-HMAC-SHA256 Credential=MYLOCAL123/20250417/eu-west-3/s3/aws4_request, "
        "SignedHeaders=host;x-amz-content-sha256;x-amz-date, "
        "Signature=ec323a7db4d0b8bd27eced3b2bb0d59f9b9dd"
    )
    assert parse_token_from_header(header) == "MYLOCAL123"


def test_parse_token_wrong_prefix():
    with pytest.raises(ParseError):
        parse_token_from_header("Bearer token")


def test_parse_token_without_scope():
    with pytest.raises(ParseError):
        parse_token_from_header("AWS4-HMAC-SHA256 Credential=token")


def test_parse_path_with_bucket_and_path():
    assert parse_path("/bucket_name/some/path") == ("bucket_name", "/some/path")


def test_parse_path_with_bucket_only():
    assert parse_path("/bucket_name") == ("bucket_name", "/")


def test_parse_path_with_empty_input():
    with pytest.raises(ParseError):
        parse_path("")


def test_parse_path_with_no_leading_slash():
    with pytest.raises(ParseError):
        parse_path("bucket_name/some/path")


def test_parse_path_with_trailing_slash():
    assert parse_path("/bucket_name/") == ("bucket_name", "/")


def test_parse_path_with_multiple_slashes_in_path():
    assert parse_path("/bucket_name/some//path") == ("bucket_name", "/some//path")


def test_parse_path_with_special_characters_in_bucket():
    assert parse_path("/bucket-name_123/some/path") == ("bucket-name_123", "/some/path")


def test_parse_path_with_special_characters_in_path():
    assert parse_path("/bucket_name/some/path-with_special.chars") == (
        "bucket_name",
        "/some/path-with_special.chars",
    )


def test_parse_path_with_no_bucket():
    with pytest.raises(ParseError):
        parse_path("//some/path")