import pytest

from objstore_proxy.validator import ValidationError, validate_request

HEADER = (
    "AWS4-HMAC-SHA256 Credential=token/20250417/eu-west-3/s3/aws4_request, "
    "SignedHeaders=host, Signature=token"
)


def test_callback_receives_token_and_bucket():
    calls = []

    def callback(token, bucket):
        calls.append((token, bucket))
        return True

    assert validate_request(HEADER, "bucket01", callback) is True
    assert calls == [("token", "bucket01")]


def test_callback_denies():
    assert validate_request(HEADER, "bucket01", lambda t, b: False) is False


def test_empty_header():
    with pytest.raises(ValidationError, match="Header is empty"):
        validate_request("", "bucket01", lambda t, b: True)


def test_invalid_header_format():
    with pytest.raises(ValidationError, match="Invalid header format"):
        validate_request("Bearer token", "bucket01", lambda t, b: True)


def test_unparseable_token():
    with pytest.raises(ValidationError, match="Failed to parse token"):
        validate_request("AWS4-HMAC-SHA256 Credential=token", "bucket01", lambda t, b: True)


def test_callback_exception_is_wrapped():
    def callback(token, bucket):
        raise KeyError(bucket)

    with pytest.raises(ValidationError, match="inner Python exception") as info:
        validate_request(HEADER, "bucket01", callback)
    assert isinstance(info.value.__cause__, KeyError)


@pytest.mark.parametrize("result", [1, "yes", None])
def test_non_bool_result(result):
    with pytest.raises(ValidationError, match="Failed to extract boolean"):
        validate_request(HEADER, "bucket01", lambda t, b: result)