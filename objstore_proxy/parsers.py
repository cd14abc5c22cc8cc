"""Parsers for request paths and AWS SigV4 authorization headers."""

__all__ = ["ParseError", "parse_path", "parse_token_from_header", "CREDENTIAL_PREFIX"]

CREDENTIAL_PREFIX = "AWS4-HMAC-SHA256 Credential="


class ParseError(ValueError):
    """Raised when input does not match the expected grammar."""


def parse_path(path):
    """Split a request path into its bucket and the object path.

    ``"/bucket/some/key"`` gives ``("bucket", "/some/key")``; a path with
    only a bucket, with or without a trailing slash, gives ``"/"`` as the
    object path.
    """
    if not path.startswith("/"):
        raise ParseError(f"path must start with '/': {path!r}")
    bucket, _, rest = path[1:].partition("/")
    if not bucket:
        raise ParseError(f"path has no bucket: {path!r}")
    return bucket, ("/" + rest if rest else "/")


def parse_token_from_header(header):
    """Return the access key id from a SigV4 ``Authorization`` header."""
    if not header.startswith(CREDENTIAL_PREFIX):
        raise ParseError("header does not start with the SigV4 credential prefix")
    token, separator, _ = header[len(CREDENTIAL_PREFIX):].partition("/")
    if not separator:
        raise ParseError("credential scope is missing from the header")
    return token