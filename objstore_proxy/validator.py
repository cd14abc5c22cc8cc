"""Request authorization through a user-supplied callback."""

import logging

from .parsers import CREDENTIAL_PREFIX, ParseError, parse_token_from_header

__all__ = ["ValidationError", "validate_request"]

log = logging.getLogger(__name__)


class ValidationError(Exception):
    """Raised when a request cannot be validated."""


def validate_request(header, bucket, callback):
    """Ask ``callback(token, bucket)`` whether the request is authorized.

    The token is the access key id taken from the SigV4 header. The
    callback must return a ``bool``.
    """
    if not header:
        raise ValidationError("Header is empty")
    if not header.startswith(CREDENTIAL_PREFIX):
        raise ValidationError("Invalid header format")
    try:
        token = parse_token_from_header(header)
    except ParseError as err:
        raise ValidationError("Failed to parse token") from err

    try:
        result = callback(token, bucket)
    except Exception as err:
        log.error("Validator callback raised an exception: %r", err)
        raise ValidationError(
            "Failed to call callback due to an inner Python exception"
        ) from err

    if not isinstance(result, bool):
        raise ValidationError("Failed to extract boolean from Python callback")
    log.info("Callback returned: %s", result)
    return result