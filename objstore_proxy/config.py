"""Server configuration and bucket-to-endpoint mapping."""

import logging
import operator
from collections.abc import Mapping, Sequence
from dataclasses import dataclass
from typing import Any, Callable, Optional

__all__ = [
    "CallbackError",
    "CosMapItem",
    "ProxyServerConfig",
    "parse_cos_map",
    "fetch_api_key_for_bucket",
    "DEFAULT_PORT",
]

log = logging.getLogger(__name__)

DEFAULT_PORT = 6190


class CallbackError(RuntimeError):
    """Raised when a user callback fails."""


@dataclass(frozen=True)
class CosMapItem:
    """Where one bucket lives and how to authenticate against it."""

    host: str
    port: int
    instance: str
    api_key: Optional[str] = None


@dataclass
class ProxyServerConfig:
    """Settings for starting the proxy server."""

    bucket_creds_fetcher: Optional[Callable[[str], str]] = None
    cos_map: Any = None
    port: int = DEFAULT_PORT
    validator: Optional[Callable[[str, str], bool]] = None


def _require_str(value, what):
    if not isinstance(value, str):
        raise TypeError(f"{what} must be a str, not {type(value).__name__}")
    return value


def _require_port(value):
    try:
        port = operator.index(value)
    except TypeError:
        raise TypeError(f"port must be an int, not {type(value).__name__}") from None
    if not 0 <= port <= 0xFFFF:
        raise OverflowError(f"port out of range: {port}")
    return port


def parse_cos_map(entries):
    """Build a bucket mapping from ``(bucket, host, port, instance, api_key)`` tuples.

    Later entries for the same bucket replace earlier ones.
    """
    if isinstance(entries, (str, bytes, Mapping)) or not isinstance(entries, Sequence):
        raise TypeError(f"cos map must be a sequence of tuples, not {type(entries).__name__}")

    mapping = {}
    for entry in entries:
        if not isinstance(entry, tuple) or len(entry) != 5:
            raise TypeError(f"cos map entry must be a 5-tuple: {entry!r}")
        bucket, host, port, instance, api_key = entry
        if api_key is not None:
            _require_str(api_key, "api_key")
        mapping[_require_str(bucket, "bucket")] = CosMapItem(
            host=_require_str(host, "host"),
            port=_require_port(port),
            instance=_require_str(instance, "instance"),
            api_key=api_key,
        )
    return mapping


def fetch_api_key_for_bucket(callback, bucket):
    """Call ``callback(bucket)`` and return the string it gives back."""
    try:
        content = callback(bucket)
    except Exception as err:
        log.error("Credentials callback raised an exception: %r", err)
        raise CallbackError(
            "Failed to call callback due to an inner Python exception"
        ) from err
    if not isinstance(content, str):
        raise TypeError(f"callback must return a str, not {type(content).__name__}")
    log.info("Callback returned: %s...", content[:4])
    return content