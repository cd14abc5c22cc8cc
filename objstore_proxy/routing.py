"""Per-request routing decisions: authorization and upstream selection."""

import logging
import threading
from dataclasses import dataclass

from .parsers import ParseError, parse_path
from .validator import ValidationError, validate_request

__all__ = [
    "DEFAULT_COS_ENDPOINT",
    "UPSTREAM_PORT",
    "RoutingError",
    "UpstreamPeer",
    "UpstreamTarget",
    "Router",
]

log = logging.getLogger(__name__)

DEFAULT_COS_ENDPOINT = "s3.eu-de.cloud-object-storage.appdomain.cloud"
UPSTREAM_PORT = 443


class RoutingError(Exception):
    """Raised when a request cannot be routed upstream."""


@dataclass(frozen=True)
class UpstreamPeer:
    """The TLS connection to open for a request."""

    host: str
    sni: str
    port: int = UPSTREAM_PORT
    tls: bool = True
    verify_cert: bool = False


@dataclass(frozen=True)
class UpstreamTarget:
    """How the request is rewritten before it is sent upstream."""

    bucket: str
    authority: str
    path_and_query: str
    api_key: str
    scheme: str = "https"

    @property
    def host_header(self):
        return self.authority

    @property
    def url(self):
        return f"{self.scheme}://{self.authority}{self.path_and_query}"


class Router:
    """Routes requests of the form ``/<bucket>/<key>`` to object storage."""

    def __init__(self, cos_mapping=None, cos_endpoint=DEFAULT_COS_ENDPOINT, validator=None):
        self.cos_mapping = dict(cos_mapping or {})
        self.cos_endpoint = cos_endpoint
        self.validator = validator
        self.request_count = 0
        self._lock = threading.Lock()

    @staticmethod
    def _bucket_and_key(path):
        try:
            return parse_path(path)
        except ParseError as err:
            log.error("Failed to parse path %r: %s", path, err)
            raise RoutingError("Failed to parse path") from err

    def authorize(self, path, authorization):
        """Return whether the request may proceed; without a validator, always."""
        bucket, _ = self._bucket_and_key(path)
        if self.validator is None:
            return True
        try:
            return validate_request(authorization or "", bucket, self.validator)
        except ValidationError as err:
            raise RoutingError("Validator failed") from err

    def upstream_peer(self, path):
        """Choose the upstream host to connect to for ``path``."""
        with self._lock:
            self.request_count += 1
        bucket, _ = self._bucket_and_key(path)
        config = self.cos_mapping.get(bucket)
        endpoint = config.host if config is not None else f"{bucket}.{self.cos_endpoint}"
        log.debug("Upstream endpoint: %s", endpoint)
        return UpstreamPeer(host=endpoint, sni=endpoint)

    def upstream_target(self, path, query=None):
        """Work out the rewritten upstream request for ``path`` and ``query``."""
        bucket, key = self._bucket_and_key(path)
        config = self.cos_mapping.get(bucket)
        host = config.host if config is not None else self.cos_endpoint
        api_key = config.api_key if config is not None else None
        if api_key is None:
            log.error("No API key configured for bucket: %s", bucket)
            raise RoutingError("No API key configured for bucket")
        suffix = f"?{query}" if query else ""
        return UpstreamTarget(
            bucket=bucket,
            authority=f"{bucket}.{host}",
            path_and_query=key + suffix,
            api_key=api_key,
        )