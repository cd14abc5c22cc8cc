# objstore-proxy

The decision-making core of a proxy in front of a cloud object store. It reads
path-style requests (`/bucket/key`), checks them with a validator you supply,
and works out which upstream host each request goes to and how the request is
rewritten on the way.

The package has no dependencies outside the standard library.

## Installation

```
pip install objstore-proxy
```

For running the tests:

```
pip install "objstore-proxy[test]"
pytest
```

## Parsing requests (`objstore_proxy.parsers`)

```python
from objstore_proxy.parsers import parse_path, parse_token_from_header

parse_path("/my-bucket/some/key")      # ("my-bucket", "/some/key")
parse_path("/my-bucket")               # ("my-bucket", "/")
parse_path("/my-bucket/")              # ("my-bucket", "/")
parse_path("/my-bucket/some//key")     # ("my-bucket", "/some//key")

header = (
    "AWS4-HMAC-SHA256 Credential=MYLOCAL123/20250417/eu-west-3/s3/aws4_request, "
    "SignedHeaders=host;x-amz-content-sha256;x-amz-date, Signature=..."
)
parse_token_from_header(header)        # "MYLOCAL123"
```

`parse_path` raises `ParseError` (a `ValueError`) when the path does not start
with `/` or has no bucket. `parse_token_from_header` raises `ParseError` when
the header does not start with `CREDENTIAL_PREFIX`
(`"AWS4-HMAC-SHA256 Credential="`) or has no `/` after the access key id.

## Validating requests (`objstore_proxy.validator`)

```python
from objstore_proxy.validator import validate_request

def allow(token, bucket):
    return token == "MYLOCAL123" and bucket == "bucket01"

validate_request(header, "bucket01", allow)   # True
```

The callback is called as `callback(token, bucket)` with the access key id
from the header, and must return a `bool`. `ValidationError` is raised for an
empty header, a header in the wrong format, a callback that raises, or a
callback that returns something other than a `bool`.

## Configuration (`objstore_proxy.config`)

The bucket map is a list of `(bucket, host, port, instance, api_key)` tuples;
`api_key` may be `None`:

```python
from objstore_proxy.config import ProxyServerConfig, parse_cos_map

mapping = parse_cos_map([
    ("bucket01", "s3.example.com", 443, "instance-1", "placeholder"),
])
mapping["bucket01"].host      # "s3.example.com"
```

- Each entry becomes a frozen `CosMapItem(host, port, instance, api_key)`.
  Later entries for the same bucket replace earlier ones.
- `parse_cos_map` raises `TypeError` when it is not given a sequence of
  5-tuples or a field has the wrong type, and `OverflowError` for a port
  outside 0–65535.
- `ProxyServerConfig` is a dataclass holding `bucket_creds_fetcher`,
  `cos_map`, `port` (default `DEFAULT_PORT`, 6190) and `validator`.
- `fetch_api_key_for_bucket(callback, bucket)` calls `callback(bucket)` and
  returns the string it gives back. It raises `CallbackError` (a
  `RuntimeError`) when the callback raises, and `TypeError` when the callback
  does not return a `str`.

## Routing (`objstore_proxy.routing`)

```python
from objstore_proxy.routing import Router

router = Router(mapping, "s3.eu-de.cloud-object-storage.appdomain.cloud", allow)

router.authorize("/bucket01/key", header)        # True or False
peer = router.upstream_peer("/bucket01/key")
peer.host, peer.port, peer.tls, peer.verify_cert  # ("s3.example.com", 443, True, False)

target = router.upstream_target("/bucket01/key", "x=1")
target.authority        # "bucket01.s3.example.com"
target.path_and_query   # "/key?x=1"
target.url              # "https://bucket01.s3.example.com/key?x=1"
target.host_header      # same as authority
target.api_key          # "placeholder"
```

- `Router(cos_mapping=None, cos_endpoint=DEFAULT_COS_ENDPOINT, validator=None)`.
- `authorize` returns `True` when no validator is set. Otherwise it runs
  `validate_request` with the bucket from the path, and turns a
  `ValidationError` into `RoutingError`.
- `upstream_peer` returns an `UpstreamPeer`: the bucket's mapped host, or
  `<bucket>.<cos_endpoint>` for buckets that are not in the map, on port 443
  (`UPSTREAM_PORT`) over TLS with certificate checks off. Each call adds one to
  `router.request_count`.
- `upstream_target` returns an `UpstreamTarget` with authority
  `<bucket>.<host>`, the object path plus `?query` when the query is not empty,
  and the bucket's API key. It raises `RoutingError` when the bucket has no API
  key, and that includes any bucket that is not in the map.
- A path that cannot be parsed makes all three methods raise `RoutingError`.

## What this package does not do

It does not listen on a port or forward any traffic: there is no server and no
command to start. `ProxyServerConfig` only holds settings. `upstream_target`
hands back the bucket's API key, but does not exchange it for a bearer token
or cache such tokens; a server built on this package has to do that and set
the `Authorization` header itself.