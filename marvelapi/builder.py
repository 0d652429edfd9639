"""
URL + query string construction for the Marvel API.

Everything here is pure: no network, no environment. The three building
blocks are `build_auth_query`, `build_query` and `build_url`; `RequestBuilder`
binds them to one set of credentials, a base URL and a clock.
"""

import time
from typing import Callable, Iterable
from urllib.parse import urlencode, urlsplit

from marvelapi.config import API_BASE
from marvelapi.endpoints import RESOURCES, config_class_for
from marvelapi.errors import ConfigError
from marvelapi.filters import BOOL, IDS, INT, STR, FilterConfig, query_fields
from marvelapi.utils import marvel_hash

QueryPairs = list[tuple[str, str]]


def build_auth_query(public_key: str, private_key: str, timestamp) -> QueryPairs:
    """
    apikey / hash / ts, in the order Marvel documents them.
    hash = md5(ts + privateKey + publicKey), lowercase hex.
    """
    if not public_key or not private_key:
        raise ConfigError("Missing Marvel public or private key")

    ts = str(timestamp)
    return [
        ("apikey", public_key),
        ("hash", marvel_hash(ts, private_key, public_key)),
        ("ts", ts),
    ]


def _format_ids(key: str, value) -> str:
    # a single id, an already comma-joined string, or any iterable of ids
    if isinstance(value, bool):
        raise ConfigError(f"{key} expects ids, got {value!r}")
    if isinstance(value, int):
        return str(value)
    if isinstance(value, str):
        return value

    try:
        items = list(value)
    except TypeError:
        raise ConfigError(f"{key} expects ids, got {value!r}")
    if not items:
        raise ConfigError(f"{key} needs at least one id")

    parts = []
    for item in items:
        if isinstance(item, bool) or not isinstance(item, (int, str)):
            raise ConfigError(f"{key} expects ids, got {item!r}")
        parts.append(str(item))
    return ",".join(parts)


def format_value(key: str, kind: str, value) -> str:
    if kind == STR:
        if not isinstance(value, str):
            raise ConfigError(f"{key} expects a string, got {value!r}")
        return value
    if kind == INT:
        if isinstance(value, bool) or not isinstance(value, int):
            raise ConfigError(f"{key} expects an integer, got {value!r}")
        return "%d" % value
    if kind == BOOL:
        if not isinstance(value, bool):
            raise ConfigError(f"{key} expects a boolean, got {value!r}")
        return "true" if value else "false"
    if kind == IDS:
        return _format_ids(key, value)
    raise ConfigError(f"Unknown filter kind {kind!r} for {key}")


def build_query(config: FilterConfig | None) -> QueryPairs:
    """One (key, value) pair per field that is set, in declared field order."""
    if config is None:
        return []
    if not isinstance(config, FilterConfig):
        raise ConfigError(f"Expected a filter config, got {type(config).__name__}")

    pairs = []
    for qf in query_fields(config):
        value = getattr(config, qf.attr)
        if value is None:
            continue
        pairs.append((qf.key, format_value(qf.key, qf.kind, value)))
    return pairs


def _check_base(base_path: str) -> str:
    if not isinstance(base_path, str):
        raise ConfigError(f"Not a usable base URL: {base_path!r}")
    parts = urlsplit(base_path)
    try:
        parts.port
    except ValueError:
        raise ConfigError(f"Not a usable base URL: {base_path!r}")
    if parts.scheme not in ("http", "https") or not parts.netloc:
        raise ConfigError(f"Not a usable base URL: {base_path!r}")
    # urlsplit drops an empty query or fragment, so check the raw string
    if "?" in base_path or "#" in base_path:
        raise ConfigError(f"Not a usable base URL: {base_path!r}")
    return base_path.rstrip("/")


def _check_id(resource_id) -> str:
    if isinstance(resource_id, bool):
        raise ConfigError(f"Resource id must be numeric, got {resource_id!r}")
    if isinstance(resource_id, int) and resource_id >= 0:
        return str(resource_id)
    if isinstance(resource_id, str) and resource_id.isascii() and resource_id.isdecimal():
        return resource_id
    raise ConfigError(f"Resource id must be numeric, got {resource_id!r}")


def build_url(
    base_path: str,
    resource_id=None,
    related: str | None = None,
    auth_query: Iterable[tuple[str, str]] = (),
    filter_query: Iterable[tuple[str, str]] = (),
) -> str:
    """
    base_path[/resource_id][/related]?auth...&filters...

    The path never carries query parameters; those are encoded once here.
    """
    url = _check_base(base_path)

    if related and resource_id is None:
        raise ConfigError(f"'{related}' lookups need a resource id")
    if resource_id is not None:
        url += "/" + _check_id(resource_id)
    if related:
        url += "/" + related

    pairs = list(auth_query) + list(filter_query)
    if pairs:
        url += "?" + urlencode(pairs)
    return url


class RequestBuilder:
    def __init__(
        self,
        public_key: str,
        private_key: str,
        base_url: str = API_BASE,
        clock: Callable[[], float] = time.time,
    ):
        if not public_key or not private_key:
            raise ConfigError("Missing Marvel public or private key")

        self.public_key = public_key
        self.private_key = private_key
        self.base_url = _check_base(base_url)
        self.clock = clock

    def timestamp(self) -> str:
        return str(self.clock())

    def auth_query(self, timestamp=None) -> QueryPairs:
        if timestamp is None:
            timestamp = self.timestamp()
        return build_auth_query(self.public_key, self.private_key, timestamp)

    def resource_url(self, resource: str) -> str:
        if resource not in RESOURCES:
            raise ConfigError(f"Unknown Marvel resource {resource!r}")
        return f"{self.base_url}/{resource}"

    def _checked_query(self, resource, related, config) -> QueryPairs:
        expected = config_class_for(resource, related)
        if expected is None:
            raise ConfigError(f"No Marvel endpoint for {resource}/{{id}}/{related}")
        if config is not None and type(config) is not expected:
            raise ConfigError(
                f"{resource}/{related or ''} expects {expected.__name__}, "
                f"got {type(config).__name__}"
            )
        return build_query(config)

    def list_url(self, resource: str, config: FilterConfig | None = None) -> str:
        base = self.resource_url(resource)
        return build_url(base, auth_query=self.auth_query(),
                         filter_query=self._checked_query(resource, None, config))

    def single_url(self, resource: str, resource_id) -> str:
        # Marvel's canonical single-item form used here is ?id=N on the list path
        base = self.resource_url(resource)
        return build_url(base, auth_query=self.auth_query(),
                         filter_query=[("id", _check_id(resource_id))])

    def related_url(self, resource: str, resource_id, related: str,
                    config: FilterConfig | None = None) -> str:
        base = self.resource_url(resource)
        query = self._checked_query(resource, related, config)
        return build_url(base, resource_id, related,
                         auth_query=self.auth_query(), filter_query=query)

    def url_for(self, resource: str, resource_id=None, related: str | None = None,
                config: FilterConfig | None = None) -> str:
        if related is not None:
            if resource_id is None:
                raise ConfigError(f"'{related}' lookups need a resource id")
            return self.related_url(resource, resource_id, related, config)
        if resource_id is not None:
            if config is not None:
                raise ConfigError("Single-item lookups take no filter config")
            return self.single_url(resource, resource_id)
        return self.list_url(resource, config)
