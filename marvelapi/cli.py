import argparse
import logging
import sys
import time

from marvelapi.builder import build_auth_query
from marvelapi.client import MarvelClient
from marvelapi.config import Settings
from marvelapi.endpoints import RESOURCES, config_class_for
from marvelapi.errors import ConfigError
from marvelapi.filters import BOOL, INT, query_fields
from marvelapi.utils import key_preview

TRUE_WORDS = {"true", "1", "yes"}
FALSE_WORDS = {"false", "0", "no"}


def auth_check() -> int:
    """Are the keys loaded, and what would we send? Never prints the full keys."""
    settings = Settings.from_env()
    print("PUBLIC KEY START:", key_preview(settings.public_key))
    print("PRIVATE KEY START:", key_preview(settings.private_key))

    if not settings.public_key or not settings.private_key:
        print("⛔ MARVEL_PUBLIC_KEY or MARVEL_PRIVATE_KEY is missing from environment.")
        print("   Make sure .env has them or export them before running.")
        return 1

    auth = dict(build_auth_query(settings.public_key, settings.private_key, time.time()))
    print("ts:", auth["ts"])
    print("hash:", auth["hash"])
    return 0


def parse_filters(resource: str, related: str | None, raw: list[str]) -> dict:
    """
    FIELD=VALUE pairs -> config keywords. FIELD may be the Python name
    (order_by) or the Marvel query key (orderBy).
    """
    config_cls = config_class_for(resource, related)
    if config_cls is None:
        raise ConfigError(f"No Marvel endpoint for {resource}/{{id}}/{related}")

    by_name = {}
    for qf in query_fields(config_cls):
        by_name[qf.attr] = qf
        by_name[qf.key] = qf

    out = {}
    for item in raw:
        name, sep, value = item.partition("=")
        if not sep:
            raise ConfigError(f"Filter {item!r} is not FIELD=VALUE")
        qf = by_name.get(name.strip())
        if qf is None:
            raise ConfigError(f"{config_cls.__name__} has no filter {name!r}")

        value = value.strip()
        if qf.kind == INT:
            try:
                out[qf.attr] = int(value)
            except ValueError:
                raise ConfigError(f"{qf.key} expects an integer, got {value!r}")
        elif qf.kind == BOOL:
            if value.lower() in TRUE_WORDS:
                out[qf.attr] = True
            elif value.lower() in FALSE_WORDS:
                out[qf.attr] = False
            else:
                raise ConfigError(f"{qf.key} expects true/false, got {value!r}")
        else:
            out[qf.attr] = value
    return out


def get(resource: str, resource_id: int | None, related: str | None,
        raw_filters: list[str], timeout: float | None) -> int:
    config = None
    if raw_filters:
        if resource_id is not None and related is None:
            raise ConfigError("Single-item lookups take no filters")
        config_cls = config_class_for(resource, related)
        config = config_cls(**parse_filters(resource, related, raw_filters))

    with MarvelClient(timeout=timeout) as client:
        future = client.fetch(resource, resource_id=resource_id, related=related, config=config)
        result = future.result()

    if result.error is not None:
        print(f"❌ {result.error}", file=sys.stderr)
        return 1

    print(f"HTTP {result.status}", file=sys.stderr)
    print((result.body or b"").decode("utf-8", errors="replace"))
    return 0 if result.ok else 1


def main(argv=None):
    p = argparse.ArgumentParser(prog="marvel-api")
    p.add_argument("-v", "--verbose", action="store_true", help="Log each request")
    sub = p.add_subparsers(dest="cmd", required=True)

    sub.add_parser("auth", help="Check keys and print the auth params that would be sent")

    p_get = sub.add_parser("get", help="Run one GET and print the raw JSON body")
    p_get.add_argument("resource", choices=RESOURCES)
    p_get.add_argument("--id", type=int, dest="resource_id")
    p_get.add_argument("--related", choices=RESOURCES)
    p_get.add_argument("--filter", action="append", default=[], metavar="FIELD=VALUE",
                       help="Filter field, repeatable (e.g. --filter limit=5)")
    p_get.add_argument("--timeout", type=float)

    args = p.parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s: %(message)s",
    )

    try:
        if args.cmd == "auth":
            return auth_check()
        return get(args.resource, args.resource_id, args.related, args.filter, args.timeout)
    except ConfigError as e:
        print(f"⛔ {e}", file=sys.stderr)
        return 1


if __name__ == "__main__":
    sys.exit(main())
