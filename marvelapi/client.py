import time
from concurrent.futures import Future, ThreadPoolExecutor
from dataclasses import dataclass
from typing import Callable, Optional
from urllib.parse import urlsplit

import requests

from marvelapi.builder import RequestBuilder
from marvelapi import config as marvel_config
from marvelapi.endpoints import LIST_CONFIGS, RELATED_CONFIGS, RESOURCES
from marvelapi.errors import ConfigError, TransportError, UpstreamError
from marvelapi.filters import FilterConfig
from marvelapi.utils import log

Callback = Callable[[Optional[bytes], Optional[int], Optional[TransportError]], None]


@dataclass(frozen=True)
class RequestResult:
    body: Optional[bytes] = None
    status: Optional[int] = None
    error: Optional[TransportError] = None

    @property
    def ok(self) -> bool:
        return self.error is None and self.status is not None and 200 <= self.status < 300

    def raise_for_status(self) -> "RequestResult":
        """Opt-in: turn a transport failure or a non-2xx status into an exception."""
        if self.error is not None:
            raise self.error
        if not self.ok:
            raise UpstreamError(self.status, self.body)
        return self


def _config_from(config_cls, config, filters) -> FilterConfig | None:
    if not filters:
        return config
    if config is not None:
        raise ConfigError("Pass either a config object or filter keywords, not both")
    try:
        return config_cls(**filters)
    except TypeError as e:
        raise ConfigError(f"{config_cls.__name__}: {e}")


def _list_operation(name: str, resource: str):
    config_cls = LIST_CONFIGS[resource]

    def operation(self, config=None, callback=None, **filters) -> Future:
        config = _config_from(config_cls, config, filters)
        return self.fetch(resource, config=config, callback=callback)

    operation.__name__ = name
    operation.__doc__ = (
        f"GET /{resource}, filtered by a {config_cls.__name__} "
        f"(or the same fields as keywords)."
    )
    return operation


def _single_operation(name: str, resource: str):
    def operation(self, resource_id, callback=None) -> Future:
        return self.fetch(resource, resource_id=resource_id, callback=callback)

    operation.__name__ = name
    operation.__doc__ = f"GET /{resource}?id=<resource_id>."
    return operation


def _related_operation(name: str, resource: str, related: str):
    config_cls = RELATED_CONFIGS[(resource, related)]

    def operation(self, resource_id, config=None, callback=None, **filters) -> Future:
        config = _config_from(config_cls, config, filters)
        return self.fetch(resource, resource_id=resource_id, related=related,
                          config=config, callback=callback)

    operation.__name__ = name
    operation.__doc__ = (
        f"GET /{resource}/<resource_id>/{related}, filtered by a "
        f"{config_cls.__name__} (or the same fields as keywords)."
    )
    return operation


class MarvelClient:
    """
    One method per Marvel endpoint. Every call builds its URL right away
    (bad input raises ConfigError before anything is sent), then runs a
    single GET on a worker thread and returns a Future of RequestResult.

    If a callback is given it is called exactly once, on the worker thread,
    with (body, status, error). Transport problems arrive as `error`; HTTP
    error statuses arrive as a normal (body, status, None).
    """

    def __init__(
        self,
        public_key: str | None = None,
        private_key: str | None = None,
        base_url: str | None = None,
        timeout: float | None = None,
        session: requests.Session | None = None,
        max_workers: int | None = None,
        clock: Callable[[], float] = time.time,
    ):
        # the environment only fills in what was not passed
        self.builder = RequestBuilder(
            public_key or marvel_config.env_public_key(),
            private_key or marvel_config.env_private_key(),
            base_url=base_url or marvel_config.env_api_base(),
            clock=clock,
        )
        if timeout is None:
            self.timeout = marvel_config.env_timeout()
        else:
            self.timeout = marvel_config.positive_number("timeout", timeout, float)
        if max_workers is None:
            max_workers = marvel_config.env_max_workers()
        else:
            max_workers = marvel_config.positive_number("max_workers", max_workers, int)

        self._owns_session = session is None
        self.session = session if session is not None else requests.Session()
        self._executor = ThreadPoolExecutor(
            max_workers=max_workers,
            thread_name_prefix="marvelapi",
        )

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        self.close()

    def close(self):
        """Wait for in-flight requests, then release threads and connections."""
        self._executor.shutdown(wait=True)
        if self._owns_session:
            self.session.close()

    @property
    def public_key(self) -> str:
        return self.builder.public_key

    @property
    def resource_urls(self) -> dict[str, str]:
        """List URL of each resource under this client's base URL."""
        return {resource: self.builder.resource_url(resource) for resource in RESOURCES}

    def auth_query(self):
        return self.builder.auth_query()

    def fetch(self, resource: str, resource_id=None, related: str | None = None,
              config: FilterConfig | None = None, callback: Callback | None = None) -> Future:
        url = self.builder.url_for(resource, resource_id, related, config)
        return self._executor.submit(self._get, url, callback)

    def _get(self, url: str, callback: Callback | None) -> RequestResult:
        path = urlsplit(url).path
        log.debug("[MARVEL] GET %s", path)

        try:
            resp = self.session.get(url, timeout=self.timeout)
        except requests.RequestException as e:
            log.warning("[MARVEL] GET %s failed: %s", path, e)
            error = TransportError(f"GET {path} failed: {e}")
            error.__cause__ = e
            result = RequestResult(error=error)
        else:
            if resp.status_code >= 400:
                log.info("[MARVEL] GET %s returned HTTP %s", path, resp.status_code)
            result = RequestResult(body=resp.content, status=resp.status_code)

        if callback is not None:
            try:
                callback(result.body, result.status, result.error)
            except Exception:
                log.exception("[MARVEL] callback for %s raised", path)
                raise
        return result

    # --- characters ---
    list_characters = _list_operation("list_characters", "characters")
    get_character = _single_operation("get_character", "characters")
    get_character_comics = _related_operation("get_character_comics", "characters", "comics")
    get_character_events = _related_operation("get_character_events", "characters", "events")
    get_character_series = _related_operation("get_character_series", "characters", "series")
    get_character_stories = _related_operation("get_character_stories", "characters", "stories")

    # --- comics ---
    list_comics = _list_operation("list_comics", "comics")
    get_comic = _single_operation("get_comic", "comics")
    get_comic_characters = _related_operation("get_comic_characters", "comics", "characters")
    get_comic_creators = _related_operation("get_comic_creators", "comics", "creators")
    get_comic_events = _related_operation("get_comic_events", "comics", "events")
    get_comic_stories = _related_operation("get_comic_stories", "comics", "stories")

    # --- creators ---
    list_creators = _list_operation("list_creators", "creators")
    get_creator = _single_operation("get_creator", "creators")
    get_creator_comics = _related_operation("get_creator_comics", "creators", "comics")
    get_creator_events = _related_operation("get_creator_events", "creators", "events")
    get_creator_series = _related_operation("get_creator_series", "creators", "series")
    get_creator_stories = _related_operation("get_creator_stories", "creators", "stories")

    # --- events ---
    list_events = _list_operation("list_events", "events")
    get_event = _single_operation("get_event", "events")
    get_event_characters = _related_operation("get_event_characters", "events", "characters")
    get_event_comics = _related_operation("get_event_comics", "events", "comics")
    get_event_creators = _related_operation("get_event_creators", "events", "creators")
    get_event_series = _related_operation("get_event_series", "events", "series")
    get_event_stories = _related_operation("get_event_stories", "events", "stories")

    # --- series ---
    list_series = _list_operation("list_series", "series")
    get_series = _single_operation("get_series", "series")
    get_series_characters = _related_operation("get_series_characters", "series", "characters")
    get_series_comics = _related_operation("get_series_comics", "series", "comics")
    get_series_creators = _related_operation("get_series_creators", "series", "creators")
    get_series_events = _related_operation("get_series_events", "series", "events")
    get_series_stories = _related_operation("get_series_stories", "series", "stories")

    # --- stories ---
    list_stories = _list_operation("list_stories", "stories")
    get_story = _single_operation("get_story", "stories")
    get_story_characters = _related_operation("get_story_characters", "stories", "characters")
    get_story_comics = _related_operation("get_story_comics", "stories", "comics")
    get_story_creators = _related_operation("get_story_creators", "stories", "creators")
    get_story_events = _related_operation("get_story_events", "stories", "events")
    get_story_series = _related_operation("get_story_series", "stories", "series")
