"""
Filter configurations for every Marvel list endpoint.

Each config is a frozen dataclass whose fields are all optional. A field's
dataclass metadata says which query key it is sent under and how its value
is formatted, so the set of fields on a config class *is* the query table for
that endpoint:

    CharacterComicConfig(limit=5, format_type="comic", no_variants=True)
    -> limit=5&formatType=comic&noVariants=true

Relationship configs are the target resource's filters minus the id-list
filter of the resource they are scoped to (comics of a character cannot be
filtered by character).
"""

from dataclasses import dataclass, field, fields
from typing import Iterable, NamedTuple, Optional, Union

STR = "str"
INT = "int"
BOOL = "bool"
IDS = "ids"

IdList = Union[int, str, Iterable[int], Iterable[str]]


class QueryField(NamedTuple):
    attr: str
    key: str
    kind: str


def _param(key: str, kind: str = STR):
    return field(default=None, metadata={"query": key, "kind": kind})


def query_fields(config) -> list[QueryField]:
    """Declared (attribute, query key, kind) triples of a config class or instance."""
    return [
        QueryField(f.name, f.metadata["query"], f.metadata["kind"])
        for f in fields(config)
        if "query" in f.metadata
    ]


@dataclass(frozen=True)
class FilterConfig:
    pass


# --- building blocks ---

@dataclass(frozen=True)
class Paging(FilterConfig):
    limit: Optional[int] = _param("limit", INT)
    offset: Optional[int] = _param("offset", INT)


@dataclass(frozen=True)
class Ordering(FilterConfig):
    order_by: Optional[str] = _param("orderBy")
    modified_since: Optional[str] = _param("modifiedSince")


@dataclass(frozen=True)
class Naming(FilterConfig):
    name: Optional[str] = _param("name")
    name_starts_with: Optional[str] = _param("nameStartsWith")


@dataclass(frozen=True)
class Titling(FilterConfig):
    title: Optional[str] = _param("title")
    title_starts_with: Optional[str] = _param("titleStartsWith")
    start_year: Optional[int] = _param("startYear", INT)


@dataclass(frozen=True)
class ByComics(FilterConfig):
    comics: Optional[IdList] = _param("comics", IDS)


@dataclass(frozen=True)
class BySeries(FilterConfig):
    series: Optional[IdList] = _param("series", IDS)


@dataclass(frozen=True)
class ByEvents(FilterConfig):
    events: Optional[IdList] = _param("events", IDS)


@dataclass(frozen=True)
class ByStories(FilterConfig):
    stories: Optional[IdList] = _param("stories", IDS)


@dataclass(frozen=True)
class ByCharacters(FilterConfig):
    characters: Optional[IdList] = _param("characters", IDS)


@dataclass(frozen=True)
class ByCreators(FilterConfig):
    creators: Optional[IdList] = _param("creators", IDS)


@dataclass(frozen=True)
class ComicAttributes(Titling):
    format: Optional[str] = _param("format")
    format_type: Optional[str] = _param("formatType")
    no_variants: Optional[bool] = _param("noVariants", BOOL)
    date_descriptor: Optional[str] = _param("dateDescriptor")
    # two dates, comma separated: "2013-01-01,2013-01-02"
    date_range: Optional[str] = _param("dateRange")
    diamond_code: Optional[str] = _param("diamondCode")
    digital_id: Optional[int] = _param("digitalId", INT)
    upc: Optional[str] = _param("upc")
    isbn: Optional[str] = _param("isbn")
    ean: Optional[str] = _param("ean")
    issn: Optional[str] = _param("issn")
    has_digital_issue: Optional[bool] = _param("hasDigitalIssue", BOOL)
    issue_number: Optional[int] = _param("issueNumber", INT)
    shared_appearances: Optional[IdList] = _param("sharedAppearances", IDS)
    collaborators: Optional[IdList] = _param("collaborators", IDS)


@dataclass(frozen=True)
class SeriesAttributes(Titling):
    series_type: Optional[str] = _param("seriesType")
    contains: Optional[str] = _param("contains")


@dataclass(frozen=True)
class CreatorNames(FilterConfig):
    first_name: Optional[str] = _param("firstName")
    middle_name: Optional[str] = _param("middleName")
    last_name: Optional[str] = _param("lastName")
    suffix: Optional[str] = _param("suffix")
    name_starts_with: Optional[str] = _param("nameStartsWith")
    first_name_starts_with: Optional[str] = _param("firstNameStartsWith")
    middle_name_starts_with: Optional[str] = _param("middleNameStartsWith")
    last_name_starts_with: Optional[str] = _param("lastNameStartsWith")


# --- characters ---

@dataclass(frozen=True)
class CharacterConfig(ByStories, ByEvents, BySeries, ByComics, Paging, Ordering, Naming):
    pass


@dataclass(frozen=True)
class ComicCharacterConfig(ByStories, ByEvents, BySeries, Paging, Ordering, Naming):
    pass


@dataclass(frozen=True)
class EventCharacterConfig(ByStories, BySeries, ByComics, Paging, Ordering, Naming):
    pass


@dataclass(frozen=True)
class SeriesCharacterConfig(ByStories, ByEvents, ByComics, Paging, Ordering, Naming):
    pass


@dataclass(frozen=True)
class StoryCharacterConfig(ByEvents, BySeries, ByComics, Paging, Ordering, Naming):
    pass


# --- comics ---

@dataclass(frozen=True)
class ComicConfig(ByStories, ByEvents, BySeries, ByCharacters, ByCreators, Paging, Ordering, ComicAttributes):
    pass


@dataclass(frozen=True)
class CharacterComicConfig(ByStories, ByEvents, BySeries, ByCreators, Paging, Ordering, ComicAttributes):
    pass


@dataclass(frozen=True)
class CreatorComicConfig(ByStories, ByEvents, BySeries, ByCharacters, Paging, Ordering, ComicAttributes):
    pass


@dataclass(frozen=True)
class EventComicConfig(ByStories, BySeries, ByCharacters, ByCreators, Paging, Ordering, ComicAttributes):
    pass


@dataclass(frozen=True)
class SeriesComicConfig(ByStories, ByEvents, ByCharacters, ByCreators, Paging, Ordering, ComicAttributes):
    pass


@dataclass(frozen=True)
class StoryComicConfig(ByEvents, BySeries, ByCharacters, ByCreators, Paging, Ordering, ComicAttributes):
    pass


# --- creators ---

@dataclass(frozen=True)
class CreatorConfig(ByStories, ByEvents, BySeries, ByComics, Paging, Ordering, CreatorNames):
    pass


@dataclass(frozen=True)
class ComicCreatorConfig(ByStories, ByEvents, BySeries, Paging, Ordering, CreatorNames):
    pass


@dataclass(frozen=True)
class EventCreatorConfig(ByStories, BySeries, ByComics, Paging, Ordering, CreatorNames):
    pass


@dataclass(frozen=True)
class SeriesCreatorConfig(ByStories, ByEvents, ByComics, Paging, Ordering, CreatorNames):
    pass


@dataclass(frozen=True)
class StoryCreatorConfig(ByEvents, BySeries, ByComics, Paging, Ordering, CreatorNames):
    pass


# --- events ---

@dataclass(frozen=True)
class EventConfig(ByStories, ByComics, BySeries, ByCharacters, ByCreators, Paging, Ordering, Naming):
    pass


@dataclass(frozen=True)
class CharacterEventConfig(ByStories, ByComics, BySeries, ByCreators, Paging, Ordering, Naming):
    pass


@dataclass(frozen=True)
class ComicEventConfig(ByStories, BySeries, ByCharacters, ByCreators, Paging, Ordering, Naming):
    pass


@dataclass(frozen=True)
class CreatorEventConfig(ByStories, ByComics, BySeries, ByCharacters, Paging, Ordering, Naming):
    pass


@dataclass(frozen=True)
class SeriesEventConfig(ByStories, ByComics, ByCharacters, ByCreators, Paging, Ordering, Naming):
    pass


@dataclass(frozen=True)
class StoryEventConfig(ByComics, BySeries, ByCharacters, ByCreators, Paging, Ordering, Naming):
    pass


# --- series ---

@dataclass(frozen=True)
class SeriesConfig(ByCharacters, ByCreators, ByEvents, ByStories, ByComics, Paging, Ordering, SeriesAttributes):
    pass


@dataclass(frozen=True)
class CharacterSeriesConfig(ByCreators, ByEvents, ByStories, ByComics, Paging, Ordering, SeriesAttributes):
    pass


@dataclass(frozen=True)
class CreatorSeriesConfig(ByCharacters, ByEvents, ByStories, ByComics, Paging, Ordering, SeriesAttributes):
    pass


@dataclass(frozen=True)
class EventSeriesConfig(ByCharacters, ByCreators, ByStories, ByComics, Paging, Ordering, SeriesAttributes):
    pass


@dataclass(frozen=True)
class StorySeriesConfig(ByCharacters, ByCreators, ByEvents, ByComics, Paging, Ordering, SeriesAttributes):
    pass


# --- stories ---

@dataclass(frozen=True)
class StoryConfig(ByCharacters, ByCreators, ByEvents, BySeries, ByComics, Paging, Ordering):
    pass


@dataclass(frozen=True)
class CharacterStoryConfig(ByCreators, ByEvents, BySeries, ByComics, Paging, Ordering):
    pass


@dataclass(frozen=True)
class ComicStoryConfig(ByCharacters, ByCreators, ByEvents, BySeries, Paging, Ordering):
    pass


@dataclass(frozen=True)
class CreatorStoryConfig(ByCharacters, ByEvents, BySeries, ByComics, Paging, Ordering):
    pass


@dataclass(frozen=True)
class EventStoryConfig(ByCharacters, ByCreators, BySeries, ByComics, Paging, Ordering):
    pass


@dataclass(frozen=True)
class SeriesStoryConfig(ByCharacters, ByCreators, ByEvents, ByComics, Paging, Ordering):
    pass
