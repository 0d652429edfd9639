from marvelapi import filters as f

RESOURCES = ("characters", "comics", "creators", "events", "series", "stories")

# GET /{resource}
LIST_CONFIGS = {
    "characters": f.CharacterConfig,
    "comics": f.ComicConfig,
    "creators": f.CreatorConfig,
    "events": f.EventConfig,
    "series": f.SeriesConfig,
    "stories": f.StoryConfig,
}

# GET /{resource}/{id}/{related}
RELATED_CONFIGS = {
    ("characters", "comics"): f.CharacterComicConfig,
    ("characters", "events"): f.CharacterEventConfig,
    ("characters", "series"): f.CharacterSeriesConfig,
    ("characters", "stories"): f.CharacterStoryConfig,

    ("comics", "characters"): f.ComicCharacterConfig,
    ("comics", "creators"): f.ComicCreatorConfig,
    ("comics", "events"): f.ComicEventConfig,
    ("comics", "stories"): f.ComicStoryConfig,

    ("creators", "comics"): f.CreatorComicConfig,
    ("creators", "events"): f.CreatorEventConfig,
    ("creators", "series"): f.CreatorSeriesConfig,
    ("creators", "stories"): f.CreatorStoryConfig,

    ("events", "characters"): f.EventCharacterConfig,
    ("events", "comics"): f.EventComicConfig,
    ("events", "creators"): f.EventCreatorConfig,
    ("events", "series"): f.EventSeriesConfig,
    ("events", "stories"): f.EventStoryConfig,

    ("series", "characters"): f.SeriesCharacterConfig,
    ("series", "comics"): f.SeriesComicConfig,
    ("series", "creators"): f.SeriesCreatorConfig,
    ("series", "events"): f.SeriesEventConfig,
    ("series", "stories"): f.SeriesStoryConfig,

    ("stories", "characters"): f.StoryCharacterConfig,
    ("stories", "comics"): f.StoryComicConfig,
    ("stories", "creators"): f.StoryCreatorConfig,
    ("stories", "events"): f.StoryEventConfig,
    ("stories", "series"): f.StorySeriesConfig,
}


def related_of(resource: str) -> list[str]:
    return [rel for (res, rel) in RELATED_CONFIGS if res == resource]


def config_class_for(resource: str, related: str | None = None):
    """Config class an endpoint accepts; None when the pair is not an endpoint."""
    if related is None:
        return LIST_CONFIGS.get(resource)
    return RELATED_CONFIGS.get((resource, related))
