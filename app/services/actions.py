from enum import Enum
from typing import Callable, Mapping, Tuple


class Action(str, Enum):
    DETAILS = "details"
    CREDITS = "credits"
    POPULAR = "popular"
    SEARCH = "search"
    FIND_BY_IMDB_ID = "findByImdbId"
    GET_EXTERNAL_IDS = "getExternalIds"
    EMBED = "embed"
    GET_PROVIDERS = "getProviders"
    ERROR = "error"


# Actions answered by a single outbound TMDB call
TMDB_ACTIONS = frozenset({
    Action.DETAILS,
    Action.CREDITS,
    Action.POPULAR,
    Action.SEARCH,
    Action.FIND_BY_IMDB_ID,
    Action.GET_EXTERNAL_IDS,
})

Params = Mapping[str, str]

# Evaluated in order, first match wins
ACTION_RULES: Tuple[Tuple[Callable[[Params], bool], Action], ...] = (
    (lambda p: "details" in p, Action.DETAILS),
    (lambda p: "credits" in p, Action.CREDITS),
    (lambda p: "popular" in p, Action.POPULAR),
    (lambda p: "query" in p, Action.SEARCH),
    (lambda p: "imdb_id" in p and p.get("action") != "embed", Action.FIND_BY_IMDB_ID),
    (lambda p: "tmdb_id" in p, Action.GET_EXTERNAL_IDS),
    (lambda p: p.get("action") == "embed", Action.EMBED),
    (lambda p: p.get("action") == "getProviders", Action.GET_PROVIDERS),
)


def classify(params: Params) -> Action:
    """Picks the action for a request from the query parameters present.

    A parameter counts as present even when its value is empty.
    """
    for predicate, action in ACTION_RULES:
        if predicate(params):
            return action
    return Action.ERROR


def resolve_media_type(params: Params) -> str:
    return "tv" if params.get("type") == "tv" else "movie"
