import pytest

from app.services.actions import Action, classify, resolve_media_type


@pytest.mark.parametrize(
    "params, expected",
    [
        ({"details": "550", "credits": "550", "query": "x"}, Action.DETAILS),
        ({"credits": "550", "popular": "", "tmdb_id": "1"}, Action.CREDITS),
        ({"popular": "", "query": "x"}, Action.POPULAR),
        ({"query": "x", "imdb_id": "tt1"}, Action.SEARCH),
        ({"imdb_id": "tt1", "tmdb_id": "1"}, Action.FIND_BY_IMDB_ID),
        ({"imdb_id": "tt1", "action": "getProviders"}, Action.FIND_BY_IMDB_ID),
        ({"imdb_id": "tt1", "tmdb_id": "1", "action": "embed"}, Action.GET_EXTERNAL_IDS),
        ({"imdb_id": "tt1", "action": "embed", "provider": "vidsrc.cc"}, Action.EMBED),
        ({"action": "embed"}, Action.EMBED),
        ({"action": "getProviders"}, Action.GET_PROVIDERS),
        ({"action": "somethingElse"}, Action.ERROR),
        ({}, Action.ERROR),
    ],
)
def test_classify_priority(params, expected):
    assert classify(params) == expected


def test_empty_value_counts_as_present():
    assert classify({"details": ""}) == Action.DETAILS
    assert classify({"tmdb_id": ""}) == Action.GET_EXTERNAL_IDS


@pytest.mark.parametrize(
    "params, expected",
    [
        ({"type": "tv"}, "tv"),
        ({"type": "movie"}, "movie"),
        ({"type": "TV"}, "movie"),
        ({"type": ""}, "movie"),
        ({}, "movie"),
    ],
)
def test_resolve_media_type(params, expected):
    assert resolve_media_type(params) == expected
