"""
TMDB pass-through helpers.

Builds the outbound TMDB v3 URL for each metadata action and performs the
single GET whose JSON body is relayed to the caller. The API key travels
as the ``api_key`` query parameter and is redacted from anything logged.
"""
import logging
import re
from typing import Any, Mapping
from urllib.parse import quote

import httpx

from app.errors import BadRequestError, UpstreamError
from app.services.actions import Action

logger = logging.getLogger(__name__)

TMDB_BASE_URL = "https://api.themoviedb.org/3"

# Characters JavaScript's encodeURIComponent leaves untouched, beyond quote()'s defaults
_URI_COMPONENT_SAFE = "!*'()"

_API_KEY_RE = re.compile(r"(api_key=)[^&]*")


def encode_uri_component(value: str) -> str:
    return quote(value, safe=_URI_COMPONENT_SAFE)


def redact(url: str) -> str:
    return _API_KEY_RE.sub(r"\1***", url)


def details_url(api_key: str, media_type: str, tmdb_id: str) -> str:
    return f"{TMDB_BASE_URL}/{media_type}/{tmdb_id}?api_key={api_key}&language=en-US"


def credits_url(api_key: str, media_type: str, tmdb_id: str) -> str:
    return f"{TMDB_BASE_URL}/{media_type}/{tmdb_id}/credits?api_key={api_key}&language=en-US"


def popular_url(api_key: str, media_type: str = "", page: str = "") -> str:
    return (
        f"{TMDB_BASE_URL}/{media_type or 'movie'}/popular"
        f"?api_key={api_key}&language=en-US&page={page or '1'}"
    )


def search_url(api_key: str, query: str) -> str:
    return (
        f"{TMDB_BASE_URL}/search/multi?api_key={api_key}"
        f"&query={encode_uri_component(query)}&language=en-US&page=1"
    )


def find_by_imdb_id_url(api_key: str, imdb_id: str) -> str:
    return f"{TMDB_BASE_URL}/find/{imdb_id}?api_key={api_key}&external_source=imdb_id"


def external_ids_url(api_key: str, media_type: str, tmdb_id: str) -> str:
    return f"{TMDB_BASE_URL}/{media_type}/{tmdb_id}/external_ids?api_key={api_key}"


def build_tmdb_url(action: Action, params: Mapping[str, str], api_key: str, media_type: str) -> str:
    """Outbound URL for one of the TMDB-backed actions."""
    if action == Action.DETAILS:
        return details_url(api_key, media_type, params["details"])
    if action == Action.CREDITS:
        return credits_url(api_key, media_type, params["credits"])
    if action == Action.POPULAR:
        # media_type overrides the type-derived media type for this action only
        return popular_url(api_key, params.get("media_type", ""), params.get("page", ""))
    if action == Action.SEARCH:
        return search_url(api_key, params["query"])
    if action == Action.FIND_BY_IMDB_ID:
        return find_by_imdb_id_url(api_key, params["imdb_id"])
    if action == Action.GET_EXTERNAL_IDS:
        return external_ids_url(api_key, media_type, params["tmdb_id"])
    raise BadRequestError()


async def fetch_json(client: httpx.AsyncClient, url: str) -> Any:
    """Fetches a TMDB URL and returns the parsed JSON body, whatever the status."""
    try:
        response = await client.get(url)
        return response.json()
    except (httpx.HTTPError, httpx.InvalidURL, ValueError) as e:
        logger.error(f"TMDB Error for {redact(url)}: {redact(str(e))}")
        raise UpstreamError() from e
