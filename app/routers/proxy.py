import logging

import httpx
from fastapi import APIRouter, Depends, Request
from fastapi.responses import JSONResponse, Response

from app.config import Settings, get_settings
from app.errors import BadRequestError, ConfigurationError, INVALID_EMBED
from app.schemas import EmbedResponse
from app.services.actions import Action, TMDB_ACTIONS, classify, resolve_media_type
from app.services.embed import generate_embed_url, providers_payload
from app.services.tmdb import build_tmdb_url, fetch_json

logger = logging.getLogger(__name__)

router = APIRouter()


def get_http_client(request: Request) -> httpx.AsyncClient:
    return request.app.state.http


@router.api_route("/", methods=["GET", "HEAD", "OPTIONS"])
async def proxy(
    request: Request,
    settings: Settings = Depends(get_settings),
    client: httpx.AsyncClient = Depends(get_http_client),
):
    """Routes a query-string driven request to TMDB or the embed helpers."""
    # Preflight
    if request.method == "OPTIONS":
        return Response(status_code=204)

    api_key = settings.tmdb_api_key
    if not api_key:
        raise ConfigurationError()

    params = request.query_params
    action = classify(params)
    media_type = resolve_media_type(params)
    logger.debug(f"Classified request as {action.value} ({media_type})")

    if action in TMDB_ACTIONS:
        url = build_tmdb_url(action, params, api_key, media_type)
        data = await fetch_json(client, url)
        return JSONResponse(data)

    if action == Action.EMBED:
        provider = params.get("provider")
        imdb_id = params.get("imdb_id")
        if provider and imdb_id:
            embed_url = generate_embed_url(provider, imdb_id, media_type, settings.provider_urls)
            if not embed_url:
                raise BadRequestError(INVALID_EMBED)
            return JSONResponse(EmbedResponse(embedUrl=embed_url).model_dump())
        # Incomplete embed requests get the provider list instead
        return JSONResponse(providers_payload())

    if action == Action.GET_PROVIDERS:
        return JSONResponse(providers_payload())

    raise BadRequestError()
