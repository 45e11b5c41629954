import logging

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from app.schemas import ErrorResponse

logger = logging.getLogger(__name__)

# Headers stamped on every response, errors included
RESPONSE_HEADERS = {
    "Access-Control-Allow-Origin": "*",
    "Access-Control-Allow-Methods": "GET, HEAD, OPTIONS",
    "Access-Control-Allow-Headers": "Content-Type",
    "X-Content-Type-Options": "nosniff",
}

MISSING_API_KEY = "Server configuration error: TMDB_API_KEY secret not set."
MISSING_PARAMETERS = "Missing or invalid query parameters."
INVALID_EMBED = "Invalid provider or unable to generate embed URL."
UPSTREAM_FAILURE = "Failed to fetch data from TMDB API."
INTERNAL_ERROR = "Internal server error."


class ProxyError(Exception):
    """Base class for errors rendered to the caller as ``{"error": message}``."""

    status_code = 500

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class ConfigurationError(ProxyError):
    status_code = 500

    def __init__(self, message: str = MISSING_API_KEY):
        super().__init__(message)


class BadRequestError(ProxyError):
    status_code = 400

    def __init__(self, message: str = MISSING_PARAMETERS):
        super().__init__(message)


class UpstreamError(ProxyError):
    status_code = 502

    def __init__(self, message: str = UPSTREAM_FAILURE):
        super().__init__(message)


def error_response(status_code: int, message: str) -> JSONResponse:
    return JSONResponse(ErrorResponse(error=message).model_dump(), status_code=status_code, headers=RESPONSE_HEADERS)


async def proxy_error_handler(request: Request, exc: ProxyError) -> JSONResponse:
    return error_response(exc.status_code, exc.message)


async def http_error_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    response = error_response(exc.status_code, str(exc.detail))
    # Keeps "Allow" on 405s
    if exc.headers:
        response.headers.update(exc.headers)
    return response


async def unhandled_error_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.exception(f"Unhandled error for {request.method} {request.url.path}: {exc}")
    return error_response(500, INTERNAL_ERROR)


def register_error_handlers(app: FastAPI) -> None:
    app.add_exception_handler(ProxyError, proxy_error_handler)
    app.add_exception_handler(StarletteHTTPException, http_error_handler)
    app.add_exception_handler(Exception, unhandled_error_handler)
