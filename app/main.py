import logging
from contextlib import asynccontextmanager

import httpx
from fastapi import FastAPI, Request

from app.config import get_settings
from app.errors import RESPONSE_HEADERS, register_error_handlers
from app.routers import proxy

# --- LOGGING CONFIGURATION ---
settings = get_settings()
logging.basicConfig(level=settings.log_level, format='%(asctime)s - %(name)s - %(levelname)s - %(message)s')
logger = logging.getLogger(__name__)

if not settings.tmdb_api_key:
    logger.critical("TMDB_API_KEY not found in Environment Variables!")


@asynccontextmanager
async def lifespan(app: FastAPI):
    app.state.http = httpx.AsyncClient()
    try:
        yield
    finally:
        await app.state.http.aclose()


# --- APP CONFIGURATION ---
app = FastAPI(title="ScreenScout TMDB Proxy", version="PRODUCTION", lifespan=lifespan)

register_error_handlers(app)


@app.middleware("http")
async def add_standard_headers(request: Request, call_next):
    response = await call_next(request)
    response.headers.update(RESPONSE_HEADERS)
    return response


# --- ROUTERS ---
app.include_router(proxy.router)
