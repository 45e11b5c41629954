import logging
import os
from functools import lru_cache
from typing import Dict, Optional

from pydantic import BaseModel, Field

# --- 🔒 SECURE CREDENTIALS ---
TMDB_API_KEY_ENV = "TMDB_API_KEY"

# --- VIDEO PROVIDER OVERRIDES ---
# Provider domain -> environment variable holding its base URL
PROVIDER_URL_ENV = {
    "vidsrc.cc": "VIDSRC_CC_URL",
    "vidrock.net": "VIDROCK_NET_URL",
    "vidsrc.me": "VIDSRC_ME_URL",
    "vidfast.pro": "VIDFAST_PRO_URL",
}


def _env(name: str, default: Optional[str] = None) -> Optional[str]:
    v = os.getenv(name)
    if v is None or v == "":
        return default
    return v


def _log_level(value: Optional[str]) -> str:
    level = (value or "INFO").upper()
    # Unknown names fall back to INFO
    if not isinstance(logging.getLevelName(level), int):
        return "INFO"
    return level


class Settings(BaseModel):
    tmdb_api_key: Optional[str] = None
    provider_urls: Dict[str, str] = Field(default_factory=dict)
    log_level: str = "INFO"


def load_settings() -> Settings:
    """Reads the process environment into a Settings snapshot."""
    provider_urls = {}
    for domain, env_name in PROVIDER_URL_ENV.items():
        value = _env(env_name)
        if value:
            provider_urls[domain] = value

    return Settings(
        tmdb_api_key=_env(TMDB_API_KEY_ENV),
        provider_urls=provider_urls,
        log_level=_log_level(_env("LOG_LEVEL", "INFO")),
    )


@lru_cache
def get_settings() -> Settings:
    return load_settings()
