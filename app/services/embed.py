import logging
from typing import Dict, List, Mapping, Optional

from app.schemas import ProvidersResponse, VideoProvider

logger = logging.getLogger(__name__)

# --- VIDEO PROVIDERS ---
VIDEO_PROVIDERS: List[VideoProvider] = [
    VideoProvider(name="alpha", domain="vidsrc.cc", sandboxed=True),
    VideoProvider(name="bravo", domain="vidrock.net", sandboxed=True),
    VideoProvider(name="charlie", domain="vidsrc.me", sandboxed=True),
    VideoProvider(name="delta", domain="vidfast.pro", sandboxed=True),
]

DEFAULT_PROVIDER_URLS: Dict[str, str] = {
    "vidsrc.cc": "https://vidsrc.cc/v2/embed/",
    "vidrock.net": "https://vidrock.net/",
    "vidsrc.me": "https://vidsrc.me/embed/",
    "vidfast.pro": "https://vidfast.pro/",
}


def providers_payload() -> dict:
    return ProvidersResponse(providers=VIDEO_PROVIDERS).model_dump(by_alias=True)


def resolve_base_url(provider: str, overrides: Optional[Mapping[str, str]] = None) -> Optional[str]:
    """Base URL for a provider domain, preferring a non-empty override."""
    if provider not in DEFAULT_PROVIDER_URLS:
        return None
    if overrides and overrides.get(provider):
        return overrides[provider]
    return DEFAULT_PROVIDER_URLS[provider]


def generate_embed_url(
    provider: str,
    imdb_id: str,
    media_type: str,
    overrides: Optional[Mapping[str, str]] = None,
) -> Optional[str]:
    """Builds the embed page URL for a title on one of the known providers.

    Returns None for an unknown provider. Season/episode selection is left
    to the provider page; ``imdb_id`` and ``media_type`` are inserted as given.
    """
    base_url = resolve_base_url(provider, overrides)
    if not base_url:
        logger.warning(f"Unknown embed provider requested: {provider!r}")
        return None

    if provider in ("vidsrc.cc", "vidrock.net"):
        kind = "tv" if media_type == "tv" else "movie"
        return f"{base_url}{kind}/{imdb_id}"
    if provider == "vidsrc.me":
        return f"{base_url}{media_type}/{imdb_id}"
    if provider == "vidfast.pro":
        return f"{base_url}{media_type}/{imdb_id}?autoPlay=true"
    return None
